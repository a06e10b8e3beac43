"""
# Exception taxonomy for calendrical computation.

# All errors are raised at the point of detection. Arithmetic never clamps into
# range; the only normalization performed is day-of-month clamping by month and
# year adjustments.

# [ Elements ]
# /Error/
	# Base class of all calendrics errors.
# /InvalidDateError/
	# Date construction with a component outside its bound.
# /InvalidTimeError/
	# Time construction with a component outside its bound.
# /InvalidFieldValueError/
	# A strict field assignment outside of the field's narrowed range.
# /UnsupportedFieldError/
	# The chronology does not model the field.
# /UnsupportedUnitError/
	# The chronology or value type does not model the unit.
# /UnsupportedOperationError/
	# The Rules decline the operation.
# /ArithmeticOverflowError/
	# A signed 64-bit delta overflowed.
# /DateRangeError/
	# A computed result fell outside the proleptic year bounds.
# /NullArgumentError/
	# A required argument was &None.
# /ParseError/
	# Text did not have the canonical form.
"""

class Error(Exception):
	"""
	# Base class for calendrics specific errors.
	"""

class InvalidDateError(Error, ValueError):
	"""
	# A date component was outside of its bound.

	# [ Properties ]
	# /field/
		# The name of the offending component.
	# /value/
		# The offending value.
	"""

	def __init__(self, field, value, reason=None):
		self.field = field
		self.value = value
		self.reason = reason
		msg = "invalid {0} {1!r}".format(field, value)
		if reason:
			msg += ": " + reason
		super().__init__(msg)

class InvalidTimeError(Error, ValueError):
	"""
	# A time component was outside of its bound.
	"""

	def __init__(self, field, value, reason=None):
		self.field = field
		self.value = value
		self.reason = reason
		msg = "invalid {0} {1!r}".format(field, value)
		if reason:
			msg += ": " + reason
		super().__init__(msg)

class InvalidFieldValueError(Error, ValueError):
	"""
	# A strict assignment of &field was outside the narrowed &range.
	"""

	def __init__(self, field, value, range=None):
		self.field = field
		self.value = value
		self.range = range
		if range is None:
			msg = "invalid value for {0}: {1!r}".format(field, value)
		else:
			msg = "invalid value for {0}: {1!r} not in {2!s}".format(field, value, range)
		super().__init__(msg)

class UnsupportedFieldError(Error, LookupError):
	"""
	# The &chronology has no Rules for &field.
	"""

	def __init__(self, field, chronology=None):
		self.field = field
		self.chronology = chronology
		if chronology is None:
			msg = "unsupported field: {0!s}".format(field)
		else:
			msg = "unsupported field {0!s} in {1!s} chronology".format(field, chronology)
		super().__init__(msg)

class UnsupportedUnitError(Error, LookupError):
	"""
	# The &unit cannot be applied by the &chronology or value type.
	"""

	def __init__(self, unit, chronology=None):
		self.unit = unit
		self.chronology = chronology
		if chronology is None:
			msg = "unsupported unit: {0!s}".format(unit)
		else:
			msg = "unsupported unit {0!s} in {1!s} chronology".format(unit, chronology)
		super().__init__(msg)

class UnsupportedOperationError(Error, NotImplementedError):
	"""
	# The Rules of &field do not implement &operation.
	"""

	def __init__(self, operation, field):
		self.operation = operation
		self.field = field
		super().__init__("{0} is not supported by {1!s}".format(operation, field))

class ArithmeticOverflowError(Error, OverflowError):
	"""
	# A signed 64-bit integer calculation overflowed.
	"""

	def __init__(self, operation, *operands):
		self.operation = operation
		self.operands = operands
		super().__init__("{0} overflowed with operands {1!r}".format(operation, operands))

class DateRangeError(Error, ValueError):
	"""
	# The result of a calculation fell outside of the supported years.
	"""

	def __init__(self, field, value, minimum, maximum):
		self.field = field
		self.value = value
		self.minimum = minimum
		self.maximum = maximum
		super().__init__(
			"{0} {1!r} outside of [{2}, {3}]".format(field, value, minimum, maximum)
		)

class NullArgumentError(Error, TypeError):
	"""
	# A required argument was &None.
	"""

	def __init__(self, name):
		self.name = name
		super().__init__("{0} must not be None".format(name))

class ParseError(Error, ValueError):
	"""
	# The &text did not have the canonical form at &position.
	"""

	def __init__(self, text, position, expectation):
		self.text = text
		self.position = position
		self.expectation = expectation
		super().__init__(
			"{0!r} at index {1}: expected {2}".format(text, position, expectation)
		)
