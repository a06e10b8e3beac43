"""
# Abstract base classes for fields and their Rules.

# Primarily, this module exists to document the interfaces implemented by
# &.fields.DateTimeField and &.rules.Rules. The redundant method declarations
# are intentional.
"""
from abc import abstractmethod
import typing

class Rules(typing.Protocol):
	"""
	# The computations of a single field within a single chronology.

	# Targets are &.types.Date, &.types.Time, or &.types.DateTime instances;
	# date fields read the date of a date-time, time fields the time.
	"""

	@property
	@abstractmethod
	def field(self):
		"""
		# The field implemented by the rules.
		"""

	@property
	@abstractmethod
	def chronology(self):
		"""
		# The chronology the rules belong to.
		"""

	@abstractmethod
	def range(self, date=None, time=None):
		"""
		# The range of valid values of the field.

		# When neither &date nor &time is given, the range is context-free and
		# covers every possible value. Otherwise, the range is narrowed by the
		# context that is present.

		#!python
			r = rules.range(date)
			assert r.minimum <= rules.get(date) <= r.maximum
		"""

	@abstractmethod
	def get_date(self, date):
		"""
		# The value of the field in the &date.
		"""

	@abstractmethod
	def get_time(self, time):
		"""
		# The value of the field in the &time.
		"""

	@abstractmethod
	def get(self, target):
		"""
		# The value of the field in the &target; dispatches to &get_date or &get_time.
		"""

	@abstractmethod
	def set(self, target, value, lenient=False):
		"""
		# Construct a new instance of &target with the field changed to &value.

		# Strict assignments raise &.errors.InvalidFieldValueError when &value is
		# outside of the narrowed range. Lenient assignments normalize &value by
		# carrying the excess into the range unit.

		#!python
			assert rules.set(target, rules.get(target)) == target
		"""

	@abstractmethod
	def roll(self, target, amount):
		"""
		# Construct a new instance of &target with the field rolled by &amount.

		# The field wraps within its range unit leaving larger fields unchanged.
		"""

	@abstractmethod
	def add(self, target, amount):
		"""
		# Add &amount of the field's base unit to the &target.
		"""

	@abstractmethod
	def between(self, start, stop):
		"""
		# The number of complete base units between &start and &stop.
		"""

	@abstractmethod
	def estimate(self):
		"""
		# The estimated duration of the field's base unit in nanoseconds.
		"""

class Field(typing.Protocol):
	"""
	# A named component of a date or time.
	"""

	@property
	@abstractmethod
	def name(self):
		"""
		# The name of the field.
		"""

	@property
	@abstractmethod
	def base_unit(self):
		"""
		# The unit that the field is measured in.

		# For `MonthOfYear`, the unit is `Months`.
		"""

	@property
	@abstractmethod
	def range_unit(self):
		"""
		# The unit that the field varies within.

		# For `MonthOfYear`, the range is `Years`. `Year` is shorthand for
		# `YearOfForever`, and its range unit is `Forever`.
		"""

	@abstractmethod
	def rules(self, chronology=None):
		"""
		# The Rules of the field in &chronology.

		# There is no fallback to the default chronology when &chronology does not
		# model the field; &.errors.UnsupportedFieldError is raised instead.
		"""
