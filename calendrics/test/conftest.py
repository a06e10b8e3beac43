"""
# Contention primitives for the calendrics test modules.

# Test functions accept a single &Test instance, provided by the `test` fixture,
# and express their expectations with true division:

#!python
	def test_plus_days(test):
		test/Date.of(2012, 1, 2) == Date.of(2012, 1, 1).plus_days(1)
		test/errors.DateRangeError ^ (lambda: maximum_date.plus_days(1))

		with test/errors.InvalidDateError as exc:
			Date.of(2011, 2, 29)
		test/exc().field == 'day'
"""
import builtins
import functools
import operator

import pytest

class Absurdity(AssertionError):
	"""
	# Raised by &Contention instances designating a failed expectation.
	"""

	# for re-constituting the expression
	operator_names = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__le__': '<=',
		'__gt__': '>',
		'__ge__': '>=',
		'__mod__': 'is',
		'__contains__': '<<',
	}

	def __init__(self, operator, former, latter, inverse=False):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(str(self))

	def __str__(self):
		opchars = self.operator_names.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# An operand of an expectation; the comparison operators check the
	# relationship of the operand to the right-hand side.
	"""

	__slots__ = ('_operand', '_inverse', '_storage')

	def __init__(self, operand, inverse=False):
		self._operand = operand
		self._inverse = inverse

	def _conclude(self, opname, truth, latter):
		if truth == self._inverse:
			raise Absurdity(opname, self._operand, latter, inverse=self._inverse)
		return truth

	for _name, _op in (
		('__eq__', operator.eq),
		('__ne__', operator.ne),
		('__lt__', operator.lt),
		('__le__', operator.le),
		('__gt__', operator.gt),
		('__ge__', operator.ge),
		('__mod__', operator.is_),
	):
		def check(self, operand, opname=_name, op=_op):
			return self._conclude(opname, bool(op(self._operand, operand)), operand)
		locals()[_name] = check
	del _name, _op, check

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, '_storage', None)

	def __exit__(self, typ, val, tb):
		self._storage = val
		self._conclude('isinstance', builtins.isinstance(val, self._operand), val)
		return True

	def __xor__(self, operand):
		"""
		# Contend that calling &operand raises the exception class.

		#!python
			test/LookupError ^ (lambda: {}['key'])
		"""
		with self as exc:
			operand()
		return exc()

	def __lshift__(self, operand):
		"""
		# Contend that &operand is contained by the object.
		"""
		return self._conclude('__contains__', operand in self._operand, operand)

class Test(object):
	"""
	# The subject of a test function; constructs &Contention instances.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	# /contentions/
		# The number of expectations checked.
	"""

	__slots__ = ('identifier', 'contentions', '_invert_contention')

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier):
		self.identifier = identifier
		self.contentions = 0
		self._invert_contention = 0

	def _inverse(self):
		if self._invert_contention:
			self._invert_contention -= 1
			return True
		return False

	@property
	def invert(self):
		"""
		# Invert the next contention; absurdity is coherent and coherence is absurd.
		"""
		self._invert_contention += 1
		return self

	def __truediv__(self, operand):
		self.contentions += 1
		return self.Contention(operand, inverse=self._inverse())

	__rtruediv__ = __truediv__

	def __floordiv__(self, operand):
		self._invert_contention += 1
		return self / operand

	def isinstance(self, *args):
		self.contentions += 1
		i = self._inverse()
		if builtins.isinstance(*args) == i:
			raise self.Absurdity("isinstance", *args, inverse=i)

	def issubclass(self, *args):
		self.contentions += 1
		i = self._inverse()
		if builtins.issubclass(*args) == i:
			raise self.Absurdity("issubclass", *args, inverse=i)

	def skip(self, condition):
		if condition:
			pytest.skip("skipped")

	def fail(self, message=None):
		pytest.fail(message or "explicit failure")

@pytest.fixture
def test(request):
	return Test(request.node.name)
