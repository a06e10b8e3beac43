"""
# Chronology definitions and the process-wide chronology table.

# A &Chronology is a calendar system: the month structure and leap rule
# provided by a calendar module, &.gregorian or &.coptic, along with the table
# associating each supported &.fields.DateTimeField with its Rules.

# Chronologies translate between their own `(year, month, day)` triple and the
# ISO &.types.Date the value types are built on by way of the epoch-day; all
# day arithmetic is performed on epoch-days while month arithmetic is performed
# on the chronology's proleptic month count.

# [ Engineering ]
# The chronology table is built once, on first access, and published only
# after every chronology has been completely populated and sealed.
"""
import logging
import operator
import threading
import types

from . import errors
from . import gregorian
from .units import PeriodUnit, years_per_unit, days_per_unit, nanos_in_day

logger = logging.getLogger(__name__)

#: Smallest signed 64-bit integer.
int64_minimum = -(2**63)

#: Largest signed 64-bit integer.
int64_maximum = (2**63) - 1

def require(value, name):
	"""
	# Raise &errors.NullArgumentError if &value is &None.
	"""
	if value is None:
		raise errors.NullArgumentError(name)
	return value

def integer(value, name, index=operator.index):
	"""
	# Identify &value as a signed 64-bit integer.

	# Raises &errors.NullArgumentError for &None and
	# &errors.ArithmeticOverflowError when the value cannot be represented.
	"""
	if value is None:
		raise errors.NullArgumentError(name)
	value = index(value)
	if not int64_minimum <= value <= int64_maximum:
		raise errors.ArithmeticOverflowError(name, value)
	return value

def checked_add(a, b):
	r = a + b
	if not int64_minimum <= r <= int64_maximum:
		raise errors.ArithmeticOverflowError('addition', a, b)
	return r

def checked_multiply(a, b):
	r = a * b
	if not int64_minimum <= r <= int64_maximum:
		raise errors.ArithmeticOverflowError('multiplication', a, b)
	return r

def checked_negate(a):
	if a == int64_minimum:
		raise errors.ArithmeticOverflowError('negation', a)
	return -a

def quotient(a, b):
	"""
	# Integer division truncated toward zero.
	"""
	q = abs(a) // abs(b)
	return q if (a < 0) == (b < 0) else -q

def split(target):
	"""
	# Separate the date and time parts of a value; absent parts are &None.
	"""
	kind = target.kind
	if kind == 'date':
		return target, None
	elif kind == 'time':
		return None, target
	return target.date, target.time

def context(date, time):
	"""
	# Identify the date and time parts of a range context.

	# A date-time given in either position supplies both of its parts;
	# an explicitly given part takes precedence over the one it carries.
	"""
	if date is not None:
		kind = getattr(date, 'kind', None)
		if kind == 'datetime':
			date, carried = date
			if time is None:
				time = carried
		elif kind != 'date':
			raise TypeError("date context must be a date or date-time: " + repr(date))

	if time is not None:
		kind = getattr(time, 'kind', None)
		if kind == 'datetime':
			carried, time = time
			if date is None:
				date = carried
		elif kind != 'time':
			raise TypeError("time context must be a time or date-time: " + repr(time))

	return date, time

def join(target, date, time):
	"""
	# Construct a value of &target's kind from the given parts.
	"""
	kind = target.kind
	if kind == 'date':
		return date
	elif kind == 'time':
		return time
	if date is target.date and time is target.time:
		return target
	return target.of(date, time)

class Chronology(object):
	"""
	# A calendar system.

	# [ Properties ]
	# /name/
		# The identifying name of the chronology.
	# /calendar/
		# The module implementing the calendar functions.
	# /months_in_year/
		# The number of months in every year of the chronology.
	# /minimum_year/
		# The smallest year that can be represented by an ISO date.
	# /maximum_year/
		# The largest year that can be represented by an ISO date.
	"""

	def __init__(self, name, calendar):
		self.name = name
		self.calendar = calendar
		self.months_in_year = calendar.months_in_year
		self.minimum_year = calendar.minimum_year
		self.maximum_year = calendar.maximum_year
		self._rules = {}
		self.sealed = False

	def __str__(self):
		return self.name

	def __repr__(self):
		return "(calendrics.chronology@{0!r})".format(self.name)

	def register(self, field, rules):
		"""
		# Associate the &rules with the &field.
		"""
		if self.sealed:
			raise RuntimeError("chronology is sealed: " + self.name)
		self._rules[field] = rules

	def seal(self):
		"""
		# Freeze the rules table; further registrations are refused.
		"""
		self._rules = types.MappingProxyType(dict(self._rules))
		self.sealed = True

	@property
	def fields(self):
		"""
		# The fields supported by the chronology.
		"""
		return frozenset(self._rules)

	def supports(self, field):
		return field in self._rules

	def implementation(self, field):
		"""
		# Retrieve the Rules of &field.

		# Raises &errors.UnsupportedFieldError if the chronology does not model &field.
		"""
		require(field, 'field')
		try:
			return self._rules[field]
		except KeyError:
			raise errors.UnsupportedFieldError(field, self) from None

	# Calendar structure.

	def year_is_leap(self, year):
		return self.calendar.year_is_leap(year)

	def year_length(self, year):
		return self.calendar.year_length(year)

	def month_length(self, year, month):
		return self.calendar.month_length(year, month)

	def fields_of(self, date):
		"""
		# The `(year, month, day)` of the ISO &date in this chronology.
		"""
		if self.calendar is date.calendar:
			return date.year, date.month, date.day
		return self.calendar.date_from_epoch_day(date.to_epoch_day())

	def validate(self, year, month, day):
		"""
		# Raise &errors.InvalidDateError if the triple is not a date of this chronology.
		"""
		if not self.minimum_year <= year <= self.maximum_year:
			raise errors.InvalidDateError('year', year, "outside of " + self.name + " years")
		if not 1 <= month <= self.months_in_year:
			raise errors.InvalidDateError('month', month)
		if not 1 <= day <= self.month_length(year, month):
			raise errors.InvalidDateError('day', day, "beyond the length of the month")

	def date(self, template, year, month, day):
		"""
		# Construct the ISO date of the chronology's `(year, month, day)` using
		# &template's class.
		"""
		self.validate(year, month, day)
		if self.calendar is template.calendar:
			return template.of(year, month, day)
		return template.of_epoch_day(self.calendar.epoch_day_from_date((year, month, day)))

	def resolve(self, template, year, month, day):
		"""
		# Construct a date clamping the &day to the length of the month.

		# Raises &errors.DateRangeError if the &year is not supported.
		"""
		if not self.minimum_year <= year <= self.maximum_year:
			raise errors.DateRangeError('year', year, self.minimum_year, self.maximum_year)
		day = min(day, self.month_length(year, month))
		return self.date(template, year, month, day)

	# Field operations.

	def range(self, field, date=None, time=None):
		"""
		# The range of &field narrowed by the given context.
		"""
		return self.implementation(field).range(date, time)

	def get(self, field, target):
		return self.implementation(field).get(target)

	def set(self, field, target, value, lenient=False):
		return self.implementation(field).set(target, value, lenient=lenient)

	def roll(self, field, target, amount):
		return self.implementation(field).roll(target, amount)

	# Unit operations.

	def add(self, target, amount, unit):
		"""
		# Add the &amount of &unit to the &target.

		# Time units carry into the date of a date-time and wrap at midnight
		# for a time. Month based units clamp the day-of-month.
		"""
		require(target, 'target')
		require(unit, 'unit')
		amount = integer(amount, 'amount')
		date, time = split(target)

		if unit.time_based:
			if time is None:
				raise errors.UnsupportedUnitError(unit, self)
			return target.elapse(amount * unit.duration)

		if date is None:
			raise errors.UnsupportedUnitError(unit, self)

		if unit in days_per_unit:
			days = checked_multiply(amount, days_per_unit[unit])
			date = date.plus_days(days)
		elif unit is PeriodUnit.MONTHS:
			date = self.add_months(date, amount)
		elif unit is PeriodUnit.QUARTER_YEARS and self.months_in_year % 3 == 0:
			date = self.add_months(date, checked_multiply(amount, 3))
		elif unit in years_per_unit:
			date = self.add_years(date, checked_multiply(amount, years_per_unit[unit]))
		else:
			raise errors.UnsupportedUnitError(unit, self)

		return join(target, date, time)

	def add_months(self, date, months):
		year, month, day = self.fields_of(date)
		total = checked_add((year * self.months_in_year) + (month - 1), months)
		year, month = divmod(total, self.months_in_year)
		return self.resolve(date, year, month + 1, day)

	def add_years(self, date, years):
		year, month, day = self.fields_of(date)
		return self.resolve(date, checked_add(year, years), month, day)

	def epoch_month(self, date):
		"""
		# The proleptic month count of the &date relative to the first month of year zero.
		"""
		year, month, day = self.fields_of(date)
		return (year * self.months_in_year) + (month - 1)

	def between(self, unit, start, stop):
		"""
		# The number of complete &unit between &start and &stop.

		# Negative when &stop precedes &start.
		"""
		require(unit, 'unit')
		require(start, 'start')
		require(stop, 'stop')
		sd, st = split(start)
		ed, et = split(stop)

		if unit.time_based:
			if st is None or et is None:
				raise errors.UnsupportedUnitError(unit, self)
			nanos = et.to_nano_of_day() - st.to_nano_of_day()
			if sd is not None and ed is not None:
				nanos += (ed.to_epoch_day() - sd.to_epoch_day()) * nanos_in_day
			return quotient(nanos, unit.duration)

		if sd is None or ed is None:
			raise errors.UnsupportedUnitError(unit, self)

		if st is not None and et is not None:
			# Incomplete final day.
			if ed > sd and et < st:
				ed = ed.minus_days(1)
			elif ed < sd and et > st:
				ed = ed.plus_days(1)

		if unit in days_per_unit:
			return quotient(ed.to_epoch_day() - sd.to_epoch_day(), days_per_unit[unit])

		sy, sm, sday = self.fields_of(sd)
		ey, em, eday = self.fields_of(ed)
		packed_start = (((sy * self.months_in_year) + sm - 1) * 32) + sday
		packed_stop = (((ey * self.months_in_year) + em - 1) * 32) + eday
		months = quotient(packed_stop - packed_start, 32)

		if unit is PeriodUnit.MONTHS:
			return months
		elif unit is PeriodUnit.QUARTER_YEARS and self.months_in_year % 3 == 0:
			return quotient(months, 3)
		elif unit in years_per_unit:
			return quotient(months, self.months_in_year * years_per_unit[unit])

		raise errors.UnsupportedUnitError(unit, self)

	def estimate(self, unit):
		"""
		# The estimated duration of &unit in nanoseconds within this chronology.
		"""
		require(unit, 'unit')
		if unit is PeriodUnit.MONTHS:
			return PeriodUnit.YEARS.duration // self.months_in_year
		elif unit is PeriodUnit.QUARTER_YEARS and self.months_in_year % 3 != 0:
			raise errors.UnsupportedUnitError(unit, self)
		return unit.duration

_table = None
_table_lock = threading.Lock()

def _publish():
	from . import coptic
	from . import quarter

	iso = Chronology('ISO', gregorian)
	gregorian.context(iso)
	quarter.context(iso)
	iso.seal()

	cop = Chronology('Coptic', coptic)
	coptic.context(cop)
	cop.seal()

	table = types.MappingProxyType({
		'iso': iso,
		'coptic': cop,
	})
	for c in table.values():
		logger.debug("published %s chronology with %d field rules", c.name, len(c.fields))
	return table

def chronologies():
	"""
	# The process-wide table of chronologies, built on first access.
	"""
	global _table

	table = _table
	if table is None:
		with _table_lock:
			if _table is None:
				_table = _publish()
			table = _table
	return table

def chronology(name):
	"""
	# Retrieve the chronology identified by &name; case insensitive.
	"""
	require(name, 'name')
	try:
		return chronologies()[name.lower()]
	except KeyError:
		raise LookupError("unknown chronology: " + repr(name)) from None
