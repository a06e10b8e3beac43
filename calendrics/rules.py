"""
# Rules implementing the standard fields for any calendar chronology.

# The date rules here consult the chronology for the calendar structure and
# never the calendar modules directly, so &.gregorian and &.coptic share them:
# a date is read by converting it into the chronology's `(year, month, day)`
# and written by converting the adjusted triple back into an ISO date.

# Time rules are calendar neutral and operate on the nanosecond of the day.
"""
from . import abstract
from . import core
from . import errors
from . import fields
from . import gregorian
from . import week
from .fields import RuleRange
from .units import nanos_in_second, nanos_in_day

class Rules(object):
	"""
	# Base class of field Rules.

	# Subclasses implement &outline, the context-free range, and the
	# `get_*` and `set_*` methods of the part of the date-time they read.
	# &narrow refines the range given a context.

	# [ Properties ]
	# /cyclic/
		# Whether &roll wraps within the range. Rules of unbounded fields
		# roll by addition.
	"""
	__slots__ = ('field', 'chronology')
	cyclic = True

	def __init__(self, field, chronology):
		self.field = field
		self.chronology = chronology

	def __repr__(self):
		return "(calendrics.rules@'{0!s}/{1!s}')".format(self.chronology, self.field)

	def outline(self):
		raise NotImplementedError("context-free range")

	def narrow(self, date, time):
		return self.outline()

	def range(self, date=None, time=None):
		date, time = core.context(date, time)
		if date is None and time is None:
			return self.outline()
		return self.narrow(date, time)

	def _parts(self, target):
		date, time = core.split(core.require(target, 'target'))
		part = date if self.field.temporal == 'date' else time
		if part is None:
			raise errors.UnsupportedFieldError(self.field, self.chronology)
		return date, time

	def get_date(self, date):
		raise errors.UnsupportedFieldError(self.field, self.chronology)

	def get_time(self, time):
		raise errors.UnsupportedFieldError(self.field, self.chronology)

	def get(self, target):
		date, time = self._parts(target)
		if self.field.temporal == 'date':
			return self.get_date(date)
		return self.get_time(time)

	def set_date(self, date, value):
		raise errors.UnsupportedOperationError('set', self.field)

	def set_time(self, time, value):
		raise errors.UnsupportedOperationError('set', self.field)

	def set(self, target, value, lenient=False):
		value = core.integer(value, 'value')
		date, time = self._parts(target)

		if lenient:
			return self.normalize(target, value)

		r = self.range(date, time)
		if value not in r:
			raise errors.InvalidFieldValueError(self.field, value, r)

		if self.field.temporal == 'date':
			date = self.set_date(date, value)
		else:
			time = self.set_time(time, value)
		return core.join(target, date, time)

	def normalize(self, target, value):
		"""
		# Lenient assignment; the difference is added in the field's base unit.
		"""
		current = self.get(target)
		return self.chronology.add(target, value - current, self.field.base_unit)

	def roll(self, target, amount):
		amount = core.integer(amount, 'amount')
		date, time = self._parts(target)
		current = self.get(target)

		if not self.cyclic:
			return self.set(target, core.checked_add(current, amount))

		r = self.range(date, time)
		value = r.minimum + ((current - r.minimum + amount) % r.span)
		return self.set(target, value)

	def add(self, target, amount):
		return self.chronology.add(target, amount, self.field.base_unit)

	def between(self, start, stop):
		return self.chronology.between(self.field.base_unit, start, stop)

	def estimate(self):
		return self.chronology.estimate(self.field.base_unit)

abstract.Rules.register(Rules)

class YearRules(Rules):
	__slots__ = ()
	cyclic = False

	def outline(self):
		return RuleRange.of(self.chronology.minimum_year, self.chronology.maximum_year)

	def get_date(self, date):
		return self.chronology.fields_of(date)[0]

	def set_date(self, date, value):
		year, month, day = self.chronology.fields_of(date)
		return self.chronology.resolve(date, value, month, day)

class MonthOfYearRules(Rules):
	__slots__ = ()

	def outline(self):
		return RuleRange.of(1, self.chronology.months_in_year)

	def get_date(self, date):
		return self.chronology.fields_of(date)[1]

	def set_date(self, date, value):
		year, month, day = self.chronology.fields_of(date)
		return self.chronology.resolve(date, year, value, day)

class DayOfMonthRules(Rules):
	__slots__ = ()

	def outline(self):
		cal = self.chronology.calendar
		return RuleRange.of(1, min(cal.calendar_year), max(cal.calendar_leap))

	def narrow(self, date, time):
		if date is None:
			return self.outline()
		year, month, day = self.chronology.fields_of(date)
		return RuleRange.of(1, self.chronology.month_length(year, month))

	def get_date(self, date):
		return self.chronology.fields_of(date)[2]

	def set_date(self, date, value):
		year, month, day = self.chronology.fields_of(date)
		return self.chronology.date(date, year, month, value)

class DayOfYearRules(Rules):
	__slots__ = ()

	def outline(self):
		cal = self.chronology.calendar
		return RuleRange.of(1, sum(cal.calendar_year), sum(cal.calendar_leap))

	def narrow(self, date, time):
		if date is None:
			return self.outline()
		year = self.chronology.fields_of(date)[0]
		return RuleRange.of(1, self.chronology.year_length(year))

	def get_date(self, date):
		year = self.chronology.fields_of(date)[0]
		first = self.chronology.calendar.epoch_day_from_date((year, 1, 1))
		return date.to_epoch_day() - first + 1

	def set_date(self, date, value):
		return date.plus_days(value - self.get_date(date))

class EpochMonthRules(Rules):
	__slots__ = ()
	cyclic = False

	def outline(self):
		c = self.chronology
		return RuleRange.of(
			c.minimum_year * c.months_in_year,
			(c.maximum_year * c.months_in_year) + c.months_in_year - 1,
		)

	def get_date(self, date):
		return self.chronology.epoch_month(date)

	def set_date(self, date, value):
		year, month = divmod(value, self.chronology.months_in_year)
		day = self.chronology.fields_of(date)[2]
		return self.chronology.resolve(date, year, month + 1, day)

class YearOfEraRules(Rules):
	__slots__ = ()

	def outline(self):
		c = self.chronology
		return RuleRange.of(1, c.maximum_year, 1 - c.minimum_year)

	def narrow(self, date, time):
		if date is None:
			return self.outline()
		year = self.chronology.fields_of(date)[0]
		if year >= 1:
			return RuleRange.of(1, self.chronology.maximum_year)
		return RuleRange.of(1, 1 - self.chronology.minimum_year)

	def get_date(self, date):
		year = self.chronology.fields_of(date)[0]
		return year if year >= 1 else 1 - year

	def set_date(self, date, value):
		year, month, day = self.chronology.fields_of(date)
		year = value if year >= 1 else 1 - value
		return self.chronology.resolve(date, year, month, day)

	def normalize(self, target, value):
		# Excess cannot be carried into eras.
		return self.set(target, value)

class EraRules(Rules):
	"""
	# Era zero precedes year one; era one begins with it.
	"""
	__slots__ = ()

	def outline(self):
		return RuleRange.of(0, 1)

	def get_date(self, date):
		return 1 if self.chronology.fields_of(date)[0] >= 1 else 0

	def set_date(self, date, value):
		if value == self.get_date(date):
			return date
		year, month, day = self.chronology.fields_of(date)
		return self.chronology.resolve(date, 1 - year, month, day)

	def normalize(self, target, value):
		return self.set(target, value)

class EpochDayRules(Rules):
	__slots__ = ()
	cyclic = False

	def outline(self):
		return RuleRange.of(gregorian.minimum_epoch_day, gregorian.maximum_epoch_day)

	def get_date(self, date):
		return date.to_epoch_day()

	def set_date(self, date, value):
		return date.of_epoch_day(value)

class DayOfWeekRules(Rules):
	__slots__ = ()

	def outline(self):
		return RuleRange.of(1, week.days_in_week)

	def get_date(self, date):
		return week.day_of_week(date.to_epoch_day())

	def set_date(self, date, value):
		return date.plus_days(value - self.get_date(date))

class ClockRules(Rules):
	"""
	# Rules of a time field measuring &quantum nanoseconds cycling every &count.
	"""
	__slots__ = ('quantum', 'count')

	def __init__(self, field, chronology, quantum, count):
		super().__init__(field, chronology)
		self.quantum = quantum
		self.count = count

	def outline(self):
		return RuleRange.of(0, self.count - 1)

	def get_time(self, time):
		return (time.to_nano_of_day() // self.quantum) % self.count

	def set_time(self, time, value):
		nanos = time.to_nano_of_day() + ((value - self.get_time(time)) * self.quantum)
		return time.of_nano_of_day(nanos)

#: Rules classes of the calendar fields.
calendar_rules = (
	(fields.YEAR, YearRules),
	(fields.MONTH_OF_YEAR, MonthOfYearRules),
	(fields.DAY_OF_MONTH, DayOfMonthRules),
	(fields.DAY_OF_YEAR, DayOfYearRules),
	(fields.EPOCH_MONTH, EpochMonthRules),
	(fields.YEAR_OF_ERA, YearOfEraRules),
	(fields.ERA, EraRules),
	(fields.EPOCH_DAY, EpochDayRules),
	(fields.DAY_OF_WEEK, DayOfWeekRules),
)

#: Quantum and cycle of the time fields.
clock_quanta = (
	(fields.NANO_OF_SECOND, 1, nanos_in_second),
	(fields.NANO_OF_DAY, 1, nanos_in_day),
	(fields.MILLI_OF_SECOND, 1000000, 1000),
	(fields.SECOND_OF_MINUTE, nanos_in_second, 60),
	(fields.SECOND_OF_DAY, nanos_in_second, 86400),
	(fields.MINUTE_OF_HOUR, 60 * nanos_in_second, 60),
	(fields.MINUTE_OF_DAY, 60 * nanos_in_second, 1440),
	(fields.HOUR_OF_AMPM, 3600 * nanos_in_second, 12),
	(fields.HOUR_OF_DAY, 3600 * nanos_in_second, 24),
	(fields.AMPM_OF_DAY, 43200 * nanos_in_second, 2),
)

def calendar(chronology):
	"""
	# Register the calendar field rules with the &chronology.
	"""
	for field, Class in calendar_rules:
		chronology.register(field, Class(field, chronology))

def clock(chronology):
	"""
	# Register the time field rules with the &chronology.
	"""
	for field, quantum, count in clock_quanta:
		chronology.register(field, ClockRules(field, chronology, quantum, count))
