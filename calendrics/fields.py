"""
# Date and time fields and the ranges of their values.

# A &DateTimeField is a named component of a date or time carrying the unit it is
# measured in, its base unit, and the unit that it varies within, its range unit.
# Fields hold no calculations of their own: the Rules of a field are resolved from
# a chronology on demand.

#!python
	from calendrics import fields, types
	d = types.Date.of(2012, 2, 15)
	assert fields.DAY_OF_MONTH.get(d) == 15
	assert fields.DAY_OF_MONTH.range(d).maximum == 29

# Field instances are shared constants compared by identity.
"""
from . import abstract
from . import core
from .units import PeriodUnit

class RuleRange(tuple):
	"""
	# The range of valid values of a field: `(minimum, largest_minimum,
	# smallest_maximum, maximum)`.

	# The outer bounds describe the widest range across all contexts, the inner
	# bounds the narrowest; a range whose inner and outer bounds are equal is
	# fixed.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, minimum, *bounds):
		"""
		# Construct a range from two, three, or four bounds.

		#!python
			RuleRange.of(1, 12)
			RuleRange.of(1, 28, 31)
			RuleRange.of(0, 1, 12, 13)
		"""
		if len(bounds) == 1:
			parts = (minimum, minimum, bounds[0], bounds[0])
		elif len(bounds) == 2:
			parts = (minimum, minimum, bounds[0], bounds[1])
		elif len(bounds) == 3:
			parts = (minimum,) + bounds
		else:
			raise TypeError("range requires two to four bounds")

		if not (parts[0] <= parts[1] <= parts[2] <= parts[3]):
			raise ValueError("inconsistent range bounds: " + repr(parts))
		return tuple.__new__(Class, parts)

	@property
	def minimum(self):
		return self[0]

	@property
	def largest_minimum(self):
		return self[1]

	@property
	def smallest_maximum(self):
		return self[2]

	@property
	def maximum(self):
		return self[3]

	@property
	def fixed(self):
		"""
		# Whether the range is the same in every context.
		"""
		return self[0] == self[1] and self[2] == self[3]

	@property
	def span(self):
		"""
		# Number of values between the outer bounds, inclusive.
		"""
		return self[3] - self[0] + 1

	def __contains__(self, value):
		return self[0] <= value <= self[3]

	def __str__(self):
		mn, lmn, smx, mx = self
		lower = str(mn) if mn == lmn else "{0}/{1}".format(mn, lmn)
		upper = str(mx) if smx == mx else "{0}/{1}".format(smx, mx)
		return lower + " - " + upper

	def __repr__(self):
		return "(calendrics.range@'{0!s}')".format(self)

class DateTimeField(object):
	"""
	# A named field of a date or time.

	# [ Properties ]
	# /name/
		# The name of the field; `'DayOfMonth'`.
	# /base_unit/
		# The &PeriodUnit the field is measured in.
	# /range_unit/
		# The &PeriodUnit the field varies within.
	# /temporal/
		# `'date'` or `'time'`; the part of a date-time the field reads.
	# /default_chronology/
		# Name of the chronology used when none is given.
	"""
	__slots__ = ('name', 'base_unit', 'range_unit', 'temporal', 'default_chronology')

	def __init__(self, name, base_unit, range_unit, temporal='date', chronology='iso'):
		self.name = name
		self.base_unit = base_unit
		self.range_unit = range_unit
		self.temporal = temporal
		self.default_chronology = chronology

	def __str__(self):
		return self.name

	def __repr__(self):
		return "(calendrics.field@{0!r})".format(self.name)

	@property
	def unbounded(self):
		"""
		# Whether the field has no cycle to wrap within.
		"""
		return self.range_unit is PeriodUnit.FOREVER

	def chronology(self, chronology=None):
		if chronology is None:
			return core.chronology(self.default_chronology)
		return chronology

	def rules(self, chronology=None):
		"""
		# The Rules implementing the field in &chronology; the default chronology
		# when &None.

		# Raises &calendrics.errors.UnsupportedFieldError when the chronology
		# does not model the field.
		"""
		return self.chronology(chronology).implementation(self)

	def range(self, date=None, time=None, chronology=None):
		"""
		# The range of the field narrowed by the given &date and &time.

		# Without context, the range covering every date or time.
		"""
		return self.rules(chronology).range(date, time)

	def get(self, target, chronology=None):
		return self.rules(chronology).get(target)

	def set(self, target, value, chronology=None, lenient=False):
		return self.rules(chronology).set(target, value, lenient=lenient)

	def roll(self, target, amount, chronology=None):
		return self.rules(chronology).roll(target, amount)

abstract.Field.register(DateTimeField)

U = PeriodUnit

NANO_OF_SECOND = DateTimeField('NanoOfSecond', U.NANOS, U.SECONDS, 'time')
NANO_OF_DAY = DateTimeField('NanoOfDay', U.NANOS, U.DAYS, 'time')
MILLI_OF_SECOND = DateTimeField('MilliOfSecond', U.MILLIS, U.SECONDS, 'time')
SECOND_OF_MINUTE = DateTimeField('SecondOfMinute', U.SECONDS, U.MINUTES, 'time')
SECOND_OF_DAY = DateTimeField('SecondOfDay', U.SECONDS, U.DAYS, 'time')
MINUTE_OF_HOUR = DateTimeField('MinuteOfHour', U.MINUTES, U.HOURS, 'time')
MINUTE_OF_DAY = DateTimeField('MinuteOfDay', U.MINUTES, U.DAYS, 'time')
HOUR_OF_AMPM = DateTimeField('HourOfAmPm', U.HOURS, U.HALF_DAYS, 'time')
HOUR_OF_DAY = DateTimeField('HourOfDay', U.HOURS, U.DAYS, 'time')
AMPM_OF_DAY = DateTimeField('AmPmOfDay', U.HALF_DAYS, U.DAYS, 'time')

DAY_OF_WEEK = DateTimeField('DayOfWeek', U.DAYS, U.WEEKS)
DAY_OF_MONTH = DateTimeField('DayOfMonth', U.DAYS, U.MONTHS)
DAY_OF_YEAR = DateTimeField('DayOfYear', U.DAYS, U.YEARS)
EPOCH_DAY = DateTimeField('EpochDay', U.DAYS, U.FOREVER)
MONTH_OF_YEAR = DateTimeField('MonthOfYear', U.MONTHS, U.YEARS)
EPOCH_MONTH = DateTimeField('EpochMonth', U.MONTHS, U.FOREVER)
YEAR_OF_ERA = DateTimeField('YearOfEra', U.YEARS, U.ERAS)
YEAR = DateTimeField('Year', U.YEARS, U.FOREVER)
ERA = DateTimeField('Era', U.ERAS, U.FOREVER)

del U

#: Fields reading the time of day.
time_fields = (
	NANO_OF_SECOND,
	NANO_OF_DAY,
	MILLI_OF_SECOND,
	SECOND_OF_MINUTE,
	SECOND_OF_DAY,
	MINUTE_OF_HOUR,
	MINUTE_OF_DAY,
	HOUR_OF_AMPM,
	HOUR_OF_DAY,
	AMPM_OF_DAY,
)

#: Fields reading the calendar date.
date_fields = (
	DAY_OF_WEEK,
	DAY_OF_MONTH,
	DAY_OF_YEAR,
	EPOCH_DAY,
	MONTH_OF_YEAR,
	EPOCH_MONTH,
	YEAR_OF_ERA,
	YEAR,
	ERA,
)
