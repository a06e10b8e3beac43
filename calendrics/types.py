"""
# Immutable date and time value types.

#!python
	d = types.Date.of(2012, 3, 15)
	t = types.Time.of(10, 30)
	dt = d.at_time(t)

	assert dt.plus_hours(25) == types.DateTime.of_fields(2012, 3, 16, 11, 30)
	assert str(d.plus_months(11)) == '2013-02-15'
	assert d.get(fields.DAY_OF_WEEK) == 4

# Values are tuples: &Date is `(year, month, day)`, &Time is
# `(hour, minute, second, nanosecond)`, and &DateTime is `(date, time)`. As
# tuples, they are hashable and ordered by their components; the ordering of
# &DateTime is that of its date followed by its time.

# Operations never modify the value; a new instance is returned.

# [ Elements ]
# /Date/
	# A proleptic ISO calendar date.
# /Time/
	# A time of day with nanosecond precision.
# /DateTime/
	# A &Date paired with a &Time.
# /midnight/
	# The first &Time of the day.
# /noon/
	# The &Time at the middle of the day.
# /epoch/
	# The &Date `1970-01-01`; epoch-day zero.
# /minimum_date/
	# The earliest supported &Date.
# /maximum_date/
	# The latest supported &Date.
"""
import operator

from . import core
from . import errors
from . import format
from . import gregorian
from . import week
from .fields import RuleRange
from .units import PeriodUnit, nanos_in_second, nanos_in_day, seconds_in_day

#: Nanoseconds in a minute.
nanos_in_minute = 60 * nanos_in_second

#: Nanoseconds in an hour.
nanos_in_hour = 60 * nanos_in_minute

#: Range of zone offsets accepted by the epoch-second conversions.
offset_range = RuleRange.of(-18 * 3600, 18 * 3600)

def check(value, name, minimum, maximum, Error, index=operator.index):
	"""
	# Identify &value as an integer within `[minimum, maximum]` raising &Error otherwise.
	"""
	if value is None:
		raise errors.NullArgumentError(name)
	value = index(value)
	if not minimum <= value <= maximum:
		raise Error(name, value, f"not within [{minimum}, {maximum}]")
	return value

def check_offset(offset):
	offset = core.integer(offset, 'offset_seconds')
	if offset not in offset_range:
		raise errors.InvalidFieldValueError('offset_seconds', offset, offset_range)
	return offset

class Temporal(tuple):
	"""
	# Operations common to the value types; field access dispatched through
	# the Rules of a chronology and comparisons.
	"""
	__slots__ = ()

	@property
	def chronology(self):
		"""
		# The ISO chronology.
		"""
		return core.chronology('iso')

	def __getnewargs__(self):
		return tuple(self)

	def get(self, field, chronology=None):
		"""
		# The value of &field; in the field's default chronology when &chronology is &None.
		"""
		return core.require(field, 'field').get(self, chronology)

	def range(self, field, chronology=None):
		"""
		# The range of &field narrowed by this value.
		"""
		date, time = core.split(self)
		return core.require(field, 'field').range(date, time, chronology)

	def with_field(self, field, value, lenient=False, chronology=None):
		"""
		# Assign &value to &field.

		# Raises &errors.InvalidFieldValueError when &value is outside the narrowed
		# range, unless &lenient in which case the excess is carried.
		"""
		return core.require(field, 'field').set(self, value, chronology, lenient=lenient)

	def roll(self, field, amount, chronology=None):
		"""
		# Adjust &field by &amount wrapping within the field's range.
		"""
		return core.require(field, 'field').roll(self, amount, chronology)

	def plus(self, amount, unit):
		return self.chronology.add(self, amount, unit)

	def minus(self, amount, unit):
		return self.chronology.add(self, core.checked_negate(core.integer(amount, 'amount')), unit)

	# Values only compare with values of the same kind; plain tuples and
	# other kinds are not ordered against them.
	def comparable(self, operand):
		return isinstance(operand, Temporal) and operand.kind == self.kind

	def __eq__(self, operand):
		if not self.comparable(operand):
			return NotImplemented
		return tuple.__eq__(self, operand)

	def __ne__(self, operand):
		if not self.comparable(operand):
			return NotImplemented
		return tuple.__ne__(self, operand)

	def __lt__(self, operand):
		if not self.comparable(operand):
			return NotImplemented
		return tuple.__lt__(self, operand)

	def __le__(self, operand):
		if not self.comparable(operand):
			return NotImplemented
		return tuple.__le__(self, operand)

	def __gt__(self, operand):
		if not self.comparable(operand):
			return NotImplemented
		return tuple.__gt__(self, operand)

	def __ge__(self, operand):
		if not self.comparable(operand):
			return NotImplemented
		return tuple.__ge__(self, operand)

	__hash__ = tuple.__hash__

	def compare(self, operand):
		"""
		# `-1`, `0`, or `1` given that the value precedes, equals, or follows &operand.

		# Raises &TypeError when &operand is not a value of the same kind.
		"""
		core.require(operand, 'operand')
		if not self.comparable(operand):
			raise TypeError(
				"cannot compare {0} with {1}".format(self.kind, type(operand).__name__)
			)
		return (self > operand) - (self < operand)

	def is_before(self, operand):
		return self.compare(operand) < 0

	def is_after(self, operand):
		return self.compare(operand) > 0

class Date(Temporal):
	"""
	# A date of the proleptic Gregorian calendar; `(year, month, day)`.
	"""
	__slots__ = ()
	kind = 'date'
	calendar = gregorian

	def __new__(Class, year, month, day):
		Error = errors.InvalidDateError
		year = check(year, 'year', gregorian.minimum_year, gregorian.maximum_year, Error)
		month = check(month, 'month', 1, gregorian.months_in_year, Error)
		day = check(day, 'day', 1, 31, Error)

		length = gregorian.month_length(year, month)
		if day > length:
			raise Error('day', day, f"{format.format_year(year)}-{month:02} has {length} days")

		return tuple.__new__(Class, (year, month, day))

	year = property(operator.itemgetter(0))
	month = property(operator.itemgetter(1))
	day = property(operator.itemgetter(2))

	@classmethod
	def of(Class, year, month, day):
		"""
		# Construct a date from its components.

		# Raises &errors.InvalidDateError when a component is outside of its bound.
		"""
		return Class(year, month, day)

	@classmethod
	def of_epoch_day(Class, days):
		"""
		# Construct the date that is &days after `1970-01-01`.

		# Raises &errors.DateRangeError when the day is beyond the supported years.
		"""
		days = core.integer(days, 'epoch_day')
		if not gregorian.minimum_epoch_day <= days <= gregorian.maximum_epoch_day:
			raise errors.DateRangeError(
				'epoch_day', days, gregorian.minimum_epoch_day, gregorian.maximum_epoch_day
			)
		return tuple.__new__(Class, gregorian.date_from_epoch_day(days))

	@classmethod
	def of_year_day(Class, year, day_of_year):
		"""
		# Construct the date from the &year and the one-based &day_of_year.
		"""
		Error = errors.InvalidDateError
		year = check(year, 'year', gregorian.minimum_year, gregorian.maximum_year, Error)
		doy = check(day_of_year, 'day_of_year', 1, gregorian.year_length(year), Error)
		return tuple.__new__(Class, gregorian.date_from_day_of_year(year, doy))

	@classmethod
	def parse(Class, text):
		"""
		# Construct the date from its canonical text, `YYYY-MM-DD`.
		"""
		return Class(*format.parse_date(text))

	def __str__(self):
		return format.format_date(self)

	def __repr__(self):
		return f"(calendrics.date@'{self!s}')"

	def to_epoch_day(self):
		"""
		# The number of days from `1970-01-01` to the date.
		"""
		return gregorian.epoch_day_from_date(self)

	def is_leap_year(self):
		return gregorian.year_is_leap(self[0])

	def month_length(self):
		return gregorian.month_length(self[0], self[1])

	def year_length(self):
		return gregorian.year_length(self[0])

	@property
	def day_of_year(self):
		return gregorian.day_of_year(self)

	@property
	def day_of_week(self):
		"""
		# The ISO day of the week; `1` for Monday through `7` for Sunday.
		"""
		return week.day_of_week(self.to_epoch_day())

	def at_time(self, time):
		return DateTime(self, time)

	def clamped(self, year, month, day):
		# Clamp the day to the length of the month.
		return self.__class__(year, month, min(day, gregorian.month_length(year, month)))

	def with_year(self, year):
		"""
		# The date with the year replaced; February 29 becomes February 28
		# when &year is not leap.
		"""
		year = check(year, 'year', gregorian.minimum_year, gregorian.maximum_year, errors.InvalidDateError)
		if year == self[0]:
			return self
		return self.clamped(year, self[1], self[2])

	def with_month(self, month):
		"""
		# The date with the month replaced; the day is clamped to the length of the new month.
		"""
		month = check(month, 'month', 1, gregorian.months_in_year, errors.InvalidDateError)
		if month == self[1]:
			return self
		return self.clamped(self[0], month, self[2])

	def with_day_of_month(self, day):
		if day == self[2]:
			return self
		return self.__class__(self[0], self[1], day)

	def with_day_of_year(self, day_of_year):
		return self.of_year_day(self[0], day_of_year)

	def plus_days(self, days):
		"""
		# The date &days after this one.

		# Raises &errors.ArithmeticOverflowError when the addition overflows and
		# &errors.DateRangeError when the result is beyond the supported years.
		"""
		days = core.integer(days, 'days')
		if days == 0:
			return self
		return self.of_epoch_day(core.checked_add(self.to_epoch_day(), days))

	def plus_weeks(self, weeks):
		weeks = core.integer(weeks, 'weeks')
		return self.plus_days(core.checked_multiply(weeks, week.days_in_week))

	def plus_months(self, months):
		"""
		# The date &months after this one with the day clamped to the length of
		# the resulting month.
		"""
		months = core.integer(months, 'months')
		if months == 0:
			return self
		return self.chronology.add_months(self, months)

	def plus_years(self, years):
		years = core.integer(years, 'years')
		if years == 0:
			return self
		return self.chronology.add_years(self, years)

	def minus_days(self, days):
		return self.plus_days(core.checked_negate(core.integer(days, 'days')))

	def minus_weeks(self, weeks):
		return self.plus_weeks(core.checked_negate(core.integer(weeks, 'weeks')))

	def minus_months(self, months):
		return self.plus_months(core.checked_negate(core.integer(months, 'months')))

	def minus_years(self, years):
		return self.plus_years(core.checked_negate(core.integer(years, 'years')))

class Time(Temporal):
	"""
	# A time of day; `(hour, minute, second, nanosecond)`.

	# Time arithmetic wraps at midnight. &DateTime carries the days into its date.
	"""
	__slots__ = ()
	kind = 'time'

	def __new__(Class, hour, minute=0, second=0, nano=0):
		Error = errors.InvalidTimeError
		return tuple.__new__(Class, (
			check(hour, 'hour', 0, 23, Error),
			check(minute, 'minute', 0, 59, Error),
			check(second, 'second', 0, 59, Error),
			check(nano, 'nano', 0, nanos_in_second - 1, Error),
		))

	hour = property(operator.itemgetter(0))
	minute = property(operator.itemgetter(1))
	second = property(operator.itemgetter(2))
	nano = property(operator.itemgetter(3))

	@classmethod
	def of(Class, hour, minute=0, second=0, nano=0):
		"""
		# Construct a time from its components.

		# Raises &errors.InvalidTimeError when a component is outside of its bound.
		"""
		return Class(hour, minute, second, nano)

	@classmethod
	def of_nano_of_day(Class, nanos):
		nanos = check(nanos, 'nano_of_day', 0, nanos_in_day - 1, errors.InvalidTimeError)
		seconds, nano = divmod(nanos, nanos_in_second)
		minutes, second = divmod(seconds, 60)
		hour, minute = divmod(minutes, 60)
		return tuple.__new__(Class, (hour, minute, second, nano))

	@classmethod
	def of_second_of_day(Class, seconds, nano=0):
		Error = errors.InvalidTimeError
		seconds = check(seconds, 'second_of_day', 0, seconds_in_day - 1, Error)
		nano = check(nano, 'nano', 0, nanos_in_second - 1, Error)
		return Class.of_nano_of_day((seconds * nanos_in_second) + nano)

	@classmethod
	def parse(Class, text):
		"""
		# Construct the time from its canonical text, `HH:MM[:SS[.fff]]`.
		"""
		return Class(*format.parse_time(text))

	def __str__(self):
		return format.format_time(self)

	def __repr__(self):
		return f"(calendrics.time@'{self!s}')"

	def to_nano_of_day(self):
		h, m, s, ns = self
		return (((((h * 60) + m) * 60) + s) * nanos_in_second) + ns

	def to_second_of_day(self):
		h, m, s, ns = self
		return (((h * 60) + m) * 60) + s

	def with_hour(self, hour):
		return self.__class__(hour, self[1], self[2], self[3])

	def with_minute(self, minute):
		return self.__class__(self[0], minute, self[2], self[3])

	def with_second(self, second):
		return self.__class__(self[0], self[1], second, self[3])

	def with_nano(self, nano):
		return self.__class__(self[0], self[1], self[2], nano)

	def elapse(self, nanos):
		"""
		# The time &nanos after this one wrapping at midnight.
		"""
		if nanos == 0:
			return self
		return self.of_nano_of_day((self.to_nano_of_day() + nanos) % nanos_in_day)

	def plus_hours(self, hours):
		return self.elapse(core.integer(hours, 'hours') * nanos_in_hour)

	def plus_minutes(self, minutes):
		return self.elapse(core.integer(minutes, 'minutes') * nanos_in_minute)

	def plus_seconds(self, seconds):
		return self.elapse(core.integer(seconds, 'seconds') * nanos_in_second)

	def plus_nanos(self, nanos):
		return self.elapse(core.integer(nanos, 'nanos'))

	def minus_hours(self, hours):
		return self.plus_hours(core.checked_negate(core.integer(hours, 'hours')))

	def minus_minutes(self, minutes):
		return self.plus_minutes(core.checked_negate(core.integer(minutes, 'minutes')))

	def minus_seconds(self, seconds):
		return self.plus_seconds(core.checked_negate(core.integer(seconds, 'seconds')))

	def minus_nanos(self, nanos):
		return self.plus_nanos(core.checked_negate(core.integer(nanos, 'nanos')))

	def truncated(self, unit):
		"""
		# The time with the fields smaller than &unit set to zero.

		# Raises &errors.UnsupportedUnitError for units larger than &PeriodUnit.DAYS.
		"""
		core.require(unit, 'unit')
		if unit > PeriodUnit.DAYS:
			raise errors.UnsupportedUnitError(unit)
		nanos = self.to_nano_of_day()
		return self.of_nano_of_day(nanos - (nanos % unit.duration))

class DateTime(Temporal):
	"""
	# A &Date and a &Time; `(date, time)`.

	# Time arithmetic carries into the date.
	"""
	__slots__ = ()
	kind = 'datetime'

	def __new__(Class, date, time):
		core.require(date, 'date')
		core.require(time, 'time')
		if not isinstance(date, Date):
			raise TypeError("date must be a calendrics.types.Date")
		if not isinstance(time, Time):
			raise TypeError("time must be a calendrics.types.Time")
		return tuple.__new__(Class, (date, time))

	date = property(operator.itemgetter(0))
	time = property(operator.itemgetter(1))

	@classmethod
	def of(Class, date, time):
		return Class(date, time)

	@classmethod
	def of_fields(Class, year, month, day, hour=0, minute=0, second=0, nano=0):
		return Class(Date(year, month, day), Time(hour, minute, second, nano))

	@classmethod
	def of_epoch_second(Class, seconds, nano_adjustment, offset_seconds):
		"""
		# Construct the local date-time of the instant &seconds after the epoch
		# at the zone offset &offset_seconds.

		# [ Exceptions ]
		# /&errors.InvalidTimeError/
			# &nano_adjustment is outside `[0, 999999999]`.
		# /&errors.InvalidFieldValueError/
			# &offset_seconds is outside eighteen hours.
		# /&errors.NullArgumentError/
			# &offset_seconds is &None.
		# /&errors.DateRangeError/
			# The local date is beyond the supported years.
		"""
		seconds = core.integer(seconds, 'seconds')
		nano = check(nano_adjustment, 'nano_adjustment', 0, nanos_in_second - 1, errors.InvalidTimeError)
		offset = check_offset(offset_seconds)

		days, second = divmod(seconds + offset, seconds_in_day)
		if not gregorian.minimum_epoch_day <= days <= gregorian.maximum_epoch_day:
			raise errors.DateRangeError(
				'epoch_second', seconds,
				(gregorian.minimum_epoch_day * seconds_in_day) - offset,
				((gregorian.maximum_epoch_day + 1) * seconds_in_day) - offset - 1,
			)
		return Class(Date.of_epoch_day(days), Time.of_second_of_day(second, nano))

	@classmethod
	def parse(Class, text):
		"""
		# Construct the date-time from its canonical text, `YYYY-MM-DDTHH:MM[:SS[.fff]]`.
		"""
		date, time = format.parse_datetime(text)
		return Class(Date(*date), Time(*time))

	def __str__(self):
		return format.format_datetime(self)

	def __repr__(self):
		return f"(calendrics.datetime@'{self!s}')"

	year = property(lambda x: x[0][0])
	month = property(lambda x: x[0][1])
	day = property(lambda x: x[0][2])
	hour = property(lambda x: x[1][0])
	minute = property(lambda x: x[1][1])
	second = property(lambda x: x[1][2])
	nano = property(lambda x: x[1][3])

	@property
	def day_of_year(self):
		return self[0].day_of_year

	@property
	def day_of_week(self):
		return self[0].day_of_week

	def is_leap_year(self):
		return self[0].is_leap_year()

	def to_epoch_day(self):
		return self[0].to_epoch_day()

	def to_epoch_second(self, offset_seconds):
		"""
		# The seconds from the epoch to the instant this date-time denotes at
		# the zone offset &offset_seconds.
		"""
		offset = check_offset(offset_seconds)
		date, time = self
		return (date.to_epoch_day() * seconds_in_day) + time.to_second_of_day() - offset

	def with_date(self, date):
		if date == self[0]:
			return self
		return self.__class__(date, self[1])

	def with_time(self, time):
		if time == self[1]:
			return self
		return self.__class__(self[0], time)

	def with_year(self, year):
		return self.with_date(self[0].with_year(year))

	def with_month(self, month):
		return self.with_date(self[0].with_month(month))

	def with_day_of_month(self, day):
		return self.with_date(self[0].with_day_of_month(day))

	def with_day_of_year(self, day_of_year):
		return self.with_date(self[0].with_day_of_year(day_of_year))

	def with_hour(self, hour):
		return self.with_time(self[1].with_hour(hour))

	def with_minute(self, minute):
		return self.with_time(self[1].with_minute(minute))

	def with_second(self, second):
		return self.with_time(self[1].with_second(second))

	def with_nano(self, nano):
		return self.with_time(self[1].with_nano(nano))

	def elapse(self, nanos):
		"""
		# The date-time &nanos after this one; whole days are carried into the date.
		"""
		if nanos == 0:
			return self
		date, time = self
		days, nod = divmod(time.to_nano_of_day() + nanos, nanos_in_day)
		if days:
			date = date.plus_days(days)
		return self.__class__(date, time.of_nano_of_day(nod))

	def plus_days(self, days):
		return self.with_date(self[0].plus_days(days))

	def plus_weeks(self, weeks):
		return self.with_date(self[0].plus_weeks(weeks))

	def plus_months(self, months):
		return self.with_date(self[0].plus_months(months))

	def plus_years(self, years):
		return self.with_date(self[0].plus_years(years))

	def plus_hours(self, hours):
		return self.elapse(core.integer(hours, 'hours') * nanos_in_hour)

	def plus_minutes(self, minutes):
		return self.elapse(core.integer(minutes, 'minutes') * nanos_in_minute)

	def plus_seconds(self, seconds):
		return self.elapse(core.integer(seconds, 'seconds') * nanos_in_second)

	def plus_nanos(self, nanos):
		return self.elapse(core.integer(nanos, 'nanos'))

	def minus_days(self, days):
		return self.with_date(self[0].minus_days(days))

	def minus_weeks(self, weeks):
		return self.with_date(self[0].minus_weeks(weeks))

	def minus_months(self, months):
		return self.with_date(self[0].minus_months(months))

	def minus_years(self, years):
		return self.with_date(self[0].minus_years(years))

	def minus_hours(self, hours):
		return self.plus_hours(core.checked_negate(core.integer(hours, 'hours')))

	def minus_minutes(self, minutes):
		return self.plus_minutes(core.checked_negate(core.integer(minutes, 'minutes')))

	def minus_seconds(self, seconds):
		return self.plus_seconds(core.checked_negate(core.integer(seconds, 'seconds')))

	def minus_nanos(self, nanos):
		return self.plus_nanos(core.checked_negate(core.integer(nanos, 'nanos')))

	def truncated(self, unit):
		return self.with_time(self[1].truncated(unit))

midnight = Time(0, 0)
noon = Time(12, 0)
epoch = Date(1970, 1, 1)
minimum_date = Date(gregorian.minimum_year, 1, 1)
maximum_date = Date(gregorian.maximum_year, 12, 31)
