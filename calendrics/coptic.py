"""
# Coptic calendar functions and data.

# The Coptic year has twelve months of thirty days followed by an epagomenal
# thirteenth month of five days, six in a leap year. Leap years precede the
# years divisible by four; year `y` is leap when `y % 4 == 3`. The first day of
# the calendar, `0001-01-01`, is `0284-08-29` of the Julian calendar.

# Like &.gregorian, years are proleptic and year zero precedes year one.
"""
import operator
from . import calendar as callib
from . import gregorian

#: Definition of a year in terms of coptic month-to-days.
calendar_year = (30,) * 12 + (5,)

#: Definition of a leap year in terms of coptic month-to-days.
calendar_leap = calendar_year[:12] + (6,)

#: number of months in a year.
months_in_year = len(calendar_year)

### Coptic Cycle
# The cycle begins with year zero; the fourth year, `3`, is the leap year.
cycle = (
	'coptic-cycle', 1, (
		('years', 3, calendar_year),
		('leap', 1, calendar_leap),
	)
)

calendar = callib.aggregate(cycle)

def resolve_by_months(months,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_months, _select_days), months, _calendar)

def resolve_by_days(days,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_days, _select_months), days, _calendar)

#: Number of years in a leap cycle.
years_in_cycle = 4

#: Total number of days in a leap cycle.
days_in_cycle = calendar[-1][1]

def year_is_leap(y):
	"""
	# Given a coptic calendar year, determine whether it is a leap year.
	"""
	return y % 4 == 3

def year_length(y):
	return 366 if year_is_leap(y) else 365

def month_length(y, m):
	"""
	# The number of days in the one-based month &m of the year &y.
	"""
	if m == 13:
		return 6 if year_is_leap(y) else 5
	return 30

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert days relative to `0000-01-01` into a Coptic date in the common form.
	"""
	cycles, months, day, _d = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * years_in_cycle) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a Coptic date in the common form into the number of days leading up
	# to the date since `0000-01-01`.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, _d = _resolver((month - 1) + (year * months_in_year))
	return (cycles * days_in_cycle) + day_of_cycle + day - 1

#: ISO epoch-day of `0001-01-01`.
first_epoch_day = -615558

#: Days between `0000-01-01` and `1970-01-01` of the ISO calendar.
epoch_offset = days_from_date((1, 1, 1)) - first_epoch_day

def epoch_day_from_date(date, _offset=epoch_offset):
	"""
	# Convert a Coptic date in the common form into an ISO epoch-day.
	"""
	return days_from_date(date) - _offset

def date_from_epoch_day(days, _offset=epoch_offset):
	"""
	# Convert an ISO epoch-day into a Coptic date in the common form.
	"""
	return date_from_days(days + _offset)

#: Coptic year containing the first supported ISO date.
minimum_year = date_from_epoch_day(gregorian.minimum_epoch_day)[0]

#: Coptic year containing the last supported ISO date.
maximum_year = date_from_epoch_day(gregorian.maximum_epoch_day)[0]

def context(chronology):
	"""
	# Register the rules of the Coptic calendar and time fields with the &chronology.

	# The quarter-year fields are not registered; Coptic years do not divide into
	# quarters.
	"""
	from . import rules
	rules.calendar(chronology)
	rules.clock(chronology)
