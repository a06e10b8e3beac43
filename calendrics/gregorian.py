"""
# Proleptic Gregorian calendar functions and data.

# Dates are handled in their common form, `(year, month, day)`, with one-based
# months and days and a proleptic year that has no era gap: year zero precedes
# year one and is a leap year.

# Day counts come in two flavors: days relative to `0000-01-01`, the beginning of
# the first Gregorian cycle, and epoch-days relative to `1970-01-01`.
"""
import operator
from . import calendar as callib

#: Smallest supported proleptic year.
minimum_year = -999999999

#: Largest supported proleptic year.
maximum_year = 999999999

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: number of months in a year.
months_in_year = len(calendar_year)

#: Days preceding the first of each month; indexed by zero-based month.
days_before_month = tuple(sum(calendar_year[:i]) for i in range(months_in_year + 1))

#: Days preceding the first of each month in a leap year.
days_before_month_leap = tuple(sum(calendar_leap[:i]) for i in range(months_in_year + 1))

### Gregorian Cycle
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
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

#: Total number of months in a Gregorian cycle.
months_in_cycle = months_in_year * years_in_century * centuries_in_cycle

# Find the number of days in the cycle using the resolve function.
r = resolve_by_months(months_in_cycle-1)
days_in_cycle = r[1] + r[-1]
del r

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def year_length(y):
	return 366 if year_is_leap(y) else 365

def month_length(y, m):
	"""
	# The number of days in the one-based month &m of the year &y.
	"""
	if m == 2:
		return 29 if year_is_leap(y) else 28
	return calendar_year[m-1]

def day_of_year(date):
	"""
	# The one-based day of the year of the &date.
	"""
	year, month, day = date
	if year_is_leap(year):
		return days_before_month_leap[month-1] + day
	return days_before_month[month-1] + day

def date_from_day_of_year(year, doy):
	"""
	# Convert a one-based day of year into a date in the common form.
	"""
	accum = days_before_month_leap if year_is_leap(year) else days_before_month
	month = 1
	while accum[month] < doy:
		month += 1
	return (year, month, doy - accum[month-1])

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the given Earth-days, relative to `0000-01-01`, into a Gregorian date
	# in the common form: `(year, month, day)`.
	"""
	cycles, months, day, _d = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * 400) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a Gregorian date in the common form, `(year, month, day)`, to the number
	# of days leading up to the date since `0000-01-01`.
	"""
	year, month, day = date
	month -= 1
	day -= 1
	cycles, day_of_cycle, moy, _d = _resolver(month + (year * 12))
	return (cycles * days_in_cycle) + day_of_cycle + day

#: Days between `0000-01-01` and `1970-01-01`.
epoch_offset = days_from_date((1970, 1, 1))

def epoch_day_from_date(date, _offset=epoch_offset):
	"""
	# Convert a date in the common form into days relative to `1970-01-01`.
	"""
	return days_from_date(date) - _offset

def date_from_epoch_day(days, _offset=epoch_offset):
	"""
	# Convert days relative to `1970-01-01` into a date in the common form.
	"""
	return date_from_days(days + _offset)

#: Epoch-day of `-999999999-01-01`.
minimum_epoch_day = epoch_day_from_date((minimum_year, 1, 1))

#: Epoch-day of `+999999999-12-31`.
maximum_epoch_day = epoch_day_from_date((maximum_year, 12, 31))

def context(chronology):
	"""
	# Register the rules of the ISO calendar and time fields with the &chronology.
	"""
	from . import rules
	rules.calendar(chronology)
	rules.clock(chronology)
