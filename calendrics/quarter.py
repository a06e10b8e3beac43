"""
# Quarter-year fields derived from the ISO month and day.

# Quarters begin with the months January, April, July, and October. The first
# quarter has ninety days, ninety-one in a leap year; the second has ninety-one,
# and the third and fourth ninety-two.

#!python
	from calendrics import quarter, types
	d = types.Date.of(2012, 3, 15)
	assert quarter.QUARTER_OF_YEAR.get(d) == 1
	assert quarter.MONTH_OF_QUARTER.get(d) == 3
	assert quarter.DAY_OF_QUARTER.get(d) == 75

# The quarter fields are read-only: assignments, rolls, and periods between
# dates raise &.errors.UnsupportedOperationError. Additions are performed in
# the base unit of the field.
"""
from . import errors
from . import fields
from . import gregorian
from . import rules
from .fields import RuleRange
from .units import PeriodUnit

DAY_OF_QUARTER = fields.DateTimeField('DayOfQuarter', PeriodUnit.DAYS, PeriodUnit.QUARTER_YEARS)
MONTH_OF_QUARTER = fields.DateTimeField('MonthOfQuarter', PeriodUnit.MONTHS, PeriodUnit.QUARTER_YEARS)
QUARTER_OF_YEAR = fields.DateTimeField('QuarterOfYear', PeriodUnit.QUARTER_YEARS, PeriodUnit.YEARS)

#: Number of months in a quarter.
months_in_quarter = 3

#: Days in each quarter of a common year.
quarter_lengths = tuple(
	sum(gregorian.calendar_year[i:i+months_in_quarter])
	for i in range(0, gregorian.months_in_year, months_in_quarter)
)

#: Days in each quarter of a leap year.
quarter_lengths_leap = (quarter_lengths[0] + 1,) + quarter_lengths[1:]

def quarter_of_year(month):
	return ((month - 1) // months_in_quarter) + 1

def month_of_quarter(month):
	return ((month - 1) % months_in_quarter) + 1

def day_of_quarter(year, month, doy):
	"""
	# The one-based day of the quarter given the one-based day of the year, &doy.
	"""
	first = month - month_of_quarter(month) + 1
	return doy - gregorian.day_of_year((year, first, 1)) + 1

class QuarterRules(rules.Rules):
	"""
	# Read-only rules of the quarter fields.
	"""
	__slots__ = ()

	def set(self, target, value, lenient=False):
		raise errors.UnsupportedOperationError('set', self.field)

	def roll(self, target, amount):
		raise errors.UnsupportedOperationError('roll', self.field)

	def between(self, start, stop):
		raise errors.UnsupportedOperationError('between', self.field)

	def month(self, date):
		# Derived from the month-of-year of the host chronology.
		return self.chronology.implementation(fields.MONTH_OF_YEAR).get_date(date)

class DayOfQuarterRules(QuarterRules):
	__slots__ = ()

	def outline(self):
		return RuleRange.of(1, min(quarter_lengths), max(quarter_lengths_leap))

	def narrow(self, date, time):
		if date is None:
			return self.outline()
		lengths = quarter_lengths_leap if date.is_leap_year() else quarter_lengths
		return RuleRange.of(1, lengths[quarter_of_year(self.month(date)) - 1])

	def get_date(self, date):
		doy = self.chronology.implementation(fields.DAY_OF_YEAR).get_date(date)
		return day_of_quarter(date.year, self.month(date), doy)

class MonthOfQuarterRules(QuarterRules):
	__slots__ = ()

	def outline(self):
		return RuleRange.of(1, months_in_quarter)

	def get_date(self, date):
		return month_of_quarter(self.month(date))

class QuarterOfYearRules(QuarterRules):
	__slots__ = ()

	def outline(self):
		return RuleRange.of(1, gregorian.months_in_year // months_in_quarter)

	def get_date(self, date):
		return quarter_of_year(self.month(date))

def context(chronology):
	"""
	# Register the quarter rules with the ISO &chronology.
	"""
	if chronology.calendar is not gregorian:
		raise errors.UnsupportedFieldError(QUARTER_OF_YEAR, chronology)

	chronology.register(DAY_OF_QUARTER, DayOfQuarterRules(DAY_OF_QUARTER, chronology))
	chronology.register(MONTH_OF_QUARTER, MonthOfQuarterRules(MONTH_OF_QUARTER, chronology))
	chronology.register(QUARTER_OF_YEAR, QuarterOfYearRules(QUARTER_OF_YEAR, chronology))
