from .. import errors
from .. import fields
from .. import rules
from ..fields import RuleRange, DateTimeField
from ..units import PeriodUnit

def test_range_of(test):
	test/RuleRange.of(1, 12) == (1, 1, 12, 12)
	test/RuleRange.of(1, 28, 31) == (1, 1, 28, 31)
	test/RuleRange.of(0, 1, 12, 13) == (0, 1, 12, 13)
	test/TypeError ^ (lambda: RuleRange.of(1))
	test/TypeError ^ (lambda: RuleRange.of(1, 2, 3, 4, 5))
	test/ValueError ^ (lambda: RuleRange.of(12, 1))
	test/ValueError ^ (lambda: RuleRange.of(1, 31, 28))

def test_range_properties(test):
	r = RuleRange.of(1, 28, 31)
	test/r.minimum == 1
	test/r.largest_minimum == 1
	test/r.smallest_maximum == 28
	test/r.maximum == 31
	test/r.span == 31
	test/False == r.fixed
	test/True == RuleRange.of(1, 12).fixed

	test/r << 1
	test/r << 31
	test//r << 0
	test//r << 32

def test_range_str(test):
	test/'1 - 28/31' == str(RuleRange.of(1, 28, 31))
	test/'1 - 12' == str(RuleRange.of(1, 12))
	test/'0/1 - 12/13' == str(RuleRange.of(0, 1, 12, 13))
	test/"(calendrics.range@'1 - 12')" == repr(RuleRange.of(1, 12))

def test_field_properties(test):
	f = fields.DAY_OF_MONTH
	test/f.name == 'DayOfMonth'
	test/f.base_unit == PeriodUnit.DAYS
	test/f.range_unit == PeriodUnit.MONTHS
	test/f.temporal == 'date'
	test/'DayOfMonth' == str(f)
	test/"(calendrics.field@'DayOfMonth')" == repr(f)
	test/True == fields.YEAR.unbounded
	test/False == f.unbounded
	test/'time' == fields.HOUR_OF_DAY.temporal

def test_field_identity(test):
	copy = DateTimeField('DayOfMonth', PeriodUnit.DAYS, PeriodUnit.MONTHS)
	test/copy != fields.DAY_OF_MONTH
	test/fields.DAY_OF_MONTH == fields.DAY_OF_MONTH
	test/errors.UnsupportedFieldError ^ (lambda: copy.rules())

	with test/AttributeError:
		fields.DAY_OF_MONTH.extra = 1

def test_field_rules(test):
	r = fields.DAY_OF_MONTH.rules()
	test.isinstance(r, rules.DayOfMonthRules)
	test/r.field % fields.DAY_OF_MONTH
	test/r.chronology.name == 'ISO'
	test/RuleRange.of(1, 28, 31) == r.range()
	test/r.estimate() == PeriodUnit.DAYS.duration
	test/r.estimate() == fields.DAY_OF_YEAR.rules().estimate()

	clock = fields.MINUTE_OF_DAY.rules()
	test.isinstance(clock, rules.ClockRules)
	test/RuleRange.of(0, 1439) == clock.range()

def test_field_tables(test):
	for f in fields.time_fields:
		test/'time' == f.temporal
	for f in fields.date_fields:
		test/'date' == f.temporal
	test/len(set(fields.time_fields + fields.date_fields)) == 19

def test_field_range_context(test):
	from .. import quarter
	from ..types import Date, Time, DateTime
	d = Date.of(2012, 2, 10)
	t = Time.of(10, 30)
	dt = DateTime.of(d, t)

	# A date-time supplies its date part.
	test/RuleRange.of(1, 29) == fields.DAY_OF_MONTH.range(dt)
	test/RuleRange.of(1, 29) == fields.DAY_OF_MONTH.range(d)
	test/RuleRange.of(1, 366) == fields.DAY_OF_YEAR.range(dt)
	test/RuleRange.of(1, 91) == quarter.DAY_OF_QUARTER.range(dt)
	test/RuleRange.of(1, 29) == fields.DAY_OF_MONTH.range(None, dt)
	test/RuleRange.of(1, 29) == fields.DAY_OF_MONTH.range(dt, t)
	test/RuleRange.of(1, 30) == fields.DAY_OF_MONTH.range(Date.of(2012, 4, 1), dt)
	test/RuleRange.of(0, 23) == fields.HOUR_OF_DAY.range(dt)

	test/TypeError ^ (lambda: fields.DAY_OF_MONTH.range(t))
	test/TypeError ^ (lambda: fields.DAY_OF_MONTH.range((2012, 2, 10)))
	test/TypeError ^ (lambda: fields.HOUR_OF_DAY.range(None, d))
