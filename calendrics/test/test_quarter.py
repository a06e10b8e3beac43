from .. import errors
from .. import quarter
from ..fields import RuleRange
from ..types import Date, DateTime, Time

def test_lengths(test):
	test/quarter.quarter_lengths == (90, 91, 92, 92)
	test/quarter.quarter_lengths_leap == (91, 91, 92, 92)

def test_month_functions(test):
	expect = [
		(1, 1), (1, 2), (1, 3),
		(2, 1), (2, 2), (2, 3),
		(3, 1), (3, 2), (3, 3),
		(4, 1), (4, 2), (4, 3),
	]
	for month, (q, m) in zip(range(1, 13), expect):
		test/q == quarter.quarter_of_year(month)
		test/m == quarter.month_of_quarter(month)

def test_get(test):
	d = Date.of(2012, 3, 15)
	test/1 == d.get(quarter.QUARTER_OF_YEAR)
	test/3 == d.get(quarter.MONTH_OF_QUARTER)
	test/75 == d.get(quarter.DAY_OF_QUARTER)

	dt = DateTime.of(Date.of(2012, 8, 2), Time.of(12))
	test/3 == dt.get(quarter.QUARTER_OF_YEAR)
	test/2 == dt.get(quarter.MONTH_OF_QUARTER)
	test/33 == dt.get(quarter.DAY_OF_QUARTER)

def test_day_of_quarter_boundaries(test):
	test/1 == Date.of(2011, 1, 1).get(quarter.DAY_OF_QUARTER)
	test/90 == Date.of(2011, 3, 31).get(quarter.DAY_OF_QUARTER)
	test/91 == Date.of(2012, 3, 31).get(quarter.DAY_OF_QUARTER)
	test/1 == Date.of(2012, 4, 1).get(quarter.DAY_OF_QUARTER)
	test/91 == Date.of(2012, 6, 30).get(quarter.DAY_OF_QUARTER)
	test/92 == Date.of(2012, 9, 30).get(quarter.DAY_OF_QUARTER)
	test/92 == Date.of(2012, 12, 31).get(quarter.DAY_OF_QUARTER)

def test_range(test):
	test/RuleRange.of(1, 90, 92) == quarter.DAY_OF_QUARTER.range()
	test/RuleRange.of(1, 3) == quarter.MONTH_OF_QUARTER.range()
	test/RuleRange.of(1, 4) == quarter.QUARTER_OF_YEAR.range()

	test/RuleRange.of(1, 90) == Date.of(2011, 2, 1).range(quarter.DAY_OF_QUARTER)
	test/RuleRange.of(1, 91) == Date.of(2012, 2, 1).range(quarter.DAY_OF_QUARTER)
	test/RuleRange.of(1, 91) == Date.of(2011, 5, 1).range(quarter.DAY_OF_QUARTER)
	test/RuleRange.of(1, 92) == Date.of(2011, 8, 1).range(quarter.DAY_OF_QUARTER)
	test/RuleRange.of(1, 92) == Date.of(2011, 11, 1).range(quarter.DAY_OF_QUARTER)

	# No date; the widest range.
	test/RuleRange.of(1, 90, 92) == quarter.DAY_OF_QUARTER.range(None, Time.of(1))

def test_range_containment(test):
	d = Date.of(2011, 12, 20)
	for days in range(0, 800, 7):
		x = d.plus_days(days)
		for f in (quarter.DAY_OF_QUARTER, quarter.MONTH_OF_QUARTER, quarter.QUARTER_OF_YEAR):
			test/x.range(f) << x.get(f)

def test_read_only(test):
	d = Date.of(2012, 3, 15)
	for f in (quarter.DAY_OF_QUARTER, quarter.MONTH_OF_QUARTER, quarter.QUARTER_OF_YEAR):
		with test/errors.UnsupportedOperationError as exc:
			d.with_field(f, 1)
		test/exc().operation == 'set'
		test/exc().field % f

		test/errors.UnsupportedOperationError ^ (lambda: d.with_field(f, 1, lenient=True))
		test/errors.UnsupportedOperationError ^ (lambda: d.roll(f, 1))
		test/errors.UnsupportedOperationError ^ (lambda: f.rules().between(d, d))

def test_add(test):
	d = Date.of(2012, 3, 15)
	test/Date.of(2012, 6, 15) == quarter.QUARTER_OF_YEAR.rules().add(d, 1)
	test/Date.of(2012, 4, 15) == quarter.MONTH_OF_QUARTER.rules().add(d, 1)
	test/Date.of(2012, 3, 16) == quarter.DAY_OF_QUARTER.rules().add(d, 1)
	test/Date.of(2012, 2, 29) == quarter.QUARTER_OF_YEAR.rules().add(Date.of(2012, 5, 31), -1)

def test_time_unsupported(test):
	test/errors.UnsupportedFieldError ^ (lambda: Time.of(1).get(quarter.QUARTER_OF_YEAR))
