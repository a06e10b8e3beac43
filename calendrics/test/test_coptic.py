from .. import coptic
from .. import core
from .. import errors
from .. import fields
from .. import quarter
from ..fields import RuleRange
from ..types import Date
from ..units import PeriodUnit

def test_year_is_leap(test):
	test/True == coptic.year_is_leap(3)
	test/True == coptic.year_is_leap(1727)
	test/False == coptic.year_is_leap(1728)
	test/False == coptic.year_is_leap(0)
	test/True == coptic.year_is_leap(-1)

def test_month_length(test):
	test/30 == coptic.month_length(1728, 1)
	test/30 == coptic.month_length(1728, 12)
	test/5 == coptic.month_length(1728, 13)
	test/6 == coptic.month_length(1727, 13)
	test/366 == coptic.year_length(1727)
	test/365 == coptic.year_length(1728)

def test_epoch(test):
	test/(1, 1, 1) == coptic.date_from_epoch_day(-615558)
	test/-615558 == coptic.epoch_day_from_date((1, 1, 1))
	test/(0, 13, 5) == coptic.date_from_epoch_day(-615559)
	# 2011-09-12
	test/(1728, 1, 1) == coptic.date_from_epoch_day(15229)
	test/15229 == coptic.epoch_day_from_date((1728, 1, 1))

def test_conversion_continuity(test):
	previous = coptic.date_from_epoch_day(15000)
	for days in range(15001, 15000 + (366 * 5)):
		current = coptic.date_from_epoch_day(days)
		test/days == coptic.epoch_day_from_date(current)
		if current[2] != 1:
			test/current == (previous[0], previous[1], previous[2] + 1)
		elif current[1] != 1:
			test/previous[2] == coptic.month_length(previous[0], previous[1])
		else:
			test/previous[1] == 13
		previous = current

def test_leap_month_range(test):
	cop = core.chronology('coptic')
	for day in range(6, 12):
		d = Date.of(2011, 9, day)
		test/13 == d.get(fields.MONTH_OF_YEAR, cop)
		test/RuleRange.of(1, 6) == d.range(fields.DAY_OF_MONTH, cop)

	for day in range(6, 11):
		d = Date.of(2012, 9, day)
		test/13 == d.get(fields.MONTH_OF_YEAR, cop)
		test/RuleRange.of(1, 5) == d.range(fields.DAY_OF_MONTH, cop)

	test/RuleRange.of(1, 30) == Date.of(2011, 9, 12).range(fields.DAY_OF_MONTH, cop)
	test/RuleRange.of(1, 5, 30) == fields.DAY_OF_MONTH.range(chronology=cop)
	test/RuleRange.of(1, 13) == fields.MONTH_OF_YEAR.range(chronology=cop)
	test/RuleRange.of(1, 365, 366) == fields.DAY_OF_YEAR.range(chronology=cop)

def test_get(test):
	cop = core.chronology('coptic')
	d = Date.of(2012, 3, 15)
	test/1728 == d.get(fields.YEAR, cop)
	test/7 == d.get(fields.MONTH_OF_YEAR, cop)
	test/6 == d.get(fields.DAY_OF_MONTH, cop)
	test/186 == d.get(fields.DAY_OF_YEAR, cop)
	test/1728 == d.get(fields.YEAR_OF_ERA, cop)
	test/1 == d.get(fields.ERA, cop)
	test/((1728 * 13) + 6) == d.get(fields.EPOCH_MONTH, cop)
	# Calendar neutral fields.
	test/4 == d.get(fields.DAY_OF_WEEK, cop)
	test/15414 == d.get(fields.EPOCH_DAY, cop)

def test_set(test):
	cop = core.chronology('coptic')
	first = Date.of(2011, 9, 12)

	test/Date.of(2011, 10, 11) == first.with_field(fields.DAY_OF_MONTH, 30, chronology=cop)
	last = Date.of(2011, 10, 11)
	# Clamped to the epagomenal month.
	test/Date.of(2012, 9, 10) == last.with_field(fields.MONTH_OF_YEAR, 13, chronology=cop)
	test/Date.of(2012, 9, 11) == first.with_field(fields.YEAR, 1729, chronology=cop)

	with test/errors.InvalidFieldValueError as exc:
		first.with_field(fields.MONTH_OF_YEAR, 14, chronology=cop)
	test/exc().field % fields.MONTH_OF_YEAR

	with test/errors.InvalidFieldValueError as exc:
		Date.of(2012, 9, 6).with_field(fields.DAY_OF_MONTH, 6, chronology=cop)

def test_set_lenient(test):
	cop = core.chronology('coptic')
	first = Date.of(2011, 9, 12)
	test/Date.of(2012, 9, 11) == first.with_field(fields.MONTH_OF_YEAR, 14, True, cop)
	test/Date.of(2011, 10, 12) == first.with_field(fields.DAY_OF_MONTH, 31, True, cop)

def test_roll(test):
	cop = core.chronology('coptic')
	# 1727-13-06 wraps to 1727-13-01
	test/Date.of(2011, 9, 6) == Date.of(2011, 9, 11).roll(fields.DAY_OF_MONTH, 1, cop)
	# 1728-13-01 rolls back to 1728-13-05
	test/Date.of(2012, 9, 10) == Date.of(2012, 9, 6).roll(fields.DAY_OF_MONTH, -1, cop)
	# 1728-13-05 to 1728-01-05
	test/Date.of(2011, 9, 16) == Date.of(2012, 9, 10).roll(fields.MONTH_OF_YEAR, 1, cop)

def test_field_consistency(test):
	cop = core.chronology('coptic')
	dates = [Date.of_epoch_day(x) for x in range(15220, 15240)]
	dates.append(Date.of(-300, 1, 1))
	for d in dates:
		for f in fields.date_fields:
			test/d == d.with_field(f, d.get(f, cop), chronology=cop)
			test/d.range(f, cop) << d.get(f, cop)

def test_arithmetic(test):
	cop = core.chronology('coptic')
	first = Date.of(2011, 9, 12)
	test/Date.of(2012, 9, 11) == cop.add(first, 13, PeriodUnit.MONTHS)
	test/Date.of(2012, 9, 11) == cop.add(first, 1, PeriodUnit.YEARS)
	test/Date.of(2011, 9, 6) == cop.add(first, -1, PeriodUnit.MONTHS)
	test/13 == cop.between(PeriodUnit.MONTHS, first, Date.of(2012, 9, 11))
	test/12 == cop.between(PeriodUnit.MONTHS, first, Date.of(2012, 9, 10))
	test/1 == cop.between(PeriodUnit.YEARS, first, Date.of(2012, 9, 11))
	test/(PeriodUnit.YEARS.duration // 13) == cop.estimate(PeriodUnit.MONTHS)

def test_quarters_unsupported(test):
	cop = core.chronology('coptic')
	d = Date.of(2012, 3, 15)
	with test/errors.UnsupportedFieldError as exc:
		d.get(quarter.QUARTER_OF_YEAR, cop)
	test/exc().chronology % cop
	test/errors.UnsupportedFieldError ^ (lambda: quarter.DAY_OF_QUARTER.range(chronology=cop))
	test/errors.UnsupportedUnitError ^ (lambda: cop.add(d, 1, PeriodUnit.QUARTER_YEARS))
	test/errors.UnsupportedUnitError ^ (lambda: cop.estimate(PeriodUnit.QUARTER_YEARS))
