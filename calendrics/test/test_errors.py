from .. import errors
from .. import fields
from ..fields import RuleRange
from ..units import PeriodUnit

def test_hierarchy(test):
	test.issubclass(errors.InvalidDateError, errors.Error)
	test.issubclass(errors.InvalidDateError, ValueError)
	test.issubclass(errors.InvalidTimeError, ValueError)
	test.issubclass(errors.InvalidFieldValueError, ValueError)
	test.issubclass(errors.DateRangeError, ValueError)
	test.issubclass(errors.ParseError, ValueError)
	test.issubclass(errors.UnsupportedFieldError, LookupError)
	test.issubclass(errors.UnsupportedUnitError, LookupError)
	test.issubclass(errors.UnsupportedOperationError, NotImplementedError)
	test.issubclass(errors.ArithmeticOverflowError, OverflowError)
	test.issubclass(errors.NullArgumentError, TypeError)
	test.issubclass(errors.NullArgumentError, errors.Error)

def test_messages(test):
	e = errors.InvalidDateError('day', 30, "2012-02 has 29 days")
	test/str(e) == "invalid day 30: 2012-02 has 29 days"
	test/str(errors.InvalidTimeError('hour', 24)) == "invalid hour 24"

	e = errors.InvalidFieldValueError(fields.DAY_OF_MONTH, 30, RuleRange.of(1, 29))
	test/str(e) == "invalid value for DayOfMonth: 30 not in 1 - 29"

	e = errors.UnsupportedFieldError(fields.YEAR, 'Coptic')
	test/str(e) == "unsupported field Year in Coptic chronology"
	test/str(errors.UnsupportedUnitError(PeriodUnit.FOREVER)) == "unsupported unit: Forever"
	test/str(errors.UnsupportedOperationError('roll', fields.YEAR)) == "roll is not supported by Year"
	test/str(errors.DateRangeError('year', 10**9, -999999999, 999999999)) == \
		"year 1000000000 outside of [-999999999, 999999999]"
	test/str(errors.NullArgumentError('unit')) == "unit must not be None"
	test/str(errors.ParseError('2012', 4, "'-'")) == "'2012' at index 4: expected '-'"
