"""
# Primary public module.

# Provides the value types, the field constants, the units, and constructors for
# the collaborators of the package: formatters, clock sources, and serializers.

#!python
	from calendrics import library as libcal
	d = libcal.date_of(2012, 3, 15)
	dt = libcal.datetime_of(d, libcal.time_of(10, 30))
	assert dt.get(libcal.QUARTER_OF_YEAR) == 1
	assert dt.plus(1, libcal.PeriodUnit.MONTHS) == libcal.datetime_of(d.plus_months(1), dt.time)
"""
from .types import Date, Time, DateTime, midnight, noon, epoch, minimum_date, maximum_date
from .fields import *
from .quarter import DAY_OF_QUARTER, MONTH_OF_QUARTER, QUARTER_OF_YEAR
from .units import PeriodUnit
from .core import chronology, chronologies

__shortname__ = 'libcal'

def date_of(year, month, day):
	"""
	# Construct a &Date; raises &.errors.InvalidDateError for invalid components.
	"""
	return Date(year, month, day)

def time_of(hour, minute=0, second=0, nano=0):
	"""
	# Construct a &Time; raises &.errors.InvalidTimeError for invalid components.
	"""
	return Time(hour, minute, second, nano)

def datetime_of(date, time):
	return DateTime(date, time)

def datetime_from_epoch_second(seconds, nano_adjustment, offset_seconds):
	"""
	# Construct the local &DateTime of the instant &seconds after the epoch at the
	# zone offset &offset_seconds.
	"""
	return DateTime.of_epoch_second(seconds, nano_adjustment, offset_seconds)
