"""
# Immutable dates, times, and date-times of the proleptic Gregorian calendar
# with fields that are resolved against a chronology.

# &.library provides the surface; &.types the value types, &.fields and
# &.quarter the field constants, and &.core the chronologies.

#!python
	from calendrics import library as libcal
	d = libcal.date_of(2012, 3, 15)
	assert str(d.plus_days(20)) == '2012-04-04'
	assert d.range(libcal.DAY_OF_QUARTER).maximum == 91
	assert d.get(libcal.DAY_OF_MONTH, libcal.chronology('coptic')) == 6

# Chronologies are selected by name, `'iso'` or `'coptic'`, and a field reads
# the ISO chronology unless another is given.
"""
