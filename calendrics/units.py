"""
# Period units used to express field granularity and arithmetic deltas.

# Units are ordered from the smallest, &PeriodUnit.NANOS, to the largest,
# &PeriodUnit.FOREVER. The estimated duration of a unit is a nanosecond count
# suitable for coarse comparisons only; calendar arithmetic never consults it.
"""
import enum

#: Nanoseconds in a second.
nanos_in_second = 1000000000

#: Seconds in an earth-day.
seconds_in_day = 86400

#: Nanoseconds in an earth-day.
nanos_in_day = nanos_in_second * seconds_in_day

#: Seconds in the average Gregorian year, 365.2425 days.
seconds_in_year = 31556952

class PeriodUnit(enum.IntEnum):
	"""
	# Closed enumeration of measurement units.

	# The integer value of a member is its position in the ordering.
	"""

	NANOS = 0
	MICROS = 1
	MILLIS = 2
	SECONDS = 3
	MINUTES = 4
	HOURS = 5
	HALF_DAYS = 6
	DAYS = 7
	WEEKS = 8
	MONTHS = 9
	QUARTER_YEARS = 10
	YEARS = 11
	DECADES = 12
	CENTURIES = 13
	MILLENNIA = 14
	ERAS = 15
	FOREVER = 16

	@property
	def title(self):
		"""
		# The proper name of the unit.
		"""
		return _titles[self]

	@property
	def duration(self):
		"""
		# The estimated duration of the unit in nanoseconds.
		"""
		return _durations[self]

	@property
	def time_based(self):
		"""
		# Whether the unit divides a day exactly.
		"""
		return self <= PeriodUnit.HALF_DAYS

	def __str__(self):
		return self.title

_titles = {
	PeriodUnit.NANOS: 'Nanos',
	PeriodUnit.MICROS: 'Micros',
	PeriodUnit.MILLIS: 'Millis',
	PeriodUnit.SECONDS: 'Seconds',
	PeriodUnit.MINUTES: 'Minutes',
	PeriodUnit.HOURS: 'Hours',
	PeriodUnit.HALF_DAYS: 'HalfDays',
	PeriodUnit.DAYS: 'Days',
	PeriodUnit.WEEKS: 'Weeks',
	PeriodUnit.MONTHS: 'Months',
	PeriodUnit.QUARTER_YEARS: 'QuarterYears',
	PeriodUnit.YEARS: 'Years',
	PeriodUnit.DECADES: 'Decades',
	PeriodUnit.CENTURIES: 'Centuries',
	PeriodUnit.MILLENNIA: 'Millennia',
	PeriodUnit.ERAS: 'Eras',
	PeriodUnit.FOREVER: 'Forever',
}

_durations = {
	PeriodUnit.NANOS: 1,
	PeriodUnit.MICROS: 1000,
	PeriodUnit.MILLIS: 1000000,
	PeriodUnit.SECONDS: nanos_in_second,
	PeriodUnit.MINUTES: 60 * nanos_in_second,
	PeriodUnit.HOURS: 3600 * nanos_in_second,
	PeriodUnit.HALF_DAYS: 43200 * nanos_in_second,
	PeriodUnit.DAYS: nanos_in_day,
	PeriodUnit.WEEKS: 7 * nanos_in_day,
	PeriodUnit.MONTHS: (seconds_in_year // 12) * nanos_in_second,
	PeriodUnit.QUARTER_YEARS: (seconds_in_year // 4) * nanos_in_second,
	PeriodUnit.YEARS: seconds_in_year * nanos_in_second,
	PeriodUnit.DECADES: seconds_in_year * nanos_in_second * 10,
	PeriodUnit.CENTURIES: seconds_in_year * nanos_in_second * 100,
	PeriodUnit.MILLENNIA: seconds_in_year * nanos_in_second * 1000,
	PeriodUnit.ERAS: seconds_in_year * nanos_in_second * 1000000000,
	# Largest representable seconds with a full nanosecond fraction.
	PeriodUnit.FOREVER: ((2**63 - 1) * nanos_in_second) + (nanos_in_second - 1),
}

#: Years contained by each year based unit.
years_per_unit = {
	PeriodUnit.YEARS: 1,
	PeriodUnit.DECADES: 10,
	PeriodUnit.CENTURIES: 100,
	PeriodUnit.MILLENNIA: 1000,
}

#: Days contained by each day based unit.
days_per_unit = {
	PeriodUnit.DAYS: 1,
	PeriodUnit.WEEKS: 7,
}
