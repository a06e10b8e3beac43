"""
# Week based measures of time: days of seven.

# Weeks are ISO weeks beginning on Monday; the day of the week is one-based with
# Monday as `1` and Sunday as `7`.
"""

#: Total number of a days in a week.
days_in_week = 7

#: ISO day of week of `1970-01-01`, a Thursday.
epoch_day_of_week = 4

def day_of_week(epoch_day, offset=epoch_day_of_week - 1):
	"""
	# Derive the ISO day of week of the given epoch-day.
	"""
	return ((epoch_day + offset) % days_in_week) + 1
