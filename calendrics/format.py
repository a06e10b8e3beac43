"""
# Canonical text form of dates and times.

# The canonical form is the ISO-8601 extended format:

#!text
	2008-07-05
	02:01
	23:59:01
	23:59:59.990
	2008-07-05T23:59:59.999999990
	-0001-01-02
	+10000-01-01

# Years between zero and 9999 are four zero-padded digits; negative years are
# signed and padded to at least four digits and years beyond 9999 carry a plus
# sign. Seconds are omitted when both the second and nanosecond are zero, and the
# fraction is written in groups of three digits.

# The parse functions accept exactly the canonical form and return the fields in
# the common tuple form; calendrical validation is the concern of the value types.
"""
from . import core
from . import errors

#: Characters accepted as digits.
digits = frozenset('0123456789')

def format_year(year):
	if abs(year) < 1000:
		return ('-' if year < 0 else '') + "{0:04}".format(abs(year))
	elif year > 9999:
		return '+' + str(year)
	return str(year)

def format_date(date):
	year, month, day = date
	return "{0}-{1:02}-{2:02}".format(format_year(year), month, day)

def format_time(time):
	hour, minute, second, nano = time
	text = "{0:02}:{1:02}".format(hour, minute)

	if second or nano:
		text += ":{0:02}".format(second)
		if nano:
			if nano % 1000000 == 0:
				text += ".{0:03}".format(nano // 1000000)
			elif nano % 1000 == 0:
				text += ".{0:06}".format(nano // 1000)
			else:
				text += ".{0:09}".format(nano)

	return text

def format_datetime(datetime):
	date, time = datetime
	return format_date(date) + 'T' + format_time(time)

def scan_digits(text, position, minimum, maximum, len=len):
	"""
	# Read between &minimum and &maximum decimal digits from &position.

	# Returns the integer and the position following the last digit.
	"""
	end = position
	stop = min(len(text), position + maximum)
	while end < stop and text[end] in digits:
		end += 1

	if end - position < minimum:
		raise errors.ParseError(text, end, "{0} digits".format(minimum))
	return int(text[position:end]), end

def scan_literal(text, position, literal):
	if text[position:position+1] != literal:
		raise errors.ParseError(text, position, repr(literal))
	return position + 1

def scan_date(text, position=0):
	"""
	# Read a canonical date from &position.

	# Returns `((year, month, day), position)`.
	"""
	sign = text[position:position+1]
	if sign in ('+', '-'):
		position += 1
	else:
		sign = ''

	year, end = scan_digits(text, position, 4, 10)
	width = end - position
	if width > 4 and not sign:
		raise errors.ParseError(text, position, "signed year beyond four digits")
	if width == 4 and sign == '+':
		raise errors.ParseError(text, position - 1, "unsigned four digit year")
	if sign == '-':
		year = -year

	position = scan_literal(text, end, '-')
	month, position = scan_digits(text, position, 2, 2)
	position = scan_literal(text, position, '-')
	day, position = scan_digits(text, position, 2, 2)
	return (year, month, day), position

def scan_time(text, position=0):
	"""
	# Read a canonical time from &position.

	# Returns `((hour, minute, second, nanosecond), position)`.
	"""
	second = 0
	nano = 0

	hour, position = scan_digits(text, position, 2, 2)
	position = scan_literal(text, position, ':')
	minute, position = scan_digits(text, position, 2, 2)

	if text[position:position+1] == ':':
		second, position = scan_digits(text, position + 1, 2, 2)

		if text[position:position+1] == '.':
			start = position + 1
			fraction, position = scan_digits(text, start, 1, 9)
			nano = fraction * (10 ** (9 - (position - start)))

	return (hour, minute, second, nano), position

def complete(text, position):
	if position != len(text):
		raise errors.ParseError(text, position, "end of text")

def parse_date(text):
	core.require(text, 'text')
	fields, position = scan_date(text)
	complete(text, position)
	return fields

def parse_time(text):
	core.require(text, 'text')
	fields, position = scan_time(text)
	complete(text, position)
	return fields

def parse_datetime(text):
	"""
	# Parse a canonical date-time into a pair of date and time tuples.
	"""
	core.require(text, 'text')
	date, position = scan_date(text)
	position = scan_literal(text, position, 'T')
	time, position = scan_time(text, position)
	complete(text, position)
	return date, time
