"""
# Arbitrary calendar cycle address resolution.

# Calendars with a repeating leap pattern are described as a tree of nodes, each
# node being `(title, repeat, sub)` where `sub` is either a sequence of nodes or a
# leaf: a tuple of month lengths in days. &aggregate totals the months and days
# consumed by every node so that &resolve can translate a month address into
# a day address, or a day address into a month address, by descending the tree.

# Used by &.gregorian and &.coptic; neither needs to know how many months their
# years have as long as every leaf of the cycle has the same count.
"""
import itertools

def aggregate(node,
		chain=itertools.chain,
		accumulate=itertools.accumulate,
		isinstance=isinstance, int=int,
		tuple=tuple, range=range,
		len=len, sum=sum,
	):
	"""
	# Recursively aggregate the month and day totals of the &node.

	# Returns `(title, repeat, aggregates, fragment, totals)` where fragment is
	# the `(months, days)` of a single repetition and totals the `(months, days)`
	# of all repetitions.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		# Leaf; month lengths.
		day_accum = tuple(accumulate(chain((0,), sub)))
		month_accum = tuple(range(len(sub) + 1))
		agg = (month_accum, day_accum)
		month_value = len(sub)
		day_value = day_accum[-1]
	else:
		agg = tuple([aggregate(x) for x in sub])
		month_value = sum([y[-1][0] for y in agg])
		day_value = sum([y[-1][1] for y in agg])

	return (
		title, repeat, agg,
		(month_value, day_value),
		(repeat * month_value, repeat * day_value),
	)

def resolve(selectors, iaddress, calendar,
		divmod=divmod, isinstance=isinstance,
		range=range, len=len, int=int,
	):
	"""
	# Search the aggregated &calendar cycle for the address identified by &iaddress.

	# &selectors is a pair of item getters selecting the input dimension and
	# the output dimension of the aggregates; months or days.

	# Returns `(cycles, address, remainder, difference)` where &address is
	# the resolved output quantity within the cycle, &remainder the part of the
	# input that was not consumed (day of month when resolving days), and
	# &difference the size of the final output part (days in month when
	# resolving months).
	"""
	sipart, sopart = selectors
	oaddress = 0

	# Align on a cycle; floor division keeps negative addresses in the prior cycle.
	cycles, iaddress = divmod(iaddress, sipart(calendar[-1]))

	current = calendar
	while not isinstance(current[2][0][0], int):
		for sub in current[2]:
			title, repeat, inner, fragments, totals = sub
			itotal = sipart(totals)
			if iaddress >= itotal:
				iaddress -= itotal
				oaddress += sopart(totals)
			else:
				parts, iaddress = divmod(iaddress, sipart(fragments))
				oaddress += parts * sopart(fragments)
				current = sub
				break
		else:
			raise RuntimeError("address exceeded calendar cycle")

	iparts = sipart(current[2])
	oparts = sopart(current[2])
	for i in range(len(iparts) - 1):
		if iparts[i+1] > iaddress:
			break

	return (cycles, oaddress + oparts[i], iaddress - iparts[i], oparts[i+1] - oparts[i])
