""" Bits and bobs in support of visualizing grammars and charts. """
import sys

DOT = '●'
EPSILON = 'ε'

def dotted(rhs, position, after=None):
	"""
	Show a right-hand side with a dot at the given position. If ``after`` is given,
	it replaces whatever stands to the right of the dot; the chart uses that to show
	the already-recognized material instead of the raw symbols.
	"""
	items = [str(s) for s in rhs[:position]]
	items.append(DOT)
	items.extend(str(s) for s in (rhs[position:] if after is None else after))
	return " ".join(items)

def alternative(rhs):
	""" One right-hand side, the way people write them on paper. """
	return " ".join(map(str, rhs)) if rhs else EPSILON

def print_grid(grid, file=None):
	""" A boxed table, left-justified. The first row is a header, ruled off from the rest. """
	file = file or sys.stdout
	rows = [[str(cell) for cell in row] for row in grid]
	assert len(set(map(len, rows))) == 1, "ragged grid"
	widths = [max(map(len, column)) for column in zip(*rows)]
	def rule(joint): return ('─' + joint + '─').join('─' * w for w in widths)
	print(rule('┬'), file=file)
	for r, row in enumerate(rows):
		if r == 1: print(rule('┼'), file=file)
		print(' │ '.join(cell.ljust(w) for cell, w in zip(row, widths)), file=file)
	print(rule('┴'), file=file)
