"""
Parse trees are value objects.

There are exactly two kinds of node: a terminal leaf, which just carries its symbol, and a
non-terminal node, which carries its symbol and an ordered tuple of children (possibly empty,
for an epsilon-derivation). Nothing else ever needs to plug in here, so the two classes share
a small base and callers may tell them apart with the `is_terminal` tag.

The derived attributes are computed once, at construction:
	height: 1 for a leaf; one more than the tallest child for a node (an empty node is 1 tall).
	width: 1 for a leaf; the sum of child widths for a node, but never less than 1.
	frontier: the tuple of terminal symbols along the bottom edge, read left to right.
	sentence: the frontier joined with single spaces.

Equality is structural: same kind, same symbol, equal children. Two different derivations of
the same sentence are therefore unequal, while the same derivation found twice is equal.
"""

import functools

class ParseTree:
	__slots__ = ('symbol', 'height', 'width', 'frontier', 'sentence', '_hash')
	is_terminal: bool
	children = ()

	def short_name(self) -> str:
		return self.symbol

class TerminalTree(ParseTree):
	__slots__ = ()
	is_terminal = True

	def __init__(self, symbol:str):
		self.symbol = symbol
		self.height = self.width = 1
		self.frontier = (symbol,)
		self.sentence = symbol
		self._hash = hash(symbol)

	def __eq__(self, other):
		if not isinstance(other, ParseTree): return NotImplemented
		return other.is_terminal and self.symbol == other.symbol

	def __hash__(self): return self._hash

	def __repr__(self): return self.symbol

class NonTerminalTree(ParseTree):
	__slots__ = ('children',)
	is_terminal = False

	def __init__(self, symbol:str, children=()):
		self.symbol = symbol
		self.children = tuple(children)
		self.height = 1 + max((t.height for t in self.children), default=0)
		self.width = max(1, sum(t.width for t in self.children))
		self.frontier = sum((t.frontier for t in self.children), ())
		self.sentence = " ".join(self.frontier)
		self._hash = hash(symbol) * 7 + hash(self.children)

	def non_terminal(self) -> str:
		return self.symbol

	def __eq__(self, other):
		if not isinstance(other, ParseTree): return NotImplemented
		pending = [(self, other)]
		while pending:
			a, b = pending.pop()
			if a is b: continue
			if a.is_terminal or b.is_terminal:
				if a.is_terminal and b.is_terminal and a.symbol == b.symbol: continue
				return False
			if a._hash != b._hash or a.symbol != b.symbol or len(a.children) != len(b.children): return False
			pending.extend(zip(a.children, b.children))
		return True

	def __hash__(self): return self._hash

	def __repr__(self):
		# None marks where a bracket closes.
		words, pending = [], [self]
		while pending:
			tree = pending.pop()
			if tree is None: words[-1] += ']'
			elif tree.is_terminal: words.append(tree.symbol)
			else:
				words.append('[' + tree.symbol)
				pending.append(None)
				pending.extend(reversed(tree.children))
		return " ".join(words)


def ascending(tree:ParseTree):
	"""
	Sort key for presentation: shorter sentences first, then alphabetical by sentence,
	then shorter trees first. Distinct trees may tie; ties say nothing about equality.
	"""
	return len(tree.sentence), tree.sentence, tree.height

def compare_ascending(a:ParseTree, b:ParseTree) -> int:
	""" The same ordering as `ascending`, in comparator form. """
	x, y = ascending(a), ascending(b)
	return (x > y) - (x < y)

Ascending = functools.cmp_to_key(compare_ascending)
