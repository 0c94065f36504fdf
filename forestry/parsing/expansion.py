"""
Generate derivations top-down, one level of depth at a time.

Where the chart parser asks "what are the parse trees for this sentence?", this asks
"what are the parse trees of depth at most N, for any sentence at all?" Each round builds,
for every non-terminal, all the trees whose subtrees come from the previous round. The
number of trees can grow explosively, so each round charges every new tree its area
(height times width) against a budget, and a round that overspends is abandoned.

Beyond the obvious use for showing people what a grammar means, this gives an independent
check on the chart parser: every tree found here must also be found there.
"""

from ..support.sharing import Cons, each
from .context_free import Grammar
from .trees import TerminalTree, NonTerminalTree

class Expansion:
	def __init__(self, grammar:Grammar, limit:int):
		self.grammar = grammar
		self.limit = limit
		self.count = 0  # Running total area of all trees generated so far.
		self.expand_count = 0
		self.languages = {nt: [] for nt in grammar.non_terminals()}

	def expand(self) -> bool:
		"""
		Given all the trees up to depth N, build all the trees up to depth N+1.
		Return False (and leave things as they were) if that would exceed the limit.
		"""
		grammar, languages = self.grammar, self.languages
		new_languages = {}
		for nt in grammar.non_terminals():
			trees = []
			for rhs in grammar.expansions(nt):
				# Right-to-left, so that each tail is shared among all its extensions.
				strings = [None]
				for symbol in reversed(rhs):
					if symbol in languages:
						strings = [Cons(t, s) for t in languages[symbol] for s in strings]
					else:
						leaf = TerminalTree(symbol)
						strings = [Cons(leaf, s) for s in strings]
				for s in strings:
					tree = NonTerminalTree(nt, each(s))
					trees.append(tree)
					self.count += tree.height * tree.width
					if self.count > self.limit: return False
			new_languages[nt] = trees
		self.languages = new_languages
		self.expand_count += 1
		return True

	def derivations(self, nt) -> list:
		return self.languages[nt]

	def depth(self) -> int:
		return self.expand_count

	def size(self) -> int:
		return sum(map(len, self.languages.values()))
