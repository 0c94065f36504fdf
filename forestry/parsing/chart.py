"""
A chart parser which finds every parse tree a context-free grammar ascribes to a sentence.

This is Earley's algorithm run backwards: it walks the input from right to left, and
each dotted item recognizes its right-hand side from the right end toward the left.
State set S[k] holds the items whose span begins at input position k; each item
remembers the position where its span finishes, off to the right. Both "predict" and
"complete" then draw on the sets to the right of the one under construction, and the
whole thing reduces to a single loop over positions with a work-queue per position.

Partial parses ride along inside the items, as shared-tail lists of completed subtrees.
Because those lists are part of an item's identity, two derivations that reach the same
dotted rule by different routes are different items, and each survives to contribute its
own tree when the augmented start rule finishes. That's how the whole forest comes out.

Epsilon rules need one small trick. When an item completes without consuming anything,
its tree goes into a per-position list of "empties". An item predicted later at the same
position, wanting that non-terminal, may consume the empty tree at once, so there's no need
for a second pass over the state set.

Cyclic grammars (A -> B, B -> A, and friends) have infinitely many derivations for some
sentences. Deduplication keeps the chart finite in most cases, but to be certain of
termination each state set is capped at a fixed number of items. A parse which hits the
cap says so by returning `False`, and what trees it did find are still valid.
"""

import sys
from collections import deque
from typing import NamedTuple, Sequence
from ..support import pretty
from ..support.sharing import Cons, each, hash_of
from .context_free import Grammar
from .interface import ACCEPT, EXPANSION_LIMIT, ItemStateError
from .trees import ParseTree, TerminalTree, NonTerminalTree

VERBOSE = False

class ChartItem:
	"""
	A dotted rule, with what's been parsed so far.

	nt, rhs: the production rule this item is working on.
	dot: how many symbols of `rhs` remain to be recognized, counting from the left.
		Predicted items have the dot at the far right; finished items have it at zero.
	finish: the input position where this item's span ends.
	parsed: shared-tail list of trees for rhs[dot:], in reading order.
	"""
	__slots__ = ('nt', 'rhs', 'dot', 'finish', 'parsed', '_hash')

	def __init__(self, nt:str, rhs:tuple, dot:int, finish:int, parsed:Cons):
		self.nt, self.rhs, self.dot, self.finish, self.parsed = nt, rhs, dot, finish, parsed
		self._hash = hash((finish, dot, nt, rhs, hash_of(parsed)))

	@classmethod
	def predict(cls, nt:str, rhs:tuple, finish:int) -> "ChartItem":
		return cls(nt, rhs, len(rhs), finish, None)

	def advance(self, tree:ParseTree) -> "ChartItem":
		""" Consume one more symbol, right to left, recognized as the given tree. """
		if self.finished(): raise ItemStateError("Advancing at end: %s"%self)
		return ChartItem(self.nt, self.rhs, self.dot - 1, self.finish, Cons(tree, self.parsed))

	def __eq__(self, other):
		if not isinstance(other, ChartItem): return NotImplemented
		return (
			self._hash == other._hash and self.finish == other.finish and self.dot == other.dot
			and self.nt == other.nt and self.rhs == other.rhs and self.parsed == other.parsed
		)

	def __hash__(self): return self._hash

	def __str__(self):
		after = [t.short_name() for t in each(self.parsed)]
		return "(%s -> %s, %d)"%(self.nt, pretty.dotted(self.rhs, self.dot, after), self.finish)

	__repr__ = __str__

	def finished(self, nt=None) -> bool:
		return self.dot == 0 and (nt is None or self.nt == nt)

	def match(self, symbol) -> bool:
		return self.dot > 0 and self.rhs[self.dot - 1] == symbol

	def current(self):
		if self.finished(): raise ItemStateError("No current symbol at end: %s"%self)
		return self.rhs[self.dot - 1]

	def start(self) -> int:
		""" Where the span ends. Once finished, this is where completion looks for customers. """
		return self.finish

	def complete(self) -> NonTerminalTree:
		if not self.finished(): raise ItemStateError("Not complete: %s"%self)
		return NonTerminalTree(self.nt, each(self.parsed))

	def complete_top(self) -> ParseTree:
		""" The augmented start rule has exactly one symbol, so its tree is the whole result. """
		if not self.finished(): raise ItemStateError("Not complete: %s"%self)
		if self.parsed is None or self.parsed.tail is not None:
			raise ItemStateError("Top item must hold exactly one tree: %s"%self)
		return self.parsed.head


class Forest(NamedTuple):
	trees: list
	full: bool


class ChartParser:
	"""
	Bind one of these to a grammar, then call `parse(...)` as often as you like.
	Each call builds its own chart; the most recent chart stays in `last_states`
	for the benefit of `print_states`.

	`limit` caps the number of items in any one state set. Raising it trades memory
	for completeness on pathological (i.e. cyclic) grammars.
	"""
	def __init__(self, grammar:Grammar, *, limit=EXPANSION_LIMIT):
		self.grammar = grammar
		self.limit = limit
		self.top_rule = (grammar.start(),)
		self.last_states = None

	def parse(self, sentence:Sequence[str], results:list) -> bool:
		"""
		Clear `results` and fill it with every parse tree for `sentence`, rooted at the start symbol.
		Return `True` if that's all of them, or `False` if some state set hit the limit,
		in which case `results` holds whichever trees were finished anyway.
		"""
		grammar, limit = self.grammar, self.limit
		size = len(sentence)
		states = [None] * (size + 1)
		truncated = False

		for pos in range(size, -1, -1):
			queue = deque()
			if pos == size:
				queue.append(ChartItem.predict(ACCEPT, self.top_rule, pos))
			else:
				symbol = sentence[pos]
				if grammar.expansions(symbol) is None:
					leaf = TerminalTree(symbol)
					queue.extend(item.advance(leaf) for item in states[pos+1] if item.match(symbol))

			state = states[pos] = {}  # Used as an ordered set.
			empties = {}  # Trees for epsilon-spans completed at this position, also an ordered set.
			while queue:
				if len(state) > limit:
					truncated = True
					break
				item = queue.popleft()
				if item in state: continue
				state[item] = None
				if item.finished():
					tree = item.complete()
					nt, end = tree.symbol, item.start()
					if end == pos: empties[tree] = None
					queue.extend(prev.advance(tree) for prev in states[end] if prev.match(nt))
				else:
					nt = item.current()
					alternatives = grammar.expansions(nt)
					if alternatives is not None:
						queue.extend(ChartItem.predict(nt, rhs, pos) for rhs in alternatives)
						queue.extend(item.advance(tree) for tree in empties if tree.symbol == nt)

		results.clear()
		results.extend(item.complete_top() for item in states[0] if item.finished(ACCEPT))
		self.last_states = states
		if VERBOSE: print("Chart for %d symbol(s): %d items; %d tree(s)%s."%(
			size, sum(map(len, states)), len(results), " (truncated)" if truncated else ""
		))
		return not truncated

	def print_states(self, file=None):
		file = file or sys.stdout
		if self.last_states is None: return
		for i, state in enumerate(self.last_states):
			print("State %d:"%i, file=file)
			for item in state: print(item, file=file)
			print(file=file)


def parse_forest(grammar:Grammar, sentence:Sequence[str], *, limit=EXPANSION_LIMIT) -> Forest:
	""" One-shot convenience: returns the trees along with the completeness flag. """
	trees = []
	full = ChartParser(grammar, limit=limit).parse(sentence, trees)
	return Forest(trees, full)
