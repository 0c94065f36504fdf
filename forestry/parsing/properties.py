"""
Static properties of a grammar, worked out from the grammar alone.

The chart parser copes with any grammar whatsoever, so nothing here is consulted while
parsing. These facts are for people: they explain why a sentence has no parse, or why
it has suspiciously many.

	reachable: non-terminals that can turn up in some sentential form derived from the start.
	productive: non-terminals that can derive some string of terminals (possibly empty).
		The rest are "unrealizable": every derivation from them goes on forever.
	nullable: non-terminals that can derive the empty string.
	cyclic: non-terminals that can derive themselves without consuming any input.

A grammar is infinitely ambiguous if some cyclic non-terminal is both reachable and
productive, for then some sentence has infinitely many parse trees.
"""

import collections
from typing import Protocol
from ..support import foundation
from .context_free import Grammar
from .interface import Fault

class FaultHandler(Protocol):
	"""
	This generic handler just raises exceptions.
	More sophisticated handlers might do something more sophisticated,
	like collecting the complaints for a report.
	"""
	def unreachable_symbols(self, symbols):
		raise Fault("Unreachable Symbols: %r."%sorted(symbols))

	def unrealizable_symbols(self, symbols):
		raise Fault("Unrealizable Symbols: %r."%sorted(symbols))

	def cyclic_symbols(self, symbols, infinitely_ambiguous:bool):
		raise Fault("Cyclic Symbols: %r%s."%(sorted(symbols), " (infinitely ambiguous)" if infinitely_ambiguous else ""))

class SimpleFaultHandler(FaultHandler):
	""" Protocols cannot be instantiated, so here's a simple way to get "raise for everything" behavior. """
	pass


class GrammarProperties:
	"""
	All four sets are computed eagerly, at construction, and never change afterwards.
	They are frozensets of non-terminal symbols.
	"""
	def __init__(self, grammar:Grammar):
		self.grammar = grammar
		self.non_terminals = frozenset(grammar.non_terminals())
		self.reachable = frozenset(self._find_reachable())
		self.unreachable = self.non_terminals - self.reachable
		self.nullable = frozenset(self._find_nullable())
		self.productive = frozenset(self._find_productive())
		self.unrealizable = self.non_terminals - self.productive
		self.cyclic = frozenset(self._find_cyclic())

	def infinitely_ambiguous(self) -> bool:
		return any(nt in self.reachable and nt in self.productive for nt in self.cyclic)

	def _find_reachable(self) -> set:
		""" A simple transitive closure from the start symbol, through right-hand sides. """
		grammar = self.grammar
		def successors(nt):
			for rhs in grammar.expansions(nt):
				for symbol in rhs:
					if grammar.expansions(symbol) is not None:
						yield symbol
		return foundation.transitive_closure([grammar.start()], successors)

	def _bipartite_closure(self, roots) -> set:
		"""
		Nullable and productive symbols come from the same propagation with different roots:
		a rule fires when every symbol on its right has been reached, and then its left-hand
		side is reached too. The answer counts only non-terminals.
		"""
		rules = list(self.grammar.rules())
		mentions = collections.defaultdict(list)
		for index, (lhs, rhs) in enumerate(rules):
			for symbol in rhs: mentions[symbol].append(index)
		return foundation.bipartite_closure(roots, rules, mentions) & self.non_terminals

	def _find_nullable(self) -> set:
		""" Which symbols may produce the empty string? """
		return self._bipartite_closure(lhs for lhs, rhs in self.grammar.rules() if not rhs)

	def _find_productive(self) -> set:
		"""
		Terminals are productive, and so is anything nullable, since zero is finite.
		A rule with only productive symbols on the right makes its left side productive.
		"""
		return self._bipartite_closure(self.grammar.terminals() | self.nullable)

	def _trivial_successors(self) -> dict:
		"""
		A -> X is a trivial step if deriving X from A needn't consume any terminals:
		either every symbol of the alternative is nullable, and then each of them counts,
		or exactly one is not, and that one is a non-terminal.
		"""
		grammar, nullable = self.grammar, self.nullable
		trivial = collections.defaultdict(set)
		for lhs, rhs in grammar.rules():
			solid = [symbol for symbol in rhs if symbol not in nullable]
			if not solid: trivial[lhs].update(rhs)
			elif len(solid) == 1 and grammar.expansions(solid[0]) is not None: trivial[lhs].add(solid[0])
		return trivial

	def _find_cyclic(self) -> set:
		trivial = self._trivial_successors()
		return {
			nt for nt, successors in trivial.items()
			if nt in foundation.transitive_closure(successors, trivial.get)
		}

	def validate(self, fault_handler:FaultHandler=SimpleFaultHandler()):
		"""
		Calls the fault handler with every identified fault. The default fault handler
		raises an exception (derived from Fault) for the first problem noticed.
		"""
		if self.unreachable: fault_handler.unreachable_symbols(self.unreachable)
		if self.unrealizable: fault_handler.unrealizable_symbols(self.unrealizable)
		if self.cyclic: fault_handler.cyclic_symbols(self.cyclic, self.infinitely_ambiguous())

	def display(self, file=None):
		print("Start symbol:", self.grammar.start(), file=file)
		for label, symbols in [
			('Unreachable', self.unreachable),
			('Unrealizable', self.unrealizable),
			('Nullable', self.nullable),
			('Cyclic', self.cyclic),
		]:
			print("%s: %s"%(label, " ".join(self.in_order(symbols)) or '-'), file=file)
		if self.infinitely_ambiguous(): print("Some sentences have infinitely many derivations.", file=file)

	def in_order(self, symbols) -> list:
		""" Present symbols in definition order, which is friendlier than hash order. """
		return [nt for nt in self.grammar.non_terminals() if nt in symbols]
