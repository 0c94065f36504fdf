"""
# Context Free Grammars

In pure form, a context free grammar (CFG) consists of:
	* A set of terminal symbols,
	* A set of non-terminal symbols, disjoint from the terminals,
	* A set of production rules, each consisting of:
		* left-hand side (exactly one symbol)
		* right-hand side (ordered sequence of zero or more symbols)
	* and a start symbol.

Here the sets are implied rather than declared. Any symbol that heads a production rule
is a non-terminal; anything else that turns up (on the right, or in an input sentence)
is terminal. The start symbol is whichever left-hand side was defined first.

Nothing here transforms or disambiguates a grammar. Duplicate alternatives are kept,
empty alternatives are fine, and recursion in any direction is welcome. Deciding what
(if anything) is wrong with a grammar is the job of the `properties` module.


# A note on symbology:

Symbols are plain strings. The textual format read by `Grammar.from_text` is terse:
one production per line, a left-hand side, whitespace, and then alternatives separated
by vertical bars. Each alternative is a juxtaposition of single-character symbols, so
whitespace inside an alternative means nothing. The Greek letter epsilon is likewise
ignored, which lets people write an empty alternative visibly.
"""

import warnings
from typing import Optional, Sequence
from ..support import pretty
from .interface import ACCEPT, GrammarError

EPSILON = pretty.EPSILON

def symbol_list(text:str) -> list:
	""" Each non-blank character is one symbol, except that epsilon stands for nothing. """
	return [c for c in text if not c.isspace() and c != EPSILON]

class Grammar:
	"""
	An ordered collection of non-terminals and their alternative right-hand sides.

	This object follows a builder pattern: construct it empty, give it a bunch of productions,
	and then treat it as read-only while parsers and analyses consult it. Several parses may
	share one grammar.
	"""
	def __init__(self):
		self.lhss:list[str] = []  # Non-terminals in order of definition; the first is the start symbol.
		self.productions:dict[str, list[tuple]] = {}

	def add_production(self, lhs:str, rhs:Sequence[str]):
		"""
		Append an alternative to those of `lhs`, registering `lhs` on first sight.
		Repeating a production adds it again: each copy is a separate alternative.
		"""
		rhs = tuple(rhs)
		if lhs == ACCEPT or ACCEPT in rhs: raise GrammarError("The symbol %r is reserved."%ACCEPT)
		if lhs not in self.productions:
			self.lhss.append(lhs)
			self.productions[lhs] = []
		self.productions[lhs].append(rhs)

	def start(self) -> str:
		if not self.lhss: raise GrammarError("Grammar has no productions, hence no start symbol.")
		return self.lhss[0]

	def non_terminals(self) -> tuple:
		return tuple(self.lhss)

	def expansions(self, symbol) -> Optional[list]:
		""" The alternatives for a non-terminal, or `None` if the symbol is terminal. """
		return self.productions.get(symbol)

	def rules(self):
		""" Yield (lhs, rhs) pairs in definition order. """
		for lhs in self.lhss:
			for rhs in self.productions[lhs]:
				yield lhs, rhs

	def terminals(self) -> set:
		""" Of all symbols mentioned on the right, those without productions are terminal. """
		return {symbol for lhs, rhs in self.rules() for symbol in rhs if symbol not in self.productions}

	def display(self, file=None):
		head = ['', 'Symbol', 'Produces']
		body = [[i, lhs, pretty.alternative(rhs)] for i, (lhs, rhs) in enumerate(self.rules())]
		pretty.print_grid([head] + body, file=file)

	def __str__(self):
		return "\n".join(
			"%s → %s"%(lhs, " | ".join(map(pretty.alternative, self.productions[lhs])))
			for lhs in self.lhss
		)

	@classmethod
	def shorthand(cls, rules:dict):
		"""
		Just a quick way to enter a test-grammar: keys are non-terminals and values are
		alternatives separated by '|', one character per symbol. The first key is the start.
		"""
		cfg = cls()
		for lhs, rhs in rules.items():
			for alt in rhs.split('|'):
				cfg.add_production(lhs, symbol_list(alt))
		return cfg

	@classmethod
	def from_text(cls, text:str, *, strict=False):
		"""
		Read the one-production-per-line format. A line with a left-hand side but nothing
		after it can't mean anything: that draws a warning, or a GrammarError if `strict`.
		Trailing bars count, so "S a|" gives S an empty alternative.
		"""
		cfg = cls()
		for line_number, line in enumerate(text.splitlines(), 1):
			parts = line.split(None, 1)
			if not parts: continue
			if len(parts) < 2:
				message = "Line %d: %r has no right-hand side."%(line_number, parts[0])
				if strict: raise GrammarError(message)
				warnings.warn(message)
				continue
			lhs, rhs = parts
			for alt in rhs.split('|'):
				cfg.add_production(lhs, symbol_list(alt))
		return cfg
