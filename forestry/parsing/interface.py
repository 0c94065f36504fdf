"""
Parsing Interface Definitions
"""

ACCEPT = '<START>'  # The synthetic non-terminal which expands to a grammar's start symbol.
# No grammar may define the above symbol. The chart parser relies on it being free.

EXPANSION_LIMIT = 100  # Items per state set, beyond which the parser gives up on completeness.

class LanguageError(ValueError):
	""" Base class of all exceptions arising from problematic grammars or their text. """

class GrammarError(LanguageError):
	pass

class Fault(LanguageError):
	""" Generic exception thrown by the generic fault handler. """

class ItemStateError(RuntimeError):
	"""
	Raised when a chart item is asked to do something its state does not allow.
	This always means a bug in whatever code drives the items, never bad input.
	"""
