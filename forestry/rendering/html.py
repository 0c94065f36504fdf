"""
A complete HTML page describing a grammar and the derivations of one sentence.

The page lists the grammar, says what (if anything) looks wrong with it, and then
draws each tree in the order given. Callers normally sort the trees first with
`trees.ascending` so that the page comes out the same way every time.
"""

import io
from html import escape
from ..parsing.context_free import Grammar
from ..parsing.properties import GrammarProperties, FaultHandler
from ..support.pretty import EPSILON
from . import svg

class FaultReport(FaultHandler):
	""" Rather than raising, collect each complaint as a sentence for the page. """
	def __init__(self, properties:GrammarProperties):
		self.properties = properties
		self.complaints = []

	def _complain(self, symbols, label):
		names = ", ".join(self.properties.in_order(symbols))
		if len(symbols) == 1: self.complaints.append("Non-terminal %s is %s."%(names, label))
		else: self.complaints.append("Non-terminals %s are %s."%(names, label))

	def unreachable_symbols(self, symbols):
		self._complain(symbols, "unreachable from the start symbol " + self.properties.grammar.start())

	def unrealizable_symbols(self, symbols):
		self._complain(symbols, "unrealizable: they cannot generate any string" if len(symbols) > 1 else "unrealizable: it cannot generate any string")

	def cyclic_symbols(self, symbols, infinitely_ambiguous:bool):
		if infinitely_ambiguous: self._complain(symbols, "cyclic, so some strings have infinitely many derivations")
		else: self._complain(symbols, "cyclic")


def tree_heading(trees:list, sentence:str, full:bool) -> str:
	if not full: heading = "Some derivations"
	elif not trees: heading = "No derivations"
	elif len(trees) == 1: heading = "Derivation tree"
	else: heading = "Derivation trees"
	return "%s for '%s'"%(heading, sentence)

def show_grammar(out, grammar:Grammar):
	out.write('<ul class="plain">\n')
	for lhs in grammar.non_terminals():
		alternatives = [" ".join(map(escape, rhs)) if rhs else EPSILON for rhs in grammar.expansions(lhs)]
		out.write("<li>%s &#x2192; %s</li>\n"%(escape(lhs), " | ".join(alternatives)))
	out.write("</ul>\n")

def generate_html_output(grammar:Grammar, trees:list, sentence:str, full:bool) -> str:
	out = io.StringIO()
	properties = GrammarProperties(grammar)
	report = FaultReport(properties)
	properties.validate(report)

	out.write("<!DOCTYPE html>\n<html>\n<head>\n")
	out.write('<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>\n')
	out.write("<title>Derivation trees</title>\n</head>\n<body>\n")
	out.write("<h1>Derivation trees</h1>\n")
	out.write("<h2>Grammar</h2>\n")
	show_grammar(out, grammar)
	if report.complaints:
		out.write("<p>This grammar has the following problems:</p>\n<ul>\n")
		for complaint in report.complaints: out.write("<li>%s</li>\n"%escape(complaint, quote=False))
		out.write("</ul>\n")
	out.write("<h2>%s</h2>\n"%escape(tree_heading(trees, sentence, full), quote=False))
	for tree in trees: svg.draw_svg(tree, out)
	out.write("</body>\n</html>\n")
	return out.getvalue()
