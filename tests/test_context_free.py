import io
import unittest

from forestry.parsing.context_free import Grammar, symbol_list
from forestry.parsing.interface import GrammarError, ACCEPT

class TestGrammar(unittest.TestCase):
	def test_definition_order_and_start(self):
		g = Grammar()
		g.add_production('S', ['A', 'b'])
		g.add_production('A', ['a'])
		g.add_production('S', [])
		self.assertEqual('S', g.start())
		self.assertEqual(['S', 'A'], list(g.non_terminals()))
		self.assertEqual([('A', 'b'), ()], g.expansions('S'))
		self.assertIsNone(g.expansions('b'))
		self.assertEqual({'a', 'b'}, g.terminals())
		self.assertEqual([('S', ('A', 'b')), ('S', ()), ('A', ('a',))], list(g.rules()))
	
	def test_duplicates_are_kept(self):
		g = Grammar.shorthand({'S': 'a|a'})
		self.assertEqual([('a',), ('a',)], g.expansions('S'))
	
	def test_empty_grammar_has_no_start(self):
		with self.assertRaises(GrammarError):
			Grammar().start()
	
	def test_reserved_symbol(self):
		with self.assertRaises(GrammarError):
			Grammar().add_production(ACCEPT, ['a'])
		g = Grammar()
		with self.assertRaises(GrammarError):
			g.add_production('S', ['a', ACCEPT])
		self.assertEqual((), g.non_terminals())
	
	def test_non_terminals_cannot_be_altered_from_outside(self):
		g = Grammar.shorthand({'S': 'a'})
		names = g.non_terminals()
		with self.assertRaises(AttributeError):
			names.append('T')
		self.assertEqual(('S',), g.non_terminals())
	
	def test_symbol_list(self):
		self.assertEqual(['a', 'S', 'b'], symbol_list(' a S\tb '))
		self.assertEqual([], symbol_list('ε'))
		self.assertEqual([], symbol_list('  '))
	
	def test_from_text(self):
		g = Grammar.from_text("S aSb|ε\n\nT  x y |\n")
		self.assertEqual('S', g.start())
		self.assertEqual([('a', 'S', 'b'), ()], g.expansions('S'))
		self.assertEqual([('x', 'y'), ()], g.expansions('T'))
	
	def test_from_text_complains_about_bare_lines(self):
		with self.assertWarns(UserWarning):
			g = Grammar.from_text("X\nS a")
		self.assertEqual('S', g.start())
		self.assertIsNone(g.expansions('X'))
		with self.assertRaises(GrammarError):
			Grammar.from_text("X\nS a", strict=True)
	
	def test_str(self):
		g = Grammar.shorthand({'S': 'aS|'})
		self.assertEqual('S → a S | ε', str(g))

	def test_display_grid(self):
		out = io.StringIO()
		Grammar.shorthand({'S': 'aS|'}).display(file=out)
		lines = out.getvalue().splitlines()
		self.assertEqual(6, len(lines))
		self.assertEqual('─┬─' + '─' * 6 + '─┬─' + '─' * 8, lines[0][1:])
		self.assertEqual('  │ Symbol │ Produces', lines[1])
		self.assertEqual(lines[0].replace('┬', '┼'), lines[2])
		self.assertEqual('0 │ S      │ a S', lines[3].rstrip())
		self.assertEqual('1 │ S      │ ε', lines[4].rstrip())
		self.assertEqual(lines[0].replace('┬', '┴'), lines[5])


if __name__ == '__main__':
	unittest.main()
