import unittest
import forestry.support.foundation as foundation


class ModuleTests(unittest.TestCase):
	def test_transitive_closure_includes_roots(self):
		graph = {1: [2], 2: [3], 3: [1], 4: [5]}
		self.assertEqual({1, 2, 3}, foundation.transitive_closure([1], graph.get))
		self.assertEqual({4, 5}, foundation.transitive_closure([4], graph.get))
		self.assertEqual({6}, foundation.transitive_closure([6], graph.get))
	
	def test_bipartite_closure_needs_every_member(self):
		conjuncts = [('x', 'ab'), ('y', 'ax'), ('z', 'q')]
		mentions = {'a': [0, 1], 'b': [0], 'x': [1], 'q': [2]}
		self.assertEqual({'a', 'b', 'x', 'y'}, foundation.bipartite_closure('ab', conjuncts, mentions))
		self.assertEqual({'a'}, foundation.bipartite_closure('a', conjuncts, mentions))
	
	def test_bipartite_closure_counts_repeated_members(self):
		conjuncts = [('x', 'aa')]
		mentions = {'a': [0, 0]}
		self.assertEqual({'a', 'x'}, foundation.bipartite_closure('a', conjuncts, mentions))
	
	def test_visitor_falls_back_along_mro(self):
		class Base: pass
		class Derived(Base): pass
		class Namer(foundation.Visitor):
			def visit_Base(self, host, suffix): return 'base' + suffix
		self.assertEqual('base!', Namer().visit(Derived(), '!'))
		with self.assertRaises(AttributeError):
			Namer().visit(42, '!')


if __name__ == '__main__':
	unittest.main()
