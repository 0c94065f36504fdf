import unittest

from forestry.parsing.trees import TerminalTree, NonTerminalTree, ascending, compare_ascending, Ascending

def leaf(s): return TerminalTree(s)
def node(s, *children): return NonTerminalTree(s, children)

class TestParseTrees(unittest.TestCase):
	def test_terminal_attributes(self):
		t = leaf('a')
		self.assertTrue(t.is_terminal)
		self.assertEqual(1, t.height)
		self.assertEqual(1, t.width)
		self.assertEqual('a', t.sentence)
		self.assertEqual(('a',), t.frontier)
		self.assertEqual('a', t.short_name())
	
	def test_empty_node(self):
		t = node('S')
		self.assertFalse(t.is_terminal)
		self.assertEqual((), t.children)
		self.assertEqual(1, t.height)
		self.assertEqual(1, t.width)
		self.assertEqual('', t.sentence)
		self.assertEqual('S', t.non_terminal())
	
	def test_attribute_laws(self):
		inner = node('S', leaf('a'), node('S'), leaf('b'))
		outer = node('S', leaf('a'), inner, leaf('b'))
		self.assertEqual(2, inner.height)
		self.assertEqual(3, outer.height)
		self.assertEqual(3, inner.width)
		self.assertEqual(5, outer.width)
		self.assertEqual('a a b b', outer.sentence)
		self.assertEqual(tuple('aabb'), outer.frontier)
		for t in (inner, outer):
			self.assertEqual(1 + max(c.height for c in t.children), t.height)
			self.assertEqual(sum(c.width for c in t.children), t.width)
	
	def test_structural_equality(self):
		a = node('E', node('E', leaf('i')), leaf('+'), node('E', leaf('i')))
		b = node('E', node('E', leaf('i')), leaf('+'), node('E', leaf('i')))
		self.assertEqual(a, b)
		self.assertEqual(hash(a), hash(b))
		self.assertEqual(1, len({a, b}))
		self.assertNotEqual(a, node('F', *a.children))
		self.assertNotEqual(node('S'), leaf('S'))
		self.assertNotEqual(leaf('S'), node('S'))
		self.assertNotEqual(node('S', leaf('a')), node('S', node('a')))
	
	def test_distinct_derivations_of_one_sentence_differ(self):
		left = node('S', node('S', leaf('a')), leaf('a'))
		right = node('S', leaf('a'), node('S', leaf('a')))
		self.assertEqual(left.sentence, right.sentence)
		self.assertNotEqual(left, right)
	
	def test_ascending_order(self):
		long = node('S', leaf('a'), leaf('b'))
		short = node('S', leaf('b'))
		tall = node('S', node('T', leaf('b')))
		early = node('S', leaf('a'))
		trees = [long, tall, short, early]
		self.assertEqual([early, short, tall, long], sorted(trees, key=ascending))
		self.assertEqual([early, short, tall, long], sorted(trees, key=Ascending))
	
	def test_comparator_ties_are_not_equality(self):
		a = node('S', node('A', leaf('x')))
		b = node('S', node('B', leaf('x')))
		self.assertEqual(0, compare_ascending(a, b))
		self.assertNotEqual(a, b)
		self.assertLess(compare_ascending(node('S', leaf('x')), a), 0)
		self.assertGreater(compare_ascending(a, node('S', leaf('x'))), 0)

	def test_very_tall_trees(self):
		def tower(bottom, floors=5000):
			t = bottom
			for _ in range(floors): t = node('S', t)
			return t
		a, b = tower(leaf('x')), tower(leaf('x'))
		self.assertEqual(5001, a.height)
		self.assertEqual(a, b)
		self.assertEqual(hash(a), hash(b))
		self.assertNotEqual(a, tower(leaf('y')))
		self.assertNotEqual(a, tower(node('x')))
		text = repr(a)
		self.assertTrue(text.startswith('[S [S [S x'))
		self.assertTrue(text.endswith('x' + ']' * 5000))

	def test_repr(self):
		self.assertEqual('[S a [S] b]', repr(node('S', leaf('a'), node('S'), leaf('b'))))
		self.assertEqual('[S [A] [B c]]', str(node('S', node('A'), node('B', leaf('c')))))


if __name__ == '__main__':
	unittest.main()
