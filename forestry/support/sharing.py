"""
Persistent singly-linked lists with shared tails.

A chart parser keeps a great many partial parses alive at once, and most of them
agree about everything to the right of some point. Cons cells let them share that
agreement instead of copying it: advancing two items that share a suffix yields
two new items which still share that suffix in memory.

The empty list is simply ``None``, as in a cactus stack. Equality is deep and
hashing is consistent with it, so lists built along different paths still compare
equal when they hold equal things. Hashes are computed once, at construction.
"""

EMPTY_HASH = 1  # Distinguishes the empty tail from a head that happens to hash to zero.

def hash_of(node:"Cons") -> int:
	return EMPTY_HASH if node is None else hash(node)

class Cons:
	__slots__ = ('head', 'tail', '_hash')
	
	def __init__(self, head, tail:"Cons"=None):
		assert tail is None or isinstance(tail, Cons), tail
		self.head, self.tail = head, tail
		self._hash = hash(hash(head) + 31 * hash_of(tail))
	
	def __hash__(self): return self._hash
	
	def __eq__(self, other):
		if not isinstance(other, Cons): return NotImplemented
		a, b = self, other
		while a is not b:
			if a is None or b is None: return False
			if a._hash != b._hash or a.head != b.head: return False
			a, b = a.tail, b.tail
		return True
	
	def __iter__(self): return each(self)
	
	def __len__(self):
		return sum(1 for _ in self)
	
	def __repr__(self): return "<%s>"%" ".join(map(repr, self))

def cons(head, tail:Cons=None) -> Cons:
	return Cons(head, tail)

def each(node:Cons):
	""" Iterate a list which may be empty (i.e. ``None``). """
	while node is not None:
		yield node.head
		node = node.tail

def from_iterable(items) -> Cons:
	""" Build a list holding the given items in the same order. """
	node = None
	for item in reversed(list(items)): node = Cons(item, node)
	return node
