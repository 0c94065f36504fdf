""" Graph searches the grammar analyses are made of, and a visitor for the tree renderers. """

from collections import deque

def transitive_closure(roots, successors) -> set:
	"""
	Everything reachable from ``roots``, the roots included, searching breadth-first.
	``successors(node)`` gives the nodes one step on, or ``None`` where there are none.
	Nodes need only be hashable.
	"""
	closure = set(roots)
	frontier = deque(closure)
	while frontier:
		for node in successors(frontier.popleft()) or ():
			if node not in closure:
				closure.add(node)
				frontier.append(node)
	return closure

def bipartite_closure(roots, conjuncts:list, mentions:dict) -> set:
	"""
	Propagation through an and/or graph: a conjunct (say, a production rule) fires once
	every one of its members has been reached, whereupon its head joins the closure.

	``conjuncts`` is a list of (head, members) pairs; ``mentions`` maps each member to the
	indices of the conjuncts it participates in, once per occurrence. A conjunct with no
	members never fires here, so seed its head among the roots if that's what you mean.
	"""
	def successors(node):
		for index in mentions.get(node, ()):
			remain[index] -= 1
			if remain[index] == 0:
				yield conjuncts[index][0]

	remain = [len(members) for head, members in conjuncts]
	return transitive_closure(roots, successors)

class Visitor:
	"""
	Double dispatch on the class of the host: ``visit(host, ...)`` calls ``visit_<Class>``
	for the nearest class along the host's MRO that this visitor handles. Which parts of
	a structure get visited, and in what order, is up to the ``visit_...`` methods.
	"""
	def visit(self, host, *args, **kwargs):
		for cls in type(host).__mro__:
			method = getattr(self, 'visit_' + cls.__name__, None)
			if method is not None: return method(host, *args, **kwargs)
		raise AttributeError("%s has no visit method for %s"%(type(self).__name__, type(host).__name__))
