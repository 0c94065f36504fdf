"""
Draw a parse tree as a standalone SVG element.

The picture puts the root at the top and every terminal along a common baseline at
the bottom, each connected by a faint line to where it hangs in the tree. That way
the sentence reads left to right across the bottom, whatever the shape of the tree.
Each non-terminal sits above the median of its children. An epsilon-derivation gets
a grey epsilon leaf one level down, which is why the drawing depth here counts an empty
node as two levels rather than one.
"""

from html import escape
from ..support.foundation import Visitor
from ..parsing.trees import ParseTree

HSEP = 30          # Horizontal separation between adjacent leaves.
VSEP = 45          # Vertical separation between levels.
STRIP_HEIGHT = 30  # Height of the band beneath the tree where the sentence appears.
TOP = 15           # Gap between a line's lower end and the label beneath it.
BOTTOM = 5         # Gap between a label and the line leaving it downward.

NONTERMINAL_COLOUR = "#cc0000"
TERMINAL_COLOUR = "#0000cc"
LINE_COLOUR = "black"
TERMINAL_LINE_COLOUR = "#dddddd"
NULL_COLOUR = "#aaaaaa"
NULL_SYMBOL = "ε"
BACKGROUND = "#fff7db"
STRIP_BACKGROUND = "#f0e6bc"

class SVG:
	""" Just enough of an SVG writer. `out` is anything with a `write(str)` method. """
	def __init__(self, out):
		self.out = out

	def start_tag(self, tag): self.out.write("<" + tag)
	def attribute(self, name, value): self.out.write(' %s="%s"'%(name, escape(str(value))))
	def close_bracket(self): self.out.write(">")
	def close_empty(self): self.out.write("/>")
	def end_tag(self, tag): self.out.write("</%s>"%tag)

	def start_lines(self, colour):
		self.start_tag("g")
		self.attribute("stroke", colour)
		self.attribute("stroke-width", 1)
		self.attribute("stroke-linecap", "round")
		self.close_bracket()

	def end_lines(self): self.end_tag("g")

	def line(self, x1, y1, x2, y2):
		self.start_tag("line")
		for name, value in zip(("x1", "y1", "x2", "y2"), (x1, y1, x2, y2)): self.attribute(name, value)
		self.close_empty()

	def text(self, x, y, colour, s):
		self.start_tag("text")
		self.attribute("x", x)
		self.attribute("y", y)
		self.attribute("text-anchor", "middle")
		self.attribute("fill", colour)
		self.close_bracket()
		self.out.write(escape(s))
		self.end_tag("text")

	def rect(self, y, width, height, fill):
		self.start_tag("rect")
		if y: self.attribute("y", y)
		self.attribute("width", width)
		self.attribute("height", height)
		self.attribute("fill", fill)
		self.close_empty()


def depth(tree:ParseTree) -> int:
	""" Levels needed to draw a tree, counting the epsilon leaf under an empty node. """
	deepest, pending = 0, [(tree, 1)]
	while pending:
		t, level = pending.pop()
		if t.is_terminal: deepest = max(deepest, level)
		elif t.children: pending.extend((child, level + 1) for child in t.children)
		else: deepest = max(deepest, level + 1)
	return deepest


class Painter(Visitor):
	"""
	Each visit draws one node with its left edge at `x` and its label at height `y`,
	with `levels` levels remaining above the baseline. It returns the x-coordinate of
	the node, so the parent knows where to aim its lines. A non-terminal is visited
	only after all its children, and receives their x-coordinates as `roots`.
	"""
	def __init__(self, svg:SVG):
		self.svg = svg

	def paint(self, tree:ParseTree, x, y, levels) -> int:
		""" Children before parents, but with an explicit stack: trees can be very tall. """
		answer = []
		pending = [(tree, x, y, levels, answer, None)]
		while pending:
			t, x, y, levels, into, roots = pending.pop()
			if roots is not None: into.append(self.visit(t, x, y, levels, roots))
			elif t.is_terminal: into.append(self.visit(t, x, y, levels))
			else:
				roots = []
				pending.append((t, x, y, levels, into, roots))
				children, tx = [], x
				for child in t.children:
					children.append((child, tx, y + VSEP, levels - 1, roots, None))
					tx += child.width * HSEP
				pending.extend(reversed(children))
		return answer[0]

	def visit_TerminalTree(self, tree, x, y, levels):
		svg = self.svg
		svg.text(x, y, TERMINAL_COLOUR, tree.symbol)
		ly = y + levels * VSEP - 10
		svg.text(x, ly, TERMINAL_COLOUR, tree.symbol)
		svg.start_lines(TERMINAL_LINE_COLOUR)
		svg.line(x, y + BOTTOM, x, ly - TOP)
		svg.end_lines()
		return x

	def visit_NonTerminalTree(self, tree, x, y, levels, roots):
		svg = self.svg
		ty = y + VSEP
		n = len(roots)
		rx = (roots[(n-1)//2] + roots[n//2]) // 2 if n else x
		svg.text(rx, y, NONTERMINAL_COLOUR, tree.symbol)
		if n:
			svg.start_lines(LINE_COLOUR)
			for cx in roots: svg.line(rx, y + BOTTOM, cx, ty - TOP)
			svg.end_lines()
		else:
			svg.text(x, ty, NULL_COLOUR, NULL_SYMBOL)
			svg.start_lines(NULL_COLOUR)
			svg.line(x, y + BOTTOM, x, ty - TOP)
			svg.end_lines()
		return rx


def draw_svg(tree:ParseTree, out):
	""" Write the whole picture, background and all, to `out`. """
	levels = depth(tree)
	width, height = tree.width * HSEP, levels * VSEP
	svg = SVG(out)
	svg.start_tag("svg")
	svg.attribute("width", width)
	svg.attribute("height", height + STRIP_HEIGHT)
	svg.attribute("xmlns", "http://www.w3.org/2000/svg")
	svg.attribute("version", "1.1")
	svg.attribute("font-family", "sans-serif")
	svg.attribute("font-size", 15)
	svg.close_bracket()
	svg.rect(0, width, height, BACKGROUND)
	svg.rect(height, width, STRIP_HEIGHT, STRIP_BACKGROUND)
	Painter(svg).paint(tree, HSEP // 2, 30, levels)
	svg.end_tag("svg")
	out.write("\n")
