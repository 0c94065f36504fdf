"""
Show every derivation of a sentence according to a context-free grammar.

The grammar file has one production per line: a non-terminal, whitespace, and then
alternatives separated by '|'. Every other character is one symbol; 'ε' is ignored,
so it can stand in for an empty alternative. The first production names the start symbol.
"""

import sys, os, argparse

from forestry.parsing.context_free import Grammar, symbol_list
from forestry.parsing.properties import GrammarProperties
from forestry.parsing.interface import GrammarError, EXPANSION_LIMIT
from forestry.parsing.trees import ascending
from forestry.parsing import chart
from forestry.rendering.html import generate_html_output

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m forestry', description=__doc__,)
	parser.add_argument('grammar_path', help='path to grammar file')
	parser.add_argument('sentence', nargs='?', default='', help='the sentence to parse; omit for the empty sentence')
	parser.add_argument('-o', '--output', help='path for an HTML page showing the trees')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-l', '--limit', type=int, default=EXPANSION_LIMIT, help='most items per chart state (default %(default)s)')
	parser.add_argument('--states', action='store_true', help='Dump the chart after parsing.')
	parser.add_argument('--grammar', action='store_true', help='Display the grammar and its properties.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about chart statistics.")
	return parser.parse_args(argv)

def main(args):
	if args.verbose: chart.VERBOSE = True
	if args.output and os.path.exists(args.output) and not args.force:
		print('Target file already exists and --force command-line argument was not given.', file=sys.stderr)
		sys.exit(1)
	with open(args.grammar_path, encoding='utf-8') as fh: text = fh.read()
	try:
		grammar = Grammar.from_text(text)
		parser = chart.ChartParser(grammar, limit=args.limit)
	except GrammarError as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)
	if args.grammar:
		grammar.display()
		GrammarProperties(grammar).display()
	trees = []
	full = parser.parse(symbol_list(args.sentence), trees)
	trees.sort(key=ascending)
	if args.states: parser.print_states()
	for tree in trees: print(tree)
	print("%d derivation(s)%s"%(len(trees), "" if full else " (truncated)"))
	if args.output:
		with open(args.output, 'w', encoding='utf-8') as fh:
			fh.write(generate_html_output(grammar, trees, args.sentence, full))
		print('Wrote derivations in HTML format to:')
		print('\t'+args.output)

if __name__ == '__main__': main(parse_arguments())
