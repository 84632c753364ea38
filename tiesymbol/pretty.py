""" Bits and bobs in support of visualizing symbol tables. """

def grid_lines(rows) -> list:
	""" Lay rows of cells out in boxed columns, with a rule under the heading row. """
	rows = [[str(cell) for cell in row] for row in rows]
	assert len(set(map(len, rows))) <= 1, rows
	width = [max(map(len, column)) for column in zip(*rows)]
	def rule(joint): return joint.join('─'*(w+2) for w in width)
	def line(row): return '│'.join(' %s '%cell.ljust(w) for cell, w in zip(row, width))
	lines = [line(row) for row in rows]
	if len(lines) > 1: lines.insert(1, rule('┼'))
	return [rule('┬')] + lines + [rule('┴')]

def print_grid(rows):
	for text in grid_lines(rows): print(text)

def print_tree(tree:dict, indent=0):
	""" Display the nested dict from SymbolTable.tree() as an outline, one namespace per line. """
	for name in sorted(tree):
		print('\t'*indent + name)
		print_tree(tree[name], indent+1)
