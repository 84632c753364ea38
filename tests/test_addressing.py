import unittest
from tiesymbol import addressing
from tiesymbol.addressing import TypedKey, NamespaceKey
from tiesymbol.interfaces import Kind, InvalidIdentifier

class SigilTests(unittest.TestCase):
	def test_bijection(self):
		for kind in Kind:
			self.assertIs(kind, addressing.kind_for_sigil(addressing.sigil_for_kind(kind)))
		self.assertEqual('$@%&', ''.join(map(addressing.sigil_for_kind, [Kind.SCALAR, Kind.SEQUENCE, Kind.MAP, Kind.CALLABLE])))

	def test_unknown_sigil(self):
		with self.assertRaises(KeyError):
			addressing.kind_for_sigil('*')

class KeyTests(unittest.TestCase):
	def test_typed(self):
		self.assertEqual(TypedKey(Kind.CALLABLE, (), 'greet'), addressing.parse_key('&greet'))
		self.assertEqual(TypedKey(Kind.MAP, (), 'm'), addressing.parse_key('%m'))

	def test_qualified(self):
		self.assertEqual(TypedKey(Kind.SCALAR, ('A', 'B'), 'x'), addressing.parse_key('$A.B.x'))
		self.assertEqual(TypedKey(Kind.SEQUENCE, ('A',), 'xs'), addressing.parse_key('@A::xs'))
		self.assertEqual(NamespaceKey(('A', 'B')), addressing.parse_key('A.B'))

	def test_bare(self):
		self.assertEqual(NamespaceKey(('Sub',)), addressing.parse_key('Sub'))

	def test_nonsense(self):
		for text in ['', '$', '&', '$$x', '$1x', 'a b', 'A..B', '.A', '*glob', None, 12]:
			self.assertIsNone(addressing.parse_key(text), text)

	def test_format(self):
		self.assertEqual('@items', addressing.format_key(Kind.SEQUENCE, 'items'))
		self.assertEqual('Inner', addressing.format_key(None, 'Inner'))

class PathTests(unittest.TestCase):
	def test_root(self):
		for text in [None, '', 'main']:
			self.assertEqual((), addressing.parse_path(text))
		self.assertEqual('main', addressing.format_path(()))

	def test_nested(self):
		self.assertEqual(('A', 'B'), addressing.parse_path('A.B'))
		self.assertEqual(('A', 'B'), addressing.parse_path('A::B'))
		self.assertEqual(('A', 'B'), addressing.parse_path('main.A.B'))
		self.assertEqual(('A', 'B'), addressing.parse_path(('A', 'B')))
		self.assertEqual('A.B', addressing.format_path(('A', 'B')))

	def test_malformed(self):
		for text in ['A..B', '9lives', 'A.', 'has space']:
			with self.assertRaises(InvalidIdentifier):
				addressing.parse_path(text)


if __name__ == '__main__':
	unittest.main()
