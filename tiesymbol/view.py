"""
A dictionary-like view over a tree of namespaces.

	table = SymbolTable()                   # the root namespace of the global registry
	table['&greet'] = lambda: 'hello'
	table['&greet']()                       # returns 'hello'
	table['$count'] = Cell(3)
	inner = table['Inner']                  # a view over the namespace Inner
	inner['@items'] = []                    # same as table['@Inner.items'] = []
	sorted(table)                           # ['$count', '&greet', 'Inner']

Keys follow the grammar in module `addressing`. Anything you assign must be a
reference value of the kind its sigil declares: a Cell, a list (or other mutable
sequence), a dict (or other mutable mapping), or a callable.

This behaves like a MutableMapping with one deliberate difference: a missing
binding reads as None rather than raising KeyError. A nested namespace never
reads as missing, because namespaces spring into being as soon as you bind
something inside them.

Caveat: existence checks on scalars and namespaces always return true, once
the name is known to the store at all. See module `registry` for why.
"""

import inspect, re, sys
from collections.abc import MutableMapping
from typing import Iterator, Optional, Union

from . import addressing, pretty, registry
from .addressing import TypedKey, NamespaceKey
from .interfaces import BindingStore, InvalidIdentifier, TypeMismatch, CorruptBinding, kind_of

Pattern = Union[str, re.Pattern]

class SymbolTable(MutableMapping):
	"""
	The view holds nothing but its namespace path, its store, and (between first_key
	and the end of an iteration) a cursor of keys. Two views over the same path see
	the same bindings; their cursors are their own business.
	"""

	def __init__(self, namespace=None, *, store:BindingStore=None):
		self.__path = addressing.parse_path(namespace)
		self.__store = registry.GLOBAL if store is None else store
		self.__cursor = None

	@classmethod
	def mine(cls, *, store:BindingStore=None) -> "SymbolTable":
		""" Return the symbol table named for the calling module. """
		caller = inspect.currentframe().f_back
		return cls(caller.f_globals['__name__'], store=store)

	def __repr__(self): return '<%s %s>'%(type(self).__name__, self.namespace)

	@staticmethod
	def log_error(*parts):
		""" Simple place to override if you'd rather use a logging framework. """
		print(*parts, file=sys.stderr)

	# Navigation

	@property
	def path(self) -> tuple: return self.__path

	@property
	def namespace(self) -> str:
		""" The dotted name of this namespace, or "main" for the root. """
		return addressing.format_path(self.__path)

	@property
	def binding_store(self) -> BindingStore: return self.__store

	def parent_namespace(self) -> Optional[str]:
		""" Returns None if there is no parent namespace. """
		if len(self.__path) > 1: return addressing.format_path(self.__path[:-1])

	def parent(self) -> Optional["SymbolTable"]:
		""" Like parent_namespace, but returns a view over it. """
		if len(self.__path) > 1: return self._view(self.__path[:-1])

	def _view(self, path) -> "SymbolTable":
		# The path is already normalized; don't parse it again.
		view = type(self)(store=self.__store)
		view.__path = path
		return view

	def _resolve(self, relative) -> tuple:
		""" At the root, a key may spell out "main" as often as it likes. Anywhere else, main is an ordinary name. """
		if self.__path: return self.__path + relative
		return addressing.strip_root(relative)

	def _locate(self, key:TypedKey) -> tuple:
		return self._resolve(key.path), key.label

	# The mapping protocol

	def fetch(self, key:str):
		""" Return the bound value, a view over a nested namespace, or None if there's nothing there. """
		parsed = addressing.parse_key(key)
		if isinstance(parsed, TypedKey):
			path, label = self._locate(parsed)
			return self.__store.get_binding(path, label, parsed.kind)
		elif isinstance(parsed, NamespaceKey):
			path = self._resolve(parsed.path)
			if not path: return None
			return self._view(path)
		else:
			return None

	def store(self, key:str, value):
		self._bind(key, value, 4)

	def _bind(self, key, value, stacklevel):
		# stacklevel counts from the store's set_binding out to whoever called store, []= or setdefault.
		parsed = addressing.parse_key(key)
		if not isinstance(parsed, TypedKey):
			raise InvalidIdentifier("%s is not a valid identifier"%(key,))
		sigil = addressing.sigil_for_kind(parsed.kind)
		path, label = self._locate(parsed)
		qualified = sigil + addressing.format_path(path) + '.' + label
		actual = kind_of(value)
		if actual is None:
			raise TypeMismatch("cannot assign unreferenced thing to %s"%qualified)
		if actual is not parsed.kind:
			raise TypeMismatch("cannot assign %s to %s (%s)"%(type(value).__name__, parsed.kind.name, qualified))
		self.__store.set_binding(path, label, parsed.kind, value, stacklevel=stacklevel)

	def exists(self, key:str) -> bool:
		return self.fetch(key) is not None

	def delete(self, key:str):
		"""
		Deleting a typed key detaches and returns its value: the value itself
		survives for as long as anything else refers to it. Deleting a namespace
		key empties that namespace (recursively) and returns None.
		"""
		parsed = addressing.parse_key(key)
		if isinstance(parsed, TypedKey):
			path, label = self._locate(parsed)
			value = self.__store.get_binding(path, label, parsed.kind)
			if value is None: return None
			self.__store.unset_binding(path, label)
			return value
		else:
			nested = self.fetch(key)
			if nested is not None: nested.clear()
			return None

	def _snapshot(self) -> list:
		symbols = list(self.__store.get_namespaces(self.__path))
		for name in self.__store.get_names(self.__path):
			kind = self.__store.get_kind(self.__path, name)
			if kind is None:
				self.log_error("Enumerating %s found an uninterpretable binding for %r."%(self.namespace, name))
				raise CorruptBinding(self.namespace, name)
			symbols.append(addressing.format_key(kind, name))
		return sorted(symbols)

	def first_key(self) -> Optional[str]:
		""" Take a fresh snapshot of the keys in this namespace and return the first. Discards any prior cursor. """
		self.__cursor = None
		self.__cursor = self._snapshot()
		return self.next_key()

	def next_key(self) -> Optional[str]:
		""" Return the next key from the cursor, or None when it's used up (or was never started). """
		if self.__cursor: return self.__cursor.pop(0)
		return None

	def clear(self):
		"""
		Delete everything in this namespace, nested namespaces included.
		If a corrupt binding turns up partway, whatever was deleted already stays deleted.
		"""
		self.__cursor = None
		self.__cursor = self._snapshot()
		while True:
			key = self.next_key()
			if key is None: break
			self.delete(key)

	# Python's spelling of the same things

	def __getitem__(self, key): return self.fetch(key)
	def __setitem__(self, key, value): self._bind(key, value, 4)
	def __delitem__(self, key): self.delete(key)
	def __contains__(self, key): return self.exists(key)
	def __iter__(self) -> Iterator[str]: return iter(self._snapshot())
	def __len__(self): return len(self._snapshot())

	def get(self, key, default=None):
		value = self.fetch(key)
		return default if value is None else value

	def pop(self, key, *default):
		value = self.delete(key)
		if value is None and default: return default[0]
		return value

	def setdefault(self, key, default=None):
		value = self.fetch(key)
		if value is None:
			self._bind(key, default, 4)
			return default
		return value

	# Search and classification

	def search(self, pattern:Pattern) -> Iterator[str]:
		""" Yield the keys matching a regular expression, from a fresh enumeration each time you ask. """
		matcher = re.compile(pattern)
		return (key for key in self if matcher.search(key))

	def scalars(self): return self.search(r'^\$')
	def sequences(self): return self.search(r'^@')
	def maps(self): return self.search(r'^%')
	def callables(self): return self.search(r'^&')

	def classes(self):
		""" Yield the names of the nested namespaces. """
		return self.search(r'^[^$@%&]')

	def tree(self) -> dict:
		"""
		Returns a nested dict with an entry for every namespace under this one.
		Each step strictly extends the path, so there is no way for this to go around in circles.
		"""
		return {name: self.fetch(name).tree() for name in self.classes() if name in self}

	def pretty_print(self):
		""" Display the keys and kinds of this namespace as a grid, followed by the tree beneath it. """
		rows = [['key', 'kind']]
		for key in self:
			parsed = addressing.parse_key(key)
			rows.append([key, parsed.kind.name if isinstance(parsed, TypedKey) else 'NAMESPACE'])
		print(self.namespace)
		pretty.print_grid(rows)
		pretty.print_tree(self.tree())
