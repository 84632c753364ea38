"""
A binding store needs somewhere to keep the bindings. Here's my concept:

* A registry is a tree of namespaces. The root has no name (people call it "main").
* A namespace has local entries and nested child namespaces, keyed by identifier.
* An entry is a bundle of slots, one per Kind, rather like a Perl glob:
	the same name can hold a scalar, a sequence, a map, and a callable all at once.
* Every entry has an implicit scalar slot. Ask for it and you get an (empty) Cell,
	which will be there from then on. Consequently, "does $x exist" is true for any
	name the registry has ever heard of. That's a quirk, and it stays.

The registry does no validation. It will cheerfully put a number in a callable slot
if you ask it to. Keeping the slots honest is the job of the symbol table view.

Child namespaces are created on demand when something is bound inside them,
and pruned once the last entry within them goes away. An empty namespace
is therefore not listed, though of course you can still address it.
"""

import warnings
from typing import Optional

from .interfaces import Kind, Cell, Path, BindingStore, SLOT_PRECEDENCE, RedefinitionWarning, kind_of

class Entry:
	""" The slots bound to one name. Unoccupied slots are simply absent from the dictionary. """
	__slots__ = ('slots',)
	def __init__(self): self.slots : dict[Kind, object] = {}
	def __repr__(self): return '<Entry %s>'%' '.join(k.name for k in self.slots)

class NameSpace:
	"""
	One node of the namespace tree.
	The "local" is the set of names defined in this space.
	The "place" is the full path, handy in error messages.
	"""
	def __init__(self, place:Path):
		self.local : dict[str, Entry] = {}
		self.children : dict[str, NameSpace] = {}
		self.place = place

	def is_empty(self): return not (self.local or self.children)

	def new_child(self, segment) -> "NameSpace":
		""" Return the subordinate name-space called `segment`, making it if need be. """
		if segment not in self.children:
			self.children[segment] = NameSpace(self.place + (segment,))
		return self.children[segment]


class Registry(BindingStore):
	"""
	The reference implementation of a BindingStore.
	If `warn_on_redefine` is set, replacing an occupied slot issues a RedefinitionWarning.
	"""
	def __init__(self, *, warn_on_redefine=False):
		self.root = NameSpace(())
		self.warn_on_redefine = warn_on_redefine

	def _find(self, path:Path) -> Optional[NameSpace]:
		node = self.root
		for segment in path:
			node = node.children.get(segment)
			if node is None: return None
		return node

	def _make(self, path:Path) -> NameSpace:
		node = self.root
		for segment in path: node = node.new_child(segment)
		return node

	def _entry(self, path:Path, name:str) -> Optional[Entry]:
		node = self._find(path)
		if node is None: return None
		return node.local.get(name)

	def get_names(self, path:Path):
		node = self._find(path)
		return [] if node is None else list(node.local)

	def get_namespaces(self, path:Path):
		node = self._find(path)
		return [] if node is None else [s for s, child in node.children.items() if not child.is_empty()]

	def get_binding(self, path:Path, name:str, kind:Kind):
		entry = self._entry(path, name)
		if entry is None: return None
		if kind is Kind.SCALAR and kind not in entry.slots:
			entry.slots[kind] = Cell()
		return entry.slots.get(kind)

	def set_binding(self, path:Path, name:str, kind:Kind, value, *, stacklevel=2):
		node = self._make(path)
		entry = node.local.get(name)
		if entry is None: entry = node.local[name] = Entry()
		elif self.warn_on_redefine and entry.slots.get(kind) is not None:
			warnings.warn("%s %s redefined in %s"%(kind.name, name, '.'.join(path) or 'main'), RedefinitionWarning, stacklevel=stacklevel)
		entry.slots[kind] = value

	def declare(self, path:Path, name:str):
		""" Mention a name without binding anything to it. Has no effect on a name that already exists. """
		node = self._make(path)
		if name not in node.local: node.local[name] = Entry()

	def unset_binding(self, path:Path, name:str) -> Optional[Entry]:
		node = self._find(path)
		if node is None or name not in node.local: return None
		entry = node.local.pop(name)
		self._prune(path)
		return entry

	def _prune(self, path:Path):
		# Walk back up, removing namespaces left with nothing in them.
		while path:
			parent, node = self._find(path[:-1]), self._find(path)
			if not node.is_empty(): break
			del parent.children[path[-1]]
			path = path[:-1]

	def get_kind(self, path:Path, name:str) -> Optional[Kind]:
		entry = self._entry(path, name)
		if entry is None: return None
		for kind in SLOT_PRECEDENCE:
			if kind in entry.slots:
				return kind if kind_of(entry.slots[kind]) is kind else None
		return Kind.SCALAR

# This is the process-wide store that a symbol table uses unless you say otherwise.
GLOBAL = Registry()
