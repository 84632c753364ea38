"""
This file aggregates the vocabulary the rest of tie-symbol deals in:
the kinds of binding, the boxed scalar, the exception types, and
the abstract binding store.

A symbol table view never owns the values it shows you. It asks a BindingStore.
The methods on BindingStore are exactly those the view needs, without regard
to how the store is organized. The registry module supplies one concrete
store, but nothing prevents you from plugging in another.
"""

from collections.abc import MutableMapping, MutableSequence
from enum import Enum
from typing import Optional, Iterable

class Kind(Enum):
	SCALAR = "SCALAR"
	SEQUENCE = "SEQUENCE"
	MAP = "MAP"
	CALLABLE = "CALLABLE"

# When an entry holds several slots, enumeration reports it under the first of these.
SLOT_PRECEDENCE = (Kind.SEQUENCE, Kind.MAP, Kind.CALLABLE, Kind.SCALAR)

class Cell:
	"""
	A scalar lives in a box, so that a scalar binding can be shared, rebound,
	and detached just like a list or a dict. Two cells are equal if they hold
	equal values, but a cell is still a distinct reference.
	"""
	__slots__ = ('value',)
	def __init__(self, value=None): self.value = value
	def __eq__(self, other): return isinstance(other, Cell) and self.value == other.value
	__hash__ = None
	def __repr__(self): return 'Cell(%r)'%(self.value,)

def kind_of(value) -> Optional[Kind]:
	""" Return the Kind of a reference value, or None for anything that is not a reference. """
	if isinstance(value, Cell): return Kind.SCALAR
	if isinstance(value, MutableSequence): return Kind.SEQUENCE
	if isinstance(value, MutableMapping): return Kind.MAP
	if callable(value): return Kind.CALLABLE
	return None


class SymbolTableError(ValueError):
	""" Base class of all exceptions arising from the symbol table machinery. """

class InvalidIdentifier(SymbolTableError):
	""" Raised when a key (or a namespace path) is not something you can assign through. """

class TypeMismatch(SymbolTableError, TypeError):
	""" Raised when a value does not fit the kind its sigil declares. """

class CorruptBinding(SymbolTableError):
	"""
	Raised when enumeration finds a binding whose value has none of the four kinds.
	Parameters are:
		the dotted name of the namespace being enumerated.
		the offending name within it.
	"""
	def __init__(self, namespace, name):
		super().__init__("not a valid symbol: %s.%s"%(namespace, name))
		self.namespace, self.name = namespace, name

class RedefinitionWarning(UserWarning):
	""" Issued by a registry configured to complain when a bound slot gets replaced. """


Path = tuple[str, ...]

class BindingStore:
	"""
	This interface captures the operations a symbol table view performs on the store.
	Paths are tuples of identifier segments; the empty tuple is the root namespace.
	No validation is implied: the view checks kinds before it calls set_binding.
	"""
	def get_names(self, path:Path) -> Iterable[str]:
		""" Return the labels bound (in any slot, or merely declared) directly in the namespace at `path`. """
		raise NotImplementedError(type(self))

	def get_namespaces(self, path:Path) -> Iterable[str]:
		""" Return the segments of non-empty namespaces nested directly under `path`. """
		raise NotImplementedError(type(self))

	def get_binding(self, path:Path, name:str, kind:Kind):
		""" Return the value in the `kind` slot of `name`, or None if unbound. """
		raise NotImplementedError(type(self))

	def set_binding(self, path:Path, name:str, kind:Kind, value, *, stacklevel=2):
		"""
		Rebind the `kind` slot of `name`, creating the name (and namespace) as needed.
		Any warning the store issues is attributed `stacklevel` frames up, as with warnings.warn.
		"""
		raise NotImplementedError(type(self))

	def unset_binding(self, path:Path, name:str):
		""" Forget `name` entirely. The values are detached, not destroyed. Return whatever was removed, or None. """
		raise NotImplementedError(type(self))

	def get_kind(self, path:Path, name:str) -> Optional[Kind]:
		""" Report the kind `name` should be listed under, or None if the store holds something uninterpretable. """
		raise NotImplementedError(type(self))
