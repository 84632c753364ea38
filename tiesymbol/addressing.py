"""
Keys into a symbol table say two things at once: what kind of binding you mean, and where it lives.

The kind rides along as a one-character sigil in front of the label:

	$count   a scalar cell
	@items   a sequence
	%config  a map
	&greet   a callable
	Inner    (no sigil) the nested namespace called Inner

A label may be qualified with dots, so that "&A.B.f" reaches through nested
namespaces A and B to the callable f, and the bare key "A.B" names the
namespace itself. Namespace paths are written the same way. The root namespace
is called "main", and any leading "main" segments on a path are just noise.
"""

import re
from typing import NamedTuple, Optional, Union

from .interfaces import Kind, Path, InvalidIdentifier

ROOT_NAME = 'main'

SIGILS = {
	Kind.SCALAR: '$',
	Kind.SEQUENCE: '@',
	Kind.MAP: '%',
	Kind.CALLABLE: '&',
}
KINDS = {sigil:kind for kind, sigil in SIGILS.items()}

PATH_DELIMITER = re.compile(r'::|\.')

class TypedKey(NamedTuple):
	""" Addresses the `kind` slot of `label`, within the namespace `path` relative to wherever you are. """
	kind: Kind
	path: Path
	label: str

class NamespaceKey(NamedTuple):
	""" Addresses a nested namespace, relative to wherever you are. """
	path: Path

SymbolKey = Union[TypedKey, NamespaceKey]

def sigil_for_kind(kind:Kind) -> str: return SIGILS[kind]
def kind_for_sigil(sigil:str) -> Kind: return KINDS[sigil]

def _split(text:str) -> Optional[Path]:
	segments = tuple(PATH_DELIMITER.split(text))
	if all(s.isidentifier() for s in segments): return segments
	return None

def parse_key(text) -> Optional[SymbolKey]:
	"""
	Work out what a key string means. Returns None if it means nothing at all;
	whether that's a lookup miss or an error is up to the caller.
	"""
	if not isinstance(text, str) or not text: return None
	if text[0] in KINDS:
		segments = _split(text[1:])
		if segments is None: return None
		return TypedKey(KINDS[text[0]], segments[:-1], segments[-1])
	segments = _split(text)
	if segments is None: return None
	return NamespaceKey(segments)

def format_key(kind:Optional[Kind], label:str) -> str:
	""" The inverse of parse_key for unqualified labels. A kind of None formats a namespace reference. """
	if kind is None: return label
	return SIGILS[kind] + label

def strip_root(segments:Path) -> Path:
	""" Drop leading "main" segments: main.main.A is just A. """
	while segments[:1] == (ROOT_NAME,): segments = segments[1:]
	return segments

def parse_path(text:Optional[str]) -> Path:
	""" Convert "A.B" (or "A::B", or "main.A.B", or a tuple of segments) to ('A', 'B'). None and "main" both mean the root. """
	if text is None: return ()
	if isinstance(text, str):
		segments = () if text == '' else _split(text)
		if segments is None: raise InvalidIdentifier("%r is not a valid namespace"%text)
	else: segments = tuple(text)
	return strip_root(segments)

def format_path(path:Path) -> str:
	return '.'.join(path) if path else ROOT_NAME
