# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Folds syntax nodes into `Attribute` and `Tag` structures.

Tags are assembled bottom-up: a nested `{ ... }` list is fully decoded before
it is attached to its parent. The first failure anywhere aborts the whole
decode, so callers never see a partially built list.
"""

from __future__ import annotations

from typing import List

from sdlang import types as T
from sdlang.config import DEFAULT_OPTIONS, DecodeOptions
from sdlang.core.errors import DecoderInvariantError, ParseError
from sdlang.parser.syntax import SyntaxNode

from .literals import decode_ident, decode_value


def _expect(node: SyntaxNode, kind: str, context: str) -> SyntaxNode:
	if node.kind != kind:
		raise DecoderInvariantError(
			f"expected '{kind}' in {context}, found '{node.kind}': {node.text!r}",
			kind=node.kind,
			span=node.span,
		)
	return node


def decode_attribute(node: SyntaxNode, options: DecodeOptions = DEFAULT_OPTIONS) -> T.Attribute:
	children = node.children
	if len(children) != 2:
		raise DecoderInvariantError(
			f"attribute node must have a name and a value, found {len(children)} children",
			kind=node.kind,
			span=node.span,
		)
	name = decode_ident(_expect(children[0], "ident", "attribute name"))
	value = decode_value(_expect(children[1], "value", "attribute value"), options.resolver)
	return T.Attribute(name, value)


def decode_namespace(node: SyntaxNode) -> str:
	children = node.children
	if not children:
		raise DecoderInvariantError("namespace node has no identifier", kind=node.kind, span=node.span)
	return decode_ident(_expect(children[0], "ident", "namespace"))


def decode_tag(node: SyntaxNode, options: DecodeOptions = DEFAULT_OPTIONS, *, depth: int = 1) -> T.Tag:
	"""
	Fold a `tag` node's children, in source order, into a fresh `Tag`.

	`depth` is the nesting level of this tag (1 for top-level statements).
	A tag without an identifier child stays anonymous (`name == ""`).
	"""
	tag = T.Tag()
	for child in node.children:
		kind = child.kind
		if kind == "namespace":
			tag.namespace = decode_namespace(child)
		elif kind == "ident":
			tag.name = decode_ident(child)
		elif kind == "value":
			tag.values.append(decode_value(child, options.resolver))
		elif kind == "attribute":
			tag.attrs.append(decode_attribute(child, options))
		elif kind == "tags":
			tag.tags.extend(decode_tags(child, options, depth=depth + 1))
		else:
			raise DecoderInvariantError(
				f"unexpected '{kind}' node inside a tag: {child.text!r}",
				kind=kind,
				span=child.span,
			)
	return tag


def decode_tags(node: SyntaxNode, options: DecodeOptions = DEFAULT_OPTIONS, *, depth: int = 1) -> List[T.Tag]:
	"""Decode a sibling list; the first failing tag aborts the whole list."""
	if depth > options.max_depth:
		raise ParseError(
			f"tag nesting exceeds the maximum depth of {options.max_depth}",
			span=node.span,
		)
	return [decode_tag(_expect(child, "tag", "tag list"), options, depth=depth) for child in node.children]


def decode_tagtree(node: SyntaxNode, options: DecodeOptions = DEFAULT_OPTIONS) -> List[T.Tag]:
	"""Decode a whole document into its top-level tags."""
	children = node.children
	if len(children) != 1:
		raise DecoderInvariantError(
			f"document node must wrap exactly one tag list, found {len(children)} children",
			kind=node.kind,
			span=node.span,
		)
	return decode_tags(_expect(children[0], "tags", "document"), options)


def build_root(tags: List[T.Tag]) -> T.Tag:
	"""Wrap top-level tags in a fresh anonymous root."""
	return T.Tag(name="", namespace=None, tags=list(tags))


__all__ = [
	"build_root",
	"decode_attribute",
	"decode_namespace",
	"decode_tag",
	"decode_tagtree",
	"decode_tags",
]
