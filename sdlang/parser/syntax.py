# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Syntax-node view consumed by the decode layer.

The decoders never touch lark directly: they see `kind`, `span`, `text` and
ordered `children` through the `SyntaxNode` protocol. `LarkNode` adapts a
parsed lark tree lazily (children are wrapped on access, so no extra recursion
happens up front), and `Node` is a plain value implementing the same protocol
for hand-built trees in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence, Tuple, Union

from lark import Token, Tree

from sdlang.core.span import Span


class SyntaxNode(Protocol):
	"""A node of the parse tree as seen by the decoders."""

	@property
	def kind(self) -> str:
		"""Grammar rule name for inner nodes, terminal name for leaves."""
		...

	@property
	def span(self) -> Span:
		...

	@property
	def text(self) -> str:
		"""Exact source substring matched by this node."""
		...

	@property
	def children(self) -> Sequence["SyntaxNode"]:
		...


@dataclass(frozen=True)
class Node:
	"""Concrete, immutable syntax node (used for synthetic trees)."""

	kind: str
	text: str = ""
	children: Tuple["Node", ...] = ()
	span: Span = field(default_factory=Span)


class LarkNode:
	"""`SyntaxNode` adapter over a lark `Tree` or `Token` and its source text."""

	__slots__ = ("_node", "_source")

	def __init__(self, node: Union[Tree, Token], source: str) -> None:
		self._node = node
		self._source = source

	@property
	def kind(self) -> str:
		return _name(self._node)

	@property
	def span(self) -> Span:
		if isinstance(self._node, Token):
			return Span.from_loc(self._node)
		meta = self._node.meta
		if getattr(meta, "empty", True):
			return Span()
		return Span.from_loc(meta)

	@property
	def text(self) -> str:
		if isinstance(self._node, Token):
			return str(self._node)
		return self.span.slice(self._source)

	@property
	def children(self) -> Tuple["LarkNode", ...]:
		if isinstance(self._node, Token):
			return ()
		return tuple(LarkNode(child, self._source) for child in self._node.children)

	def __repr__(self) -> str:
		return f"LarkNode({self.kind!r}, {self.text!r})"


def _name(node: Union[Tree, Token]) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	return node.type


__all__ = ["LarkNode", "Node", "SyntaxNode"]
