# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""SDLang grammar engine (lark) and the syntax-node view handed to the decoders."""

from .parser import START_RULES, parse_rule
from .syntax import LarkNode, Node, SyntaxNode

__all__ = ["LarkNode", "Node", "START_RULES", "SyntaxNode", "parse_rule"]
