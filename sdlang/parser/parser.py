# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
lark binding for the SDLang grammar.

One LALR parser is compiled at import time with a start symbol for every rule
the public entry points (and the literal tests) need. Syntax errors leave this
module as `ParseError`; everything else about the tree is the decode layer's
business.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark
from lark.exceptions import UnexpectedInput

from sdlang.core.errors import ParseError

from .syntax import LarkNode

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

# Rules that may be parsed as standalone fragments.
START_RULES = (
	"tagtree",
	"tags",
	"tag",
	"attribute",
	"ident",
	"value",
	"string",
	"base64",
	"date",
	"time",
	"datetime",
	"duration",
	"number",
	"decimal",
	"boolean",
	"null",
)

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start=list(START_RULES),
	propagate_positions=True,
	maybe_placeholders=False,
)
logger.debug("compiled SDLang grammar from %s", _GRAMMAR_PATH)


def parse_rule(rule: str, source: str) -> LarkNode:
	"""
	Parse `source` as a whole instance of grammar rule `rule`.

	Returns the syntax tree wrapped as a `SyntaxNode`. Raises `ParseError` when
	the text does not match, and `ValueError` for a rule name that is not a
	start symbol.
	"""
	if rule not in START_RULES:
		raise ValueError(f"unknown start rule {rule!r}; expected one of {', '.join(START_RULES)}")
	try:
		tree = _PARSER.parse(source, start=rule)
	except UnexpectedInput as err:
		logger.debug("syntax error while parsing %s: %s", rule, err)
		raise ParseError.from_lark(err) from err
	return LarkNode(tree, source)


__all__ = ["START_RULES", "parse_rule"]
