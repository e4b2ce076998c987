# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Public decode entry points.

`parse_text` decodes a whole document held in memory; `parse_file` reads a
path or stream completely and delegates to it. The `parse_value`,
`parse_attribute` and `parse_tag` helpers decode a standalone fragment that
matches exactly one grammar rule.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Optional, Union

from sdlang import types as T
from sdlang.config import DEFAULT_OPTIONS, DecodeOptions
from sdlang.core.errors import ParseError
from sdlang.core.span import Span
from sdlang.decode import build_root, decode_attribute, decode_tag, decode_tagtree, decode_value
from sdlang.parser import parse_rule

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", IO[bytes], IO[str]]


def parse_text(text: str, *, options: Optional[DecodeOptions] = None) -> T.Tag:
	"""
	Parse a document into its root tag.

	The root is anonymous (`name == ""`), has no namespace, values or
	attributes, and owns the top-level tags in source order.
	"""
	opts = options or DEFAULT_OPTIONS
	tree = parse_rule("tagtree", text)
	try:
		tags = decode_tagtree(tree, opts)
	except ParseError as err:
		logger.debug("decode failed at %s: %s", err.span.describe(), err.message)
		raise
	logger.debug("decoded %d top-level tag(s)", len(tags))
	return build_root(tags)


def _read_all(source: Source, encoding: str) -> str:
	if isinstance(source, (str, os.PathLike)):
		with open(source, "rb") as fh:
			data: Union[str, bytes] = fh.read()
	else:
		data = source.read()
	if isinstance(data, str):
		return data
	try:
		return data.decode(encoding)
	except UnicodeDecodeError as err:
		raise ParseError(
			f"input is not valid {encoding}: {err.reason}",
			span=Span(start=err.start, end=err.end),
			stage="syntax",
		) from err


def parse_file(source: Source, *, options: Optional[DecodeOptions] = None, encoding: str = "utf-8") -> T.Tag:
	"""
	Read all of `source` (a path or an open stream) and parse it.

	I/O failures propagate as `OSError`; only undecodable bytes and
	malformed SDLang become `ParseError`.
	"""
	return parse_text(_read_all(source, encoding), options=options)


def parse_value(text: str, *, options: Optional[DecodeOptions] = None) -> T.Value:
	opts = options or DEFAULT_OPTIONS
	return decode_value(parse_rule("value", text), opts.resolver)


def parse_attribute(text: str, *, options: Optional[DecodeOptions] = None) -> T.Attribute:
	return decode_attribute(parse_rule("attribute", text), options or DEFAULT_OPTIONS)


def parse_tag(text: str, *, options: Optional[DecodeOptions] = None) -> T.Tag:
	return decode_tag(parse_rule("tag", text), options or DEFAULT_OPTIONS)


__all__ = ["parse_attribute", "parse_file", "parse_tag", "parse_text", "parse_value"]
