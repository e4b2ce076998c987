# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Decode layer: literal decoders and the tag/attribute assembler."""

from .literals import (
	decode_base64,
	decode_boolean,
	decode_date,
	decode_datetime,
	decode_decimal,
	decode_duration,
	decode_ident,
	decode_number,
	decode_string,
	decode_time,
	decode_value,
)
from .tree import (
	build_root,
	decode_attribute,
	decode_namespace,
	decode_tag,
	decode_tagtree,
	decode_tags,
)

__all__ = [
	"build_root",
	"decode_attribute",
	"decode_base64",
	"decode_boolean",
	"decode_date",
	"decode_datetime",
	"decode_decimal",
	"decode_duration",
	"decode_ident",
	"decode_namespace",
	"decode_number",
	"decode_string",
	"decode_tag",
	"decode_tagtree",
	"decode_tags",
	"decode_time",
	"decode_value",
]
