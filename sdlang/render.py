# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Human-readable dump of SDLang values and tag trees.

This is a debugging aid, not a serializer: strings are re-quoted without
escaping, bytes print as hex lists, and nothing here promises the output can
be parsed again. The layout is:

	tag "<namespace>:<name>": <values>, [<attr>: <value>]
	* <child>
	  * <grandchild>
	* <child>
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from sdlang.types import Attribute, Tag, Value


def _format_offset(offset: _dt.timedelta) -> str:
	sign = "-" if offset < _dt.timedelta(0) else "+"
	total = abs(int(offset.total_seconds()))
	hours, rest = divmod(total, 3600)
	minutes, seconds = divmod(rest, 60)
	text = f"{sign}{hours:02d}:{minutes:02d}"
	if seconds:
		text += f":{seconds:02d}"
	return text


def format_datetime(value: _dt.datetime) -> str:
	text = value.strftime("%Y-%m-%d %H:%M:%S")
	if value.microsecond:
		text += f".{value.microsecond // 1000:03d}"
	offset = value.utcoffset()
	if offset is not None:
		text += " " + _format_offset(offset)
	return text


def format_value(value: "Value") -> str:
	kind = value.variant
	if kind == "string":
		return f'"{value.value}"'
	if kind == "base64":
		return "[" + ", ".join(f"{byte:x}" for byte in value.value) + "]"
	if kind == "date":
		return value.value.isoformat()
	if kind == "datetime":
		return format_datetime(value.value)
	if kind == "duration":
		return str(value.value)
	if kind in ("number", "decimal"):
		return repr(value.value)
	if kind == "boolean":
		return "true" if value.value else "false"
	if kind == "null":
		return "null"
	raise TypeError(f"not an SDLang value: {value!r}")


def format_attribute(attr: "Attribute") -> str:
	return f"{attr.name}: {format_value(attr.value)}"


def format_tag(tag: "Tag") -> str:
	parts = [format_value(v) for v in tag.values]
	parts.extend(f"[{format_attribute(a)}]" for a in tag.attrs)
	lines = [f'tag "{tag.qualified_name}": ' + ", ".join(parts)]
	for child in tag.tags:
		lines.append("* " + format_tag(child).replace("\n", "\n  "))
	return "\n".join(lines)


__all__ = ["format_attribute", "format_datetime", "format_tag", "format_value"]
