# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
SDLang document model: values, attributes and tags.

`Value` is a closed family of frozen variants; exactly one payload type per
variant. `Tag` and `Attribute` are plain dataclasses: the decoder fills them
bottom-up and hands ownership to the caller, who may rearrange them freely.
`str()` of any of these produces the diagnostic rendering from
`sdlang.render`, which is not meant to be parsed back.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, List, Optional, Tuple

from sdlang import render


class Value:
	"""Base class of every SDLang value variant."""

	__slots__ = ()

	variant: ClassVar[str] = ""

	def __str__(self) -> str:
		return render.format_value(self)

	@staticmethod
	def of(obj: Any) -> "Value":
		"""
		Wrap a plain Python object in the matching variant.

		`None` maps to `Null`, `bool` to `Boolean` (checked before `int`),
		`datetime` to `DateTime` (checked before `date`). Values pass through.
		"""
		if isinstance(obj, Value):
			return obj
		if obj is None:
			return Null()
		if isinstance(obj, bool):
			return Boolean(obj)
		if isinstance(obj, int):
			return Number(obj)
		if isinstance(obj, float):
			return Decimal(obj)
		if isinstance(obj, str):
			return String(obj)
		if isinstance(obj, (bytes, bytearray)):
			return Base64(bytes(obj))
		if isinstance(obj, _dt.datetime):
			return DateTime(obj)
		if isinstance(obj, _dt.date):
			return Date(obj)
		if isinstance(obj, _dt.timedelta):
			return Duration(obj)
		raise TypeError(f"cannot convert {type(obj).__name__} to an SDLang value")

	@classmethod
	def parse(cls, text: str, **kwargs: Any) -> "Value":
		"""Parse a single value literal (see `sdlang.parse_value`)."""
		from sdlang.loader import parse_value

		return parse_value(text, **kwargs)


@dataclass(frozen=True)
class String(Value):
	"""Text; escaped and raw strings both land here."""

	value: str
	variant: ClassVar[str] = "string"


@dataclass(frozen=True)
class Base64(Value):
	"""Binary data decoded from a `[...]` literal."""

	value: bytes
	variant: ClassVar[str] = "base64"


@dataclass(frozen=True)
class Date(Value):
	"""Calendar date, no zone."""

	value: _dt.date
	variant: ClassVar[str] = "date"


@dataclass(frozen=True)
class DateTime(Value):
	"""Date and time with a fixed UTC offset."""

	value: _dt.datetime
	variant: ClassVar[str] = "datetime"

	def __post_init__(self) -> None:
		if self.value.utcoffset() is None:
			raise ValueError("DateTime values must carry a UTC offset")


@dataclass(frozen=True)
class Duration(Value):
	"""Non-negative elapsed time."""

	value: _dt.timedelta
	variant: ClassVar[str] = "duration"

	def __post_init__(self) -> None:
		if self.value < _dt.timedelta(0):
			raise ValueError("Duration values cannot be negative")


@dataclass(frozen=True)
class Number(Value):
	"""Signed integer (up to 128 bits)."""

	value: int
	variant: ClassVar[str] = "number"


@dataclass(frozen=True)
class Decimal(Value):
	"""Floating-point number (64-bit)."""

	value: float
	variant: ClassVar[str] = "decimal"


@dataclass(frozen=True)
class Boolean(Value):
	value: bool
	variant: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class Null(Value):
	variant: ClassVar[str] = "null"

	@property
	def value(self) -> None:
		return None


@dataclass
class Attribute:
	"""A named value attached to a tag."""

	name: str
	value: Value

	def __str__(self) -> str:
		return render.format_attribute(self)

	@classmethod
	def from_pair(cls, pair: Tuple[str, Any]) -> "Attribute":
		"""Build from a `(name, value)` pair; plain objects are wrapped via `Value.of`."""
		name, value = pair
		return cls(name, Value.of(value))

	def as_pair(self) -> Tuple[str, Value]:
		return (self.name, self.value)

	@classmethod
	def parse(cls, text: str, **kwargs: Any) -> "Attribute":
		"""Parse a single `name=value` fragment (see `sdlang.parse_attribute`)."""
		from sdlang.loader import parse_attribute

		return parse_attribute(text, **kwargs)


@dataclass
class Tag:
	"""
	A named, optionally namespaced node with values, attributes and child tags.

	An anonymous tag (a statement made only of values) has `name == ""`. The
	document root returned by `sdlang.parse_text` is also anonymous and only
	ever populates `tags`.

	Keyword construction doubles as the builder:

		Tag("contents", values=[String("x")], tags=[Tag("section")])
	"""

	name: str = ""
	namespace: Optional[str] = None
	values: List[Value] = field(default_factory=list)
	attrs: List[Attribute] = field(default_factory=list)
	tags: List["Tag"] = field(default_factory=list)

	def __str__(self) -> str:
		return render.format_tag(self)

	@property
	def qualified_name(self) -> str:
		if self.namespace is None:
			return self.name
		return f"{self.namespace}:{self.name}"

	def attr(self, name: str) -> Optional[Attribute]:
		"""First attribute called `name`, in source order, or None."""
		return next((a for a in self.attrs if a.name == name), None)

	def attr_value(self, name: str, default: Any = None) -> Any:
		"""Python payload of the first attribute called `name`, or `default`."""
		found = self.attr(name)
		if found is None:
			return default
		return found.value.value

	def tag(self, name: str) -> Optional["Tag"]:
		"""First child tag called `name`, in source order, or None."""
		return next((t for t in self.tags if t.name == name), None)

	def tags_named(self, name: str) -> Iterable["Tag"]:
		return (t for t in self.tags if t.name == name)

	@classmethod
	def parse(cls, text: str, **kwargs: Any) -> "Tag":
		"""Parse a single tag statement (see `sdlang.parse_tag`)."""
		from sdlang.loader import parse_tag

		return parse_tag(text, **kwargs)


__all__ = [
	"Attribute",
	"Base64",
	"Boolean",
	"Date",
	"DateTime",
	"Decimal",
	"Duration",
	"Null",
	"Number",
	"String",
	"Tag",
	"Value",
]
