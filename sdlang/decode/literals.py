# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Literal decoders: one function per SDLang literal kind.

Each decoder takes the syntax node of its own grammar rule and returns the
Python payload (or a `Value` for `decode_value`). Conversion failures a user
can cause (overflow, impossible dates, bad base64) raise `ParseError` with the
node's span. Shapes the grammar cannot produce raise `DecoderInvariantError`.
"""

from __future__ import annotations

import base64 as _b64
import binascii
import datetime as _dt
import math
import re
import struct
from fractions import Fraction
from typing import Callable, Dict

from sdlang import types as T
from sdlang.core.errors import DecoderInvariantError, ParseError
from sdlang.parser.syntax import SyntaxNode
from sdlang.tz import OffsetResolver

RAW_DELIMITER = "`"

# The grammar's escape alphabet. An escaped line break reads as "\n".
ESCAPES: Dict[str, str] = {
	"n": "\n",
	"\n": "\n",
	"r": "\r",
	"t": "\t",
	"\\": "\\",
	"0": "\x00",
	'"': '"',
	"'": "'",
}

# Signed bit width per integer suffix.
NUMBER_WIDTHS: Dict[str, int] = {
	"": 32,
	"L": 64,
	"BD": 128,
}

# ASCII only; int() and float() would also take other Unicode digits.
_INTEGER_DIGITS = re.compile(r"-?[0-9]+")
_DECIMAL_DIGITS = re.compile(r"-?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?")
_DAY_DIGITS = re.compile(r"[0-9]+")

_FLOAT32_MAX_BITS = 0x7F7FFFFF
# Halfway between the largest binary32 and 2**128; ties here round to infinity.
_FLOAT32_OVERFLOW = Fraction(2**128 - 2**103)
# A quarter of the smallest binary32 subnormal; anything smaller rounds to zero.
_FLOAT32_ZERO_BELOW = 2.0**-151


def _only_child(node: SyntaxNode) -> SyntaxNode:
	children = node.children
	if len(children) != 1:
		raise DecoderInvariantError(
			f"'{node.kind}' node must have exactly one child, found {len(children)}",
			kind=node.kind,
			span=node.span,
		)
	return children[0]


def _unexpected(node: SyntaxNode, context: str) -> DecoderInvariantError:
	return DecoderInvariantError(
		f"unexpected '{node.kind}' node in {context}: {node.text!r}",
		kind=node.kind,
		span=node.span,
	)


def decode_string(node: SyntaxNode) -> str:
	"""Strip the delimiters and, unless raw, resolve backslash escapes."""
	text = node.text
	if len(text) < 2 or text[0] != text[-1]:
		raise _unexpected(node, "string literal")
	body = text[1:-1]
	if text[0] == RAW_DELIMITER:
		return body

	out: list[str] = []
	escaped = False
	for ch in body:
		if escaped:
			resolved = ESCAPES.get(ch)
			if resolved is None:
				raise DecoderInvariantError(
					f"escape '\\{ch}' is outside the string escape alphabet",
					kind=node.kind,
					span=node.span,
				)
			out.append(resolved)
			escaped = False
		elif ch == "\\":
			escaped = True
		else:
			out.append(ch)
	if escaped:
		raise DecoderInvariantError("string literal ends inside an escape", kind=node.kind, span=node.span)
	return "".join(out)


def decode_number(node: SyntaxNode) -> int:
	"""
	Decode an integer at the width its suffix selects.

	No suffix is a 32-bit literal, `L` is 64-bit, `BD` is 128-bit; all are
	returned as plain ints. Digits that do not fit the selected width are an
	error even though the result type could hold them.
	"""
	children = node.children
	if not children or len(children) > 2:
		raise _unexpected(node, "number literal")
	digits = children[0]
	suffix = children[1].text if len(children) == 2 else ""
	bits = NUMBER_WIDTHS.get(suffix)
	if bits is None:
		raise _unexpected(children[1], "number suffix")
	text = digits.text
	if not _INTEGER_DIGITS.fullmatch(text):
		raise _unexpected(digits, "number digits")
	number = int(text)
	bound = 1 << (bits - 1)
	if not -bound <= number < bound:
		raise ParseError(
			f"Error in parsing '{text}' as a {bits}-bit number (too large?)",
			span=digits.span,
		)
	return number


def _float32_bits(value: float) -> int:
	return struct.unpack("<I", struct.pack("<f", value))[0]


def _float32_from_bits(bits: int) -> float:
	return struct.unpack("<f", struct.pack("<I", bits))[0]


def _to_float32(text: str) -> float:
	"""
	Round decimal `text` straight to the nearest binary32 value, ties to even.

	The binary64 reading of `text` can sit exactly on a binary32 halfway point
	and then round the wrong way, so it is only used as a first guess: the
	guess and its two binary32 neighbours are compared against the exact value.
	Raises OverflowError when the result would be infinite.
	"""
	approx = float(text)
	negative = text.startswith("-")
	if abs(approx) < _FLOAT32_ZERO_BELOW:
		return -0.0 if negative else 0.0
	exact = abs(Fraction(text))
	if exact >= _FLOAT32_OVERFLOW:
		raise OverflowError(f"{text} is out of binary32 range")
	bits = _float32_bits(abs(approx))
	candidates = [bits]
	if bits > 0:
		candidates.append(bits - 1)
	if bits < _FLOAT32_MAX_BITS:
		candidates.append(bits + 1)
	best = min(candidates, key=lambda b: (abs(Fraction(_float32_from_bits(b)) - exact), b & 1))
	result = _float32_from_bits(best)
	return -result if negative else result


def decode_decimal(node: SyntaxNode) -> float:
	"""Decode a decimal: 32-bit precision without a suffix, 64-bit with `f`."""
	children = node.children
	if not children or len(children) > 2:
		raise _unexpected(node, "decimal literal")
	digits = children[0]
	suffix = children[1].text if len(children) == 2 else ""
	if suffix not in ("", "f"):
		raise _unexpected(children[1], "decimal suffix")
	text = digits.text
	if not _DECIMAL_DIGITS.fullmatch(text):
		raise _unexpected(digits, "decimal digits")
	error = ParseError(
		f"Error in parsing '{text}' as a {'64' if suffix else '32'}-bit decimal (too large?)",
		span=digits.span,
	)
	try:
		number = float(text)
		if not suffix and math.isfinite(number):
			number = _to_float32(text)
	except OverflowError:
		raise error from None
	if not math.isfinite(number):
		raise error
	return number


def decode_boolean(node: SyntaxNode) -> bool:
	spelling = _only_child(node)
	if spelling.kind == "bool_true":
		return True
	if spelling.kind == "bool_false":
		return False
	raise _unexpected(spelling, "boolean literal")


def decode_date(node: SyntaxNode) -> _dt.date:
	text = node.text
	try:
		return _dt.datetime.strptime(text, "%Y/%m/%d").date()
	except ValueError:
		raise ParseError(f"Error in parsing '{text}' into a date!", span=node.span) from None


def decode_time(node: SyntaxNode) -> _dt.time:
	"""`HH:MM:SS`, or `HH:MM:SS.mmm` when the node has a millisecond child."""
	text = node.text
	fmt = "%H:%M:%S.%f" if len(node.children) > 1 else "%H:%M:%S"
	try:
		return _dt.datetime.strptime(text, fmt).time()
	except ValueError:
		raise ParseError(f"Error in parsing '{text}' into a time!", span=node.span) from None


def decode_datetime(node: SyntaxNode, resolver: OffsetResolver) -> _dt.datetime:
	"""
	Combine date and time and attach a fixed offset.

	With `-UTC` the offset is zero. Otherwise `resolver` supplies the offset
	for this particular wall-clock instant.
	"""
	children = node.children
	if len(children) not in (2, 3):
		raise _unexpected(node, "datetime literal")
	date_node, time_node = children[0], children[1]
	if date_node.kind != "date" or time_node.kind != "time":
		raise _unexpected(node, "datetime literal")
	naive = _dt.datetime.combine(decode_date(date_node), decode_time(time_node))
	if len(children) == 3:
		if children[2].kind != "UTC":
			raise _unexpected(children[2], "datetime zone marker")
		return naive.replace(tzinfo=_dt.timezone.utc)
	try:
		offset = resolver(naive)
		zone = _dt.timezone(offset)
	except (ValueError, OverflowError, OSError) as err:
		raise ParseError(
			f"Could not resolve a UTC offset for '{node.text}': {err}",
			span=node.span,
		) from err
	return naive.replace(tzinfo=zone)


def decode_duration(node: SyntaxNode) -> _dt.timedelta:
	"""Read `[Nd:]HH:MM:SS[.mmm]` as an elapsed amount of time."""
	days = 0
	clock = _dt.time()
	for part in node.children:
		if part.kind == "days":
			count = _only_child(part)
			if not _DAY_DIGITS.fullmatch(count.text):
				raise _unexpected(count, "day count")
			days = int(count.text)
		elif part.kind == "time":
			clock = decode_time(part)
		else:
			raise _unexpected(part, "duration literal")
	try:
		return _dt.timedelta(
			days=days,
			hours=clock.hour,
			minutes=clock.minute,
			seconds=clock.second,
			microseconds=clock.microsecond,
		)
	except OverflowError:
		raise ParseError(f"Could not parse days from '{node.text}'!", span=node.span) from None


def decode_base64(node: SyntaxNode) -> bytes:
	"""Strip the brackets and any whitespace, then decode standard base64."""
	text = node.text
	if len(text) < 2 or text[0] != "[" or text[-1] != "]":
		raise _unexpected(node, "base64 literal")
	payload = "".join(text[1:-1].split())
	try:
		return _b64.b64decode(payload, validate=True)
	except (binascii.Error, ValueError) as err:
		raise ParseError(f"Error in parsing Base64: {err}", span=node.span) from err


def decode_ident(node: SyntaxNode) -> str:
	return node.text


def _decode_null(node: SyntaxNode) -> None:
	return None


_VALUE_DECODERS: Dict[str, Callable[[SyntaxNode], object]] = {
	"string": decode_string,
	"base64": decode_base64,
	"date": decode_date,
	"duration": decode_duration,
	"number": decode_number,
	"decimal": decode_decimal,
	"boolean": decode_boolean,
	"null": _decode_null,
}

_VALUE_VARIANTS: Dict[str, Callable[[object], T.Value]] = {
	"string": T.String,
	"base64": T.Base64,
	"date": T.Date,
	"datetime": T.DateTime,
	"duration": T.Duration,
	"number": T.Number,
	"decimal": T.Decimal,
	"boolean": T.Boolean,
	"null": lambda _payload: T.Null(),
}


def decode_value(node: SyntaxNode, resolver: OffsetResolver) -> T.Value:
	"""Decode a `value` node into the matching `Value` variant."""
	literal = _only_child(node)
	kind = literal.kind
	if kind == "datetime":
		payload: object = decode_datetime(literal, resolver)
	else:
		decoder = _VALUE_DECODERS.get(kind)
		if decoder is None:
			raise _unexpected(literal, "value")
		payload = decoder(literal)
	return _VALUE_VARIANTS[kind](payload)


__all__ = [
	"ESCAPES",
	"NUMBER_WIDTHS",
	"decode_base64",
	"decode_boolean",
	"decode_date",
	"decode_datetime",
	"decode_duration",
	"decode_decimal",
	"decode_ident",
	"decode_number",
	"decode_string",
	"decode_time",
	"decode_value",
]
