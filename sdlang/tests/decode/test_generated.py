# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generated round trips.

Every strategy yields `(text, expected)` pairs: SDLang source built from a
random model, and the model the decoder has to give back for it.
"""

from __future__ import annotations

import base64
import dataclasses
import datetime as dt

from hypothesis import HealthCheck, given, settings, strategies as st

import sdlang
from sdlang import types as T
from sdlang.config import DecodeOptions
from sdlang.decode import decode_time
from sdlang.parser import parse_rule
from sdlang.tz import FixedOffsetResolver

LOCAL = dt.timedelta(hours=-5)
OPTIONS = DecodeOptions(resolver=FixedOffsetResolver(LOCAL))

RESERVED = {"true", "false", "on", "off", "null"}
ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\", "0": "\x00", '"': '"', "'": "'", "\n": "\n"}

gap = st.text(alphabet=" \t", min_size=1, max_size=3)
blank = st.text(alphabet=" \t", max_size=3)
separator = st.builds(lambda a, sep, b: a + sep + b, blank, st.sampled_from([";", "\n"]), blank)


def _float_text(value: float) -> str:
	mantissa, e, exponent = repr(value).partition("e")
	if "." not in mantissa:
		mantissa += ".0"
	return mantissa + e + exponent


# Literals


@st.composite
def strings(draw):
	if draw(st.booleans()):
		body = draw(st.text(st.characters(exclude_categories=("Cs",), exclude_characters="`")))
		return f"`{body}`", body
	pieces = draw(
		st.lists(
			st.one_of(
				st.text(st.characters(exclude_categories=("Cs",), exclude_characters='"\\\n'), min_size=1),
				st.sampled_from(sorted(ESCAPES)).map(lambda ch: "\\" + ch),
			)
		)
	)
	expected = "".join(ESCAPES[p[1]] if p.startswith("\\") else p for p in pieces)
	return '"' + "".join(pieces) + '"', expected


@st.composite
def numbers(draw):
	suffix = draw(st.sampled_from(["", "L", "BD"]))
	bound = 1 << ({"": 32, "L": 64, "BD": 128}[suffix] - 1)
	n = draw(st.integers(min_value=-bound, max_value=bound - 1))
	return f"{n}{suffix}", n


@st.composite
def decimals(draw):
	if draw(st.booleans()):
		# Values a binary32 holds exactly read back unchanged without a suffix.
		x = draw(st.floats(width=32, allow_nan=False, allow_infinity=False))
		return _float_text(x), x
	x = draw(st.floats(allow_nan=False, allow_infinity=False))
	return _float_text(x) + "f", x


booleans = st.sampled_from([("true", True), ("on", True), ("false", False), ("off", False)])

# datetime.date starts at year 1.
dates = st.dates().map(lambda d: (f"{d.year:04d}/{d.month:02d}/{d.day:02d}", d))


@st.composite
def times(draw):
	h = draw(st.integers(0, 23))
	m = draw(st.integers(0, 59))
	s = draw(st.integers(0, 59))
	text = f"{h:02d}:{m:02d}:{s:02d}"
	if draw(st.booleans()):
		ms = draw(st.integers(0, 999))
		return f"{text}.{ms:03d}", dt.time(h, m, s, ms * 1000)
	return text, dt.time(h, m, s)


@st.composite
def datetimes(draw):
	date_text, date = draw(dates)
	time_text, time = draw(times())
	naive = dt.datetime.combine(date, time)
	if draw(st.booleans()):
		return f"{date_text}{draw(gap)}{time_text}-UTC", naive.replace(tzinfo=dt.timezone.utc)
	return f"{date_text}{draw(gap)}{time_text}", naive.replace(tzinfo=dt.timezone(LOCAL))


@st.composite
def durations(draw, with_days=None):
	if with_days is None:
		with_days = draw(st.booleans())
	time_text, time = draw(times())
	clock = dt.timedelta(hours=time.hour, minutes=time.minute, seconds=time.second, microseconds=time.microsecond)
	if not with_days:
		return time_text, clock
	# timedelta tops out at 999999999 days.
	days = draw(st.integers(0, 999999999))
	return f"{days}d:{time_text}", clock + dt.timedelta(days=days)


@st.composite
def base64s(draw):
	data = draw(st.binary(max_size=255))
	encoded = base64.b64encode(data).decode("ascii")
	groups = [encoded[i:i + 4] for i in range(0, len(encoded), 4)]
	return "[" + "".join(group + draw(blank) for group in groups) + "]", data


def values(with_bare_durations=True):
	"""Any value literal, as `(text, Value)`."""
	return st.one_of(
		st.just(("null", T.Null())),
		booleans.map(lambda p: (p[0], T.Boolean(p[1]))),
		numbers().map(lambda p: (p[0], T.Number(p[1]))),
		decimals().map(lambda p: (p[0], T.Decimal(p[1]))),
		dates.map(lambda p: (p[0], T.Date(p[1]))),
		datetimes().map(lambda p: (p[0], T.DateTime(p[1]))),
		durations(True if not with_bare_durations else None).map(lambda p: (p[0], T.Duration(p[1]))),
		strings().map(lambda p: (p[0], T.String(p[1]))),
		base64s().map(lambda p: (p[0], T.Base64(p[1]))),
	)


# Inside a tag a bare clock after a date would read as one datetime, so the
# durations there always carry a day count.
tag_values = values(with_bare_durations=False)

idents = st.from_regex(r"[A-Za-z_][A-Za-z0-9.$_-]*", fullmatch=True).filter(lambda s: s not in RESERVED)


@st.composite
def attributes(draw):
	name = draw(idents)
	text, value = draw(tag_values)
	return f"{name}={text}", T.Attribute(name, value)


# Tags


@st.composite
def minimal_tags(draw):
	items = draw(st.lists(st.tuples(tag_values, gap), max_size=3))
	attrs = draw(st.lists(st.tuples(attributes(), gap), max_size=3))
	text = ""
	tag = T.Tag()
	if not items or draw(st.booleans()):
		tag.name = draw(idents)
		text = tag.name
		if draw(st.booleans()):
			tag.namespace = draw(idents)
			text = f"{tag.namespace}:{text}"
		text += draw(gap)
	for (value_text, value), white in items:
		text += value_text + white
		tag.values.append(value)
	for (attr_text, attr), white in attrs:
		text += attr_text + white
		tag.attrs.append(attr)
	return text, tag


@st.composite
def _with_children(draw, children):
	text, tag = draw(minimal_tags())
	kids = draw(st.lists(st.tuples(children, separator), max_size=4))
	body = "".join(kid_text + sep for (kid_text, _), sep in kids)
	tag = dataclasses.replace(tag, tags=[kid for (_, kid), _ in kids])
	return f"{text}{{{draw(gap)}{body}}}", tag


tags = st.recursive(minimal_tags(), _with_children, max_leaves=8)


@st.composite
def tagtrees(draw):
	items = draw(st.lists(st.tuples(tags, separator), max_size=4))
	return "".join(text + sep for (text, _), sep in items), [tag for (_, tag), _ in items]


# Round trips


@given(strings())
def test_strings(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.String(expected)


@given(numbers())
def test_numbers(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.Number(expected)


@given(decimals())
def test_decimals(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.Decimal(expected)


@given(booleans)
def test_booleans(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.Boolean(expected)


@given(dates)
def test_dates(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.Date(expected)


@given(times())
def test_times(case) -> None:
	text, expected = case
	assert decode_time(parse_rule("time", text)) == expected


@given(datetimes())
def test_datetimes(case) -> None:
	text, expected = case
	value = sdlang.parse_value(text, options=OPTIONS).value
	assert value == expected
	assert value.utcoffset() == expected.utcoffset()


@given(durations())
def test_durations(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.Duration(expected)


@given(base64s())
def test_base64(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text) == T.Base64(expected)


@given(values())
def test_values(case) -> None:
	text, expected = case
	assert sdlang.parse_value(text, options=OPTIONS) == expected


@given(idents)
def test_idents(name) -> None:
	assert sdlang.parse_tag(name) == T.Tag(name)


@given(attributes())
def test_attributes(case) -> None:
	text, expected = case
	assert sdlang.parse_attribute(text, options=OPTIONS) == expected


@given(tags)
@settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_tags(case) -> None:
	text, expected = case
	assert sdlang.parse_tag(text, options=OPTIONS) == expected


@given(tagtrees())
@settings(max_examples=40, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_tagtrees(case) -> None:
	text, expected = case
	assert sdlang.parse_text(text, options=OPTIONS) == T.Tag(tags=expected)
