# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
SDLang (Simple Declarative Language) parser.

SDLang has an XML-like structure of tags, values and attributes with a
C-like surface syntax:

	// a tag with a single string value
	title "Hello, World"

	// attributes, and nested tags
	author "Peter Parker" email="peter@example.org" active=true
	contents {
		section "First Section" {
			paragraph "This is the first paragraph"
		}
	}

	// anonymous tags are just values
	"This text is the value of an anonymous tag!"

Parsing a document:

	>>> import sdlang
	>>> root = sdlang.parse_text('hello_world "text"')
	>>> print(root.tag("hello_world"))
	tag "hello_world": "text"
"""

from sdlang.config import DEFAULT_MAX_DEPTH, DecodeOptions
from sdlang.core.errors import DecoderInvariantError, ParseError
from sdlang.core.span import Span
from sdlang.loader import parse_attribute, parse_file, parse_tag, parse_text, parse_value
from sdlang.parser import parse_rule
from sdlang.types import (
	Attribute,
	Base64,
	Boolean,
	Date,
	DateTime,
	Decimal,
	Duration,
	Null,
	Number,
	String,
	Tag,
	Value,
)
from sdlang.tz import FixedOffsetResolver, OffsetResolver, ZoneOffsetResolver, local_offset

__all__ = [
	"Attribute",
	"Base64",
	"Boolean",
	"DEFAULT_MAX_DEPTH",
	"Date",
	"DateTime",
	"DecodeOptions",
	"Decimal",
	"DecoderInvariantError",
	"Duration",
	"FixedOffsetResolver",
	"Null",
	"Number",
	"OffsetResolver",
	"ParseError",
	"Span",
	"String",
	"Tag",
	"Value",
	"ZoneOffsetResolver",
	"local_offset",
	"parse_attribute",
	"parse_file",
	"parse_rule",
	"parse_tag",
	"parse_text",
	"parse_value",
]
