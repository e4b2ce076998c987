# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Shared building blocks: source spans and error types."""

from .errors import DecoderInvariantError, ParseError
from .span import Span

__all__ = ["DecoderInvariantError", "ParseError", "Span"]
