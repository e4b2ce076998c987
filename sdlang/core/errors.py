# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error types reported by the SDLang decoder.

Everything a caller can cause with bad input surfaces as `ParseError`, whether
the grammar rejected the text or a well-formed literal could not be converted.
`DecoderInvariantError` is reserved for the decode layer receiving a syntax
node it was never written to handle; it means the grammar and the decoders
disagree, and it is not a `ParseError`.
"""

from __future__ import annotations

from typing import Optional

from lark.exceptions import UnexpectedInput

from .span import Span


class ParseError(ValueError):
	"""
	User-facing parse failure with a message and a source span.

	`stage` is "syntax" for grammar failures and "decode" for literal
	conversion failures. Callers do not need to distinguish the two.
	"""

	def __init__(self, message: str, *, span: Optional[Span] = None, stage: str = "decode") -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()
		self.stage = stage

	def __str__(self) -> str:
		if self.span.line is None:
			return self.message
		return f"{self.message} ({self.span.describe()})"

	@classmethod
	def from_lark(cls, err: UnexpectedInput) -> "ParseError":
		"""Convert a lark syntax error into a ParseError."""
		line = getattr(err, "line", None)
		column = getattr(err, "column", None)
		pos = getattr(err, "pos_in_stream", None)
		# lark reports -1 for positions it could not determine (e.g. at EOF).
		span = Span(
			start=pos if pos is not None and pos >= 0 else None,
			end=pos if pos is not None and pos >= 0 else None,
			line=line if line is not None and line >= 0 else None,
			column=column if column is not None and column >= 0 else None,
			raw=err,
		)
		message = str(err).strip().splitlines()[0] if str(err).strip() else "syntax error"
		return cls(message, span=span, stage="syntax")


class DecoderInvariantError(RuntimeError):
	"""The decode layer met a syntax node its grammar contract rules out."""

	def __init__(self, message: str, *, kind: Optional[str] = None, span: Optional[Span] = None) -> None:
		super().__init__(message)
		self.kind = kind
		self.span = span if span is not None else Span()


__all__ = ["ParseError", "DecoderInvariantError"]
