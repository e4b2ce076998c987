# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source span representation shared by syntax nodes and errors.

A Span carries character offsets into the decoded text plus best-effort
line/column information. Spans built from lark objects keep the source
object in `raw` so richer renderers can still reach parser-specific details.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (offsets, best-effort line/column, raw parser loc)."""

	start: Optional[int] = None
	end: Optional[int] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = field(default=None, compare=False, repr=False)

	@classmethod
	def from_loc(cls, loc: Any) -> "Span":
		"""
		Construct a Span from a lark `Token`, a lark tree `Meta`, or an existing Span.

		Missing attributes (e.g. the meta of an empty rule) are left as None.
		"""
		if loc is None:
			return cls()
		if isinstance(loc, cls):
			return loc
		return cls(
			start=getattr(loc, "start_pos", None),
			end=getattr(loc, "end_pos", None),
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			raw=loc,
		)

	@property
	def known(self) -> bool:
		return self.start is not None and self.end is not None

	def slice(self, source: str) -> str:
		"""Return the text this span covers in `source` ("" when unknown)."""
		if not self.known:
			return ""
		return source[self.start:self.end]

	def describe(self) -> str:
		if self.line is None:
			return "<unknown>"
		if self.column is None:
			return f"line {self.line}"
		return f"line {self.line}, column {self.column}"


__all__ = ["Span"]
