# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Decode options threaded through the decoders by argument."""

from __future__ import annotations

from dataclasses import dataclass

from sdlang.tz import OffsetResolver, local_offset

# Each level of tag nesting costs a couple of Python frames while decoding.
DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True)
class DecodeOptions:
	"""
	Knobs for a decode pass.

	resolver: offset lookup for datetimes without `-UTC`.
	max_depth: deepest allowed `{ ... }` nesting; deeper input is a ParseError.
	"""

	resolver: OffsetResolver = local_offset
	max_depth: int = DEFAULT_MAX_DEPTH

	def __post_init__(self) -> None:
		if self.max_depth < 1:
			raise ValueError(f"max_depth must be positive, got {self.max_depth}")


DEFAULT_OPTIONS = DecodeOptions()

__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_OPTIONS", "DecodeOptions"]
