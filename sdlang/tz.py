# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
UTC offset resolution for datetimes written without `-UTC`.

A datetime literal without the marker means "local time", so the decoder asks
an `OffsetResolver` for the offset in force at that exact wall-clock instant
(DST applies per date, not per "now"). The resolver is always passed in
explicitly through `DecodeOptions`; the host-zone default is just one
implementation.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Callable
from zoneinfo import ZoneInfo

OffsetResolver = Callable[[_dt.datetime], _dt.timedelta]


def local_offset(naive: _dt.datetime) -> _dt.timedelta:
	"""Offset of the host's local zone at `naive` (interpreted as local time)."""
	offset = naive.astimezone().utcoffset()
	if offset is None:  # pragma: no cover - astimezone() always attaches a zone
		raise ValueError(f"no local offset for {naive.isoformat()}")
	return offset


@dataclass(frozen=True)
class FixedOffsetResolver:
	"""Always answers the same offset."""

	offset: _dt.timedelta = _dt.timedelta(0)

	def __call__(self, naive: _dt.datetime) -> _dt.timedelta:
		return self.offset


@dataclass(frozen=True)
class ZoneOffsetResolver:
	"""
	Resolves offsets from an IANA zone (e.g. "Europe/Berlin").

	Wall-clock times that are ambiguous or skipped by a transition resolve with
	`fold=0`, i.e. the offset in force before the transition.
	"""

	key: str

	def __call__(self, naive: _dt.datetime) -> _dt.timedelta:
		offset = naive.replace(tzinfo=ZoneInfo(self.key), fold=0).utcoffset()
		if offset is None:  # pragma: no cover - ZoneInfo always answers
			raise ValueError(f"zone {self.key} has no offset for {naive.isoformat()}")
		return offset


__all__ = ["FixedOffsetResolver", "OffsetResolver", "ZoneOffsetResolver", "local_offset"]
