# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import datetime as dt

import pytest

from sdlang.config import DecodeOptions
from sdlang.tz import FixedOffsetResolver


@pytest.fixture
def utc_options() -> DecodeOptions:
	"""Decode options whose local zone is pinned to UTC."""
	return DecodeOptions(resolver=FixedOffsetResolver(dt.timedelta(0)))
