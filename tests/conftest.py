"""Pytest configuration and fixtures for Datemath tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add the parent directory to sys.path so datemath can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datemath import Instant, TzinfoTimezone, UTC, parse_instant  # noqa: E402
from datemath.units.timezone import Timezone  # noqa: E402


@pytest.fixture
def new_york() -> Timezone:
    """America/New_York, which switches DST on 2014-03-09 and 2014-11-02."""
    from zoneinfo import ZoneInfo

    return TzinfoTimezone(ZoneInfo("America/New_York"))


@pytest.fixture
def utc() -> Timezone:
    return UTC


@pytest.fixture
def local(new_york: Timezone) -> Callable[[str], Instant]:
    """Parse ISO 8601 text as New York wall-clock time."""

    def parse(s: str) -> Instant:
        return parse_instant(s, timezone=new_york)

    return parse
