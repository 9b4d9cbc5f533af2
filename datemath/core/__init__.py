"""Core value types.

This module provides:
    - Instant: A point in time with millisecond precision
    - Fields: The local calendar components of an Instant
"""

from __future__ import annotations

from datemath.core.fields import Fields
from datemath.core.instant import Instant

__all__: list[str] = [
    "Fields",
    "Instant",
]
