"""Part enumeration: the ladder of calendar fields.

Parts are ordered from finest (MILLISECOND) to coarsest (YEAR). Flooring a
part resets every finer part to its floor value.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from datemath._internal.constants import (
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)


class Part(Enum):
    """Calendar field rank with its floor value and fixed size.

    Each member's value is a ``(rank, floor_value, millis)`` triple:

    - rank orders the ladder, 0 for MILLISECOND up to 6 for YEAR;
    - floor_value is the value a field takes when zeroed (days and months
      count from 1, YEAR has none);
    - millis is the part's length in milliseconds, or None where the
      length varies with the calendar.

    Examples:
        >>> Part.DAY.floor_value
        1
        >>> Part.HOUR.millis
        3600000
        >>> [p.name for p in Part.HOUR.finer()]
        ['MILLISECOND', 'SECOND', 'MINUTE']
    """

    MILLISECOND = (0, 0, 1)
    SECOND = (1, 0, MS_PER_SECOND)
    MINUTE = (2, 0, MS_PER_MINUTE)
    HOUR = (3, 0, MS_PER_HOUR)
    DAY = (4, 1, None)
    MONTH = (5, 1, None)
    YEAR = (6, None, None)

    @property
    def rank(self) -> int:
        return self.value[0]

    @property
    def floor_value(self) -> int | None:
        return self.value[1]

    @property
    def millis(self) -> int | None:
        return self.value[2]

    @property
    def field(self) -> str:
        """Name of the matching attribute on Fields and Instant."""
        return self.name.lower()

    def finer(self) -> Iterator[Part]:
        """Yield the parts strictly finer than this one, finest first."""
        for part in Part:
            if part.rank < self.rank:
                yield part

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return self.rank < other.rank


__all__ = ["Part"]
