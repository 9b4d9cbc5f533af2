"""Fields: the local calendar components of an instant.

Fields is the explicit state the arithmetic engine works on. Each transform
returns a new Fields; components may be pushed out of range (month 13,
day 0, hour -1) and normalized() rolls the surplus into the neighbouring
components the way a calendar does.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from datemath._internal.calendar import (
    days_to_day_of_week,
    days_to_ymd,
    ymd_to_days,
)
from datemath._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from datemath.units.part import Part


@dataclass(frozen=True)
class Fields:
    """Year, month (1-12), day, hour, minute, second and millisecond.

    Examples:
        >>> Fields(2014, 13, 1).normalized()
        Fields(year=2015, month=1, day=1, hour=0, minute=0, second=0, millisecond=0)

        >>> Fields(2014, 3, 0).normalized().day
        28
    """

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_local_ms(cls, local_ms: int) -> Fields:
        """Build Fields from wall-clock milliseconds since 1970-01-01T00:00."""
        days, rem = divmod(local_ms, MS_PER_DAY)
        year, month, day = days_to_ymd(days)
        hour, rem = divmod(rem, MS_PER_HOUR)
        minute, rem = divmod(rem, MS_PER_MINUTE)
        second, millisecond = divmod(rem, MS_PER_SECOND)
        return cls(year, month, day, hour, minute, second, millisecond)

    def to_local_ms(self) -> int:
        """Return wall-clock milliseconds since 1970-01-01T00:00.

        Out-of-range components are carried into the coarser ones.
        """
        year_carry, month_index = divmod(self.month - 1, 12)
        days = ymd_to_days(self.year + year_carry, month_index + 1, 1) + self.day - 1
        return (
            days * MS_PER_DAY
            + self.hour * MS_PER_HOUR
            + self.minute * MS_PER_MINUTE
            + self.second * MS_PER_SECOND
            + self.millisecond
        )

    def normalized(self) -> Fields:
        return Fields.from_local_ms(self.to_local_ms())

    @property
    def day_of_week(self) -> int:
        """Day of week, Monday=0 through Sunday=6."""
        return days_to_day_of_week(self.to_local_ms() // MS_PER_DAY)

    def get(self, part: Part) -> int:
        return getattr(self, part.field)

    def shifted(self, part: Part, n: int) -> Fields:
        """Add n to one part and normalize."""
        return replace(self, **{part.field: self.get(part) + n}).normalized()

    def floored(self, part: Part) -> Fields:
        """Reset every part finer than part to its floor value."""
        return replace(self, **{finer.field: finer.floor_value for finer in part.finer()})

    def compare_from(self, part: Part, other: Fields) -> int:
        """Compare with other on part and every finer part, coarsest first.

        Returns:
            1 if self is later, -1 if earlier, 0 if those parts are equal.
        """
        for rank in range(part.rank, -1, -1):
            current = _PARTS_BY_RANK[rank]
            a, b = self.get(current), other.get(current)
            if a != b:
                return 1 if a > b else -1
        return 0


_PARTS_BY_RANK: tuple[Part, ...] = tuple(sorted(Part, key=lambda p: p.rank))


__all__ = ["Fields"]
