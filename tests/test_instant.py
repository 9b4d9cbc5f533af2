"""Tests for the Instant value type.

These tests verify construction with rollover, the Invalid Instant,
comparisons, conversions and the local calendar accessors.
"""

from __future__ import annotations

import datetime

import pytest

from datemath import Fields, FixedTimezone, Instant, UTC
from datemath._internal.constants import MAX_EPOCH_MS
from datemath.errors import OverflowError


class TestInstantConstruction:
    """Tests for building Instants from components."""

    def test_components(self, utc) -> None:
        """Components are read back unchanged."""
        d = Instant(2014, 6, 8, 16, 59, 55, 555, timezone=utc)
        assert (d.year, d.month, d.day) == (2014, 6, 8)
        assert (d.hour, d.minute, d.second, d.millisecond) == (16, 59, 55, 555)
        assert d.epoch_ms == 1_402_246_795_555

    def test_defaults(self, utc) -> None:
        """Omitted components take their floor values."""
        assert Instant(2014, timezone=utc).fields == Fields(2014, 1, 1)

    def test_month_rollover(self, utc) -> None:
        """Month 13 rolls into the next year."""
        assert Instant(2014, 13, 1, timezone=utc) == Instant(2015, 1, 1, timezone=utc)
        assert Instant(2014, 0, 1, timezone=utc) == Instant(2013, 12, 1, timezone=utc)

    def test_day_rollover(self, utc) -> None:
        """Days past the month end roll over."""
        assert Instant(2014, 2, 29, timezone=utc) == Instant(2014, 3, 1, timezone=utc)
        assert Instant(2014, 3, 0, timezone=utc).day == 28

    def test_time_rollover(self, utc) -> None:
        """Hour 24 is midnight of the next day."""
        assert Instant(2014, 6, 8, 24, timezone=utc) == Instant(2014, 6, 9, timezone=utc)
        assert Instant(2014, 6, 8, 0, -1, timezone=utc).fields == Fields(2014, 6, 7, 23, 59)

    def test_local_components(self, new_york) -> None:
        """Components are wall-clock time in the timezone."""
        d = Instant(2014, 6, 8, 12, timezone=new_york)
        assert d.epoch_ms == 1_402_243_200_000  # 16:00Z
        assert d.hour == 12
        assert d.utc_offset == -240

    @pytest.mark.parametrize("bad", [2014.0, "2014", None, True])
    def test_rejects_non_int(self, bad: object) -> None:
        """Components must be ints."""
        with pytest.raises(TypeError):
            Instant(bad)  # type: ignore[arg-type]

    def test_rejects_bad_timezone(self) -> None:
        """timezone must be a Timezone."""
        with pytest.raises(TypeError):
            Instant(2014, timezone="UTC")  # type: ignore[arg-type]

    def test_out_of_range_is_invalid(self, utc) -> None:
        """Dates past the supported range are invalid."""
        assert not Instant(300_000, timezone=utc).is_valid
        assert Instant.from_epoch_ms(MAX_EPOCH_MS).is_valid
        assert not Instant.from_epoch_ms(MAX_EPOCH_MS + 1).is_valid

    def test_from_epoch_ms(self, utc) -> None:
        """Epoch zero is 1970-01-01 UTC."""
        d = Instant.from_epoch_ms(0, timezone=utc)
        assert d.fields == Fields(1970, 1, 1)
        assert d.day_of_week == 3
        assert d.iso_weekday == 4

    def test_from_epoch_ms_rejects_float(self) -> None:
        """Epoch milliseconds must be an int."""
        with pytest.raises(TypeError):
            Instant.from_epoch_ms(1.5)  # type: ignore[arg-type]

    def test_now(self) -> None:
        """now() is valid."""
        assert Instant.now().is_valid


class TestInvalidInstant:
    """Tests for the Invalid Instant."""

    def test_not_valid(self) -> None:
        """The Invalid Instant reports itself invalid."""
        d = Instant.invalid()
        assert d.is_valid is False
        assert d.epoch_ms is None

    def test_equals_nothing(self, utc) -> None:
        """The Invalid Instant equals nothing, itself included."""
        d = Instant.invalid()
        assert d != d
        assert not (d == Instant.invalid())
        assert not (d == Instant(2014, timezone=utc))
        assert d != Instant(2014, timezone=utc)

    def test_orders_with_nothing(self, utc) -> None:
        """Every ordering comparison is False."""
        d = Instant.invalid()
        other = Instant(2014, timezone=utc)
        assert not d < other
        assert not d <= other
        assert not d > other
        assert not d >= other

    def test_fields_raise(self) -> None:
        """Field access raises ValueError."""
        with pytest.raises(ValueError):
            Instant.invalid().year

    def test_subtraction_raises(self, utc) -> None:
        """Subtraction raises TypeError."""
        with pytest.raises(TypeError):
            Instant.invalid() - Instant(2014, timezone=utc)

    def test_str_and_repr(self) -> None:
        """str and repr name the Invalid Instant."""
        assert str(Instant.invalid()) == "Invalid Instant"
        assert repr(Instant.invalid(timezone=UTC)).startswith("Instant.invalid(")


class TestInstantComparison:
    """Tests for comparison, hashing and subtraction."""

    def test_equal_across_timezones(self, new_york, utc) -> None:
        """Equality compares instants, not views."""
        a = Instant(2014, 6, 8, 12, timezone=new_york)
        b = Instant(2014, 6, 8, 16, timezone=utc)
        assert a == b
        assert hash(a) == hash(b)

    def test_ordering(self, utc) -> None:
        """Instants order by epoch."""
        a = Instant(2014, 6, 8, timezone=utc)
        b = Instant(2014, 6, 9, timezone=utc)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= a

    def test_subtraction_is_elapsed_ms(self, utc) -> None:
        """Subtraction gives elapsed milliseconds."""
        a = Instant(2014, 6, 8, timezone=utc)
        b = Instant(2014, 6, 9, 0, 0, 0, 5, timezone=utc)
        assert b - a == 86_400_005
        assert a - b == -86_400_005

    def test_not_equal_to_other_types(self, utc) -> None:
        """Instants never equal plain numbers."""
        assert Instant(2014, timezone=utc) != 1_388_534_400_000


class TestInstantConversion:
    """Tests for timezone views and datetime interop."""

    def test_with_timezone_keeps_instant(self, new_york, utc) -> None:
        """Changing the view keeps the instant."""
        d = Instant(2014, 6, 8, 12, timezone=new_york)
        u = d.with_timezone(utc)
        assert u == d
        assert u.hour == 16
        assert u.timezone is utc

    def test_to_iso_format(self, new_york) -> None:
        """ISO output carries the local offset."""
        d = Instant(2014, 6, 8, 16, 59, 55, 555, timezone=new_york)
        assert d.to_iso_format() == "2014-06-08T16:59:55.555-04:00"
        assert str(d) == d.to_iso_format()

    def test_to_datetime(self, new_york) -> None:
        """Conversion gives an aware datetime."""
        dt = Instant(2014, 6, 8, 16, 59, 55, 555, timezone=new_york).to_datetime()
        assert dt == datetime.datetime(2014, 6, 8, 20, 59, 55, 555_000, tzinfo=datetime.timezone.utc)
        assert dt.utcoffset() == datetime.timedelta(hours=-4)

    def test_to_datetime_out_of_range(self, utc) -> None:
        """Years datetime cannot hold raise OverflowError."""
        with pytest.raises(OverflowError):
            Instant(10_000, timezone=utc).to_datetime()

    def test_from_aware_datetime(self) -> None:
        """Aware datetimes keep their instant."""
        tz = datetime.timezone(datetime.timedelta(hours=2))
        d = Instant.from_datetime(datetime.datetime(2014, 6, 8, 12, 0, 0, 1_999, tzinfo=tz))
        assert d.epoch_ms == 1_402_221_600_001
        assert d.hour == 12
        assert d.utc_offset == 120

    def test_from_naive_datetime(self, new_york) -> None:
        """Naive datetimes are wall-clock time in the timezone."""
        d = Instant.from_datetime(datetime.datetime(2014, 6, 8, 12), timezone=new_york)
        assert d == Instant(2014, 6, 8, 12, timezone=new_york)

    def test_from_datetime_rejects_date(self) -> None:
        """Plain dates are rejected."""
        with pytest.raises(TypeError):
            Instant.from_datetime(datetime.date(2014, 6, 8))  # type: ignore[arg-type]

    def test_repr(self) -> None:
        """repr shows the components and the timezone."""
        tz = FixedTimezone.from_hours(2)
        assert repr(Instant(2014, 6, 8, timezone=tz)) == (
            "Instant(2014, 6, 8, 0, 0, 0, 0, timezone=FixedTimezone(offset_seconds=7200))"
        )


class TestFields:
    """Tests for the Fields state struct."""

    def test_normalized(self) -> None:
        """Out-of-range fields normalize."""
        assert Fields(2014, 13, 1).normalized() == Fields(2015, 1, 1)
        assert Fields(2014, 1, 1, 0, 0, 0, -1).normalized() == Fields(2013, 12, 31, 23, 59, 59, 999)

    def test_round_trip_local_ms(self) -> None:
        """Fields survive a trip through local milliseconds."""
        f = Fields(2014, 6, 8, 16, 59, 55, 555)
        assert Fields.from_local_ms(f.to_local_ms()) == f

    def test_compare_from(self) -> None:
        """Comparison starts at the given part."""
        from datemath import Part

        a = Fields(2014, 2, 28)
        b = Fields(2014, 3, 27, 23, 59, 59, 999)
        assert b.compare_from(Part.DAY, a) == -1
        assert Fields(2014, 3, 28).compare_from(Part.DAY, a) == 0
        assert a.compare_from(Part.MILLISECOND, a) == 0
