"""Tests for template formatting and week numbering.

These tests verify every formatting token, bracket escapes, and the ISO
8601 week helpers against the standard library's isocalendar().
"""

from __future__ import annotations

import datetime

import pytest

from datemath import FixedTimezone, Instant, date_range, format_instant
from datemath.format.isoweek import (
    custom_week,
    custom_weekday,
    custom_year,
    iso_week,
    iso_weekday,
    iso_year,
)


class TestFormatInstantErrors:
    """Tests for rejected arguments."""

    @pytest.mark.parametrize("value", [None, True, 0, "", {}])
    def test_non_instant_raises(self, value: object) -> None:
        """date must be an Instant."""
        with pytest.raises(TypeError):
            format_instant("", value)  # type: ignore[arg-type]

    def test_invalid_instant_raises(self) -> None:
        """The Invalid Instant cannot be formatted."""
        with pytest.raises(TypeError):
            format_instant("yyyy", Instant.invalid())

    def test_non_string_template_raises(self) -> None:
        """The template must be a str."""
        with pytest.raises(TypeError):
            format_instant(None, Instant.now())  # type: ignore[arg-type]


class TestFormatInstantTokens:
    """Tests for token replacement."""

    def test_example(self, new_york) -> None:
        """A typical template renders as expected."""
        d = Instant(2012, 9, 27, timezone=new_york)
        assert format_instant("ddd, mmm d, yyyy", d) == "Thu, Sep 27, 2012"

    def test_date_tokens(self, new_york) -> None:
        """Year, month and day tokens render."""
        d = Instant(2012, 9, 27, 22, 56, 0, 555, timezone=new_york)
        template = "yyyy yy mmmm mmm mm m dddd ddd dd d S q o ww w N"
        expected = "2012 12 September Sep 09 9 Thursday Thu 27 27 th 3 2012 39 39 4"
        assert format_instant(template, d) == expected

    def test_time_tokens(self, new_york) -> None:
        """Hour, minute, second and ms tokens render."""
        d = Instant(2012, 9, 27, 22, 56, 0, 555, timezone=new_york)
        template = "HH H hh h MM M ss s l AA A aa a"
        expected = "22 22 10 10 56 56 00 0 555 PM P pm p"
        assert format_instant(template, d) == expected

    def test_morning_tokens(self, utc) -> None:
        """Early times render with padding and a 12 o'clock hour."""
        d = Instant(2014, 1, 5, 0, 5, 7, 9, timezone=utc)
        assert format_instant("hh h HH H MM ss l AA a", d) == "12 12 00 0 05 07 009 AM a"

    def test_offset_tokens_east_is_positive(self) -> None:
        """Zones east of UTC show a plus sign."""
        d = Instant(2014, 6, 8, timezone=FixedTimezone.from_hours(5, 30))
        assert format_instant("O P", d) == "+0530 +05:30"

    def test_offset_tokens_follow_dst(self, new_york) -> None:
        """The offset follows daylight saving time."""
        assert format_instant("O", Instant(2014, 1, 8, timezone=new_york)) == "-0500"
        assert format_instant("P", Instant(2014, 6, 8, timezone=new_york)) == "-04:00"

    def test_brackets_escape_tokens(self, new_york) -> None:
        """Bracketed text is emitted verbatim."""
        assert format_instant("[yyyy]: yyyy", Instant(1985, 1, timezone=new_york)) == "yyyy: 1985"

    def test_other_text_passes_through(self, utc) -> None:
        """Non-token text is copied unchanged."""
        d = Instant(2014, 6, 8, 16, 59, timezone=utc)
        assert format_instant("h:MM aa [on the] dS!", d) == "4:59 pm on the 8th!"

    def test_short_year(self, utc) -> None:
        """yy drops the first two digits of the year."""
        assert format_instant("yy", Instant(2009, timezone=utc)) == "09"
        assert format_instant("yy", Instant(987, timezone=utc)) == "7"

    def test_quarters(self, utc) -> None:
        """q gives the quarter of each month."""
        quarters = [format_instant("q", Instant(2014, month, timezone=utc)) for month in range(1, 13)]
        assert quarters == ["1", "1", "1", "2", "2", "2", "3", "3", "3", "4", "4", "4"]


class TestFormatOverRanges:
    """Names and suffixes across a full cycle, walked with date_range()."""

    def test_weekday_names(self, local) -> None:
        """A week of days yields every weekday name."""
        days = date_range("day", local("1981-06-08"), local("1981-06-15"))
        assert [format_instant("dddd", d) for d in days] == [
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ]

    def test_month_names(self, local) -> None:
        """A year of months yields every month name."""
        months = date_range("month", local("1981-01-01"), local("1982-01-01"))
        assert [format_instant("mmmm", d) for d in months] == [
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ]

    def test_ordinal_suffixes(self, local) -> None:
        """Days of a month get English ordinal suffixes."""
        days = date_range("day", local("1981-01-01"), local("1981-02-01"))
        suffixes = [format_instant("dS", d) for d in days]
        assert suffixes[:4] == ["1st", "2nd", "3rd", "4th"]
        assert suffixes[9:13] == ["10th", "11th", "12th", "13th"]
        assert suffixes[19:24] == ["20th", "21st", "22nd", "23rd", "24th"]
        assert suffixes[29:] == ["30th", "31st"]
        assert len(suffixes) == 31


class TestIsoWeek:
    """Tests for ISO 8601 week numbering."""

    def test_example(self, new_york) -> None:
        """2012-09-27 is in ISO week 39."""
        assert iso_week(Instant(2012, 9, 27, timezone=new_york)) == 39

    @pytest.mark.parametrize(
        "ymd, expected",
        [
            ((2008, 12, 29), (2009, 1, 1)),
            ((2010, 1, 3), (2009, 53, 7)),
            ((2012, 1, 1), (2011, 52, 7)),
            ((2015, 12, 31), (2015, 53, 4)),
            ((2016, 1, 4), (2016, 1, 1)),
        ],
    )
    def test_year_boundaries(self, utc, ymd, expected) -> None:
        """Days near New Year belong to the right ISO year."""
        d = Instant(*ymd, timezone=utc)
        assert (iso_year(d), iso_week(d), iso_weekday(d)) == expected

    def test_matches_isocalendar(self, utc) -> None:
        """Every day from late 2003 to early 2017 agrees with the standard library."""
        start = Instant(2003, 12, 20, timezone=utc)
        end = Instant(2017, 1, 10, timezone=utc)
        for d in date_range("day", start, end):
            expected = tuple(datetime.date(d.year, d.month, d.day).isocalendar())
            assert (iso_year(d), iso_week(d), iso_weekday(d)) == expected

    def test_time_of_day_is_ignored(self, new_york) -> None:
        """A late Sunday stays in the week that started on Monday."""
        morning = Instant(2014, 6, 8, 0, 0, timezone=new_york)
        evening = Instant(2014, 6, 8, 23, 59, 59, 999, timezone=new_york)
        assert iso_week(morning) == iso_week(evening) == 23

    def test_rejects_invalid(self) -> None:
        """The Invalid Instant is rejected."""
        with pytest.raises(TypeError):
            iso_week(Instant.invalid())


def _reference_week(
    first_day_of_week: int, week1_weekday: int, day: datetime.date
) -> tuple[int, int]:
    """Week-numbering year and week of day, counted directly with datetime.date."""
    week_start = day - datetime.timedelta(days=(day.weekday() - first_day_of_week) % 7)
    anchor = week_start + datetime.timedelta(days=(week1_weekday - first_day_of_week) % 7)
    jan1 = datetime.date(anchor.year, 1, 1)
    first_anchor = jan1 + datetime.timedelta(days=(week1_weekday - jan1.weekday()) % 7)
    week1_start = first_anchor - datetime.timedelta(
        days=(first_anchor.weekday() - first_day_of_week) % 7
    )
    return anchor.year, (week_start - week1_start).days // 7 + 1


class TestCustomWeek:
    """Tests for week numbering with other week conventions."""

    def test_custom_weekday(self, utc) -> None:
        """Weekday position depends on the day the week starts on."""
        thursday = Instant(2012, 9, 27, timezone=utc)
        assert custom_weekday(0, thursday) == 3
        assert custom_weekday(6, thursday) == 4  # weeks starting on Sunday

    def test_sunday_weeks_with_first_sunday_rule(self, utc) -> None:
        """Weeks start on Sunday and week 1 holds the year's first Sunday."""
        # 2012-01-01 was a Sunday, so it opens week 1
        assert custom_week(6, 6, Instant(2012, 1, 1, timezone=utc)) == 1
        assert custom_week(6, 6, Instant(2012, 1, 8, timezone=utc)) == 2
        # 2011-12-31 was a Saturday, the last day of its week
        assert custom_year(6, 6, Instant(2011, 12, 31, timezone=utc)) == 2011

    def test_epidemiological_weeks(self, utc) -> None:
        """Sunday weeks with week 1 holding the first Wednesday (MMWR weeks)."""
        # 2014-01-01 was a Wednesday, so week 1 began on Sunday 2013-12-29
        assert custom_year(6, 2, Instant(2013, 12, 29, timezone=utc)) == 2014
        assert custom_week(6, 2, Instant(2013, 12, 29, timezone=utc)) == 1
        assert custom_week(6, 2, Instant(2013, 12, 28, timezone=utc)) == 52
        # 2014 has 53 weeks; week 1 of 2015 begins on Sunday 2015-01-04
        assert custom_year(6, 2, Instant(2015, 1, 3, timezone=utc)) == 2014
        assert custom_week(6, 2, Instant(2015, 1, 3, timezone=utc)) == 53
        assert custom_week(6, 2, Instant(2015, 1, 4, timezone=utc)) == 1

    @pytest.mark.parametrize(
        ("first_day_of_week", "week1_weekday"),
        [(6, 2), (6, 5), (6, 0), (6, 3), (2, 0), (4, 1), (0, 3), (6, 6)],
    )
    def test_matches_day_counting(self, utc, first_day_of_week: int, week1_weekday: int) -> None:
        """Every day from late 2013 to early 2015 agrees with direct day counting."""
        start = Instant(2013, 12, 20, timezone=utc)
        end = Instant(2015, 1, 10, timezone=utc)
        for d in date_range("day", start, end):
            expected = _reference_week(
                first_day_of_week, week1_weekday, datetime.date(d.year, d.month, d.day)
            )
            actual = (
                custom_year(first_day_of_week, week1_weekday, d),
                custom_week(first_day_of_week, week1_weekday, d),
            )
            assert actual == expected, d

    def test_iso_parameters_match_iso_helpers(self, utc) -> None:
        """Monday weeks pinned on Thursday are ISO 8601 weeks."""
        d = Instant(2010, 1, 3, timezone=utc)
        assert custom_week(0, 3, d) == iso_week(d)
        assert custom_year(0, 3, d) == iso_year(d)
