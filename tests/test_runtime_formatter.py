"""Tests for RangeFormatter.

Orchestration tests run over the table-driven point formatter from
conftest so expected strings do not depend on the installed CLDR data.
TestBabelRanges checks end-to-end output for patterns that have been
stable across CLDR releases.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import pytest

from dateranger.core.errors import InvalidInputError, PatternError
from dateranger.enums import DateStyle
from dateranger.runtime.formatter import RangeFormatter, default_formatter, format_range
from dateranger.runtime.range_config import RangeConfig, RangeRequest
from dateranger.runtime.separators import SeparatorResolver

if TYPE_CHECKING:
    from tests.conftest import TablePointFormatter

S = DateStyle


def cfg(**kwargs: object) -> RangeConfig:
    return RangeConfig(**kwargs)  # type: ignore[arg-type]


class TestDateRanges:
    """Date-only ranges over the table formatter."""

    def test_same_month(self, range_formatter: RangeFormatter) -> None:
        """Month and year are printed once."""
        assert range_formatter.format_range("2020-01-03", "2020-01-05") == "Jan 3–5, 2020"

    def test_same_year(self, range_formatter: RangeFormatter) -> None:
        """Year is printed once; the separator is padded."""
        assert range_formatter.format_range("2020-01-03", "2020-02-05") == "Jan 3 – Feb 5, 2020"

    def test_different_years(self, range_formatter: RangeFormatter) -> None:
        """Nothing is shared across years."""
        result = range_formatter.format_range("2019-12-30", "2020-01-02")
        assert result == "Dec 30, 2019 – Jan 2, 2020"

    def test_same_day(self, range_formatter: RangeFormatter) -> None:
        """Identical dates collapse to one point."""
        assert range_formatter.format_range("2020-01-03", "2020-01-03") == "Jan 3, 2020"

    def test_same_day_different_times_without_time_style(
        self, range_formatter: RangeFormatter
    ) -> None:
        """Times finer than the displayed precision are invisible."""
        result = range_formatter.format_range("2020-01-03T08:00", "2020-01-03T20:00")
        assert result == "Jan 3, 2020"

    def test_short_style(self, range_formatter: RangeFormatter) -> None:
        """Numeric dates share their prefix and suffix."""
        result = range_formatter.format_range("2020-01-03", "2020-01-05", cfg(date_style="short"))
        assert result == "1/3–5/20"

    def test_long_style(self, range_formatter: RangeFormatter) -> None:
        """Long style pads the separator even for a month split."""
        result = range_formatter.format_range("2020-01-03", "2020-01-05", cfg(date_style="long"))
        assert result == "January 3 – 5, 2020"

    def test_full_style(self, range_formatter: RangeFormatter) -> None:
        """Weekdays are part of the differing middles."""
        result = range_formatter.format_range("2020-01-03", "2020-01-05", cfg(date_style="full"))
        assert result == "Friday, January 3 – Sunday, January 5, 2020"

    def test_custom_separator(self, range_formatter: RangeFormatter) -> None:
        """The configured separator replaces the dash."""
        result = range_formatter.format_range(
            "2020-01-03", "2020-02-05", cfg(range_separator="to")
        )
        assert result == "Jan 3 to Feb 5, 2020"

    def test_mixed_input_types(self, range_formatter: RangeFormatter) -> None:
        """Start and end may use different representations."""
        start = date(2020, 1, 3)
        end = int(datetime(2020, 1, 5, tzinfo=UTC).timestamp())
        assert range_formatter.format_range(start, end) == "Jan 3–5, 2020"


class TestDateTimeRanges:
    """Ranges that display a time portion."""

    def test_same_half_day(self, range_formatter: RangeFormatter) -> None:
        """Date and AM/PM marker are shared."""
        result = range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T11:30", cfg(time_style="short")
        )
        assert result == "Jan 3, 2020, 10:00 – 11:30 AM"

    def test_across_noon(self, range_formatter: RangeFormatter) -> None:
        """Only the date is shared across noon."""
        result = range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T14:00", cfg(time_style="short")
        )
        assert result == "Jan 3, 2020, 10:00 AM – 2:00 PM"

    def test_different_days_expand(self, range_formatter: RangeFormatter) -> None:
        """With a time shown, different days print both points in full."""
        result = range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-05T11:00", cfg(time_style="short")
        )
        assert result == "Jan 3, 2020, 10:00 AM – Jan 5, 2020, 11:00 AM"

    def test_seconds(self, range_formatter: RangeFormatter) -> None:
        """A seconds difference prints the whole time for both points."""
        result = range_formatter.format_range(
            "2020-01-03T10:00:00", "2020-01-03T10:00:30", cfg(time_style="medium")
        )
        assert result == "Jan 3, 2020, 10:00:00 – 10:00:30 AM"

    def test_identical_datetimes(self, range_formatter: RangeFormatter) -> None:
        """Identical instants collapse to one point."""
        result = range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T10:00", cfg(time_style="short")
        )
        assert result == "Jan 3, 2020, 10:00 AM"

    def test_twenty_four_hour_clock(self, range_formatter: RangeFormatter) -> None:
        """Without an AM/PM field the shared suffix is empty."""
        config = cfg(time_style="long")
        assert range_formatter.format_range(
            "2020-01-03T09:00", "2020-01-03T10:00", config
        ) == "Jan 3, 2020, 09:00:00 – 10:00:00"
        assert range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T14:00", config
        ) == "Jan 3, 2020, 10:00:00 – 14:00:00"

    def test_timezone_suffix_shared(self, range_formatter: RangeFormatter) -> None:
        """Zone names are printed once."""
        result = range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T11:00", cfg(time_style="full")
        )
        assert result == "Jan 3, 2020, 10:00:00 – 11:00:00 UTC"

    def test_time_only(self, range_formatter: RangeFormatter) -> None:
        """Time-only ranges share the AM/PM marker."""
        result = range_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T11:30", cfg(date_style="none", time_style="short")
        )
        assert result == "10:00 – 11:30 AM"

    def test_custom_date_time_separator(self, range_formatter: RangeFormatter) -> None:
        """The date-time separator joins the portions."""
        config = cfg(time_style="short", date_time_separator=" at ")
        result = range_formatter.format_range("2020-01-03T10:00", "2020-01-03T11:30", config)
        assert result == "Jan 3, 2020 at 10:00 – 11:30 AM"


class TestTimezones:
    """Ranges rendered in a configured timezone."""

    def test_spring_forward_same_day_expands(self, range_formatter: RangeFormatter) -> None:
        """01:30 EST to 03:30 EDT prints both points in full."""
        config = cfg(time_style="full", timezone="America/New_York")
        result = range_formatter.format_range(
            datetime(2020, 3, 8, 6, 30, tzinfo=UTC),
            datetime(2020, 3, 8, 7, 30, tzinfo=UTC),
            config,
        )
        assert result == "Mar 8, 2020, 01:30:00 EST – Mar 8, 2020, 03:30:00 EDT"

    @pytest.mark.parametrize(
        ("date_style", "expected"), [("medium", "Mar 8, 2020"), ("short", "3/8/20")]
    )
    def test_spring_forward_date_only_collapses(
        self, range_formatter: RangeFormatter, date_style: str, expected: str
    ) -> None:
        """Without a time the transition day is printed once."""
        config = cfg(date_style=date_style, timezone="America/New_York")
        result = range_formatter.format_range(
            "2020-03-08T01:30", "2020-03-08T03:30", config
        )
        assert result == expected

    def test_multi_week_range_across_transition(self, range_formatter: RangeFormatter) -> None:
        """A range merely spanning a transition is compacted normally."""
        config = cfg(timezone="America/New_York")
        assert range_formatter.format_range("2020-03-01", "2020-03-20", config) == "Mar 1–20, 2020"

    def test_points_converted_before_comparison(self, range_formatter: RangeFormatter) -> None:
        """Dates are compared in the display zone, not in UTC."""
        config = cfg(timezone="Asia/Tokyo")
        result = range_formatter.format_range(
            datetime(2020, 1, 2, 20, tzinfo=UTC),
            datetime(2020, 1, 4, 20, tzinfo=UTC),
            config,
        )
        assert result == "Jan 3–5, 2020"


class TestSingleAndMissingEnd:
    """Single points and omitted ends."""

    @pytest.mark.parametrize("end", [None, "", "   "])
    def test_missing_end(self, range_formatter: RangeFormatter, end: object) -> None:
        """An absent end renders the start alone."""
        assert range_formatter.format_range("2020-01-03", end) == "Jan 3, 2020"

    def test_format_request(self, range_formatter: RangeFormatter) -> None:
        """format() accepts a RangeRequest."""
        request = RangeRequest("2020-01-03", "2020-01-05", cfg(date_style="long"))
        assert range_formatter.format(request) == "January 3 – 5, 2020"

    def test_format_point(self, range_formatter: RangeFormatter) -> None:
        """format_point renders one instant with both portions."""
        result = range_formatter.format_point("2020-01-03T14:05", cfg(time_style="short"))
        assert result == "Jan 3, 2020, 2:05 PM"

    def test_format_point_default_config(self, range_formatter: RangeFormatter) -> None:
        """format_point defaults to a medium date."""
        assert range_formatter.format_point(date(2020, 1, 3)) == "Jan 3, 2020"


class TestErrors:
    """Error propagation."""

    def test_invalid_start(self, range_formatter: RangeFormatter) -> None:
        """Unsupported input types are rejected."""
        with pytest.raises(InvalidInputError):
            range_formatter.format_range([2020, 1, 3])

    def test_invalid_end(self, range_formatter: RangeFormatter) -> None:
        """Unparseable end text is rejected."""
        with pytest.raises(InvalidInputError):
            range_formatter.format_range("2020-01-03", "soon")

    def test_malformed_locale_pattern(
        self,
        range_formatter: RangeFormatter,
        table_formatter: TablePointFormatter,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Patterns without literals between fields are rejected."""
        monkeypatch.setattr(table_formatter, "get_pattern", lambda *_: "yyyyMMdd")
        with pytest.raises(PatternError, match="missing separator"):
            range_formatter.format_range("2020-01-03", "2020-01-05")

    def test_non_positive_cache_size(self) -> None:
        """The mask cache needs room for at least one entry."""
        with pytest.raises(ValueError, match="cache_size must be positive"):
            RangeFormatter(cache_size=0)


class TestPatternMaskCache:
    """Test the pattern mask LRU cache."""

    def test_mask_reused(
        self, range_formatter: RangeFormatter, table_formatter: TablePointFormatter
    ) -> None:
        """Patterns are fetched once per configuration."""
        config = cfg(time_style="short")
        range_formatter.format_range("2020-01-03T10:00", "2020-01-03T11:00", config)
        range_formatter.format_range("2020-01-04T10:00", "2020-01-04T11:00", config)
        assert table_formatter.pattern_calls == [
            ("en", S.MEDIUM, S.NONE),
            ("en", S.NONE, S.SHORT),
        ]
        assert range_formatter.cache_size() == 1

    def test_style_change_builds_new_mask(self, range_formatter: RangeFormatter) -> None:
        """A different style never meets a stale mask."""
        short = range_formatter.pattern_mask(cfg(date_style="short"))
        long = range_formatter.pattern_mask(cfg(date_style="long"))
        assert short.pattern == "M/d/yy"
        assert long.pattern == "MMMM d, y"
        assert range_formatter.cache_size() == 2

    def test_separator_changes_mask(self, range_formatter: RangeFormatter) -> None:
        """The date-time separator is part of the mask."""
        comma = range_formatter.pattern_mask(cfg(time_style="short"))
        at = range_formatter.pattern_mask(cfg(time_style="short", date_time_separator=" at "))
        assert comma.pattern != at.pattern

    def test_eviction(
        self, table_formatter: TablePointFormatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The least recently used mask is evicted."""
        formatter = RangeFormatter(table_formatter, cache_size=2)
        first, second, third = cfg(date_style="short"), cfg(), cfg(date_style="long")
        with caplog.at_level(logging.DEBUG, logger="dateranger.runtime.formatter"):
            formatter.pattern_mask(first)
            formatter.pattern_mask(second)
            formatter.pattern_mask(first)
            formatter.pattern_mask(third)
        info = formatter.cache_info()
        assert info["size"] == 2
        assert info["max_size"] == 2
        assert info["keys"] == (first.mask_key, third.mask_key)
        assert "Evicted pattern mask" in caplog.text

    def test_clear_cache(self, range_formatter: RangeFormatter) -> None:
        """clear_cache drops every mask."""
        range_formatter.pattern_mask(cfg())
        range_formatter.clear_cache()
        assert range_formatter.cache_size() == 0


class TestCustomCollaborators:
    """Injected point formatters and separator registries."""

    def test_properties(self, table_formatter: TablePointFormatter) -> None:
        """Collaborators are exposed read-only."""
        separators = SeparatorResolver({})
        formatter = RangeFormatter(table_formatter, separators=separators)
        assert formatter.point_formatter is table_formatter
        assert formatter.separators is separators

    def test_custom_provider(self, range_formatter: RangeFormatter) -> None:
        """A registered provider decides the separator."""

        class Slash:
            def modify_separator(self, split: object, separator: str, date_style: S) -> str:
                return " / "

        range_formatter.separators.register("en", Slash())
        assert range_formatter.format_range("2020-01-03", "2020-01-05") == "Jan 3 / 5, 2020"


class TestBabelRanges:
    """End-to-end ranges over Babel's CLDR data."""

    def test_english(self, babel_formatter: RangeFormatter) -> None:
        """English medium dates."""
        assert babel_formatter.format_range("2020-01-03", "2020-01-05") == "Jan 3–5, 2020"
        assert babel_formatter.format_range("2020-01-03", "2020-02-05") == "Jan 3 – Feb 5, 2020"
        assert babel_formatter.format_range("2020-01-03") == "Jan 3, 2020"

    def test_german_medium(self, babel_formatter: RangeFormatter) -> None:
        """German numeric dates keep the ordinal period."""
        result = babel_formatter.format_range("2020-01-03", "2020-01-05", cfg(locale="de"))
        assert result == "03.–05.01.2020"

    def test_german_long(self, babel_formatter: RangeFormatter) -> None:
        """German long dates keep the ordinal period."""
        config = cfg(locale="de-DE", date_style="long")
        assert babel_formatter.format_range("2020-01-03", "2020-01-05", config) == (
            "3.–5. Januar 2020"
        )

    def test_french(self, babel_formatter: RangeFormatter) -> None:
        """Day-first locales share the month and year suffix."""
        assert babel_formatter.format_range(
            "2020-01-03", "2020-01-05", cfg(locale="fr")
        ) == "3–5 janv. 2020"

    def test_japanese(self, babel_formatter: RangeFormatter) -> None:
        """Year-first locales share the year and month prefix."""
        assert babel_formatter.format_range(
            "2020-01-03", "2020-01-05", cfg(locale="ja")
        ) == "2020/01/03–05"

    def test_english_time(self, babel_formatter: RangeFormatter) -> None:
        """The AM/PM marker is shared within one half of the day."""
        result = babel_formatter.format_range(
            "2020-01-03T10:00", "2020-01-03T11:30", cfg(time_style="short")
        )
        assert result.startswith("Jan 3, 2020, 10:00 – 11:30")
        assert result.endswith("AM")
        assert result.count("AM") == 1


class TestModuleFormatRange:
    """Test the module-level convenience function."""

    def test_shared_formatter(self) -> None:
        """default_formatter is created once."""
        assert default_formatter() is default_formatter()

    def test_defaults(self) -> None:
        """Keyword defaults match RangeConfig defaults."""
        assert format_range("2020-01-03", "2020-01-05") == "Jan 3–5, 2020"

    def test_options(self) -> None:
        """Keyword options build the configuration."""
        result = format_range(
            "2020-01-03", "2020-02-05", locale="en", date_style="medium", range_separator="to"
        )
        assert result == "Jan 3 to Feb 5, 2020"
