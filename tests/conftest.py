"""Shared pytest configuration: Hypothesis profiles, fuzz marker, fixtures.

Hypothesis profiles (HYPOTHESIS_PROFILE overrides, CI=true selects "ci"):
    dev      500 examples, the local default
    ci       50 derandomized examples
    verbose  100 examples with progress output

Tests marked @pytest.mark.fuzz sweep extra locales and run only with
``pytest -m fuzz``.
"""

from __future__ import annotations

import os
from datetime import datetime

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from dateranger.enums import DateStyle
from dateranger.runtime.formatter import RangeFormatter

# Fixtures such as table_formatter are stateless across examples
_COMMON = {"suppress_health_check": [HealthCheck.function_scoped_fixture]}

settings.register_profile("dev", max_examples=500, **_COMMON)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True, **_COMMON)
settings.register_profile("verbose", max_examples=100, verbosity=Verbosity.verbose, **_COMMON)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="locale sweep; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)


class TablePointFormatter:
    """PointFormatter with fixed patterns and strftime-based output.

    Keeps orchestration tests independent of the installed CLDR version.
    Patterns and strftime formats are keyed by style; every locale shares
    them. Calls are recorded for cache assertions.
    """

    DATE = {
        DateStyle.SHORT: ("M/d/yy", "{d.month}/{d.day}/{yy}"),
        DateStyle.MEDIUM: ("MMM d, y", "{mon} {d.day}, {d.year}"),
        DateStyle.LONG: ("MMMM d, y", "{month} {d.day}, {d.year}"),
        DateStyle.FULL: ("EEEE, MMMM d, y", "{weekday}, {month} {d.day}, {d.year}"),
    }
    TIME = {
        DateStyle.SHORT: ("h:mm a", "{h12}:{d.minute:02d} {ampm}"),
        DateStyle.MEDIUM: ("h:mm:ss a", "{h12}:{d.minute:02d}:{d.second:02d} {ampm}"),
        DateStyle.LONG: ("HH:mm:ss", "{d.hour:02d}:{d.minute:02d}:{d.second:02d}"),
        DateStyle.FULL: ("HH:mm:ss z", "{d.hour:02d}:{d.minute:02d}:{d.second:02d} {tz}"),
    }

    def __init__(self) -> None:
        self.pattern_calls: list[tuple[str, DateStyle, DateStyle]] = []

    def get_pattern(self, locale_code: str, date_style: DateStyle, time_style: DateStyle) -> str:
        self.pattern_calls.append((locale_code, date_style, time_style))
        if date_style is not DateStyle.NONE:
            return self.DATE[date_style][0]
        return self.TIME[time_style][0]

    def format_point(
        self, value: datetime, locale_code: str, date_style: DateStyle, time_style: DateStyle
    ) -> str:
        if date_style is not DateStyle.NONE:
            template = self.DATE[date_style][1]
        else:
            template = self.TIME[time_style][1]
        return template.format(
            d=value,
            yy=f"{value.year % 100:02d}",
            mon=value.strftime("%b"),
            month=value.strftime("%B"),
            weekday=value.strftime("%A"),
            h12=value.hour % 12 or 12,
            ampm="AM" if value.hour < 12 else "PM",
            tz=value.tzname(),
        )


@pytest.fixture
def table_formatter() -> TablePointFormatter:
    """Fresh table-driven point formatter."""
    return TablePointFormatter()


@pytest.fixture
def range_formatter(table_formatter: TablePointFormatter) -> RangeFormatter:
    """RangeFormatter over the table-driven point formatter."""
    return RangeFormatter(table_formatter)


@pytest.fixture
def babel_formatter() -> RangeFormatter:
    """RangeFormatter over Babel's CLDR data."""
    return RangeFormatter()
