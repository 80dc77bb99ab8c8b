"""Host adapters: thin pass-through helpers for applications and templates.

A content system that displays stored dates needs four things around the
range formatter: the list of style names to offer in its settings UI,
lenient style-name parsing, conversion of stored UTC values into the
viewer's timezone, and template-friendly entry points. None of these hold
logic of their own; they resolve host-level inputs and call RangeFormatter.

Template Engines:
    TEMPLATE_FILTERS and TEMPLATE_FUNCTIONS map names to callables and can
    be merged into any engine's registry, e.g. for Jinja2:

        env.filters.update(TEMPLATE_FILTERS)
        env.globals.update(TEMPLATE_FUNCTIONS)

    {{ event.start | intl_date("long", "short") }}
    {{ current_lang() }}

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any
from zoneinfo import ZoneInfo

from dateranger.constants import ALLOWED_FORMATS, RESTRICTED_FORMATS
from dateranger.enums import DateStyle
from dateranger.locale_utils import get_system_locale, language_code
from dateranger.runtime.formatter import RangeFormatter, default_formatter
from dateranger.runtime.inputs import DateLike, is_absent, prepare
from dateranger.runtime.range_config import RangeConfig

__all__ = [
    "TEMPLATE_FILTERS",
    "TEMPLATE_FUNCTIONS",
    "allowed_formats",
    "current_language",
    "daterange",
    "format_datetime",
    "resolve_style",
    "to_user_timezone",
]

logger = logging.getLogger(__name__)


def allowed_formats(restrict_intl: bool = False) -> tuple[str, ...]:
    """Style names a host may offer in its settings UI.

    Args:
        restrict_intl: Offer only "none" and "short" (for hosts whose locale
            facility lacks full internationalization support)

    Example:
        >>> allowed_formats()
        ('none', 'full', 'long', 'medium', 'short')
        >>> allowed_formats(restrict_intl=True)
        ('none', 'short')
    """
    return RESTRICTED_FORMATS if restrict_intl else ALLOWED_FORMATS


def resolve_style(name: str | DateStyle | None) -> DateStyle:
    """Map a host style name to DateStyle, defaulting to medium.

    Stored settings may hold names from older configurations; anything
    unrecognized renders as medium instead of failing the page.
    """
    if name is None:
        return DateStyle.MEDIUM
    try:
        return DateStyle(str(name).lower())
    except ValueError:
        logger.debug("Unknown style name %r, using medium", name)
        return DateStyle.MEDIUM


def to_user_timezone(value: DateLike, timezone: str | None) -> datetime:
    """Read a stored value as UTC and convert it to the viewer's timezone.

    Naive values and ISO strings without an offset are taken as UTC.

    Args:
        value: Stored date-like value
        timezone: IANA zone of the viewer (None keeps UTC)

    Raises:
        InvalidInputError: If value is not a recognized date value
        zoneinfo.ZoneInfoNotFoundError: If timezone is unknown
    """
    point = prepare(value, UTC)
    if timezone is None:
        return point
    return point.astimezone(ZoneInfo(timezone))


def daterange(
    start: DateLike,
    end: DateLike = None,
    date_format: str | DateStyle = "medium",
    time_format: str | DateStyle = "short",
    range_separator: str | None = None,
    date_time_separator: str | None = None,
    locale: str = "en",
    timezone: str | None = None,
    *,
    formatter: RangeFormatter | None = None,
) -> str:
    """Simplify a date range for display.

    Values that are not datetime objects are stored values: they are read
    as UTC and shown in ``timezone``, as format_datetime does.

    Args:
        start: Range start
        end: Range end (None or blank renders start alone)
        date_format: Date style name (unknown names mean medium)
        time_format: Time style name (unknown names mean medium)
        range_separator: Override of the range separator
        date_time_separator: Override of the date-time separator
        locale: Locale code
        timezone: IANA zone the range is displayed in
        formatter: RangeFormatter to use (default: shared formatter)

    Example:
        >>> daterange("2020-01-03T10:00", "2020-01-05T12:00", time_format="none")
        'Jan 3–5, 2020'
    """
    options: dict[str, Any] = {}
    if range_separator is not None:
        options["range_separator"] = range_separator
    if date_time_separator is not None:
        options["date_time_separator"] = date_time_separator

    config = RangeConfig(
        locale=locale,
        date_style=resolve_style(date_format),
        time_style=resolve_style(time_format),
        timezone=timezone,
        **options,
    )
    if is_absent(end):
        end = start
    if not isinstance(start, datetime):
        start = to_user_timezone(start, timezone)
    if not isinstance(end, datetime):
        end = to_user_timezone(end, timezone)
    return (formatter or default_formatter()).format_range(start, end, config)


def format_datetime(
    value: DateLike,
    date_format: str | DateStyle = "medium",
    time_format: str | DateStyle = "none",
    lang: str | None = None,
    *,
    timezone: str | None = None,
    formatter: RangeFormatter | None = None,
) -> str:
    """Format a single date or datetime (the ``intl_date`` template filter).

    Values that are not datetime objects are stored values: they are read
    as UTC and shown in ``timezone``.

    Args:
        value: Date-like value
        date_format: Date style name
        time_format: Time style name
        lang: Language code (default: current_language())
        timezone: IANA zone of the viewer
        formatter: RangeFormatter to use (default: shared formatter)

    Example:
        >>> format_datetime("2020-01-03", "long", lang="en")
        'January 3, 2020'
    """
    if not isinstance(value, datetime):
        value = to_user_timezone(value, timezone)
    config = RangeConfig(
        locale=lang if lang is not None else current_language(),
        date_style=resolve_style(date_format),
        time_style=resolve_style(time_format),
        timezone=timezone,
    )
    return (formatter or default_formatter()).format_point(value, config)


def current_language() -> str:
    """Two-letter language code of the process locale.

    Example:
        >>> import os
        >>> os.environ["LC_ALL"] = "de_DE.UTF-8"
        >>> current_language()  # doctest: +SKIP
        'de'
    """
    return language_code(get_system_locale())


TEMPLATE_FILTERS: Mapping[str, Callable[..., str]] = MappingProxyType(
    {"intl_date": format_datetime}
)
TEMPLATE_FUNCTIONS: Mapping[str, Callable[..., str]] = MappingProxyType(
    {"current_lang": current_language}
)
