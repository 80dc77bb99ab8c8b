"""Point formatters: single-instant formatting and raw pattern discovery.

The range formatter never formats dates itself. It asks a PointFormatter
for (a) the raw CLDR pattern of a date or time style and (b) the text of
one instant in that style, then compares and merges the results.

BabelPointFormatter is the default implementation, backed by Babel's CLDR
data. Tests and hosts with their own locale facility can supply any object
implementing the PointFormatter protocol.

Thread-safe. Babel is thread-safe and locale resolution is cached via
lru_cache.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

from babel import UnknownLocaleError
from babel import dates as babel_dates

from dateranger.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE
from dateranger.enums import DateStyle
from dateranger.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["BabelPointFormatter", "PointFormatter", "resolve_locale", "single_style"]

logger = logging.getLogger(__name__)


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class PointFormatter(Protocol):
    """Locale-aware formatter of single time points.

    Exactly one of ``date_style`` and ``time_style`` is not DateStyle.NONE
    in every call: the range formatter asks for the date portion and the
    time portion separately and joins them itself.
    """

    def get_pattern(
        self,
        locale_code: str,
        date_style: DateStyle,
        time_style: DateStyle,
    ) -> str:
        """Return the raw CLDR pattern used for the given style."""
        ...

    def format_point(
        self,
        value: datetime,
        locale_code: str,
        date_style: DateStyle,
        time_style: DateStyle,
    ) -> str:
        """Format an aware datetime in the given style."""
        ...
# pylint: enable=unnecessary-ellipsis


def single_style(date_style: DateStyle, time_style: DateStyle) -> tuple[bool, DateStyle]:
    """Return (is_date, style) for a call that selects exactly one portion.

    Raises:
        ValueError: If both styles or neither style is none
    """
    if (date_style is DateStyle.NONE) == (time_style is DateStyle.NONE):
        msg = (
            "Exactly one of date_style and time_style must be none; "
            f"got {date_style!s}/{time_style!s}"
        )
        raise ValueError(msg)
    if date_style is not DateStyle.NONE:
        return True, date_style
    return False, time_style


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def resolve_locale(locale_code: str, *, strict: bool = False) -> Locale:
    """Resolve a locale code to a Babel Locale.

    For unknown or invalid locales, logs a warning and falls back to en_US
    unless ``strict`` is set. Cached, so each bad code is reported once.

    Args:
        locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')
        strict: Raise instead of falling back

    Returns:
        Babel Locale

    Raises:
        ValueError: If strict and the locale is unknown or malformed
    """
    try:
        return get_babel_locale(normalize_locale(locale_code))
    except UnknownLocaleError as e:
        if strict:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE)
    except (ValueError, TypeError) as e:
        if strict:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    return get_babel_locale(FALLBACK_LOCALE)


class BabelPointFormatter:
    """PointFormatter backed by Babel's CLDR data.

    Examples:
        >>> from datetime import UTC, datetime
        >>> formatter = BabelPointFormatter()
        >>> formatter.get_pattern("en", DateStyle.MEDIUM, DateStyle.NONE)
        'MMM d, y'
        >>> dt = datetime(2020, 1, 3, tzinfo=UTC)
        >>> formatter.format_point(dt, "en", DateStyle.MEDIUM, DateStyle.NONE)
        'Jan 3, 2020'
    """

    __slots__ = ("_strict",)

    def __init__(self, *, strict: bool = False) -> None:
        """Create a Babel-backed point formatter.

        Args:
            strict: Raise ValueError for unknown locales instead of
                falling back to en_US
        """
        self._strict = strict

    @property
    def strict(self) -> bool:
        """True if unknown locales raise instead of falling back."""
        return self._strict

    def get_pattern(
        self,
        locale_code: str,
        date_style: DateStyle,
        time_style: DateStyle,
    ) -> str:
        """Return the CLDR pattern Babel uses for a date or time style."""
        is_date, style = single_style(date_style, time_style)
        locale = resolve_locale(locale_code, strict=self._strict)
        if is_date:
            return str(babel_dates.get_date_format(style.value, locale=locale).pattern)
        return str(babel_dates.get_time_format(style.value, locale=locale).pattern)

    def format_point(
        self,
        value: datetime,
        locale_code: str,
        date_style: DateStyle,
        time_style: DateStyle,
    ) -> str:
        """Format the date or the time portion of an aware datetime.

        The value is rendered in its own timezone: Babel's format_date
        takes the wall-clock date as-is, and format_time is given the
        value's tzinfo so zone names match the offset.
        """
        is_date, style = single_style(date_style, time_style)
        locale = resolve_locale(locale_code, strict=self._strict)
        if is_date:
            return str(babel_dates.format_date(value, format=style.value, locale=locale))
        return str(
            babel_dates.format_time(value, format=style.value, tzinfo=value.tzinfo, locale=locale)
        )
