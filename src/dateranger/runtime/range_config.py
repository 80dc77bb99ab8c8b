"""Immutable range formatting configuration.

RangeConfig replaces setter-style configuration: a formatter never holds
style state, and its pattern mask cache is keyed by the configuration
value, so a changed style can never meet a stale mask.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateranger.constants import DEFAULT_DATE_TIME_SEPARATOR, DEFAULT_RANGE_SEPARATOR
from dateranger.enums import DateStyle
from dateranger.locale_utils import normalize_locale

from .inputs import DateLike

__all__ = ["MaskKey", "RangeConfig", "RangeRequest", "coerce_style"]

type MaskKey = tuple[str, DateStyle, DateStyle, str]


def coerce_style(value: DateStyle | str, name: str) -> DateStyle:
    """Convert a style name to DateStyle.

    Raises:
        ValueError: If the name is not one of none/full/long/medium/short
    """
    try:
        return DateStyle(value.lower() if isinstance(value, str) else value)
    except ValueError:
        allowed = ", ".join(style.value for style in DateStyle)
        msg = f"{name} must be one of {allowed}; got {value!r}"
        raise ValueError(msg) from None


@dataclass(frozen=True)
class RangeConfig:
    """Immutable configuration for one range formatting call.

    Attributes:
        locale: BCP-47 or POSIX locale code (default: "en")
        date_style: Style of the date portion (default: medium)
        time_style: Style of the time portion (default: none)
        range_separator: Text joining the differing middles (default: en dash)
        date_time_separator: Text joining date and time portions (default: ", ")
        timezone: IANA zone name points are displayed in. None keeps each
            aware value in its own zone and reads naive values as UTC.

    Example:
        >>> config = RangeConfig(locale="de", date_style="long", time_style="short")
        >>> config.date_style
        <DateStyle.LONG: 'long'>
        >>> config.with_time
        True
    """

    locale: str = "en"
    date_style: DateStyle = DateStyle.MEDIUM
    time_style: DateStyle = DateStyle.NONE
    range_separator: str = DEFAULT_RANGE_SEPARATOR
    date_time_separator: str = DEFAULT_DATE_TIME_SEPARATOR
    timezone: str | None = None

    def __post_init__(self) -> None:
        """Coerce style names and validate the combination.

        Raises:
            ValueError: If a style is unknown, both styles are none, the
                locale is blank, or the timezone is unknown
        """
        object.__setattr__(self, "date_style", coerce_style(self.date_style, "date_style"))
        object.__setattr__(self, "time_style", coerce_style(self.time_style, "time_style"))

        if self.date_style is DateStyle.NONE and self.time_style is DateStyle.NONE:
            msg = "date_style and time_style cannot both be none"
            raise ValueError(msg)
        if not self.locale.strip():
            msg = "locale must not be empty"
            raise ValueError(msg)
        if self.timezone is not None:
            # Fail at construction rather than on first use
            _ = self.tzinfo

    @property
    def with_time(self) -> bool:
        """True if the time portion is displayed."""
        return self.time_style is not DateStyle.NONE

    @property
    def mask_key(self) -> MaskKey:
        """Cache key of the pattern mask this configuration renders with."""
        return (
            normalize_locale(self.locale),
            self.date_style,
            self.time_style,
            self.date_time_separator,
        )

    @cached_property
    def tzinfo(self) -> ZoneInfo | None:
        """ZoneInfo for the configured timezone, or None."""
        if self.timezone is None:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown timezone {self.timezone!r}"
            raise ValueError(msg) from e


@dataclass(frozen=True, slots=True)
class RangeRequest:
    """A start/end pair plus the configuration to render it with.

    ``end`` defaults to ``start`` when None or blank, which renders a
    single point in time.
    """

    start: DateLike
    end: DateLike = None
    config: RangeConfig = field(default_factory=RangeConfig)
