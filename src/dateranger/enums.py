"""Enumerations for dateranger type-safe constants.

FieldCategory is an IntEnum: its members double as comparable precision
levels, ordered from coarsest to finest. DateStyle is a StrEnum, so its
members are the style strings Babel expects.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class FieldCategory(IntEnum):
    """Coarse semantic category of a date/time pattern field.

    Members are ordered from coarsest to finest so that a category can be
    used as a precision level: ``FieldCategory.MONTH < FieldCategory.DAY``.
    """

    ALWAYS_EXPAND = -2
    """No shared portion: start and end are rendered in full."""

    TIMEZONE = -1
    """Zone name or offset. Sits below ERA, outside the precision scale."""

    ERA = 0
    YEAR = 1
    QUARTER = 2
    MONTH = 3
    WEEK = 4
    DAY = 5
    AM_PM = 6
    HOUR = 7
    MINUTE = 8
    SECOND = 9


class DateStyle(StrEnum):
    """Display style for the date portion or the time portion of a point.

    StrEnum provides automatic string conversion: str(DateStyle.MEDIUM) == "medium"
    """

    NONE = "none"
    """Portion omitted entirely."""

    FULL = "full"
    """Most verbose form: Friday, January 3, 2020"""

    LONG = "long"
    """January 3, 2020"""

    MEDIUM = "medium"
    """Jan 3, 2020"""

    SHORT = "short"
    """1/3/20"""


__all__ = [
    "DateStyle",
    "FieldCategory",
]
