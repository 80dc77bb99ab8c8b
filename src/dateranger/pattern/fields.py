"""Field classifier for CLDR date/time pattern letters.

Maps a single pattern letter to the coarse FieldCategory used for range
comparison. Letters that are not listed are literals.

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from dateranger.enums import FieldCategory

__all__ = ["PATTERN_FIELDS", "classify"]

# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
# CLDR pattern letter  | Category
# ---------------------|----------
# G                    | ERA
# y Y u U r            | YEAR      (calendar, week-based, extended, cyclic, related)
# Q q                  | QUARTER
# M L                  | MONTH     (format and stand-alone)
# w W                  | WEEK      (week of year, week of month)
# d D F g E e c        | DAY       (day of month/year, weekday, Julian day)
# a                    | AM_PM
# h H k K              | HOUR      (1-12, 0-23, 1-24, 0-11)
# m                    | MINUTE
# s S A                | SECOND    (second, fraction, milliseconds in day)
# z Z O v V X x        | TIMEZONE
PATTERN_FIELDS: MappingProxyType[str, FieldCategory] = MappingProxyType(
    {
        "G": FieldCategory.ERA,
        "y": FieldCategory.YEAR,
        "Y": FieldCategory.YEAR,
        "u": FieldCategory.YEAR,
        "U": FieldCategory.YEAR,
        "r": FieldCategory.YEAR,
        "Q": FieldCategory.QUARTER,
        "q": FieldCategory.QUARTER,
        "M": FieldCategory.MONTH,
        "L": FieldCategory.MONTH,
        "w": FieldCategory.WEEK,
        "W": FieldCategory.WEEK,
        "d": FieldCategory.DAY,
        "D": FieldCategory.DAY,
        "F": FieldCategory.DAY,
        "g": FieldCategory.DAY,
        "E": FieldCategory.DAY,
        "e": FieldCategory.DAY,
        "c": FieldCategory.DAY,
        "a": FieldCategory.AM_PM,
        "h": FieldCategory.HOUR,
        "H": FieldCategory.HOUR,
        "k": FieldCategory.HOUR,
        "K": FieldCategory.HOUR,
        "m": FieldCategory.MINUTE,
        "s": FieldCategory.SECOND,
        "S": FieldCategory.SECOND,
        "A": FieldCategory.SECOND,
        "z": FieldCategory.TIMEZONE,
        "Z": FieldCategory.TIMEZONE,
        "O": FieldCategory.TIMEZONE,
        "v": FieldCategory.TIMEZONE,
        "V": FieldCategory.TIMEZONE,
        "X": FieldCategory.TIMEZONE,
        "x": FieldCategory.TIMEZONE,
    }
)


def classify(char: str) -> FieldCategory | None:
    """Return the field category of a pattern letter, or None for literals.

    The CLDR day-period letters b and B are not classified. Patterns that
    use them (zh_Hant times, "Bh:mm") keep the letter as literal text,
    which never matches the formatted period name, so tokenize raises
    TokenizationError for those locales.

    Example:
        >>> classify("M")
        <FieldCategory.MONTH: 3>
        >>> classify(",") is None
        True
    """
    return PATTERN_FIELDS.get(char)
