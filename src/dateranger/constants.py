"""Shared constants for dateranger.

Centralizes the defaults used by the range formatter, the pattern parser
and the host adapters. Placing them here avoids circular imports between
the pattern and runtime packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separators
    "DEFAULT_RANGE_SEPARATOR",
    "DEFAULT_DATE_TIME_SEPARATOR",
    # Pattern syntax
    "ESCAPE_CHARACTER",
    # Cache limits
    "MAX_MASK_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Host configuration
    "ALLOWED_FORMATS",
    "RESTRICTED_FORMATS",
    "FALLBACK_LOCALE",
]

# ============================================================================
# SEPARATORS
# ============================================================================

# En dash joins the differing middles of a range ("Jan 3–5, 2020").
DEFAULT_RANGE_SEPARATOR: str = "–"

# Joins the date portion and the time portion of one point.
DEFAULT_DATE_TIME_SEPARATOR: str = ", "

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# CLDR patterns quote literal text with apostrophes: "h 'o''clock' a".
ESCAPE_CHARACTER: str = "'"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Pattern masks per RangeFormatter instance. One entry per distinct
# (locale, date style, time style, date-time separator) combination.
MAX_MASK_CACHE_SIZE: int = 128

# Parsed Babel Locale objects (lru_cache in locale_utils).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# HOST CONFIGURATION
# ============================================================================

# Style names a host may offer for date and time formats.
ALLOWED_FORMATS: tuple[str, ...] = ("none", "full", "long", "medium", "short")

# Time styles a host offers when its locale facility lacks full i18n support.
RESTRICTED_FORMATS: tuple[str, ...] = ("none", "short")

# Locale used when a requested locale is unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"
