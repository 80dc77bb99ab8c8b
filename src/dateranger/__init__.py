"""dateranger - compact, locale-aware date and time ranges.

Formats a start and an end point as the shortest locale-correct range by
printing the portions they share once: "Jan 3–5, 2020" instead of
"Jan 3, 2020 – Jan 5, 2020". Locale patterns are taken from CLDR via
Babel and manipulated generically, so every CLDR locale works without
per-locale format tables.

Public API:
    RangeFormatter - Range formatting with a cached pattern mask per style
    RangeConfig - Immutable locale, style and separator configuration
    RangeRequest - Start/end pair with its configuration
    format_range - Format a range with the shared default formatter
    DateStyle - Style names: none, full, long, medium, short
    FieldCategory - Pattern field categories, coarsest to finest

Exceptions:
    DateRangeError - Base exception class
    InvalidInputError - Unrecognized start/end value
    PatternError - Malformed locale pattern
    TokenizationError - Formatted string does not match its pattern

Submodules:
    dateranger.pattern - Pattern classification, parsing and tokenizing
    dateranger.runtime - Comparator, separators, point formatters, orchestration
    dateranger.integration - Host and template adapters
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import DateRangeError, InvalidInputError, PatternError, TokenizationError
from .enums import DateStyle, FieldCategory
from .runtime import RangeConfig, RangeFormatter, RangeRequest, format_range

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("dateranger")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateRangeError",
    "DateStyle",
    "FieldCategory",
    "InvalidInputError",
    "PatternError",
    "RangeConfig",
    "RangeFormatter",
    "RangeRequest",
    "TokenizationError",
    "__version__",
    "format_range",
]
