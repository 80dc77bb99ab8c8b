"""Runtime layer: compare, resolve and orchestrate range formatting.

Exports:
    RangeFormatter: Orchestrates point formatting, comparison and merging
    RangeConfig: Immutable formatting configuration
    RangeRequest: Start/end pair with its configuration
    PointFormatter, BabelPointFormatter: Single-point formatting boundary
    SeparatorResolver, SeparatorProvider: Locale-pluggable range separators
    find_split: Granularity comparator
    prepare: Input normalization
    format_range: Format with the shared default formatter

Python 3.13+.
"""

from .formatter import RangeFormatter, default_formatter, format_range
from .granularity import find_split
from .inputs import DateLike, prepare
from .point_formatter import BabelPointFormatter, PointFormatter
from .range_config import RangeConfig, RangeRequest
from .separators import DefaultProvider, GermanProvider, SeparatorProvider, SeparatorResolver

__all__ = [
    "BabelPointFormatter",
    "DateLike",
    "DefaultProvider",
    "GermanProvider",
    "PointFormatter",
    "RangeConfig",
    "RangeFormatter",
    "RangeRequest",
    "SeparatorProvider",
    "SeparatorResolver",
    "default_formatter",
    "find_split",
    "format_range",
    "prepare",
]
