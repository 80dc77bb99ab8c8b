"""Range formatter: compact, locale-correct text for a time range.

Architecture:
    - Both points are formatted independently by a PointFormatter
    - The granularity comparator decides where the points diverge
    - Both strings are tokenized along the cached pattern mask
    - Shared prefix and suffix are printed once; the differing middles
      are printed for both points, joined by the resolved separator

Example:
    start  "Jan 3, 2020"     tokens  Jan | " " | 3 | ", " | 2020
    end    "Jan 5, 2020"     tokens  Jan | " " | 5 | ", " | 2020
    split  MONTH             left "Jan "   middles "3" / "5"   right ", 2020"
    result "Jan 3–5, 2020"

Thread Safety:
    RangeFormatter holds no style state. The pattern mask cache is an
    OrderedDict LRU protected by RLock; concurrent misses for the same
    key build the mask twice and keep the first.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import datetime
from functools import cache
from threading import RLock
from typing import Any

from dateranger.constants import MAX_MASK_CACHE_SIZE
from dateranger.enums import DateStyle, FieldCategory
from dateranger.pattern import (
    FieldSegment,
    PatternMask,
    Token,
    combine_patterns,
    parse_pattern,
    tokenize,
)

from .granularity import find_split
from .inputs import DateLike, is_absent, prepare
from .point_formatter import BabelPointFormatter, PointFormatter
from .range_config import MaskKey, RangeConfig, RangeRequest
from .separators import SeparatorResolver

__all__ = ["RangeFormatter", "default_formatter", "format_range"]

logger = logging.getLogger(__name__)


class RangeFormatter:
    """Formats start/end pairs as compact locale-aware ranges.

    Examples:
        >>> formatter = RangeFormatter()
        >>> formatter.format_range("2020-01-03", "2020-01-05")
        'Jan 3–5, 2020'

        >>> formatter.format_range("2020-01-03", "2020-02-05")
        'Jan 3 – Feb 5, 2020'

        >>> formatter.format_range("2020-01-03")
        'Jan 3, 2020'

        >>> config = RangeConfig(time_style="short")
        >>> formatter.format_range("2020-01-03T10:00", "2020-01-03T11:30", config)
        'Jan 3, 2020, 10:00 – 11:30\\u202fAM'
    """

    __slots__ = ("_cache", "_cache_lock", "_max_cache_size", "_point_formatter", "_separators")

    def __init__(
        self,
        point_formatter: PointFormatter | None = None,
        *,
        separators: SeparatorResolver | None = None,
        cache_size: int = MAX_MASK_CACHE_SIZE,
    ) -> None:
        """Create a range formatter.

        Args:
            point_formatter: Single-point formatter (default: BabelPointFormatter)
            separators: Separator registry (default: built-in providers)
            cache_size: Maximum cached pattern masks

        Raises:
            ValueError: If cache_size is not positive
        """
        if cache_size <= 0:
            msg = "cache_size must be positive"
            raise ValueError(msg)
        self._point_formatter: PointFormatter = (
            point_formatter if point_formatter is not None else BabelPointFormatter()
        )
        self._separators = separators if separators is not None else SeparatorResolver()
        self._max_cache_size = cache_size
        self._cache: OrderedDict[MaskKey, PatternMask] = OrderedDict()
        self._cache_lock = RLock()

    @property
    def point_formatter(self) -> PointFormatter:
        """The single-point formatter in use."""
        return self._point_formatter

    @property
    def separators(self) -> SeparatorResolver:
        """The separator registry in use."""
        return self._separators

    # ------------------------------------------------------------------
    # Pattern mask cache
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        """Drop all cached pattern masks."""
        with self._cache_lock:
            self._cache.clear()

    def cache_size(self) -> int:
        """Number of cached pattern masks."""
        with self._cache_lock:
            return len(self._cache)

    def cache_info(self) -> dict[str, Any]:
        """Cache statistics: size, max_size, and keys in LRU order."""
        with self._cache_lock:
            return {
                "size": len(self._cache),
                "max_size": self._max_cache_size,
                "keys": tuple(self._cache.keys()),
            }

    def pattern_mask(self, config: RangeConfig) -> PatternMask:
        """Return the pattern mask for a configuration, building it on a miss.

        Raises:
            PatternError: If the locale's combined pattern is malformed
        """
        key = config.mask_key

        with self._cache_lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                return self._cache[key]

        locale_code = config.locale
        date_pattern = ""
        time_pattern = ""
        if config.date_style is not DateStyle.NONE:
            date_pattern = self._point_formatter.get_pattern(
                locale_code, config.date_style, DateStyle.NONE
            )
        if config.with_time:
            time_pattern = self._point_formatter.get_pattern(
                locale_code, DateStyle.NONE, config.time_style
            )

        mask = parse_pattern(
            combine_patterns(date_pattern, time_pattern, config.date_time_separator)
        )
        logger.debug("Built pattern mask for %s: %r", key, mask.pattern)

        with self._cache_lock:
            if key in self._cache:
                return self._cache[key]
            if len(self._cache) >= self._max_cache_size:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Evicted pattern mask for %s", evicted)
            self._cache[key] = mask
            return mask

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, request: RangeRequest) -> str:
        """Format a range request.

        Args:
            request: Start, optional end, and configuration

        Returns:
            Compact range text, or a single point if start and end are
            indistinguishable at the configured display precision

        Raises:
            InvalidInputError: If start or end is not a recognized date value
            PatternError: If the locale's pattern is malformed
        """
        config = request.config
        start = prepare(request.start, config.tzinfo)
        end = start if is_absent(request.end) else prepare(request.end, config.tzinfo)
        return self._format_points(start, end, config)

    def format_range(
        self,
        start: DateLike,
        end: DateLike = None,
        config: RangeConfig | None = None,
    ) -> str:
        """Format a range from loose arguments (see format)."""
        return self.format(RangeRequest(start, end, config if config is not None else RangeConfig()))

    def format_point(self, value: DateLike, config: RangeConfig | None = None) -> str:
        """Format a single point in time with a range configuration.

        Raises:
            InvalidInputError: If value is not a recognized date value
        """
        config = config if config is not None else RangeConfig()
        return self._render(prepare(value, config.tzinfo), config)

    def _render(self, point: datetime, config: RangeConfig) -> str:
        """Format one point: date portion, then time portion."""
        parts: list[str] = []
        if config.date_style is not DateStyle.NONE:
            parts.append(
                self._point_formatter.format_point(
                    point, config.locale, config.date_style, DateStyle.NONE
                )
            )
        if config.with_time:
            parts.append(
                self._point_formatter.format_point(
                    point, config.locale, DateStyle.NONE, config.time_style
                )
            )
        return config.date_time_separator.join(parts)

    def _format_points(self, start: datetime, end: datetime, config: RangeConfig) -> str:
        mask = self.pattern_mask(config)
        split = find_split(start, end, with_time=config.with_time)

        start_tokens = tokenize(self._render(start, config), mask)
        end_tokens = tokenize(self._render(end, config), mask)

        # Shared prefix: up to the first field finer than the split
        first = _first_finer(mask, split)
        left = _join(start_tokens[:first])

        if split >= mask.precision:
            # Identical at the displayed resolution: one point in time
            return left

        # Shared suffix: after the last field finer than the split
        last = _last_finer(mask, split)
        right = _join(end_tokens[last + 1 :])

        left_middle = _join(start_tokens[first : last + 1])
        right_middle = _join(end_tokens[first : last + 1])
        separator = self._separators.resolve(
            config.locale, split, config.range_separator, date_style=config.date_style
        )
        return f"{left}{left_middle}{separator}{right_middle}{right}"


def _is_finer(segment: object, split: FieldCategory) -> bool:
    return isinstance(segment, FieldSegment) and segment.category > split


def _first_finer(mask: PatternMask, split: FieldCategory) -> int:
    """Index of the first field finer than split, or len(mask) if none."""
    for index, segment in enumerate(mask):
        if _is_finer(segment, split):
            return index
    return len(mask)


def _last_finer(mask: PatternMask, split: FieldCategory) -> int:
    """Index of the last field finer than split, or -1 if none."""
    for index in range(len(mask) - 1, -1, -1):
        if _is_finer(mask[index], split):
            return index
    return -1


def _join(tokens: tuple[Token, ...]) -> str:
    return "".join(token.content for token in tokens)


@cache
def default_formatter() -> RangeFormatter:
    """Shared Babel-backed RangeFormatter (created on first use)."""
    return RangeFormatter()


def format_range(
    start: DateLike,
    end: DateLike = None,
    *,
    locale: str = "en",
    date_style: DateStyle | str = DateStyle.MEDIUM,
    time_style: DateStyle | str = DateStyle.NONE,
    range_separator: str | None = None,
    date_time_separator: str | None = None,
    timezone: str | None = None,
) -> str:
    """Format a range with the shared default formatter.

    Separators left as None use the package defaults.

    Example:
        >>> format_range("2020-01-03", "2020-01-05")
        'Jan 3–5, 2020'
        >>> format_range("2020-01-03", "2020-01-05", locale="de")
        '03.–05.01.2020'
    """
    options: dict[str, Any] = {}
    if range_separator is not None:
        options["range_separator"] = range_separator
    if date_time_separator is not None:
        options["date_time_separator"] = date_time_separator
    config = RangeConfig(
        locale=locale,
        date_style=date_style,  # type: ignore[arg-type]
        time_style=time_style,  # type: ignore[arg-type]
        timezone=timezone,
        **options,
    )
    return default_formatter().format_range(start, end, config)
