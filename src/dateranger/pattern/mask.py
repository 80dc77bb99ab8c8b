"""Pattern parser: CLDR date/time pattern to pattern mask.

A pattern mask is the ordered structure of a locale's display pattern,
split into field segments (one per run of letters of one category) and
literal segments (punctuation and quoted text that appear verbatim).

CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

Examples:
    "MMM d, y"      -> [MONTH, " ", DAY, ", ", YEAR]
    "h 'o''clock' a" -> [HOUR, " ", "o'clock", " ", AM_PM]

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from dateranger.constants import ESCAPE_CHARACTER
from dateranger.core.errors import PatternError
from dateranger.enums import FieldCategory

from .fields import classify

__all__ = [
    "FieldSegment",
    "LiteralSegment",
    "PatternMask",
    "PatternSegment",
    "combine_patterns",
    "parse_pattern",
    "quote_literal",
]


@dataclass(frozen=True, slots=True)
class FieldSegment:
    """Contiguous run of pattern letters belonging to one category."""

    category: FieldCategory


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Literal text that must appear verbatim in formatted output."""

    text: str

    def __post_init__(self) -> None:
        """Reject empty literals (they would match anywhere)."""
        if not self.text:
            msg = "LiteralSegment text must not be empty"
            raise ValueError(msg)


type PatternSegment = FieldSegment | LiteralSegment


@dataclass(frozen=True, slots=True)
class PatternMask:
    """Parsed, ordered structure of a date/time pattern.

    Attributes:
        pattern: Raw pattern the mask was parsed from
        segments: Field and literal segments in pattern order
        precision: Finest field category in the mask (ALWAYS_EXPAND if none)
    """

    pattern: str
    segments: tuple[PatternSegment, ...]
    precision: FieldCategory

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PatternSegment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> PatternSegment:
        return self.segments[index]


def quote_literal(text: str) -> str:
    """Wrap text in CLDR quotes so every character is taken literally.

    Example:
        >>> quote_literal(", ")
        "', '"
        >>> quote_literal("o'clock")
        "'o''clock'"
    """
    escaped = text.replace(ESCAPE_CHARACTER, ESCAPE_CHARACTER * 2)
    return f"{ESCAPE_CHARACTER}{escaped}{ESCAPE_CHARACTER}"


def combine_patterns(date_pattern: str, time_pattern: str, date_time_separator: str) -> str:
    """Join a date pattern and a time pattern with a quoted separator.

    Either pattern may be empty (style "none"), in which case the other is
    returned unchanged.

    Example:
        >>> combine_patterns("MMM d, y", "h:mm a", ", ")
        "MMM d, y', 'h:mm a"
    """
    if not date_pattern:
        return time_pattern
    if not time_pattern:
        return date_pattern
    if not date_time_separator:
        return date_pattern + time_pattern
    return date_pattern + quote_literal(date_time_separator) + time_pattern


def parse_pattern(pattern: str) -> PatternMask:
    """Parse a CLDR date/time pattern into a PatternMask.

    Args:
        pattern: Raw CLDR pattern (e.g., "MMM d, y")

    Returns:
        PatternMask with segments in pattern order

    Raises:
        PatternError: If two different field categories are adjacent
            without a literal between them (e.g., "yyyyMMdd")
    """
    segments: list[PatternSegment] = []
    literal_chars: list[str] = []
    open_field: FieldCategory | None = None
    precision = FieldCategory.ALWAYS_EXPAND

    def flush_literal() -> None:
        if literal_chars:
            segments.append(LiteralSegment("".join(literal_chars)))
            literal_chars.clear()

    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == ESCAPE_CHARACTER:
            # Escape boundary: finalize whatever is open
            flush_literal()
            open_field = None

            # '' outside a quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == ESCAPE_CHARACTER:
                segments.append(LiteralSegment(ESCAPE_CHARACTER))
                i += 2
                continue

            i += 1  # Skip opening quote
            quoted: list[str] = []
            while i < n:
                if pattern[i] == ESCAPE_CHARACTER:
                    if i + 1 < n and pattern[i + 1] == ESCAPE_CHARACTER:
                        quoted.append(ESCAPE_CHARACTER)
                        i += 2
                    else:
                        i += 1  # Closing quote
                        break
                else:
                    quoted.append(pattern[i])
                    i += 1

            # Unterminated quote runs to end of pattern
            if quoted:
                segments.append(LiteralSegment("".join(quoted)))
            continue

        category = classify(char)

        if category is None:
            open_field = None
            literal_chars.append(char)
        elif open_field is None:
            flush_literal()
            segments.append(FieldSegment(category))
            open_field = category
            precision = max(precision, category)
        elif open_field is not category:
            msg = (
                f"missing separator between date parts at position {i} in {pattern!r}"
            )
            raise PatternError(msg, pattern=pattern, position=i)

        i += 1

    flush_literal()
    return PatternMask(pattern=pattern, segments=tuple(segments), precision=precision)
