"""Pattern layer: classify, parse and tokenize CLDR date/time patterns.

This package knows nothing about time points or locales. It turns raw
pattern strings into masks and splits formatted strings along them.

Exports:
    classify: Pattern letter to FieldCategory
    parse_pattern: Raw pattern to PatternMask
    combine_patterns: Join date and time patterns with a quoted separator
    tokenize: Formatted string to tokens aligned with a mask
    PatternMask, FieldSegment, LiteralSegment, PatternSegment, Token

Python 3.13+. Zero external dependencies.
"""

from .fields import classify
from .mask import (
    FieldSegment,
    LiteralSegment,
    PatternMask,
    PatternSegment,
    combine_patterns,
    parse_pattern,
)
from .tokenizer import Token, tokenize

__all__ = [
    "FieldSegment",
    "LiteralSegment",
    "PatternMask",
    "PatternSegment",
    "Token",
    "classify",
    "combine_patterns",
    "parse_pattern",
    "tokenize",
]
