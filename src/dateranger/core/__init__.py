"""Core utilities shared across pattern and runtime layers.

This package holds the exception hierarchy that both the pattern layer
(parsing, tokenizing) and the runtime layer (comparison, orchestration)
raise. Isolating it here keeps the dependency graph clean:

    core <- pattern <- runtime

Exports:
    DateRangeError: Base exception
    InvalidInputError: Unrecognized start/end value
    PatternError: Malformed locale pattern
    TokenizationError: Formatted string does not match its mask

Python 3.13+.
"""

from .errors import DateRangeError, InvalidInputError, PatternError, TokenizationError

__all__ = ["DateRangeError", "InvalidInputError", "PatternError", "TokenizationError"]
