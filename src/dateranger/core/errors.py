"""Exception hierarchy for date range formatting.

All errors derive from DateRangeError so callers can catch the whole
family with one clause. Errors are deterministic given the same inputs
and are never retried internally.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DateRangeError",
    "InvalidInputError",
    "PatternError",
    "TokenizationError",
]


class DateRangeError(Exception):
    """Base exception for all dateranger errors."""


class InvalidInputError(DateRangeError):
    """Start or end value is not a recognized time representation.

    Raised for unsupported types (lists, decimals, bools, ...) and for
    strings that are not ISO 8601.

    Attributes:
        value: The rejected input
    """

    def __init__(self, message: str, *, value: object = None) -> None:
        """Initialize InvalidInputError.

        Args:
            message: Human-readable error message
            value: The rejected input
        """
        super().__init__(message)
        self.value = value


class PatternError(DateRangeError):
    """Locale pattern juxtaposes two field categories without a literal.

    Real CLDR patterns are well-formed, so this indicates malformed or
    unsupported locale data.

    Attributes:
        pattern: The raw pattern that failed to parse
        position: Index of the offending character in the pattern

    Example:
        >>> parse_pattern("yyyyMMdd")
        Traceback (most recent call last):
            ...
        PatternError: missing separator between date parts at position 4 in 'yyyyMMdd'
    """

    def __init__(self, message: str, *, pattern: str = "", position: int = -1) -> None:
        """Initialize PatternError.

        Args:
            message: Human-readable error message
            pattern: The raw pattern that failed to parse
            position: Index of the offending character (-1 if unknown)
        """
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class TokenizationError(DateRangeError):
    """Formatted string does not follow the structure of its pattern mask.

    Indicates an integration error: the mask and the formatted string were
    produced for different locales or styles. Not a user-facing condition.

    Attributes:
        formatted: The formatted string that failed to tokenize
        pattern: Raw pattern of the mask it was matched against
    """

    def __init__(self, message: str, *, formatted: str = "", pattern: str = "") -> None:
        """Initialize TokenizationError.

        Args:
            message: Human-readable error message
            formatted: The formatted string that failed to tokenize
            pattern: Raw pattern of the mask
        """
        super().__init__(message)
        self.formatted = formatted
        self.pattern = pattern
