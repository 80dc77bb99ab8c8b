"""Segment tokenizer: split a formatted date string along its pattern mask.

Given "Jan 3, 2020" and the mask of "MMM d, y", produces one token per
mask segment:

    [Token("Jan", MONTH), Token(" "), Token("3", DAY), Token(", "), Token("2020", YEAR)]

Field text is located by searching for the next literal, so field content
never needs to be understood (month names, numerals in any script, era
names all tokenize the same way).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from dateranger.core.errors import TokenizationError
from dateranger.enums import FieldCategory

from .mask import FieldSegment, PatternMask

__all__ = ["Token", "tokenize"]


@dataclass(frozen=True, slots=True)
class Token:
    """Substring of a formatted date attributed to one mask segment.

    Attributes:
        content: The text of the segment as it appears in the output
        category: Field category, or None for literal tokens
    """

    content: str
    category: FieldCategory | None = None

    @property
    def is_literal(self) -> bool:
        """True if the token is literal text rather than a field value."""
        return self.category is None


def tokenize(formatted: str, mask: PatternMask) -> tuple[Token, ...]:
    """Split a formatted date/time string into tokens aligned with a mask.

    Concatenating the contents of the returned tokens reproduces
    ``formatted`` exactly.

    Args:
        formatted: Output of a point formatter for the mask's pattern
        mask: PatternMask the string was formatted with

    Returns:
        Tuple of tokens, one per mask segment, in mask order

    Raises:
        TokenizationError: If a literal of the mask cannot be found in the
            remaining text, or text is left over after the last literal

    Patterns using the day-period letters b or B are not supported: the
    letter is treated as literal text and never matches the formatted
    period name.
    """
    tokens: list[Token] = []
    remainder = formatted
    pending: FieldSegment | None = None

    for segment in mask:
        if isinstance(segment, FieldSegment):
            pending = segment
            continue

        literal = segment.text
        if pending is not None:
            head, found, tail = remainder.partition(literal)
            if not found:
                msg = f"literal {literal!r} not found in {remainder!r}"
                raise TokenizationError(msg, formatted=formatted, pattern=mask.pattern)
            tokens.append(Token(head, pending.category))
            remainder = tail
            pending = None
        elif remainder.startswith(literal):
            remainder = remainder[len(literal) :]
        else:
            msg = f"expected literal {literal!r} at start of {remainder!r}"
            raise TokenizationError(msg, formatted=formatted, pattern=mask.pattern)

        tokens.append(Token(literal))

    if pending is not None:
        tokens.append(Token(remainder, pending.category))
    elif remainder:
        msg = f"unexpected trailing text {remainder!r}"
        raise TokenizationError(msg, formatted=formatted, pattern=mask.pattern)

    return tuple(tokens)
