"""Input normalization: any supported date-like value to an aware datetime.

Callers hand the formatter whatever their storage produced: datetime or
date objects, Unix timestamps, ISO 8601 strings, or None for "now". Each
value is classified once at the boundary into a small tagged union, then
converted to an aware datetime in the requested timezone.

Timezone Handling:
    - tz given: aware values are converted into it; naive values are read
      as wall-clock time in it.
    - tz None: aware values keep their own zone; naive values are UTC.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, tzinfo

from dateranger.core.errors import InvalidInputError

__all__ = [
    "DateInput",
    "DateLike",
    "IsoString",
    "Now",
    "StructuredInstant",
    "TimestampSeconds",
    "classify_input",
    "is_absent",
    "prepare",
    "to_datetime",
]

type DateLike = datetime | date | int | float | str | None


@dataclass(frozen=True, slots=True)
class TimestampSeconds:
    """Seconds since the Unix epoch."""

    seconds: int | float


@dataclass(frozen=True, slots=True)
class IsoString:
    """ISO 8601 date or datetime text."""

    text: str


@dataclass(frozen=True, slots=True)
class StructuredInstant:
    """Already-parsed datetime (dates are promoted to midnight)."""

    value: datetime


@dataclass(frozen=True, slots=True)
class Now:
    """The current instant."""


type DateInput = TimestampSeconds | IsoString | StructuredInstant | Now


def is_absent(value: object) -> bool:
    """True for None and blank strings (an omitted range end)."""
    return value is None or (isinstance(value, str) and not value.strip())


def classify_input(value: object) -> DateInput:
    """Classify a date-like value into the DateInput tagged union.

    Args:
        value: datetime, date, int/float timestamp, ISO string, or None

    Returns:
        The matching DateInput variant

    Raises:
        InvalidInputError: For any other type (bool included)
    """
    if value is None:
        return Now()
    if isinstance(value, datetime):
        return StructuredInstant(value)
    if isinstance(value, date):
        return StructuredInstant(datetime.combine(value, time()))
    # bool is an int subclass but never a timestamp
    if isinstance(value, int | float) and not isinstance(value, bool):
        return TimestampSeconds(value)
    if isinstance(value, str):
        return IsoString(value.strip())

    msg = f"Don't know how to handle {type(value).__name__}"
    raise InvalidInputError(msg, value=value)


def to_datetime(date_input: DateInput) -> datetime:
    """Convert a classified input to a datetime (naive or aware).

    Raises:
        InvalidInputError: If a timestamp is out of range or a string is
            not ISO 8601
    """
    if isinstance(date_input, StructuredInstant):
        return date_input.value
    if isinstance(date_input, Now):
        return datetime.now(UTC)
    if isinstance(date_input, TimestampSeconds):
        try:
            return datetime.fromtimestamp(date_input.seconds, tz=UTC)
        except (OverflowError, OSError, ValueError) as e:
            msg = f"Timestamp out of range: {date_input.seconds!r}"
            raise InvalidInputError(msg, value=date_input.seconds) from e

    try:
        return datetime.fromisoformat(date_input.text)
    except ValueError as e:
        msg = f"Invalid datetime string {date_input.text!r}: not ISO 8601 format"
        raise InvalidInputError(msg, value=date_input.text) from e


def prepare(value: object, tz: tzinfo | None = None) -> datetime:
    """Normalize a date-like value to an aware datetime.

    Args:
        value: datetime, date, int/float timestamp, ISO string, or None (now)
        tz: Target timezone (None keeps aware values in their own zone)

    Returns:
        Timezone-aware datetime

    Raises:
        InvalidInputError: If the value is not a recognized representation

    Examples:
        >>> prepare(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)

        >>> prepare("2020-01-03")
        datetime.datetime(2020, 1, 3, 0, 0, tzinfo=datetime.timezone.utc)
    """
    result = to_datetime(classify_input(value))

    if result.tzinfo is None:
        return result.replace(tzinfo=tz or UTC)
    if tz is not None:
        return result.astimezone(tz)
    return result
