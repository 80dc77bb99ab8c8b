"""Granularity comparator: where do two time points diverge?

The split category is the coarsest field category at which start and end
are still equal. Everything at or above it can be printed once; fields
finer than it are printed for both points.

Python 3.13+. Zero external dependencies.
"""

from datetime import datetime

from dateranger.enums import FieldCategory

__all__ = ["crosses_offset_change", "find_split"]


def find_split(start: datetime, end: datetime, *, with_time: bool) -> FieldCategory:
    """Find the split category for a range.

    Fields are compared from coarsest to finest; the first mismatch wins:

        year differs     -> TIMEZONE (nothing shared below the zone)
        month differs    -> YEAR
        day differs      -> MONTH
        AM/PM differs    -> DAY
        hour differs     -> AM_PM
        minute differs   -> AM_PM
        second differs   -> AM_PM
        all equal        -> SECOND

    Minute and second differences stop at AM_PM: a range is never rendered
    as "10:00:00–30:00".

    When the time is displayed, the result is forced to ALWAYS_EXPAND if
    the points fall on different days or the UTC offset changes between
    them (see crosses_offset_change). A date-only display names no
    instant, so a same-day range across a transition still collapses.

    Args:
        start: Range start, in the timezone it is displayed in
        end: Range end, in the timezone it is displayed in
        with_time: True if a time style is displayed

    Returns:
        Split category, or FieldCategory.ALWAYS_EXPAND

    Example:
        >>> find_split(datetime(2020, 1, 3), datetime(2020, 1, 5), with_time=False)
        <FieldCategory.MONTH: 3>
    """
    if start.year != end.year:
        split = FieldCategory.TIMEZONE
    elif start.month != end.month:
        split = FieldCategory.YEAR
    elif start.day != end.day:
        split = FieldCategory.MONTH
    elif (start.hour < 12) != (end.hour < 12):
        split = FieldCategory.DAY
    elif (start.hour, start.minute, start.second) != (end.hour, end.minute, end.second):
        split = FieldCategory.AM_PM
    else:
        split = FieldCategory.SECOND

    if with_time and (split < FieldCategory.DAY or crosses_offset_change(start, end)):
        return FieldCategory.ALWAYS_EXPAND
    return split


def crosses_offset_change(start: datetime, end: datetime) -> bool:
    """True if end's clock runs at a different offset than start's.

    End's wall-clock time is re-stamped onto start's calendar date (in
    end's timezone) before comparing offset and zone abbreviation. Two
    points in one named zone on either side of a DST transition that share
    a calendar date compare unequal; a multi-week range in that zone that
    merely spans a transition compares equal. Points carrying different
    fixed offsets always compare unequal.
    """
    probe = datetime.combine(start.date(), end.timetz())
    return probe.utcoffset() != start.utcoffset() or probe.tzname() != start.tzname()
