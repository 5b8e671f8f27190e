"""Date normalization for display and machine-readable values."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class NormalizedRange:
    """
    Derived values used to format a range.

    The display instants may be truncated to midnight when a time is unknown
    or hidden. The machine instants feed the hCalendar ``datetime`` attribute;
    an unknown end time becomes midnight at the start of the following day.
    """

    display_start: datetime
    display_end: datetime
    machine_start: datetime
    machine_end: datetime
    multi_day: bool
    same_month: bool
    show_time: bool


def start_of_day(dt: datetime) -> datetime:
    """Midnight on the same calendar day, keeping any tzinfo."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_next_day(dt: datetime) -> datetime:
    """Midnight at the start of the day after ``dt``."""
    return start_of_day(dt) + timedelta(days=1)


def is_multi_day(start: datetime, end: datetime) -> bool:
    """True if the instants fall on different calendar days."""
    return (
        start.timetuple().tm_yday != end.timetuple().tm_yday
        or start.year != end.year
    )


def is_same_month(start: datetime, end: datetime) -> bool:
    """True if the instants fall in the same month of the same year."""
    return start.month == end.month and start.year == end.year


def normalize_range(
    start: datetime,
    end: datetime,
    start_time_known: bool,
    end_time_known: bool,
    show_start_time: bool,
    show_end_time: bool,
) -> NormalizedRange:
    """Derive display and machine instants from the caller's range."""
    machine_start = start if start_time_known else start_of_day(start)
    machine_end = end if end_time_known else start_of_next_day(end)

    display_start = start
    if not start_time_known or not show_start_time:
        display_start = start_of_day(start)

    display_end = end
    if not end_time_known or not show_end_time:
        display_end = start_of_day(end)

    # Day and month comparisons use the original instants, not the rolled-over end
    return NormalizedRange(
        display_start=display_start,
        display_end=display_end,
        machine_start=machine_start,
        machine_end=machine_end,
        multi_day=is_multi_day(start, end),
        same_month=is_same_month(start, end),
        show_time=show_start_time or show_end_time,
    )
