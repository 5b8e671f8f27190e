"""
Range formatter: house-style text with hCalendar machine timestamps.

Examples of each presentation, with the machine timestamps omitted:

    One day, no time                 Friday 26 May 2006
    One day, with start time         9am, Friday 26 May 2006
    One day, start and finish times  9am to 2pm, Friday 26 May 2006
    Different days, same month       26 to 27 May 2006
    Different days, different month  Friday 26 May 2006 to Thursday 1 June 2006
    Different days, with start time  9am, Friday 26 May 2006 | Saturday 27 May 2006
    Different days, both times       9am, Friday 26 May 2006 | 2pm, Saturday 27 May 2006
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, List, Optional

from .errors import RangeFormatError
from .house_style import BritishDateFormatter, DateTextFormatter
from .iso8601 import to_iso8601
from .normalize import NormalizedRange, normalize_range
from .segments import Literal, MachineSpan, OutputSegment, SpanRole
from .timespan import TimeSpan

logger = logging.getLogger(__name__)

JOINER = " to "


class RangeCase(Enum):
    """Mutually exclusive presentations of a date range."""

    ONE_DAY_NO_TIME = 1
    ONE_DAY_START_TIME = 2
    ONE_DAY_START_AND_END_TIME = 3
    DAYS_SAME_MONTH = 4
    DAYS_DIFFERENT_MONTHS = 5
    DAYS_START_TIME = 6
    DAYS_START_AND_END_TIME = 7


def classify_range(
    rng: NormalizedRange, show_start_time: bool, show_end_time: bool
) -> RangeCase:
    """Pick the presentation for a normalized range."""
    if show_end_time and not show_start_time:
        raise RangeFormatError(
            "Cannot show the end time without the start time; "
            "set show_start_time or hide the end time"
        )

    if not rng.multi_day:
        if not rng.show_time:
            return RangeCase.ONE_DAY_NO_TIME
        if not show_end_time or rng.display_start == rng.display_end:
            return RangeCase.ONE_DAY_START_TIME
        return RangeCase.ONE_DAY_START_AND_END_TIME

    if not rng.show_time:
        if rng.same_month:
            return RangeCase.DAYS_SAME_MONTH
        return RangeCase.DAYS_DIFFERENT_MONTHS
    if not show_end_time:
        return RangeCase.DAYS_START_TIME
    return RangeCase.DAYS_START_AND_END_TIME


_Builder = Callable[
    [NormalizedRange, DateTextFormatter, str, str], List[OutputSegment]
]


def _one_day_no_time(rng, text, start_value, end_value):
    # The start span only carries the machine timestamp
    return [
        MachineSpan(SpanRole.START, start_value),
        MachineSpan(
            SpanRole.END, end_value, text.long_date_with_day(rng.display_start)
        ),
    ]


def _one_day_start_time(rng, text, start_value, end_value):
    return [
        MachineSpan(SpanRole.START, start_value),
        MachineSpan(
            SpanRole.END,
            end_value,
            text.long_date_with_day_and_time(rng.display_start),
        ),
    ]


def _one_day_start_and_end_time(rng, text, start_value, end_value):
    end_time = text.time(rng.display_end)
    end_text = f"{end_time}, {text.long_date_with_day(rng.display_start)}"
    return [
        MachineSpan(SpanRole.START, start_value, text.time(rng.display_start)),
        Literal(JOINER),
        MachineSpan(SpanRole.END, end_value, end_text),
    ]


def _days_same_month(rng, text, start_value, end_value):
    return [
        MachineSpan(SpanRole.START, start_value, text.day_of_month(rng.display_start)),
        Literal(JOINER),
        MachineSpan(SpanRole.END, end_value, text.short_date(rng.display_end)),
    ]


def _days_different_months(rng, text, start_value, end_value):
    return [
        MachineSpan(
            SpanRole.START, start_value, text.long_date_with_day(rng.display_start)
        ),
        Literal(JOINER),
        MachineSpan(SpanRole.END, end_value, text.long_date_with_day(rng.display_end)),
    ]


def _days_start_time(rng, text, start_value, end_value):
    return [
        MachineSpan(
            SpanRole.START,
            start_value,
            text.long_date_with_day_and_time(rng.display_start),
        ),
        MachineSpan(SpanRole.END, end_value, text.long_date_with_day(rng.display_end)),
    ]


def _days_start_and_end_time(rng, text, start_value, end_value):
    return [
        MachineSpan(
            SpanRole.START,
            start_value,
            text.long_date_with_day_and_time(rng.display_start),
        ),
        MachineSpan(
            SpanRole.END,
            end_value,
            text.long_date_with_day_and_time(rng.display_end),
        ),
    ]


_BUILDERS: Dict[RangeCase, _Builder] = {
    RangeCase.ONE_DAY_NO_TIME: _one_day_no_time,
    RangeCase.ONE_DAY_START_TIME: _one_day_start_time,
    RangeCase.ONE_DAY_START_AND_END_TIME: _one_day_start_and_end_time,
    RangeCase.DAYS_SAME_MONTH: _days_same_month,
    RangeCase.DAYS_DIFFERENT_MONTHS: _days_different_months,
    RangeCase.DAYS_START_TIME: _days_start_time,
    RangeCase.DAYS_START_AND_END_TIME: _days_start_and_end_time,
}


def format_date_range(
    start: datetime,
    end: datetime,
    start_time_known: bool,
    end_time_known: bool,
    show_start_time: bool,
    show_end_time: bool,
    text_formatter: Optional[DateTextFormatter] = None,
) -> List[OutputSegment]:
    """
    Describe a period from one date and time to another in house style.

    Args:
        start: The start date and time
        end: The end date and time
        start_time_known: If False, 00:00 on the start day is assumed
        end_time_known: If False, 00:00 the next morning is assumed
        show_start_time: Display the start time
        show_end_time: Display the end time
        text_formatter: Renders dates and times (defaults to British style)

    Returns:
        Ordered segments: a start span, an optional joining literal, an end span

    Raises:
        RangeFormatError: If the end time is shown but the start time is not
    """
    if end < start:
        logger.debug(f"Range ends before it starts: {start} to {end}")

    text = text_formatter or BritishDateFormatter()
    rng = normalize_range(
        start, end, start_time_known, end_time_known, show_start_time, show_end_time
    )
    case = classify_range(rng, show_start_time, show_end_time)
    logger.debug(f"Formatting {start} to {end} as {case.name}")

    builder = _BUILDERS.get(case)
    if builder is None:
        raise AssertionError(f"No presentation registered for {case}")

    return builder(
        rng, text, to_iso8601(rng.machine_start), to_iso8601(rng.machine_end)
    )


def format_time_span(
    span: TimeSpan, text_formatter: Optional[DateTextFormatter] = None
) -> List[OutputSegment]:
    """Format a TimeSpan using its own flags."""
    if span.is_all_day:
        logger.debug(
            f"Formatting all-day span {span.start:%Y-%m-%d} to {span.end:%Y-%m-%d}"
        )
    return format_date_range(
        span.start,
        span.end,
        span.start_time_known,
        span.end_time_known,
        span.show_start_time,
        span.show_end_time,
        text_formatter,
    )
