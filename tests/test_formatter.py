"""Tests for the range formatter."""

import logging
from datetime import date, datetime

import pytest

from hcalrange.errors import RangeFormatError
from hcalrange.formatter import (
    JOINER,
    RangeCase,
    classify_range,
    format_date_range,
    format_time_span,
)
from hcalrange.normalize import normalize_range
from hcalrange.segments import Literal, MachineSpan, SpanRole
from hcalrange.timespan import TimeSpan
from examples.text_formatter_callable import TwentyFourHourFormatter


def _texts(segments):
    return [
        s.display_text if isinstance(s, MachineSpan) else s.text for s in segments
    ]


def _spans(segments):
    return [s for s in segments if isinstance(s, MachineSpan)]


def test_one_day_no_time():
    """Test a single day with no times shown."""
    start = datetime(2006, 5, 26, 9, 0)
    segments = format_date_range(start, start, True, True, False, False)

    assert segments == [
        MachineSpan(SpanRole.START, "2006-05-26T09:00:00", ""),
        MachineSpan(SpanRole.END, "2006-05-26T09:00:00", "Friday 26 May 2006"),
    ]


def test_one_day_no_time_ignores_time_of_day():
    """Test the display is the same whatever the times of day are."""
    flags = (True, True, False, False)
    early = format_date_range(
        datetime(2006, 5, 26, 1, 0), datetime(2006, 5, 26, 2, 0), *flags
    )
    late = format_date_range(
        datetime(2006, 5, 26, 20, 0), datetime(2006, 5, 26, 23, 0), *flags
    )

    assert _texts(early) == ["", "Friday 26 May 2006"]
    assert _texts(late) == ["", "Friday 26 May 2006"]


def test_one_day_all_day_machine_values():
    """Test an all-day event ends at midnight the next morning."""
    day = datetime(2006, 5, 26)
    segments = format_date_range(day, day, False, False, False, False)

    assert [s.machine_value for s in _spans(segments)] == [
        "2006-05-26T00:00:00",
        "2006-05-27T00:00:00",
    ]
    assert _texts(segments) == ["", "Friday 26 May 2006"]


def test_one_day_with_start_time():
    """Test a single day showing the start time."""
    start = datetime(2006, 5, 26, 9, 0)
    segments = format_date_range(start, start, True, True, True, False)

    assert _texts(segments) == ["", "9am, Friday 26 May 2006"]
    assert segments[0].role is SpanRole.START
    assert segments[1].role is SpanRole.END


def test_one_day_matching_start_and_end_times():
    """Test matching start and end times collapse to one time."""
    start = datetime(2006, 5, 26, 9, 0)
    segments = format_date_range(start, start, True, True, True, True)

    assert _texts(segments) == ["", "9am, Friday 26 May 2006"]


def test_one_day_start_and_end_times():
    """Test a single day showing start and finish times."""
    segments = format_date_range(
        datetime(2006, 5, 26, 9, 0),
        datetime(2006, 5, 26, 14, 0),
        True,
        True,
        True,
        True,
    )

    assert _texts(segments) == ["9am", " to ", "2pm, Friday 26 May 2006"]
    assert segments[1] == Literal(JOINER)
    assert segments[0].machine_value == "2006-05-26T09:00:00"
    assert segments[2].machine_value == "2006-05-26T14:00:00"


def test_one_day_unknown_end_time_shown():
    """Test an unknown end time shows as midnight but rolls over for machines."""
    segments = format_date_range(
        datetime(2006, 5, 26, 9, 0),
        datetime(2006, 5, 26, 17, 0),
        True,
        False,
        True,
        True,
    )

    assert _texts(segments) == ["9am", " to ", "midnight, Friday 26 May 2006"]
    assert segments[2].machine_value == "2006-05-27T00:00:00"


def test_days_same_month():
    """Test different days in the same month with no times."""
    segments = format_date_range(
        datetime(2006, 5, 26), datetime(2006, 5, 27), False, False, False, False
    )

    assert _texts(segments) == ["26", " to ", "27 May 2006"]
    assert [s.machine_value for s in _spans(segments)] == [
        "2006-05-26T00:00:00",
        "2006-05-28T00:00:00",
    ]


def test_days_different_months():
    """Test different days in different months with no times."""
    segments = format_date_range(
        datetime(2006, 5, 26), datetime(2006, 6, 1), False, False, False, False
    )

    assert _texts(segments) == ["Friday 26 May 2006", " to ", "Thursday 1 June 2006"]


def test_days_same_month_different_years():
    """Test the same month of different years is not the same month."""
    segments = format_date_range(
        datetime(2006, 5, 26), datetime(2007, 5, 27), False, False, False, False
    )

    assert _texts(segments) == [
        "Friday 26 May 2006",
        " to ",
        "Sunday 27 May 2007",
    ]


def test_days_with_start_time():
    """Test different days showing only the start time."""
    segments = format_date_range(
        datetime(2006, 5, 26, 9, 0),
        datetime(2006, 5, 27, 14, 0),
        True,
        True,
        True,
        False,
    )

    assert _texts(segments) == ["9am, Friday 26 May 2006", "Saturday 27 May 2006"]
    assert not any(isinstance(s, Literal) for s in segments)
    assert segments[1].machine_value == "2006-05-27T14:00:00"


def test_days_with_start_and_end_times():
    """Test different days showing both times."""
    segments = format_date_range(
        datetime(2006, 5, 26, 9, 0),
        datetime(2006, 5, 27, 14, 0),
        True,
        True,
        True,
        True,
    )

    assert segments == [
        MachineSpan(SpanRole.START, "2006-05-26T09:00:00", "9am, Friday 26 May 2006"),
        MachineSpan(SpanRole.END, "2006-05-27T14:00:00", "2pm, Saturday 27 May 2006"),
    ]


def test_end_time_without_start_time_rejected():
    """Test showing only the end time has no presentation."""
    with pytest.raises(RangeFormatError, match="without the start time"):
        format_date_range(
            datetime(2006, 5, 26, 9, 0),
            datetime(2006, 5, 26, 14, 0),
            True,
            True,
            False,
            True,
        )


def test_range_format_error_is_value_error():
    """Test callers can catch the rejection as a ValueError."""
    with pytest.raises(ValueError):
        format_date_range(
            datetime(2006, 5, 26), datetime(2006, 6, 26), True, True, False, True
        )


def test_classify_every_supported_combination():
    """Test every supported flag combination maps to a presentation."""
    same_day = (datetime(2006, 5, 26, 9, 0), datetime(2006, 5, 26, 14, 0))
    next_day = (datetime(2006, 5, 26, 9, 0), datetime(2006, 5, 27, 14, 0))
    next_month = (datetime(2006, 5, 26, 9, 0), datetime(2006, 6, 1, 14, 0))

    expected = {
        (same_day, False, False): RangeCase.ONE_DAY_NO_TIME,
        (same_day, True, False): RangeCase.ONE_DAY_START_TIME,
        (same_day, True, True): RangeCase.ONE_DAY_START_AND_END_TIME,
        (next_day, False, False): RangeCase.DAYS_SAME_MONTH,
        (next_month, False, False): RangeCase.DAYS_DIFFERENT_MONTHS,
        (next_day, True, False): RangeCase.DAYS_START_TIME,
        (next_month, True, True): RangeCase.DAYS_START_AND_END_TIME,
    }

    for ((start, end), show_start, show_end), case in expected.items():
        rng = normalize_range(start, end, True, True, show_start, show_end)
        assert classify_range(rng, show_start, show_end) is case


def test_span_structure_for_all_cases():
    """Test every presentation has one start span, one end span, literals between."""
    start = datetime(2006, 5, 26, 9, 0)
    ends = [datetime(2006, 5, 26, 14, 0), datetime(2006, 5, 27, 14, 0)]
    ends.append(datetime(2006, 6, 1, 14, 0))

    for end in ends:
        for known in (True, False):
            for show_start, show_end in ((False, False), (True, False), (True, True)):
                segments = format_date_range(
                    start, end, known, known, show_start, show_end
                )
                spans = _spans(segments)

                assert [s.role for s in spans] == [SpanRole.START, SpanRole.END]
                assert isinstance(segments[0], MachineSpan)
                assert isinstance(segments[-1], MachineSpan)


def test_format_is_repeatable():
    """Test formatting the same inputs twice gives the same segments."""
    args = (datetime(2006, 5, 26, 9, 0), datetime(2006, 5, 27, 14, 0), True, True)

    assert format_date_range(*args, True, False) == format_date_range(
        *args, True, False
    )


def test_format_time_span():
    """Test formatting from a TimeSpan uses its flags."""
    span = TimeSpan.from_dates(date(2006, 5, 26), date(2006, 5, 27))

    assert _texts(format_time_span(span)) == ["26", " to ", "27 May 2006"]


def test_custom_text_formatter():
    """Test a custom text formatter supplies the wording."""
    segments = format_date_range(
        datetime(2006, 5, 26, 9, 0),
        datetime(2006, 5, 26, 14, 0),
        True,
        True,
        True,
        True,
        TwentyFourHourFormatter(),
    )

    assert _texts(segments) == ["09:00", " to ", "14:00, Friday 26 May 2006"]


def test_format_time_span_date_only_start_with_end_time():
    """Test a date-only start with a timed end formats as a date range."""
    span = TimeSpan.from_dates(date(2006, 5, 26), datetime(2006, 5, 27, 14, 0))
    segments = format_time_span(span)

    assert _texts(segments) == ["26", " to ", "27 May 2006"]
    assert segments[2].machine_value == "2006-05-27T14:00:00"


def test_format_time_span_logs_all_day(caplog):
    """Test all-day spans are noted in the debug log."""
    span = TimeSpan.from_dates(date(2006, 5, 26), date(2006, 5, 26))

    with caplog.at_level(logging.DEBUG, logger="hcalrange.formatter"):
        format_time_span(span)

    assert "Formatting all-day span 2006-05-26 to 2006-05-26" in caplog.text
