"""Time span input model for hcalrange."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Tuple, Union


@dataclass(frozen=True)
class TimeSpan:
    """An event's start and end, with flags describing their times of day."""

    start: datetime
    end: datetime
    start_time_known: bool = True
    end_time_known: bool = True
    show_start_time: bool = True
    show_end_time: bool = True

    @property
    def is_all_day(self) -> bool:
        """True if neither time of day is meaningful."""
        return not self.start_time_known and not self.end_time_known

    @classmethod
    def from_dates(
        cls,
        start: Union[date, datetime],
        end: Union[date, datetime],
        show_start_time: bool = True,
        show_end_time: bool = True,
    ) -> "TimeSpan":
        """
        Build a span from dates or datetimes.

        A plain ``date`` is promoted to midnight, its time is marked unknown
        and its time is never shown. An end time is only shown alongside a
        start time, so a date-only start hides the end time too.
        """
        start_dt, start_known = _as_datetime(start)
        end_dt, end_known = _as_datetime(end)
        if not start_known:
            show_end_time = False
        return cls(
            start=start_dt,
            end=end_dt,
            start_time_known=start_known,
            end_time_known=end_known,
            show_start_time=show_start_time and start_known,
            show_end_time=show_end_time and end_known,
        )


def _as_datetime(value: Union[date, datetime]) -> Tuple[datetime, bool]:
    if isinstance(value, datetime):
        return value, True
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day), False
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")
