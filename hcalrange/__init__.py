"""hcalrange: house-style date ranges with hCalendar machine timestamps."""

from .formatter import format_date_range, format_time_span
from .segments import Literal, MachineSpan, OutputSegment, SpanRole
from .timespan import TimeSpan

__all__ = [
    "format_date_range",
    "format_time_span",
    "Literal",
    "MachineSpan",
    "OutputSegment",
    "SpanRole",
    "TimeSpan",
]
