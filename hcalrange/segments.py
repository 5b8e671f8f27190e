"""Output segments produced by the range formatter."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SpanRole(str, Enum):
    """Which end of the range a machine span marks."""

    START = "start"
    END = "end"

    @property
    def hcalendar_class(self) -> str:
        """hCalendar class name for this role."""
        return "dtstart" if self is SpanRole.START else "dtend"


@dataclass(frozen=True)
class MachineSpan:
    """Human-facing text paired with a machine-readable timestamp."""

    role: SpanRole
    machine_value: str
    display_text: str = ""


@dataclass(frozen=True)
class Literal:
    """Plain text placed between the two spans."""

    text: str


OutputSegment = Union[MachineSpan, Literal]
