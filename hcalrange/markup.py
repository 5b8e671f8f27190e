"""Markup sinks that render formatter output for display or export."""

from html import escape
from typing import Any, Dict, Iterable, List, Optional

from .segments import Literal, MachineSpan, OutputSegment


def render_html(segments: Iterable[OutputSegment]) -> str:
    """Render segments as hCalendar <time> elements and escaped text."""
    parts = []
    for segment in segments:
        if isinstance(segment, MachineSpan):
            parts.append(
                f'<time class="{segment.role.hcalendar_class}" '
                f'datetime="{escape(segment.machine_value)}">'
                f"{escape(segment.display_text)}</time>"
            )
        elif isinstance(segment, Literal):
            parts.append(escape(segment.text))
        else:
            raise TypeError(f"Unknown segment type: {type(segment).__name__}")
    return "".join(parts)


def wrap_vevent(range_html: str, summary: Optional[str] = None) -> str:
    """Wrap a rendered range in an hCalendar vevent container."""
    summary_html = ""
    if summary:
        summary_html = f'<span class="summary">{escape(summary)}</span> '
    return f'<div class="vevent">{summary_html}{range_html}</div>'


def render_text(segments: Iterable[OutputSegment]) -> str:
    """
    Visible text only, as a reader would see it.

    Spans with no literal between them describe the start and finish
    separately, so each goes on its own line.
    """
    parts = []
    previous: Optional[OutputSegment] = None
    for segment in segments:
        if isinstance(segment, MachineSpan):
            if isinstance(previous, MachineSpan) and previous.display_text:
                parts.append("\n")
            parts.append(segment.display_text)
        else:
            parts.append(segment.text)
        previous = segment
    return "".join(parts)


def segments_to_dicts(segments: Iterable[OutputSegment]) -> List[Dict[str, Any]]:
    """JSON-ready representation of segments, in order."""
    result: List[Dict[str, Any]] = []
    for segment in segments:
        if isinstance(segment, MachineSpan):
            result.append(
                {
                    "type": "span",
                    "role": segment.role.value,
                    "class": segment.role.hcalendar_class,
                    "datetime": segment.machine_value,
                    "text": segment.display_text,
                }
            )
        else:
            result.append({"type": "literal", "text": segment.text})
    return result
