"""ISO-8601 encoding for hCalendar datetime attributes."""

from datetime import datetime


def to_iso8601(dt: datetime) -> str:
    """
    Encode an instant as YYYY-MM-DDThh:mm:ss, adding the UTC offset when known.

    Naive datetimes carry no offset suffix.
    """
    return dt.isoformat(timespec="seconds")
