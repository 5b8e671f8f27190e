"""Example callable text formatters for hcalrange."""

from datetime import datetime

from hcalrange.house_style import BritishDateFormatter, DateTextFormatter


class TwentyFourHourFormatter(BritishDateFormatter):
    """British dates with times on the 24-hour clock, e.g. '09:00'."""

    def time(self, dt: datetime) -> str:
        return f"{dt.hour:02d}:{dt.minute:02d}"


def twenty_four_hour() -> DateTextFormatter:
    """
    Example formatter factory for use as "module:callable" configuration.

    Returns:
        A formatter rendering '14:00, Friday 26 May 2006'
    """
    return TwentyFourHourFormatter()
