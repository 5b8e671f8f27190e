"""House-style date and time text for hcalrange."""

import importlib
from abc import ABC, abstractmethod
from datetime import datetime

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class DateTextFormatter(ABC):
    """Renders the human-facing pieces of a date range."""

    @abstractmethod
    def long_date_with_day(self, dt: datetime) -> str:
        """Weekday and full date, e.g. 'Friday 26 May 2006'."""
        pass

    @abstractmethod
    def short_date(self, dt: datetime) -> str:
        """Full date without weekday, e.g. '27 May 2006'."""
        pass

    @abstractmethod
    def time(self, dt: datetime) -> str:
        """Time of day only, e.g. '9am'."""
        pass

    def long_date_with_day_and_time(self, dt: datetime) -> str:
        """Time followed by weekday and date, e.g. '9am, Friday 26 May 2006'."""
        return f"{self.time(dt)}, {self.long_date_with_day(dt)}"

    def day_of_month(self, dt: datetime) -> str:
        return str(dt.day)


class BritishDateFormatter(DateTextFormatter):
    """British house style: day before month, 12-hour clock without leading zeros."""

    def long_date_with_day(self, dt: datetime) -> str:
        return f"{DAY_NAMES[dt.weekday()]} {self.short_date(dt)}"

    def short_date(self, dt: datetime) -> str:
        return f"{dt.day} {MONTH_NAMES[dt.month - 1]} {dt.year}"

    def time(self, dt: datetime) -> str:
        if dt.minute == 0:
            if dt.hour == 0:
                return "midnight"
            if dt.hour == 12:
                return "12 noon"

        hour = dt.hour % 12 or 12
        suffix = "am" if dt.hour < 12 else "pm"
        if dt.minute:
            return f"{hour}.{dt.minute:02d}{suffix}"
        return f"{hour}{suffix}"


def create_text_formatter(formatter_spec: str) -> DateTextFormatter:
    """
    Create a text formatter from a specification string.

    Built-in formatters:
    - "british" - BritishDateFormatter

    Any other value is treated as "module:callable", where the callable
    returns a DateTextFormatter instance.

    Args:
        formatter_spec: Formatter specification string

    Returns:
        Configured DateTextFormatter instance
    """
    if formatter_spec == "british":
        return BritishDateFormatter()

    if ":" in formatter_spec:
        try:
            module_path, callable_name = formatter_spec.rsplit(":", 1)
            module = importlib.import_module(module_path)
            formatter_callable = getattr(module, callable_name)
        except (ImportError, AttributeError) as e:
            raise ValueError(
                f"Could not import text formatter '{formatter_spec}': {e}"
            )

        if not callable(formatter_callable):
            raise ValueError(f"{callable_name} is not callable")

        result = formatter_callable()
        if not isinstance(result, DateTextFormatter):
            raise ValueError(
                f"{callable_name} must return a DateTextFormatter instance, "
                f"got {type(result)}"
            )
        return result

    raise ValueError(f"Invalid text formatter specification: {formatter_spec}")
