"""Exception types for hcalrange."""


class HCalRangeError(Exception):
    """Base class for hcalrange errors."""


class RangeFormatError(HCalRangeError, ValueError):
    """Raised when a flag combination has no house-style presentation."""


class ConfigError(HCalRangeError, ValueError):
    """Raised when configuration data is missing or invalid."""
