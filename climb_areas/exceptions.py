"""Exceptions raised by the climb areas application."""


class ClimbAreasError(Exception):
    """Base class for application errors."""


class DatasetError(ClimbAreasError):
    """The climbing areas feed could not be turned into records."""


class ConfigError(ClimbAreasError):
    """A heatmap configuration override is invalid."""

    def __init__(self, key: str, value, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{key}': {value!r} ({reason})")
