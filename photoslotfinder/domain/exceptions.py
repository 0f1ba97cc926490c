"""
Domain-specific exception hierarchy for the photo slot finder application.
"""


class PhotoSlotFinderError(Exception):
    """Base class for all application-level errors."""


class RosterLoadError(PhotoSlotFinderError):
    """Raised when a roster file cannot be read or parsed."""


class ScheduleWriteError(PhotoSlotFinderError):
    """Raised when the resulting schedules cannot be persisted."""
