"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import PhotoSlotFinderError, RosterLoadError, ScheduleWriteError
from .gap_finder import DEFAULT_DURATION_MINUTES, GapFinder
from .models import Photographer, Roster, RosterProtocol, Schedule, TimeSlot

__all__ = [
    "DEFAULT_DURATION_MINUTES",
    "GapFinder",
    "Photographer",
    "PhotoSlotFinderError",
    "Roster",
    "RosterLoadError",
    "RosterProtocol",
    "Schedule",
    "ScheduleWriteError",
    "TimeSlot",
]
