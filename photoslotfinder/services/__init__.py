"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .slot_finder import FinderRun, RosterSourceProtocol, ScheduleSinkProtocol, SlotFinderService

__all__ = ["FinderRun", "RosterSourceProtocol", "ScheduleSinkProtocol", "SlotFinderService"]
