"""
Application services for finding bookable photographer slots.

The service coordinates loading the roster via a source adapter, delegates
the gap search to the domain-level ``GapFinder`` and hands the results to a
sink adapter. Both adapters are described by protocols so tests can swap in
in-memory stubs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Sequence

from ..domain.gap_finder import GapFinder
from ..domain.models import Roster, Schedule

logger = logging.getLogger(__name__)


class RosterSourceProtocol(Protocol):
    """Protocol describing where rosters come from."""

    def load(self, path: Path) -> Roster:
        """Return the roster stored at path."""


class ScheduleSinkProtocol(Protocol):
    """Protocol describing where found schedules go."""

    def write(self, schedules: Sequence[Schedule], path: Path) -> None:
        """Persist schedules to path."""


@dataclass(frozen=True)
class FinderRun:
    """Outcome of a complete load-find-write run."""
    roster: Roster
    schedules: List[Schedule]
    output_path: Path


class SlotFinderService:
    """
    Orchestrates roster loading, gap finding and result persistence.
    """

    def __init__(
        self,
        roster_source: RosterSourceProtocol,
        gap_finder: GapFinder,
        schedule_sink: ScheduleSinkProtocol,
    ) -> None:
        self._roster_source = roster_source
        self._gap_finder = gap_finder
        self._schedule_sink = schedule_sink

    def run(self, *, input_path: Path, output_path: Path) -> FinderRun:
        """Load the roster, find slots and write them out."""
        roster = self.load_roster(input_path)
        schedules = self.find_slots(roster)

        self._schedule_sink.write(schedules, output_path)

        return FinderRun(roster=roster, schedules=schedules, output_path=output_path)

    def load_roster(self, input_path: Path) -> Roster:
        """Load the roster from the configured source."""
        return self._roster_source.load(input_path)

    def find_slots(self, roster: Roster) -> List[Schedule]:
        """Calculate candidate slots and record them on the roster."""
        schedules = self._gap_finder.find_available_slots(roster)
        logger.info(
            "Found %d slot(s) of %d minutes for %d photographer(s)",
            len(schedules),
            self._gap_finder.duration_minutes,
            len(roster.photographers),
        )
        return schedules
