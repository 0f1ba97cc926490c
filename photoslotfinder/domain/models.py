"""
Domain models for photographers, their calendars and found slots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from pendulum import DateTime


@dataclass(frozen=True)
class TimeSlot:
    """
    Represents an immutable time interval [starts, ends).

    By convention ends is after starts. Malformed ranges are not rejected;
    they simply never produce a usable gap.
    """
    starts: DateTime
    ends: DateTime
    id: str = ""

    def duration_minutes(self) -> int:
        """Return the duration in whole minutes."""
        return minutes_between(self.starts, self.ends)

    def __str__(self) -> str:
        return f"{self.starts.format('DD.MM.YYYY HH:mm')} - {self.ends.format('HH:mm')}"


@dataclass(frozen=True)
class Photographer:
    """
    A photographer together with their availability windows and bookings.

    Bookings are expected in chronological order and must not overlap.
    """
    id: str
    name: str
    availabilities: Sequence[TimeSlot] = ()
    bookings: Sequence[TimeSlot] = ()

    def snapshot(self) -> "Photographer":
        """Copy of the photographer without availability or bookings."""
        return Photographer(id=self.id, name=self.name)

    def display_name(self) -> str:
        return self.name or self.id


@dataclass(frozen=True)
class Schedule:
    """A candidate slot offered for a photographer."""
    photographer: Photographer
    time_slot: TimeSlot


class RosterProtocol(Protocol):
    """Protocol describing the roster behaviour needed by the gap finder."""

    @property
    def photographers(self) -> Sequence[Photographer]:
        """Return all photographers of the roster."""

    def add_schedule(
        self,
        photographer: Photographer,
        starts: DateTime,
        duration_minutes: int,
    ) -> Schedule:
        """Record a candidate slot of the given length for a photographer."""


@dataclass
class Roster:
    """
    All photographers of a run plus the schedules found for them.

    Schedules are only ever appended.
    """
    photographers: List[Photographer] = field(default_factory=list)
    schedules: List[Schedule] = field(default_factory=list)

    def add_schedule(
        self,
        photographer: Photographer,
        starts: DateTime,
        duration_minutes: int,
    ) -> Schedule:
        schedule = Schedule(
            photographer=photographer,
            time_slot=TimeSlot(starts=starts, ends=starts.add(minutes=duration_minutes)),
        )
        self.schedules.append(schedule)
        return schedule


def minutes_between(starts: DateTime, ends: DateTime) -> int:
    """Whole minutes from starts to ends, truncated toward zero."""
    return int((ends - starts).total_seconds() / 60)
