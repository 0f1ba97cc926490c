"""
Core business logic for finding bookable gaps in photographers' calendars.

Pure domain logic without any external dependencies (no file access,
no network, no global state).
"""

import logging
from typing import List, Optional, Sequence

from pendulum import DateTime

from .models import RosterProtocol, Schedule, TimeSlot, minutes_between

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 90


class GapFinder:
    """
    Finds at most one free slot of a fixed duration per availability window.

    Algorithm, per availability window:
    1. Skip windows shorter than the requested duration
    2. Walk the (chronologically sorted) bookings
    3. Take the first gap long enough for the duration, in this order:
       window start before the first booking, between two bookings,
       after the last booking
    4. Offer a slot of exactly the requested duration at the gap's start

    Windows without any bookings never produce a slot, and the first
    qualifying gap wins even if a later one would fit better.
    """

    def __init__(self, duration_minutes: int = DEFAULT_DURATION_MINUTES):
        if duration_minutes <= 0:
            raise ValueError(f"Duration must be greater than zero, got {duration_minutes}")
        self.duration_minutes = duration_minutes

    def find_available_slots(self, roster: RosterProtocol) -> List[Schedule]:
        """
        Record candidate slots for every photographer of the roster.

        Args:
            roster: Roster to read photographers from and append schedules to

        Returns:
            The schedules added by this call, in photographer-then-window order
        """
        added: List[Schedule] = []

        for photographer in roster.photographers:
            snapshot = photographer.snapshot()

            for window in photographer.availabilities:
                starts = self.find_slot_start(window, photographer.bookings)
                if starts is None:
                    continue

                schedule = roster.add_schedule(snapshot, starts, self.duration_minutes)
                logger.debug(
                    "Found slot %s for photographer %s", schedule.time_slot, photographer.id
                )
                added.append(schedule)

        return added

    def find_slot(self, window: TimeSlot, bookings: Sequence[TimeSlot]) -> Optional[TimeSlot]:
        """Return the candidate slot for one window, or None."""
        starts = self.find_slot_start(window, bookings)
        if starts is None:
            return None
        return TimeSlot(starts=starts, ends=starts.add(minutes=self.duration_minutes))

    def find_slot_start(
        self,
        window: TimeSlot,
        bookings: Sequence[TimeSlot]
    ) -> Optional[DateTime]:
        """
        Find where the first free slot inside a window starts.

        Example (90 minutes):
        Window: 09:00 - 13:00
        Bookings: [09:30-10:00, 11:00-11:15]
        Gaps checked: 09:00-09:30, 10:00-11:00, 11:15-13:00
        Result: 11:15
        """
        duration = self.duration_minutes

        if window.duration_minutes() < duration:
            logger.debug("Window %s is shorter than %d minutes, skipping", window, duration)
            return None

        last_index = len(bookings) - 1
        prev_ends: Optional[DateTime] = None

        for index, booking in enumerate(bookings):
            # Booking starts after the window closes
            if booking.starts > window.ends and window.duration_minutes() >= duration:
                return window.starts

            if booking.starts < window.ends:
                if index == 0:
                    if minutes_between(window.starts, booking.starts) >= duration:
                        return window.starts
                elif minutes_between(prev_ends, booking.starts) >= duration:
                    return prev_ends

            if index == last_index:
                if minutes_between(booking.ends, window.ends) >= duration:
                    return booking.ends

            prev_ends = booking.ends

        return None
