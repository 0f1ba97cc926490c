"""
JSON file adapters for reading rosters and writing found schedules.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pendulum
from pendulum import DateTime

from ..domain.exceptions import RosterLoadError, ScheduleWriteError
from ..domain.models import Photographer, Roster, Schedule, TimeSlot

logger = logging.getLogger(__name__)


class JsonRosterLoader:
    """
    Reads a roster of photographers from a JSON file.

    Expected shape::

        {"photographers": [
            {"id": "1", "name": "...",
             "availabilities": [{"starts": "...", "ends": "..."}],
             "bookings": [{"id": "1", "starts": "...", "ends": "..."}]}
        ]}

    Bookings are kept in file order; sorting them is the caller's job.
    """

    def load(self, path: Path) -> Roster:
        """
        Load and parse a roster file.

        Raises:
            RosterLoadError: If the file is missing, unreadable or malformed
        """
        if not path.exists():
            raise RosterLoadError(f"Input file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise RosterLoadError(f"Invalid JSON in {path}: {exc}") from exc
        except OSError as exc:
            raise RosterLoadError(f"Could not read {path}: {exc}") from exc

        roster = parse_roster(data)
        if not roster.photographers:
            logger.warning("Roster %s contains no photographers", path)
        else:
            logger.debug("Loaded %d photographer(s) from %s", len(roster.photographers), path)

        return roster


def parse_roster(data: Any) -> Roster:
    """Build a Roster from already decoded JSON data."""
    if not isinstance(data, dict):
        raise RosterLoadError("Roster must be a JSON object at the root level.")

    photographers = [
        _parse_photographer(item)
        for item in _as_list(data.get("photographers"), "photographers")
    ]
    return Roster(photographers=photographers)


def _parse_photographer(item: Any) -> Photographer:
    if not isinstance(item, dict):
        raise RosterLoadError(f"Photographer entry must be an object, got {item!r}")

    return Photographer(
        id=str(item.get("id", "")),
        name=str(item.get("name", "")),
        availabilities=tuple(
            _parse_time_slot(slot)
            for slot in _as_list(item.get("availabilities"), "availabilities")
        ),
        bookings=tuple(
            _parse_time_slot(slot)
            for slot in _as_list(item.get("bookings"), "bookings")
        ),
    )


def _parse_time_slot(item: Any) -> TimeSlot:
    if not isinstance(item, dict):
        raise RosterLoadError(f"Time slot entry must be an object, got {item!r}")

    try:
        return TimeSlot(
            id=str(item.get("id", "")),
            starts=_parse_datetime(item["starts"]),
            ends=_parse_datetime(item["ends"]),
        )
    except KeyError as exc:
        raise RosterLoadError(f"Time slot is missing {exc.args[0]!r}: {item!r}") from exc


def _parse_datetime(value: Any) -> DateTime:
    if not isinstance(value, str):
        raise RosterLoadError(f"Timestamp must be a string, got {value!r}")

    try:
        parsed = pendulum.parse(value)
    except ValueError as exc:
        raise RosterLoadError(f"Invalid timestamp {value!r}: {exc}") from exc

    if not isinstance(parsed, DateTime):
        raise RosterLoadError(f"Timestamp {value!r} is not a date and time")
    return parsed


def _as_list(value: Any, field_name: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise RosterLoadError(f"'{field_name}' must be a list, got {type(value).__name__}")
    return value


class JsonScheduleWriter:
    """Writes found schedules to a JSON file."""

    def __init__(self, indent: int = 1):
        self.indent = indent

    def write(self, schedules: Sequence[Schedule], path: Path) -> None:
        """
        Serialize schedules to the given path.

        Raises:
            ScheduleWriteError: If the file cannot be written
        """
        payload = [schedule_to_dict(schedule) for schedule in schedules]

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=self.indent, ensure_ascii=False)
        except OSError as exc:
            raise ScheduleWriteError(f"Could not write {path}: {exc}") from exc

        logger.debug("Wrote %d schedule(s) to %s", len(payload), path)


def schedule_to_dict(schedule: Schedule) -> Dict[str, Any]:
    """JSON-ready representation of a schedule."""
    photographer = schedule.photographer
    result: Dict[str, Any] = {
        "photographer": {"id": photographer.id, "name": photographer.name},
        "timeSlot": time_slot_to_dict(schedule.time_slot),
    }
    if photographer.availabilities:
        result["photographer"]["availabilities"] = [
            time_slot_to_dict(slot) for slot in photographer.availabilities
        ]
    if photographer.bookings:
        result["photographer"]["bookings"] = [
            time_slot_to_dict(slot) for slot in photographer.bookings
        ]
    return result


def time_slot_to_dict(slot: TimeSlot) -> Dict[str, str]:
    result: Dict[str, str] = {}
    if slot.id:
        result["id"] = slot.id
    result["starts"] = slot.starts.to_iso8601_string()
    result["ends"] = slot.ends.to_iso8601_string()
    return result


def default_output_path(input_path: Path, suffix: str = ".output") -> Path:
    """Results path for an input file, e.g. roster.json -> roster.json.output."""
    return input_path.with_name(input_path.name + suffix)
