"""
Adapters layer - Reading rosters from and writing schedules to JSON files.
"""

from .json_roster import JsonRosterLoader, JsonScheduleWriter, default_output_path, parse_roster

__all__ = ["JsonRosterLoader", "JsonScheduleWriter", "default_output_path", "parse_roster"]
