"""Timetable types and the per-location departure data."""
from types import MappingProxyType
from typing import Mapping, NamedTuple


class ClockTime(NamedTuple):
    """Wall-clock time of day with no date or timezone attached."""

    hour: int
    minute: int


# Ascending time-of-day order is assumed, not checked.
Schedule = tuple[ClockTime, ...]


SCHEDULES: Mapping[str, Schedule] = MappingProxyType(
    {
        "bva": (
            ClockTime(7, 20),
            ClockTime(8, 25),
            ClockTime(9, 30),
            ClockTime(10, 35),
            ClockTime(11, 40),
            ClockTime(12, 45),
            ClockTime(13, 50),
            ClockTime(14, 55),
            ClockTime(16, 0),
            ClockTime(17, 5),
        ),
        "vaco": (
            ClockTime(7, 0),
            ClockTime(8, 5),
            ClockTime(9, 10),
            ClockTime(10, 15),
            ClockTime(11, 20),
            ClockTime(12, 25),
            ClockTime(13, 30),
            ClockTime(14, 35),
            ClockTime(15, 40),
            ClockTime(16, 45),
            ClockTime(17, 50),
        ),
    }
)
