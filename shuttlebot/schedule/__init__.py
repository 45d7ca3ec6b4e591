from shuttlebot.schedule.models import SCHEDULES, ClockTime, Schedule
from shuttlebot.schedule.resolver import (
    MAX_UPCOMING,
    LocationNotFoundError,
    departures_message,
    format_clock,
    get_schedule,
    resolve_clock_time,
    resolve_schedule,
    times_after,
    upcoming_departures,
)

__all__ = [
    "MAX_UPCOMING",
    "SCHEDULES",
    "ClockTime",
    "LocationNotFoundError",
    "Schedule",
    "departures_message",
    "format_clock",
    "get_schedule",
    "resolve_clock_time",
    "resolve_schedule",
    "times_after",
    "upcoming_departures",
]
