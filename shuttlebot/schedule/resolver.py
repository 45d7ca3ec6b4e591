"""
Upcoming departures: resolve a location's timetable against the current time.
Every entry is placed on today's date in the caller's timezone; there is no
rollover to tomorrow once the last departure has passed.
"""
from datetime import datetime
from typing import Iterable, Mapping

from shuttlebot.schedule.models import SCHEDULES, ClockTime, Schedule

MAX_UPCOMING = 3
MESSAGE_PREFIX = "Upcoming departures: "


class LocationNotFoundError(LookupError):
    """Raised when a location keyword has no timetable."""

    def __init__(self, location: str):
        super().__init__(f"Shuttle location not found: {location!r}")
        self.location = location


def get_schedule(location: str, schedules: Mapping[str, Schedule] = SCHEDULES) -> Schedule:
    """Return the timetable for a location keyword (case-insensitive)."""
    key = (location or "").lower()
    try:
        return schedules[key]
    except KeyError:
        raise LocationNotFoundError(key) from None


def resolve_clock_time(clock_time: ClockTime, now: datetime) -> datetime:
    return datetime(
        now.year,
        now.month,
        now.day,
        clock_time.hour,
        clock_time.minute,
        tzinfo=now.tzinfo,
    )


def resolve_schedule(schedule: Schedule, now: datetime) -> list[datetime]:
    return [resolve_clock_time(ct, now) for ct in schedule]


def times_after(times: Iterable[datetime], after: datetime, limit: int = MAX_UPCOMING) -> list[datetime]:
    """First `limit` times strictly later than `after`, in input order."""
    out: list[datetime] = []
    if limit <= 0:
        return out
    for t in times:
        if t > after:
            out.append(t)
            if len(out) >= limit:
                break
    return out


def format_clock(t: datetime) -> str:
    # 12-hour clock, no leading zero on the hour: 7:20AM, 12:45PM
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d}{suffix}"


def upcoming_departures(location: str, now: datetime, limit: int = MAX_UPCOMING) -> list[datetime]:
    schedule = get_schedule(location)
    return times_after(resolve_schedule(schedule, now), now, limit)


def departures_message(times: Iterable[datetime]) -> str:
    return MESSAGE_PREFIX + ", ".join(format_clock(t) for t in times)
