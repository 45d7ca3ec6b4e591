"""Tests for timetable lookup, time resolution, filtering and formatting."""
from datetime import datetime, timedelta

import pytest

from shuttlebot.clock import REFERENCE_TZ
from shuttlebot.schedule import (
    MAX_UPCOMING,
    SCHEDULES,
    ClockTime,
    LocationNotFoundError,
    departures_message,
    format_clock,
    get_schedule,
    resolve_clock_time,
    resolve_schedule,
    times_after,
    upcoming_departures,
)


# --- Timetable data ---


def test_known_locations():
    assert set(SCHEDULES) == {"bva", "vaco"}
    assert len(SCHEDULES["bva"]) == 10
    assert len(SCHEDULES["vaco"]) == 11


def test_schedules_are_ascending():
    for location, schedule in SCHEDULES.items():
        assert list(schedule) == sorted(schedule), location


def test_schedules_mapping_is_read_only():
    with pytest.raises(TypeError):
        SCHEDULES["new"] = (ClockTime(9, 0),)


@pytest.mark.parametrize("keyword", ["bva", "BVA", "Bva", "bVa"])
def test_get_schedule_case_insensitive(keyword):
    assert get_schedule(keyword) == SCHEDULES["bva"]


@pytest.mark.parametrize("keyword", ["xyz", "", " bva", "bva "])
def test_get_schedule_unknown(keyword):
    with pytest.raises(LocationNotFoundError):
        get_schedule(keyword)


def test_location_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        get_schedule("nowhere")


# --- Resolution ---


def test_resolve_clock_time_uses_today(at):
    now = at(6, 59, month=10, day=19)
    t = resolve_clock_time(ClockTime(16, 0), now)
    assert (t.year, t.month, t.day, t.hour, t.minute) == (2026, 10, 19, 16, 0)
    assert t.second == 0 and t.microsecond == 0
    assert t.tzinfo is REFERENCE_TZ


def test_resolve_clock_time_drops_seconds_of_now():
    now = datetime(2026, 10, 19, 7, 20, 45, 123456, tzinfo=REFERENCE_TZ)
    t = resolve_clock_time(ClockTime(7, 20), now)
    assert t < now


def test_resolve_on_dst_start_day_uses_daylight_offset(at):
    # 2026-03-08: clocks jump 2:00 -> 3:00 in the US
    now = at(1, 0, month=3, day=8)
    assert now.utcoffset() == timedelta(hours=-5)
    t = resolve_clock_time(ClockTime(7, 20), now)
    assert t.utcoffset() == timedelta(hours=-4)


def test_resolve_schedule_keeps_order(at):
    resolved = resolve_schedule(SCHEDULES["vaco"], at(0, 1))
    assert resolved == sorted(resolved)
    assert len(resolved) == len(SCHEDULES["vaco"])


# --- Filtering ---


def test_times_after_is_strict(at):
    now = at(7, 20)
    times = times_after(resolve_schedule(SCHEDULES["bva"], now), now)
    assert times[0] == at(8, 25)


def test_times_after_limit(at):
    now = at(0, 1)
    times = resolve_schedule(SCHEDULES["vaco"], now)
    assert len(times_after(times, now)) == MAX_UPCOMING
    assert len(times_after(times, now, limit=5)) == 5
    assert times_after(times, now, limit=0) == []


def test_upcoming_departures_scenario_morning(at):
    now = at(7, 15)
    times = upcoming_departures("bva", now)
    assert times == [at(7, 20), at(8, 25), at(9, 30)]


def test_upcoming_departures_fewer_than_limit(at):
    times = upcoming_departures("bva", at(16, 30))
    assert times == [at(17, 5)]


def test_upcoming_departures_no_next_day_rollover(at):
    assert upcoming_departures("bva", at(17, 10)) == []
    assert upcoming_departures("vaco", at(23, 59)) == []


@pytest.mark.parametrize("location", ["bva", "vaco"])
def test_upcoming_departures_properties(location, at):
    for hour in range(24):
        for minute in (0, 5, 20, 35, 59):
            now = at(hour, minute)
            times = upcoming_departures(location, now)
            assert 0 <= len(times) <= MAX_UPCOMING
            assert all(t > now for t in times)
            assert times == sorted(times)


# --- Formatting ---


@pytest.mark.parametrize(
    "hour,minute,expected",
    [
        (0, 5, "12:05AM"),
        (7, 20, "7:20AM"),
        (11, 40, "11:40AM"),
        (12, 45, "12:45PM"),
        (15, 4, "3:04PM"),
        (17, 50, "5:50PM"),
    ],
)
def test_format_clock(hour, minute, expected, at):
    assert format_clock(at(hour, minute)) == expected


def test_departures_message(at):
    assert departures_message([at(7, 20), at(8, 25), at(9, 30)]) == "Upcoming departures: 7:20AM, 8:25AM, 9:30AM"


def test_departures_message_empty():
    assert departures_message([]) == "Upcoming departures: "
