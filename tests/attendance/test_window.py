from datetime import date, datetime

import pytest

from src.presence_tracker.presence_tracker.attendance.window import (
    day_flags,
    is_blocked,
    is_employment_blocked,
    is_weekend,
)

from fakes import make_user

# 2024-01-10 is a Wednesday; 2024-01-13/14 the following weekend.
HIRED = make_user(1, "Doe", "John", date(2024, 1, 10), date(2024, 3, 29))


@pytest.mark.parametrize(
    "day",
    [date(2024, 1, 9), date(2024, 1, 1), date(2023, 12, 25), date(2024, 3, 30), date(2024, 4, 1)],
)
def test_days_outside_window_are_blocked_regardless_of_calendar(day):
    assert is_blocked(HIRED, day, holidays=set()) is True
    assert is_blocked(HIRED, day, holidays={day}) is True
    assert is_employment_blocked(HIRED, day) is True


def test_window_is_inclusive_on_both_ends():
    assert is_blocked(HIRED, date(2024, 1, 10), set()) is False
    assert is_blocked(HIRED, date(2024, 3, 29), set()) is False


def test_open_ended_window_never_expires():
    user = make_user(2, "Roe", "Jane", date(2024, 1, 1))
    assert is_blocked(user, date(2099, 6, 1), set()) is False  # Monday


def test_weekend_and_holiday_inside_window():
    assert is_weekend(date(2024, 1, 13)) and is_weekend(date(2024, 1, 14))
    assert not is_weekend(date(2024, 1, 15))

    assert is_blocked(HIRED, date(2024, 1, 13), set()) is True
    assert is_blocked(HIRED, date(2024, 1, 15), {date(2024, 1, 15)}) is True
    assert is_blocked(HIRED, date(2024, 1, 16), {date(2024, 1, 15)}) is False


def test_time_of_day_is_ignored():
    assert is_blocked(HIRED, datetime(2024, 1, 10, 23, 59), set()) is False
    assert is_blocked(HIRED, datetime(2024, 1, 9, 23, 59), set()) is True


def test_day_flags_separate_reasons():
    flags = day_flags(HIRED, date(2024, 1, 6), {date(2024, 1, 6)})
    assert flags.weekend and flags.holiday and flags.employment_blocked
    assert flags.blocked

    open_day = day_flags(HIRED, date(2024, 1, 11), set())
    assert not open_day.blocked
