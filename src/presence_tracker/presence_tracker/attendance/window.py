"""Employment window filter.

One pure rule decides whether a calendar day can carry a status for a user.
Both the edit path and the matrix/export path call it.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Collection

from ..common.datetime_utils import to_calendar_date
from ..users.model import User


@dataclass(frozen=True)
class DayFlags:
    weekend: bool
    holiday: bool
    employment_blocked: bool

    @property
    def blocked(self) -> bool:
        return self.employment_blocked or self.weekend or self.holiday


def is_weekend(day: date | datetime) -> bool:
    """Saturday or Sunday."""
    return to_calendar_date(day).weekday() >= 5


def is_employment_blocked(user: User, day: date | datetime) -> bool:
    """True when the day falls outside [start_date, end_date or +inf]."""
    day = to_calendar_date(day)
    if day < to_calendar_date(user.start_date):
        return True
    if user.end_date is not None and day > to_calendar_date(user.end_date):
        return True
    return False


def day_flags(user: User, day: date | datetime, holidays: Collection[date]) -> DayFlags:
    day = to_calendar_date(day)
    return DayFlags(
        weekend=is_weekend(day),
        holiday=day in holidays,
        employment_blocked=is_employment_blocked(user, day),
    )


def is_blocked(user: User, day: date | datetime, holidays: Collection[date]) -> bool:
    """A day is blocked outside the employment window, on weekends and on holidays."""
    if is_employment_blocked(user, day):
        return True
    day = to_calendar_date(day)
    return is_weekend(day) or day in holidays
