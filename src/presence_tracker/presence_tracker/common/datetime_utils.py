from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import DATE_FORMAT, MONTH_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_request_date(value: str | None, field_name: str) -> date:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def to_calendar_date(value: date | datetime | str) -> date:
    """Strip time-of-day so comparisons happen on calendar days only."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value)[:10])


def iter_days(start: date, end: date) -> Iterator[date]:
    """Inclusive day range; yields nothing when end < start."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    if month == 12:
        following = date(year + 1, 1, 1)
    else:
        following = date(year, month + 1, 1)
    return first, following - timedelta(days=1)


def parse_month(value: str | None, *, today: date | None = None) -> tuple[int, int]:
    if not value:
        today = today or date.today()
        return today.year, today.month
    try:
        parsed = datetime.strptime(value, MONTH_FORMAT)
    except ValueError:
        raise ValidationError("month must be a YYYY-MM value")
    return parsed.year, parsed.month


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
