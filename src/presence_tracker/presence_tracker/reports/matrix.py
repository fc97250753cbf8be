"""Attendance matrix: one row per user, one column per day.

The same builder feeds the interactive month grid and the spreadsheet
export.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Collection, Iterable, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..attendance.window import day_flags
from ..common.datetime_utils import iter_days, to_calendar_date
from ..core.constants import ALL_CATEGORIES, ON_SITE_CODE
from ..users.model import User


@dataclass(frozen=True)
class MatrixCell:
    day: date
    code: str
    weekend: bool
    holiday: bool
    employment_blocked: bool

    @property
    def blocked(self) -> bool:
        return self.employment_blocked or self.weekend or self.holiday


@dataclass(frozen=True)
class MatrixRow:
    user_id: int
    am: str
    surname: str
    name: str
    department: str
    cells: list[MatrixCell] = field(default_factory=list)


@dataclass(frozen=True)
class Matrix:
    days: list[date]
    rows: list[MatrixRow]
    on_site_totals: list[int]

    @property
    def day_keys(self) -> list[str]:
        return [d.isoformat() for d in self.days]


def _filter_records(
    records: Iterable[AttendanceRecord],
    category_filter: Optional[Union[str, int]],
) -> Iterable[AttendanceRecord]:
    if category_filter is None or str(category_filter) in ("", ALL_CATEGORIES):
        return records
    wanted = str(category_filter)
    return (r for r in records if str(r.category_id) == wanted)


def _sort_key(user: User) -> tuple[str, str, int]:
    return (user.surname, user.name, user.user_id)


def build_matrix(
    users: Sequence[User],
    start: date,
    end: date,
    records: Iterable[AttendanceRecord],
    holidays: Collection[date] = (),
    category_filter: Optional[Union[str, int]] = None,
) -> Matrix:
    """Resolve every (user, day) cell for the inclusive range [start, end].

    `end < start` yields an empty day axis. Blocked days are always empty,
    even when a stale record exists for them.
    """

    days = list(iter_days(to_calendar_date(start), to_calendar_date(end)))
    holiday_set = {to_calendar_date(h) for h in holidays}

    index: dict[tuple[int, str], str] = {}
    for r in _filter_records(records, category_filter):
        index[(r.user_id, to_calendar_date(r.work_date).isoformat())] = r.category_code or ""

    rows: list[MatrixRow] = []
    totals = [0] * len(days)

    for user in sorted(users, key=_sort_key):
        cells: list[MatrixCell] = []
        for i, day in enumerate(days):
            flags = day_flags(user, day, holiday_set)
            code = "" if flags.blocked else index.get((user.user_id, day.isoformat()), "")
            if code == ON_SITE_CODE:
                totals[i] += 1
            cells.append(
                MatrixCell(
                    day=day,
                    code=code,
                    weekend=flags.weekend,
                    holiday=flags.holiday,
                    employment_blocked=flags.employment_blocked,
                )
            )

        rows.append(
            MatrixRow(
                user_id=user.user_id,
                am=user.am,
                surname=user.surname,
                name=user.name,
                department=user.department_name or "",
                cells=cells,
            )
        )

    return Matrix(days=days, rows=rows, on_site_totals=totals)
