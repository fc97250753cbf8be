from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..holidays.service import HolidayService
from ..users.repository import UserRepository
from .exporter import render_matrix_xlsx
from .matrix import Matrix, build_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportFile:
    filename: str
    content: bytes


def report_filename(start: date, end: date) -> str:
    return f"Attendance_Matrix_{start.isoformat()}_to_{end.isoformat()}.xlsx"


class AttendanceReportService:
    """Use case: date-ranged attendance matrix for admins."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        holidays: HolidayService,
    ):
        self._attendance = attendance
        self._users = users
        self._holidays = holidays

    def build_matrix(self, *, start: date, end: date, category_id: Optional[str] = None) -> Matrix:
        users = list(self._users.list_all())
        if end < start:
            # Out-of-order range: empty day axis, nothing to read.
            return build_matrix(users, start, end, [], ())

        records = self._attendance.list_between(start_date=start, end_date=end)
        holidays = self._holidays.dates_between(start, end)
        return build_matrix(users, start, end, records, holidays, category_filter=category_id)

    def export_xlsx(self, *, start: date, end: date, category_id: Optional[str] = None) -> ReportFile:
        matrix = self.build_matrix(start=start, end=end, category_id=category_id)
        content = render_matrix_xlsx(matrix)
        logger.info(
            "Rendered attendance matrix %s..%s category=%s users=%d days=%d",
            start,
            end,
            category_id or "all",
            len(matrix.rows),
            len(matrix.days),
        )
        return ReportFile(filename=report_filename(start, end), content=content)
