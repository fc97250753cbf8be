from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..categories.model import Category
from ..categories.service import CategoryService
from ..common.datetime_utils import month_bounds
from ..core.exceptions import BlockedDayError, NotFoundError, ValidationError
from ..holidays.service import HolidayService
from ..reports.matrix import Matrix, build_matrix
from ..users.model import User
from ..users.repository import UserRepository
from .cycle import next_category
from .repository import AttendanceRepository
from .window import is_blocked

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthGrid:
    """Everything the calendar page needs for one month."""

    year: int
    month: int
    matrix: Matrix
    categories_by_code: dict[str, Category]
    legend: list[Category]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        categories: CategoryService,
        holidays: HolidayService,
    ):
        self._attendance = attendance
        self._users = users
        self._categories = categories
        self._holidays = holidays

    def _get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _is_blocked(self, user: User, work_date: date) -> bool:
        return is_blocked(user, work_date, self._holidays.dates_between(work_date, work_date))

    def _ensure_open(self, user: User, work_date: date) -> None:
        if self._is_blocked(user, work_date):
            raise BlockedDayError(f"{work_date.isoformat()} is not editable for {user.full_name}")

    def _stored_code(self, user_id: int, work_date: date) -> Optional[str]:
        record = self._attendance.get_for_user_and_date(user_id, work_date)
        return record.category_code if record else None

    def get_attendance(self, user_id: int, work_date: date) -> Optional[str]:
        """Resolved code for one day; blocked days read as empty even if a row exists."""

        user = self._get_user(user_id)
        if self._is_blocked(user, work_date):
            return None
        return self._stored_code(user_id, work_date)

    def update_attendance(self, *, user_id: int, work_date: date, category_id: Optional[int]) -> Optional[str]:
        """Upsert one (user, day) status, or delete it when category_id is None."""

        user = self._get_user(user_id)
        self._ensure_open(user, work_date)

        if category_id is None:
            self._attendance.delete(user_id=user_id, work_date=work_date)
            logger.info("Cleared attendance user=%s date=%s", user_id, work_date)
            return None

        category = self._categories.find(category_id)
        if not category:
            raise ValidationError("Unknown category")

        self._attendance.upsert(user_id=user_id, work_date=work_date, category_id=category.category_id)
        logger.info("Set attendance user=%s date=%s code=%s", user_id, work_date, category.code)
        return category.code

    def cycle_day(self, *, user_id: int, work_date: date) -> Optional[str]:
        """Advance the day's status one step through the active categories.

        Returns the new code, or None when the day was cleared.
        """

        user = self._get_user(user_id)
        self._ensure_open(user, work_date)

        current_code = self._stored_code(user_id, work_date)
        nxt = next_category(current_code, self._categories.list_active())

        if nxt is None:
            if current_code:
                self._attendance.delete(user_id=user_id, work_date=work_date)
                logger.info("Cleared attendance user=%s date=%s (was %s)", user_id, work_date, current_code)
            return None

        self._attendance.upsert(user_id=user_id, work_date=work_date, category_id=nxt.category_id)
        logger.info("Cycled attendance user=%s date=%s %s -> %s", user_id, work_date, current_code or "-", nxt.code)
        return nxt.code

    def month_grid(self, year: int, month: int, *, user_id: Optional[int] = None) -> MonthGrid:
        start, end = month_bounds(year, month)
        if user_id is not None:
            users = [self._get_user(user_id)]
        else:
            users = list(self._users.list_all())

        records = self._attendance.list_between(start_date=start, end_date=end, user_id=user_id)
        matrix = build_matrix(users, start, end, records, self._holidays.dates_between(start, end))

        return MonthGrid(
            year=year,
            month=month,
            matrix=matrix,
            categories_by_code=self._categories.by_code(),
            legend=self._categories.list_active(),
        )
