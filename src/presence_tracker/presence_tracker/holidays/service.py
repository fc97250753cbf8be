from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..core.exceptions import NotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_all(self) -> Sequence[Holiday]:
        return list(self._holidays.list_all())

    def dates_between(self, start: date, end: date) -> set[date]:
        if end < start:
            return set()
        return {h.holiday_date for h in self._holidays.list_between(start_date=start, end_date=end)}

    def add(self, holiday_date: date, name: str = "") -> int:
        if any(h.holiday_date == holiday_date for h in self._holidays.list_all()):
            raise ValidationError(f"{holiday_date.isoformat()} is already a holiday")
        holiday_id = self._holidays.create(holiday_date=holiday_date, name=name.strip())
        logger.info("Added holiday %s (%s)", holiday_date, name)
        return holiday_id

    def remove(self, holiday_id: int) -> None:
        if not self._holidays.delete_by_id(holiday_id):
            raise NotFoundError("Holiday not found")
        logger.info("Removed holiday %s", holiday_id)
