from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one status for one user on one calendar day."""

    user_id: int
    work_date: date
    category_id: int
    category_code: Optional[str] = None
