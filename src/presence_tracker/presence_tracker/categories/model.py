from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """Attendance status code (OS, T, OOO, BT, ...).

    Identity is stable once attendance rows reference it; deactivating only
    removes it from the status cycle.
    """

    category_id: int
    code: str
    label: str
    color: str
    is_work_day: bool = True
    is_active: bool = True
