from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: an employee whose days are tracked.

    Note: plain data object, no DB access. `department_name` is filled by the
    repository join and is only used for display.
    """

    user_id: int
    am: str
    surname: str
    name: str
    department_id: Optional[int]
    start_date: date
    end_date: Optional[date] = None
    department_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.surname} {self.name}".strip()


@dataclass(frozen=True)
class Admin:
    admin_id: int
    username: str
    password_hash: str
