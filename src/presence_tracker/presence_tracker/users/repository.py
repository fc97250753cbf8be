from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Admin, User


class UserRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_am(self, am: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        am: str,
        surname: str,
        name: str,
        department_id: Optional[int],
        start_date: date,
        end_date: Optional[date],
    ) -> int:
        raise NotImplementedError

    def set_end_date(self, user_id: int, *, end_date: Optional[date]) -> bool:
        raise NotImplementedError


class AdminRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError
