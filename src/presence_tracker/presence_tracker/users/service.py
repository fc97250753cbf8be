from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty, require_window
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .department_model import Department
from .department_repository import DepartmentRepository
from .model import User
from .repository import AdminRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into Flask session after login."""

    admin_id: int
    username: str


class AuthService:
    """Use case: authenticate an administrator (login)."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def authenticate(self, username: str, password: str) -> SessionAdmin:
        if not username or not password:
            raise AuthenticationError("Username and password are required")

        admin = self._admins.get_by_username(username)
        if not admin:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionAdmin(admin_id=admin.admin_id, username=admin.username)


class UserService:
    """Use case: manage employees and departments (admin)."""

    def __init__(self, users: UserRepository, departments: DepartmentRepository):
        self._users = users
        self._departments = departments

    def list_users(self) -> Sequence[User]:
        return list(self._users.list_all())

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(
        self,
        *,
        am: str,
        surname: str,
        name: str,
        department_id: Optional[int],
        start_date: date,
        end_date: Optional[date] = None,
    ) -> int:
        am = require_non_empty(am, "AM")
        surname = require_non_empty(surname, "Surname")
        name = require_non_empty(name, "Name")
        require_window(start_date, end_date)

        if self._users.get_by_am(am):
            raise ValidationError(f"AM {am} already exists")

        user_id = self._users.create_user(
            am=am,
            surname=surname,
            name=name,
            department_id=department_id,
            start_date=start_date,
            end_date=end_date,
        )
        logger.info("Created user %s (am=%s, start=%s, end=%s)", user_id, am, start_date, end_date)
        return user_id

    def set_end_date(self, user_id: int, end_date: Optional[date]) -> None:
        user = self.get_user(user_id)
        require_window(user.start_date, end_date)
        self._users.set_end_date(user_id, end_date=end_date)
        logger.info("User %s end_date=%s", user_id, end_date)

    def list_departments(self) -> Sequence[Department]:
        return list(self._departments.list_all())

    def create_department(self, name: str) -> int:
        name = require_non_empty(name, "Department")
        if self._departments.get_by_name(name):
            raise ValidationError(f"Department {name} already exists")
        return self._departments.create(name=name)
