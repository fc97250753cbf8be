from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Admin, User
from .repository import AdminRepository, UserRepository

_SELECT_USERS = """
    SELECT u.user_id, u.am, u.surname, u.name, u.department_id,
           u.start_date, u.end_date, d.name AS department_name
    FROM users u
    LEFT JOIN departments d ON d.department_id = u.department_id
"""


def _to_user(r: dict) -> User:
    dept_id = r.get("department_id")
    return User(
        user_id=int(r["user_id"]),
        am=str(r["am"]),
        surname=r["surname"],
        name=r["name"],
        department_id=int(dept_id) if dept_id is not None else None,
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r.get("end_date")),
        department_name=r.get("department_name"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USERS + " ORDER BY u.surname, u.name, u.user_id")
            return [_to_user(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USERS + " WHERE u.user_id=%s", (int(user_id),))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def get_by_am(self, am: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USERS + " WHERE u.am=%s", (am,))
            r = fetchone(cur)
            return _to_user(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(am, surname, name, department_id, start_date, end_date)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (am, surname, name, department_id, start_date, end_date),
            )
            return int(cur.lastrowid)

    def set_end_date(self, user_id: int, *, end_date: Optional[date]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET end_date=%s WHERE user_id=%s", (end_date, int(user_id)))
            return cur.rowcount > 0


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, username, password_hash FROM admins WHERE username=%s",
                (username,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Admin(admin_id=int(r["admin_id"]), username=r["username"], password_hash=r["password_hash"])
