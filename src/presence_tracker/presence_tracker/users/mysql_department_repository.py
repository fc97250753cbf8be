from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .department_model import Department
from .department_repository import DepartmentRepository


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_id, name FROM departments ORDER BY name")
            rows = fetchall(cur)
            return [Department(department_id=int(r["department_id"]), name=r["name"]) for r in rows]

    def get_by_name(self, name: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_id, name FROM departments WHERE name=%s", (name,))
            r = fetchone(cur)
            return Department(department_id=int(r["department_id"]), name=r["name"]) if r else None

    def create(self, *, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO departments(name) VALUES(%s)", (name,))
            return int(cur.lastrowid)
