from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Category
from .repository import CategoryRepository

_COLUMNS = "category_id, code, label, color, is_work_day, is_active"


def _to_category(r: dict) -> Category:
    return Category(
        category_id=int(r["category_id"]),
        code=r["code"],
        label=r["label"],
        color=r.get("color") or "",
        is_work_day=bool(r.get("is_work_day", True)),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLCategoryRepository(CategoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Category]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM categories ORDER BY category_id")
            return [_to_category(r) for r in fetchall(cur)]

    def get_by_id(self, category_id: int) -> Optional[Category]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM categories WHERE category_id=%s", (int(category_id),))
            r = fetchone(cur)
            return _to_category(r) if r else None

    def get_by_code(self, code: str) -> Optional[Category]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM categories WHERE code=%s", (code,))
            r = fetchone(cur)
            return _to_category(r) if r else None

    def create(self, *, code: str, label: str, color: str, is_work_day: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO categories(code, label, color, is_work_day, is_active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (code, label, color, int(bool(is_work_day))),
            )
            return int(cur.lastrowid)

    def set_active(self, category_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE categories SET is_active=%s WHERE category_id=%s",
                (int(bool(is_active)), int(category_id)),
            )
            return cur.rowcount > 0
