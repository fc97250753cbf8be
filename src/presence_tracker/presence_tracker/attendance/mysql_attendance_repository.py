from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        user_id=int(r["user_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        category_id=int(r["category_id"]),
        category_code=r.get("code"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.user_id, a.work_date, a.category_id, c.code
                FROM attendance a
                JOIN categories c ON c.category_id = a.category_id
                WHERE a.user_id=%s AND a.work_date=%s
                """,
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, *, user_id: int, work_date: date, category_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(user_id, work_date, category_id)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE category_id=VALUES(category_id)
                """,
                (int(user_id), work_date, int(category_id)),
            )

    def delete(self, *, user_id: int, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance WHERE user_id=%s AND work_date=%s",
                (int(user_id), work_date),
            )
            return cur.rowcount > 0

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["a.work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if user_id is not None:
            clauses.append("a.user_id=%s")
            params.append(int(user_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.user_id, a.work_date, a.category_id, c.code
                FROM attendance a
                JOIN categories c ON c.category_id = a.category_id
                WHERE {where}
                ORDER BY a.work_date, a.user_id
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
