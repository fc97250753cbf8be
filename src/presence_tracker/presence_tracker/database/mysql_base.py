from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import to_calendar_date
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, roll back and re-raise on error."""

    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        logger.warning("Rolling back transaction on %s", conn_factory.config.database)
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def normalize_mysql_date(value: Any) -> Optional[date]:
    """DATE columns come back as date, DATETIME as datetime, the pure driver
    sometimes as 'YYYY-MM-DD' strings."""

    if value is None:
        return None
    if isinstance(value, (date, str)):
        return to_calendar_date(value.strip() if isinstance(value, str) else value)
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")
