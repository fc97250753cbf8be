"""Schema/seed helpers used by scripts/ and by create_app when AUTO_INIT_DB
or AUTO_SEED_DB is set."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# Quoted strings are matched whole so a ';' inside a value never splits.
_SQL_TOKEN = re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|;|[^'\";]+", re.S)
_DB_DIRECTIVE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")


def split_sql(sql: str) -> Iterator[str]:
    """Split a .sql file into statements; drops '--' comment lines."""

    body = "\n".join(ln for ln in sql.splitlines() if not ln.lstrip().startswith("--"))
    body = _DB_DIRECTIVE.sub("", body)

    buf: list[str] = []
    for token in _SQL_TOKEN.findall(body):
        if token == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
        else:
            buf.append(token)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_script(db: DatabaseConnection, path: Path) -> int:
    conn = db.connect()
    try:
        cur = conn.cursor()
        count = 0
        for stmt in split_sql(Path(path).read_text(encoding="utf-8")):
            cur.execute(stmt)
            count += 1
        conn.commit()
        return count
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    db = DatabaseConnection.from_dict(db_config)
    conn = db.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{db.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _run_script(DatabaseConnection.from_dict(db_config), Path(schema_path))
    logger.info("Applied %d schema statements from %s", count, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _run_script(DatabaseConnection.from_dict(db_config), Path(seed_path))
    logger.info("Applied %d seed statements from %s", count, seed_path)


def ensure_demo_admin(db_config: dict, *, username: str = "admin", password: str = "admin123") -> None:
    """Create the admin account, or reset its password if it exists."""

    conn = DatabaseConnection.from_dict(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute(
            """
            INSERT INTO admins (username, password_hash) VALUES (%s, %s)
            ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash)
            """,
            (username, generate_password_hash(password)),
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("Admin account %r is ready", username)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection.from_dict(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
