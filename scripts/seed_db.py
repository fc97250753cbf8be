"""Load demo categories, departments and employees, then create the admin.

ADMIN_USERNAME / ADMIN_PASSWORD override the demo credentials.
"""
from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module
from src.presence_tracker.presence_tracker.database.bootstrap import apply_seed_sql, ensure_demo_admin
from src.presence_tracker.presence_tracker.database.connection import DBConfig


def main() -> None:
    load_dotenv(REPO_ROOT / ".env", override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    username = os.getenv("ADMIN_USERNAME", "admin")
    ensure_demo_admin(db_config, username=username, password=os.getenv("ADMIN_PASSWORD", "admin123"))

    print(f"OK: seeded {DBConfig.from_dict(db_config).describe()} (admin login: {username})")


if __name__ == "__main__":
    main()
