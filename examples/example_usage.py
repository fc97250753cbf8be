"""Example: export a matrix through the service layer (no Flask).

Usage: python -m examples.example_usage 2024-01-01 2024-01-31
"""

import importlib
import sys
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from src.presence_tracker.presence_tracker.common.datetime_utils import parse_iso_date
from src.presence_tracker.presence_tracker.container import build_container


def main():
    load_dotenv(override=False)
    start, end = parse_iso_date(sys.argv[1]), parse_iso_date(sys.argv[2])
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    report = container.report_service.export_xlsx(start=start, end=end)
    Path(report.filename).write_bytes(report.content)
    print(f"OK: wrote {report.filename}")


if __name__ == "__main__":
    main()
