from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    """Company-wide non-work day."""

    holiday_id: int
    holiday_date: date
    name: str = ""
