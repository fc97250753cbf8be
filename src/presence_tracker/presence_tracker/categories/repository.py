from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Category


class CategoryRepository(Protocol):
    def list_all(self) -> Sequence[Category]:
        """All categories in registry order (category_id ascending)."""

        raise NotImplementedError

    def get_by_id(self, category_id: int) -> Optional[Category]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Category]:
        raise NotImplementedError

    def create(self, *, code: str, label: str, color: str, is_work_day: bool) -> int:
        raise NotImplementedError

    def set_active(self, category_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
