from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Category
from .repository import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    """Use case: maintain the category registry (admin)."""

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def list_all(self) -> Sequence[Category]:
        return list(self._categories.list_all())

    def find(self, category_id: int) -> Optional[Category]:
        return self._categories.get_by_id(category_id)

    def list_active(self) -> list[Category]:
        return [c for c in self._categories.list_all() if c.is_active]

    def by_code(self) -> dict[str, Category]:
        return {c.code: c for c in self._categories.list_all()}

    def create(self, *, code: str, label: str, color: str = "", is_work_day: bool = True) -> int:
        code = require_non_empty(code, "Code").upper()
        label = require_non_empty(label, "Label")
        if self._categories.get_by_code(code):
            raise ValidationError(f"Category code {code} already exists")

        category_id = self._categories.create(code=code, label=label, color=color.strip(), is_work_day=is_work_day)
        logger.info("Created category %s (%s)", code, category_id)
        return category_id

    def toggle_active(self, category_id: int) -> Category:
        category = self._categories.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")

        self._categories.set_active(category_id, is_active=not category.is_active)
        logger.info("Category %s is_active=%s", category.code, not category.is_active)
        return Category(
            category_id=category.category_id,
            code=category.code,
            label=category.label,
            color=category.color,
            is_work_day=category.is_work_day,
            is_active=not category.is_active,
        )
