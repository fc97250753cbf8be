"""Status cycle: empty -> OS -> ... -> last active -> empty."""
from __future__ import annotations

from typing import Optional, Sequence

from ..categories.model import Category
from ..core.constants import ON_SITE_CODE


def next_category(current_code: Optional[str], active_categories: Sequence[Category]) -> Optional[Category]:
    """Return the category that follows `current_code`, or None for "clear".

    `active_categories` must already be filtered to active ones, in registry
    order. None means the caller deletes the attendance row.
    """

    if not active_categories:
        return None

    if not current_code:
        for category in active_categories:
            if category.code == ON_SITE_CODE:
                return category
        return active_categories[0]

    codes = [c.code for c in active_categories]
    if current_code not in codes:
        # Deactivated after assignment: restart the cycle.
        return active_categories[0]

    next_index = (codes.index(current_code) + 1) % (len(active_categories) + 1)
    if next_index == len(active_categories):
        return None
    return active_categories[next_index]
