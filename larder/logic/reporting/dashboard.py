"""Dashboard view model: display order for both collections plus summary counts."""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Optional

from larder.domain.FreezerMeal import FreezerMeal
from larder.domain.PantryItem import PantryItem
from larder.domain.Store import Store
from larder.logic.pantry.freshness import freezer_age_class, is_expired, is_expiring_soon
from larder.utilities.constants import AGE_OLD, PANTRY_CATEGORIES

__all__ = ["pantry_sort_key", "freezer_sort_key", "sort_pantry_items", "sort_freezer_meals", "build_dashboard"]


def pantry_sort_key(item: PantryItem):
    # Soonest expiry first, items without an expiry last, then by name
    return (item.expiry == "", item.expiry, item.name)


def freezer_sort_key(meal: FreezerMeal):
    # Plain string order on purpose: a blank date_frozen sorts before any date
    return (meal.date_frozen, meal.name)


def sort_pantry_items(items: List[PantryItem]) -> List[PantryItem]:
    return sorted(items, key=pantry_sort_key)


def sort_freezer_meals(meals: List[FreezerMeal]) -> List[FreezerMeal]:
    return sorted(meals, key=freezer_sort_key)


def build_dashboard(store: Store, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Template context for the index page.

    Returns structure:
    {
      'pantry_items': [PantryItem, ...],    # display order
      'freezer_meals': [FreezerMeal, ...],  # display order
      'summary': {'pantry_total', 'expired', 'expiring_soon', 'freezer_total', 'freezer_old'},
      'categories': [str, ...],
    }
    """
    pantry = sort_pantry_items(store.pantry_items)
    meals = sort_freezer_meals(store.freezer_meals)
    summary = {
        'pantry_total': len(pantry),
        'expired': sum(1 for i in pantry if is_expired(i.expiry, now)),
        'expiring_soon': sum(1 for i in pantry if is_expiring_soon(i.expiry, now)),
        'freezer_total': len(meals),
        'freezer_old': sum(1 for m in meals if freezer_age_class(m.date_frozen, now) == AGE_OLD),
    }
    return {
        'pantry_items': pantry,
        'freezer_meals': meals,
        'summary': summary,
        'categories': PANTRY_CATEGORIES,
    }
