from datetime import datetime

from larder.domain.FreezerMeal import FreezerMeal
from larder.domain.PantryItem import PantryItem
from larder.domain.Store import Store
from larder.logic.reporting.dashboard import build_dashboard, sort_freezer_meals, sort_pantry_items
from larder.utilities.constants import PANTRY_CATEGORIES

NOW = datetime(2026, 3, 15, 10, 30)


def test_pantry_sorted_by_expiry_with_blank_last():
    items = [
        PantryItem(1, "Zucchini", expiry=""),
        PantryItem(2, "Milk", expiry="2026-03-20"),
        PantryItem(3, "Apples", expiry=""),
        PantryItem(4, "Butter", expiry="2026-03-17"),
        PantryItem(5, "Avocado", expiry="2026-03-20"),
    ]
    assert [i.name for i in sort_pantry_items(items)] == ["Butter", "Avocado", "Milk", "Apples", "Zucchini"]


def test_pantry_name_tiebreak_is_case_sensitive():
    items = [PantryItem(1, "apple"), PantryItem(2, "Banana")]
    assert [i.name for i in sort_pantry_items(items)] == ["Banana", "apple"]


def test_freezer_sorted_oldest_first_with_blank_first():
    meals = [
        FreezerMeal(1, "Stew", date_frozen="2026-02-01"),
        FreezerMeal(2, "Soup", date_frozen=""),
        FreezerMeal(3, "Chili", date_frozen="2026-01-10"),
        FreezerMeal(4, "Broth", date_frozen="2026-02-01"),
    ]
    assert [m.name for m in sort_freezer_meals(meals)] == ["Soup", "Chili", "Broth", "Stew"]


def test_sorting_does_not_mutate_store():
    store = Store(pantry_items=[PantryItem(1, "B", expiry=""), PantryItem(2, "A", expiry="2026-04-01")])
    build_dashboard(store, NOW)
    assert [i.id for i in store.pantry_items] == [1, 2]


def test_build_dashboard_summary():
    store = Store(
        pantry_items=[
            PantryItem(1, "Old yoghurt", expiry="2026-03-01"),
            PantryItem(2, "Bread", expiry="2026-03-17"),
            PantryItem(3, "Rice", expiry=""),
        ],
        freezer_meals=[
            FreezerMeal(1, "Ancient curry", date_frozen="2025-10-01"),
            FreezerMeal(2, "Fresh pesto", date_frozen="2026-03-10"),
        ],
    )
    context = build_dashboard(store, NOW)
    assert context["summary"] == {
        "pantry_total": 3,
        "expired": 1,
        "expiring_soon": 1,
        "freezer_total": 2,
        "freezer_old": 1,
    }
    assert [i.name for i in context["pantry_items"]] == ["Old yoghurt", "Bread", "Rice"]
    assert context["categories"] == PANTRY_CATEGORIES
