"""Store aggregate: every pantry item and freezer meal plus the next-id counters.

The store is always loaded and saved as a whole. The persisted counters are
only a hint and are never read back: on load each counter is recomputed as
max(existing id) + 1 (or 1 for an empty collection), so every backend hands
out the same ids for the same data.
"""
from typing import List, Optional
from larder.domain.PantryItem import PantryItem
from larder.domain.FreezerMeal import FreezerMeal


def _next_id(ids) -> int:
    return max([0] + list(ids)) + 1


def _collection(data: dict, key: str) -> list:
    # Missing or null means empty; anything else must already be an array
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be an array, got {type(value).__name__}")
    return value


class Store:
    def __init__(self, pantry_items: Optional[List[PantryItem]] = None,
                 freezer_meals: Optional[List[FreezerMeal]] = None):
        # Avoid mutable default arguments
        self.pantry_items: List[PantryItem] = list(pantry_items) if pantry_items else []
        self.freezer_meals: List[FreezerMeal] = list(freezer_meals) if freezer_meals else []
        self.reconcile_counters()

    def reconcile_counters(self):
        '''Derives both counters from the ids currently held.'''
        self.next_pantry_id = _next_id(i.id for i in self.pantry_items)
        self.next_meal_id = _next_id(m.id for m in self.freezer_meals)
        return self

    # --- Pantry -----------------------------------------------------------
    def find_pantry_item(self, item_id: int) -> Optional[PantryItem]:
        return next((i for i in self.pantry_items if i.id == item_id), None)

    def add_pantry_item(self, name: str, quantity: str = "", category: str = "",
                        expiry: str = "", notes: str = "") -> PantryItem:
        '''Appends a new item under the next pantry id and advances the counter.'''
        item = PantryItem(self.next_pantry_id, name, quantity, category, expiry, notes)
        self.pantry_items.append(item)
        self.next_pantry_id += 1
        return item

    def remove_pantry_item(self, item_id: int) -> bool:
        '''Removes every item with this id. Returns False when none matched.'''
        remaining = [i for i in self.pantry_items if i.id != item_id]
        removed = len(remaining) != len(self.pantry_items)
        self.pantry_items = remaining
        return removed

    # --- Freezer ----------------------------------------------------------
    def find_freezer_meal(self, meal_id: int) -> Optional[FreezerMeal]:
        return next((m for m in self.freezer_meals if m.id == meal_id), None)

    def add_freezer_meal(self, name: str, portions: str = "", date_frozen: str = "",
                         description: str = "") -> FreezerMeal:
        meal = FreezerMeal(self.next_meal_id, name, portions, date_frozen, description)
        self.freezer_meals.append(meal)
        self.next_meal_id += 1
        return meal

    def remove_freezer_meal(self, meal_id: int) -> bool:
        remaining = [m for m in self.freezer_meals if m.id != meal_id]
        removed = len(remaining) != len(self.freezer_meals)
        self.freezer_meals = remaining
        return removed

    # --- Persistence helpers ---------------------------------------------
    @staticmethod
    def from_dict(data):
        '''Builds a Store from the persisted document. Raises ValueError on malformed input.'''
        if not isinstance(data, dict):
            raise ValueError(f"store document must be an object, got {type(data).__name__}")
        return Store(
            pantry_items=[PantryItem.from_dict(entry) for entry in _collection(data, "pantry_items")],
            freezer_meals=[FreezerMeal.from_dict(entry) for entry in _collection(data, "freezer_meals")],
        )

    def to_dict(self):
        return {
            "pantry_items": [item.to_dict() for item in self.pantry_items],
            "freezer_meals": [meal.to_dict() for meal in self.freezer_meals],
            "next_pantry_id": self.next_pantry_id,
            "next_meal_id": self.next_meal_id,
        }

    def __str__(self) -> str:
        return (f"Store({len(self.pantry_items)} pantry items, {len(self.freezer_meals)} freezer meals, "
                f"next ids {self.next_pantry_id}/{self.next_meal_id})")

    __repr__ = __str__
