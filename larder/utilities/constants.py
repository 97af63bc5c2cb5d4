from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DAYS_BEFORE_EXPIRY: Final[int] = 7

# Freezer age brackets, in whole days since the meal was frozen
FREEZER_FRESH_MAX_DAYS: Final[int] = 30
FREEZER_MEDIUM_MAX_DAYS: Final[int] = 90

AGE_FRESH: Final[str] = "age-fresh"
AGE_MEDIUM: Final[str] = "age-medium"
AGE_OLD: Final[str] = "age-old"

CATEGORY_CLASSES: Final[dict[str, str]] = {
    "Canned Goods": "cat-canned",
    "Dry Goods": "cat-dry",
    "Spices": "cat-spices",
    "Condiments": "cat-condiments",
    "Baking": "cat-baking",
    "Snacks": "cat-snacks",
    "Beverages": "cat-beverages",
    "Other": "cat-other",
}
DEFAULT_CATEGORY_CLASS: Final[str] = "cat-other"

# Shown in the add/edit dropdowns, in this order
PANTRY_CATEGORIES: Final[list[str]] = list(CATEGORY_CLASSES)
