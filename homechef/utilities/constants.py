from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_MEAL_TYPE: Final[str] = "Dinner"

SHOPPING_CATEGORIES: Final[list[str]] = [
    "Produce",
    "Dairy",
    "Meat",
    "Bakery",
    "Frozen",
    "Pantry",
    "Spices",
    "Canned",
    "Beverages",
    "Household",
    "Other",
]

DEFAULT_PANTRY_STAPLES: Final[list[str]] = [
    "Salt", "Pepper", "Olive Oil", "Water", "Sugar", "Flour", "Oil", "Butter"
]

INITIAL_SETTINGS: Final[dict] = {
    "language": "en",
    "default_adults": 2,
    "default_kids": 1,
    "week_start_day": 1,  # 0 = Sunday, 1 = Monday, 6 = Saturday
    "pantry_staples": DEFAULT_PANTRY_STAPLES,
    "stores": [
        {"id": 1, "name": "Default Store", "category_order": SHOPPING_CATEGORIES},
    ],
}

# Manual shopping items start as a single piece in the catch-all category
MANUAL_ITEM_QUANTITY: Final[float] = 1
MANUAL_ITEM_UNIT: Final[str] = "pc"
MANUAL_ITEM_CATEGORY: Final[str] = "Other"
