"""Ingredient domain entity: item name, quantity, unit, shopping category."""
from homechef.utilities.constants import SHOPPING_CATEGORIES


def _to_number(value) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


class Ingredient:
    def __init__(self, item_name: str = "", quantity: float = 0, unit: str = "", category: str = "Other"):
        self.item_name = item_name
        self.quantity = quantity
        self.unit = unit
        self.category = category if category in SHOPPING_CATEGORIES else "Other"

    def __str__(self) -> str:
        return f"{self.item_name} - {self.quantity:g} {self.unit} ({self.category})"

    __repr__ = __str__

    def key(self) -> tuple:
        '''Grouping key used by the shopping aggregator: (lowercase name, lowercase unit).'''
        return ((self.item_name or "").lower(), (self.unit or "").lower())

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            item_name=str(d.get("item_name") or ""),
            quantity=_to_number(d.get("quantity")),
            unit=str(d.get("unit") or ""),
            category=str(d.get("category") or "Other"),
        )

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "item_name": self.item_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
        }
