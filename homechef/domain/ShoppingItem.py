"""ShoppingItem: one shopping-list row (an Ingredient plus id, checked flag and origin)."""
from homechef.domain.Ingredient import Ingredient


class ShoppingItem(Ingredient):
    def __init__(self, id: int, item_name: str = "", quantity: float = 0, unit: str = "",
                 category: str = "Other", checked: bool = False, is_manually_added: bool = False):
        super().__init__(item_name, quantity, unit, category)
        self.id = id
        self.checked = checked
        self.is_manually_added = is_manually_added

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        origin = "manual" if self.is_manually_added else "plan"
        return f"[{mark}] {super().__str__()} - {origin}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        base = Ingredient.from_dict(d)
        return ShoppingItem(
            id=int(d["id"]),
            item_name=base.item_name,
            quantity=base.quantity,
            unit=base.unit,
            category=base.category,
            checked=bool(d.get("checked", False)),
            is_manually_added=bool(d.get("is_manually_added", False)),
        )

    def to_dict(self):
        d = super().to_dict()
        d.update({
            "id": self.id,
            "checked": self.checked,
            "is_manually_added": self.is_manually_added,
        })
        return d
