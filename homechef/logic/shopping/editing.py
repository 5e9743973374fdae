"""Shopping list edits driven by the user (toggle, manual add, update, clear checked)."""
from typing import List, Optional, Sequence, Tuple

from homechef.domain.ShoppingItem import ShoppingItem
from homechef.utilities.constants import MANUAL_ITEM_CATEGORY, MANUAL_ITEM_QUANTITY, MANUAL_ITEM_UNIT, SHOPPING_CATEGORIES
from homechef.utilities.ids import new_id

EDITABLE_FIELDS = ("item_name", "quantity", "unit", "category")


def toggle_item(stored: Sequence[ShoppingItem], visible: Sequence[ShoppingItem],
                item_id: int) -> Optional[ShoppingItem]:
    """Flip the checked flag of `item_id` and return the row to persist.

    Rows that only exist in the computed view (a generated line that was never
    saved) are looked up in `visible` and persisted on first toggle.
    """
    source = next((i for i in stored if i.id == item_id), None)
    if source is None:
        source = next((i for i in visible if i.id == item_id), None)
    if source is None:
        return None
    toggled = ShoppingItem.from_dict(source.to_dict())
    toggled.checked = not source.checked
    return toggled


def add_manual_item(stored: Sequence[ShoppingItem], name: str) -> ShoppingItem:
    return ShoppingItem(
        id=new_id(i.id for i in stored),
        item_name=name.strip(),
        quantity=MANUAL_ITEM_QUANTITY,
        unit=MANUAL_ITEM_UNIT,
        category=MANUAL_ITEM_CATEGORY,
        checked=False,
        is_manually_added=True,
    )


def update_item(stored: Sequence[ShoppingItem], item_id: int, updates: dict) -> Optional[ShoppingItem]:
    source = next((i for i in stored if i.id == item_id), None)
    if source is None:
        return None
    data = source.to_dict()
    data.update({k: v for k, v in updates.items() if k in EDITABLE_FIELDS and v is not None})
    if data["category"] not in SHOPPING_CATEGORIES:
        raise ValueError(f"Unknown category: {data['category']}")
    return ShoppingItem.from_dict(data)


def clear_checked(stored: Sequence[ShoppingItem]) -> Tuple[List[ShoppingItem], List[ShoppingItem]]:
    """Return (kept, deleted)."""
    kept = [i for i in stored if not i.checked]
    deleted = [i for i in stored if i.checked]
    return kept, deleted
