"""Shopping list repository (file persistence)."""
from typing import Sequence

from homechef.domain.ShoppingItem import ShoppingItem
from homechef.infra.paths import SHOPPING_FILE_NAME
from homechef.infra.store import JsonCollection


class ShoppingRepository(JsonCollection[ShoppingItem]):
    def __init__(self, path=None):
        super().__init__(SHOPPING_FILE_NAME, ShoppingItem.from_dict, path)

    def save_all(self, items: Sequence[ShoppingItem]) -> None:
        '''Bulk replace: the stored list becomes exactly `items`.'''
        self._write_raw([item.to_dict() for item in items])
