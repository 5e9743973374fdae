import unittest
from homechef.domain.ShoppingItem import ShoppingItem
from homechef.logic.shopping.editing import add_manual_item, clear_checked, toggle_item, update_item


class TestShoppingEditing(unittest.TestCase):

    def setUp(self):
        self.stored = [
            ShoppingItem(1, "Chicken", 500, "g", "Meat"),
            ShoppingItem(2, "Coffee", 1, "pc", "Beverages", checked=True, is_manually_added=True),
        ]

    def test_toggle_stored_item(self):
        toggled = toggle_item(self.stored, [], 1)
        self.assertTrue(toggled.checked)
        self.assertFalse(self.stored[0].checked)

    def test_toggle_view_only_item_is_returned_for_persisting(self):
        visible = [ShoppingItem(7, "Lettuce", 1, "pc", "Produce")]
        toggled = toggle_item(self.stored, visible, 7)
        self.assertEqual(toggled.id, 7)
        self.assertTrue(toggled.checked)

    def test_toggle_unknown(self):
        self.assertIsNone(toggle_item(self.stored, [], 99))

    def test_add_manual_item_defaults(self):
        item = add_manual_item(self.stored, "  Dish soap ")
        self.assertEqual(item.item_name, "Dish soap")
        self.assertEqual((item.quantity, item.unit, item.category), (1, "pc", "Other"))
        self.assertTrue(item.is_manually_added)
        self.assertNotIn(item.id, (1, 2))

    def test_update_item_partial(self):
        updated = update_item(self.stored, 1, {"quantity": 750, "unit": None})
        self.assertEqual(updated.quantity, 750)
        self.assertEqual(updated.unit, "g")

    def test_update_item_rejects_unknown_category(self):
        with self.assertRaises(ValueError):
            update_item(self.stored, 1, {"category": "Gadgets"})

    def test_clear_checked(self):
        kept, deleted = clear_checked(self.stored)
        self.assertEqual([i.id for i in kept], [1])
        self.assertEqual([i.id for i in deleted], [2])


if __name__ == '__main__':
    unittest.main()
