import unittest
from datetime import date, timedelta
from homechef.domain.Ingredient import Ingredient
from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.domain.ShoppingItem import ShoppingItem
from homechef.logic.recipes.versioning import update_recipe_with_versioning
from homechef.logic.shopping.list_builder import aggregate, is_staple, plan_for_week, rows_to_store, staple_patterns

TODAY = date(2026, 3, 2)


def _curry():
    return Recipe(
        id=1,
        title="Chicken Curry",
        servings_default=4,
        ingredients=[
            Ingredient("Salt", 1, "tsp", "Pantry"),
            Ingredient("Chicken", 500, "g", "Meat"),
        ],
    )


def _salad():
    return Recipe(
        id=2,
        title="Salad",
        servings_default=2,
        ingredients=[
            Ingredient("Chicken", 200, "g", "Meat"),
            Ingredient("Lettuce", 1, "pc", "Produce"),
            Ingredient("chicken", 1, "pc", "Meat"),
        ],
    )


def _by_key(items):
    return {i.key(): i for i in items}


class TestAggregate(unittest.TestCase):

    def test_servings_are_scaled_and_staples_dropped(self):
        plan = [MealPlanItem(1, TODAY, 1, recipe_version=1, servings=8)]
        result = aggregate([], plan, [_curry()], ["Salt"])
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].item_name, "Chicken")
        self.assertEqual(result[0].quantity, 1000)
        self.assertEqual(result[0].unit, "g")
        self.assertFalse(result[0].checked)
        self.assertFalse(result[0].is_manually_added)

    def test_same_name_and_unit_are_summed(self):
        plan = [
            MealPlanItem(1, TODAY, 1, servings=4),
            MealPlanItem(2, TODAY + timedelta(days=1), 2, servings=2),
        ]
        result = _by_key(aggregate([], plan, [_curry(), _salad()], []))
        self.assertEqual(result[("chicken", "g")].quantity, 700)
        # different units never merge
        self.assertEqual(result[("chicken", "pc")].quantity, 1)
        self.assertIn(("salt", "tsp"), result)

    def test_missing_servings_use_recipe_default(self):
        plan = [MealPlanItem(1, TODAY, 1)]
        result = aggregate([], plan, [_curry()], ["salt"])
        self.assertEqual(result[0].quantity, 500)

    def test_total_quantity_is_conserved(self):
        plan = [MealPlanItem(1, TODAY, 1, servings=2), MealPlanItem(2, TODAY, 2, servings=6)]
        result = aggregate([], plan, [_curry(), _salad()], [])
        expected = (1 + 500) * 0.5 + (200 + 1 + 1) * 3
        self.assertAlmostEqual(sum(i.quantity for i in result), expected)

    def test_staples_match_whole_words_case_insensitively(self):
        patterns = staple_patterns(["salt", "Oil"])
        self.assertTrue(is_staple("Salt for seasoning", patterns))
        self.assertTrue(is_staple("Olive OIL", patterns))
        self.assertFalse(is_staple("Saltines", patterns))
        self.assertFalse(is_staple("Boiled eggs", patterns))

    def test_staples_with_regex_characters_are_literal(self):
        patterns = staple_patterns(["C++ sauce", "(", ""])
        self.assertEqual(len(patterns), 2)
        self.assertFalse(is_staple("Chicken", patterns))
        recipe = Recipe(id=5, title="Odd", ingredients=[Ingredient("Rice (basmati)", 100, "g", "Pantry")])
        result = aggregate([], [MealPlanItem(1, TODAY, 5)], [recipe], ["(", "[unclosed"])
        self.assertEqual(len(result), 1)

    def test_manual_items_pass_through_first(self):
        manual = ShoppingItem(42, "Dish soap", 1, "pc", "Household", checked=True, is_manually_added=True)
        plan = [MealPlanItem(1, TODAY, 1, servings=4)]
        result = aggregate([manual], plan, [_curry()], ["Salt"])
        self.assertEqual(result[0].to_dict(), manual.to_dict())
        self.assertEqual(len(result), 2)

    def test_manual_items_survive_an_empty_plan(self):
        manual = ShoppingItem(42, "Coffee", 1, "pc", "Beverages", is_manually_added=True)
        stale = ShoppingItem(43, "Chicken", 500, "g", "Meat")
        result = aggregate([manual, stale], [], [_curry()], [])
        self.assertEqual([i.id for i in result], [42])

    def test_generated_lines_keep_id_and_checked_state(self):
        plan = [MealPlanItem(1, TODAY, 1, servings=4)]
        first = aggregate([], plan, [_curry()], ["Salt"])
        first[0].checked = True
        second = aggregate(first, [MealPlanItem(1, TODAY, 1, servings=8)], [_curry()], ["Salt"])
        self.assertEqual(second[0].id, first[0].id)
        self.assertTrue(second[0].checked)
        self.assertEqual(second[0].quantity, 1000)

    def test_rerun_is_idempotent(self):
        manual = ShoppingItem(42, "Coffee", 1, "pc", "Beverages", is_manually_added=True)
        plan = [MealPlanItem(1, TODAY, 1, servings=4), MealPlanItem(2, TODAY, 2, servings=2)]
        recipes = [_curry(), _salad()]
        once = aggregate([manual], plan, recipes, ["Salt"])
        twice = aggregate(once, plan, recipes, ["Salt"])
        self.assertEqual([i.to_dict() for i in once], [i.to_dict() for i in twice])

    def test_manual_item_with_same_key_keeps_its_own_id(self):
        manual = ShoppingItem(42, "Chicken", 1, "g", "Meat", checked=True, is_manually_added=True)
        result = aggregate([manual], [MealPlanItem(1, TODAY, 1)], [_curry()], ["Salt"])
        generated = [i for i in result if not i.is_manually_added]
        self.assertNotEqual(generated[0].id, 42)
        self.assertTrue(generated[0].checked)

    def test_pinned_version_uses_historical_ingredients(self):
        v1 = _curry()
        v2 = update_recipe_with_versioning(v1, Recipe(
            id=1, title="Chicken Curry", servings_default=4,
            ingredients=[Ingredient("Chicken", 900, "g", "Meat")],
        ))
        plan = [MealPlanItem(1, TODAY, 1, recipe_version=1, servings=4)]
        result = aggregate([], plan, [v2], ["Salt"])
        self.assertEqual(result[0].quantity, 500)

    def test_deleted_recipe_is_skipped(self):
        plan = [MealPlanItem(1, TODAY, 99, servings=4), MealPlanItem(2, TODAY, 1, servings=4)]
        result = aggregate([], plan, [_curry()], ["Salt"])
        self.assertEqual([i.item_name for i in result], ["Chicken"])

    def test_inputs_are_not_mutated(self):
        previous = [ShoppingItem(5, "Chicken", 100, "g", "Meat")]
        aggregate(previous, [MealPlanItem(1, TODAY, 1, servings=4)], [_curry()], [])
        self.assertEqual(previous[0].quantity, 100)


class TestRowsToStore(unittest.TestCase):

    def test_rows_of_other_weeks_are_kept(self):
        other_week = ShoppingItem(5, "Split Peas", 250, "g", "Pantry", checked=True)
        stale = ShoppingItem(6, "Chicken", 100, "g", "Meat")
        manual = ShoppingItem(7, "Coffee", 1, "pc", "Beverages", is_manually_added=True)
        view = aggregate([other_week, stale, manual], [MealPlanItem(1, TODAY, 1)], [_curry()], ["Salt"])
        stored = rows_to_store([other_week, stale, manual], view)
        self.assertEqual([i.id for i in stored], [7, 6, 5])
        self.assertEqual(stored[1].quantity, 500)
        self.assertTrue(stored[2].checked)

    def test_returning_to_a_week_keeps_id_and_checked(self):
        peas = Recipe(id=3, title="Pea Soup", servings_default=2,
                      ingredients=[Ingredient("Split Peas", 250, "g", "Pantry")])
        recipes = [_curry(), peas]
        week_one = [MealPlanItem(2, TODAY + timedelta(days=8), 3)]
        first = aggregate([], week_one, recipes, [])
        first[0].checked = True
        stored = rows_to_store([], first)
        week_zero = aggregate(stored, [MealPlanItem(1, TODAY, 1)], recipes, [])
        stored = rows_to_store(stored, week_zero)
        again = aggregate(stored, week_one, recipes, [])
        self.assertEqual(again[0].id, first[0].id)
        self.assertTrue(again[0].checked)


class TestPlanForWeek(unittest.TestCase):

    def test_week_window(self):
        plan = [MealPlanItem(i, TODAY + timedelta(days=i), 1) for i in range(-1, 15)]
        this_week = plan_for_week(plan, TODAY, 0)
        self.assertEqual([p.date for p in this_week], [TODAY + timedelta(days=i) for i in range(7)])
        next_week = plan_for_week(plan, TODAY, 1)
        self.assertEqual(next_week[0].date, TODAY + timedelta(days=7))
        self.assertEqual(len(next_week), 7)


if __name__ == '__main__':
    unittest.main()
