import unittest
from datetime import date, timedelta
from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.logic.planning.generator import (
    ScoringConfig, fill_window, quality_score, recency_days, recency_penalty, score_recipe
)

TODAY = date(2026, 3, 2)


class FixedRandom:
    """Stand-in for the random module: no jitter."""

    def __init__(self, value=0.0):
        self.value = value

    def random(self):
        return self.value


def _cfg(**overrides):
    values = dict(
        neutral_rating=3.5, never_eaten_days=100, recency_cap_days=30, rating_weight=10,
        recency_weight=2, jitter=10, penalties=((1, 10000), (2, 5000), (5, 2000), (7, 500)), window_days=7,
    )
    values.update(overrides)
    return ScoringConfig(**values)


class TestScoring(unittest.TestCase):

    def test_penalty_steps(self):
        cfg = _cfg()
        self.assertEqual(recency_penalty(1, cfg), 10000)
        self.assertEqual(recency_penalty(2, cfg), 5000)
        self.assertEqual(recency_penalty(3, cfg), 2000)
        self.assertEqual(recency_penalty(6, cfg), 500)
        self.assertEqual(recency_penalty(8, cfg), 0)

    def test_quality_prefers_recorded_ratings(self):
        recipe = Recipe(id=1, title="Soup", rating=5)
        plan = [MealPlanItem(1, TODAY, 1, rating=2), MealPlanItem(2, TODAY, 1, rating=4)]
        self.assertEqual(quality_score(recipe, plan, _cfg()), 3)
        self.assertEqual(quality_score(recipe, [], _cfg()), 5)
        self.assertEqual(quality_score(Recipe(id=2, title="Stew"), [], _cfg()), 3.5)

    def test_recency_only_counts_earlier_dates(self):
        recipe = Recipe(id=1, title="Soup")
        plan = [MealPlanItem(1, TODAY - timedelta(days=4), 1), MealPlanItem(2, TODAY + timedelta(days=2), 1)]
        self.assertEqual(recency_days(recipe, plan, TODAY, _cfg()), 4)
        self.assertEqual(recency_days(recipe, [], TODAY, _cfg()), 100)

    def test_never_eaten_score(self):
        recipe = Recipe(id=1, title="Soup", rating=5)
        # 5 * 10 + min(100, 30) * 2 - 0
        self.assertEqual(score_recipe(recipe, [], TODAY, _cfg()), 110)


class TestFillWindow(unittest.TestCase):

    def test_recently_eaten_recipe_loses(self):
        candidate = TODAY + timedelta(days=5)
        a = Recipe(id=1, title="A", rating=5)
        b = Recipe(id=2, title="B", rating=5)
        plan = [MealPlanItem(100, candidate - timedelta(days=1), b.id, recipe_version=1)]
        created = fill_window(plan, [b, a], candidate, rng=FixedRandom(), today=TODAY, config=_cfg(window_days=1))
        self.assertEqual(len(created), 1)
        self.assertEqual(created[0].recipe_id, a.id)
        self.assertEqual(created[0].date, candidate)

    def test_past_and_booked_dates_are_skipped(self):
        recipes = [Recipe(id=i, title=f"R{i}") for i in range(1, 8)]
        booked = MealPlanItem(100, TODAY + timedelta(days=1), 1)
        created = fill_window([booked], recipes, TODAY - timedelta(days=3),
                              rng=FixedRandom(), today=TODAY, config=_cfg())
        dates = [c.date for c in created]
        self.assertEqual(dates, [TODAY, TODAY + timedelta(days=2), TODAY + timedelta(days=3)])
        self.assertNotIn(booked.date, dates)

    def test_each_booking_is_seen_by_later_dates(self):
        recipes = [Recipe(id=1, title="One"), Recipe(id=2, title="Two")]
        created = fill_window([], recipes, TODAY, rng=FixedRandom(), today=TODAY, config=_cfg(window_days=2))
        # Equal scores: the first recipe in catalog order wins day one, the penalty hands day two to the other
        self.assertEqual([c.recipe_id for c in created], [1, 2])

    def test_soft_penalty_still_books_single_recipe(self):
        created = fill_window([], [Recipe(id=1, title="Only")], TODAY,
                              rng=FixedRandom(), today=TODAY, config=_cfg(window_days=3))
        self.assertEqual([c.recipe_id for c in created], [1, 1, 1])

    def test_new_items_pin_current_version_and_servings(self):
        recipe = Recipe(id=1, title="Curry", servings_default=6, version=3)
        created = fill_window([], [recipe], TODAY, rng=FixedRandom(), today=TODAY, config=_cfg(window_days=1))
        self.assertEqual(created[0].recipe_version, 3)
        self.assertEqual(created[0].servings, 6)

    def test_ids_are_unique_and_above_existing(self):
        existing = MealPlanItem(10 ** 15, TODAY - timedelta(days=1), 1)
        created = fill_window([existing], [Recipe(id=1, title="A"), Recipe(id=2, title="B")], TODAY,
                              rng=FixedRandom(), today=TODAY, config=_cfg())
        ids = [c.id for c in created]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertTrue(all(i > existing.id for i in ids))

    def test_empty_catalog(self):
        self.assertEqual(fill_window([], [], TODAY, rng=FixedRandom(), today=TODAY), [])

    def test_input_plan_is_not_mutated(self):
        plan = [MealPlanItem(1, TODAY - timedelta(days=1), 1)]
        fill_window(plan, [Recipe(id=1, title="A")], TODAY, rng=FixedRandom(), today=TODAY, config=_cfg())
        self.assertEqual(len(plan), 1)

    def test_jitter_can_break_ties(self):
        class Alternating:
            def __init__(self):
                self.calls = 0

            def random(self):
                self.calls += 1
                return 0.0 if self.calls % 2 else 0.9

        recipes = [Recipe(id=1, title="One"), Recipe(id=2, title="Two")]
        created = fill_window([], recipes, TODAY, rng=Alternating(), today=TODAY, config=_cfg(window_days=1))
        self.assertEqual(created[0].recipe_id, 2)


if __name__ == '__main__':
    unittest.main()
