"""Pure plan edits.

Each function takes the current plan (a list of MealPlanItem) and returns
(new_plan, changed_items). changed_items are the entries the caller must
persist, in order. The input list and its items are never mutated.
"""
from __future__ import annotations
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.utilities.ids import id_base, new_id

__all__ = [
    "find_by_date", "find_by_id", "add_meal", "move_meal", "reorder_meal", "remove_meal",
    "rate_meal", "update_servings", "clear_history", "clear_reviews", "generate_initial_plan",
]

PlanEdit = Tuple[List[MealPlanItem], List[MealPlanItem]]


def find_by_date(plan: Sequence[MealPlanItem], day: date) -> Optional[MealPlanItem]:
    return next((p for p in plan if p.date == day), None)


def find_by_id(plan: Sequence[MealPlanItem], meal_id: int) -> Optional[MealPlanItem]:
    return next((p for p in plan if p.id == meal_id), None)


def _swap(plan, changes) -> List[MealPlanItem]:
    by_id = {c.id: c for c in changes}
    return [by_id.get(p.id, p) for p in plan]


def add_meal(plan: Sequence[MealPlanItem], recipe: Recipe, day: date) -> PlanEdit:
    item = MealPlanItem(
        id=new_id(p.id for p in plan),
        date=day,
        recipe_id=recipe.id,
        recipe_version=recipe.version,
        servings=recipe.servings_default,
    )
    return list(plan) + [item], [item]


def reorder_meal(plan: Sequence[MealPlanItem], meal_id: int, target: date) -> PlanEdit:
    """Move a meal to `target`, swapping dates with whatever is already there."""
    meal = find_by_id(plan, meal_id)
    if meal is None or meal.date == target:
        return list(plan), []
    occupant = find_by_date(plan, target)
    changes = [meal.replace(date=target.isoformat())]
    if occupant is not None:
        changes.append(occupant.replace(date=meal.date.isoformat()))
    return _swap(plan, changes), changes


def move_meal(plan: Sequence[MealPlanItem], day: date, direction: str) -> PlanEdit:
    """Shift the meal on `day` one day 'up' (earlier) or 'down' (later)."""
    meal = find_by_date(plan, day)
    if meal is None:
        return list(plan), []
    if direction not in ("up", "down"):
        raise ValueError(f"Unknown direction: {direction}")
    target = day + timedelta(days=1 if direction == "down" else -1)
    return reorder_meal(plan, meal.id, target)


def remove_meal(plan: Sequence[MealPlanItem], day: date) -> Tuple[List[MealPlanItem], Optional[MealPlanItem]]:
    """Return (new_plan, removed_item); removed_item is None when the day was empty."""
    meal = find_by_date(plan, day)
    if meal is None:
        return list(plan), None
    return [p for p in plan if p.date != day], meal


def rate_meal(plan: Sequence[MealPlanItem], meal_id: int, rating: float,
              comment: Optional[str] = None) -> PlanEdit:
    meal = find_by_id(plan, meal_id)
    if meal is None:
        return list(plan), []
    rated = meal.replace(is_cooked=True, rating=rating, rating_comment=comment)
    return _swap(plan, [rated]), [rated]


def update_servings(plan: Sequence[MealPlanItem], meal_id: int, servings: int) -> PlanEdit:
    meal = find_by_id(plan, meal_id)
    if meal is None:
        return list(plan), []
    updated = meal.replace(servings=servings)
    return _swap(plan, [updated]), [updated]


def clear_history(plan: Sequence[MealPlanItem], today: Optional[date] = None) -> List[MealPlanItem]:
    """Drop every meal dated before today."""
    today = today or date.today()
    return [p for p in plan if p.date >= today]


def clear_reviews(plan: Sequence[MealPlanItem]) -> List[MealPlanItem]:
    return [p.replace(rating=None, rating_comment=None, is_cooked=False) for p in plan]


def generate_initial_plan(recipes: Sequence[Recipe], today: Optional[date] = None,
                          days: int = 7) -> List[MealPlanItem]:
    """Round-robin seed plan for the next `days` days (used when the store is empty)."""
    if not recipes:
        return []
    today = today or date.today()
    base = id_base()
    plan = []
    for i in range(days):
        recipe = recipes[i % len(recipes)]
        plan.append(MealPlanItem(
            id=base + i,
            date=today + timedelta(days=i),
            recipe_id=recipe.id,
            recipe_version=recipe.version,
            servings=recipe.servings_default,
        ))
    return plan
