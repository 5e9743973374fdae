"""Shopping list builder.

Provides aggregate(previous_list, plan_in_scope, recipes, pantry_staples),
which recomputes the plan-generated part of the shopping list and keeps
whatever the user owns:

- manually added items are passed through verbatim, in their original order;
- generated lines are keyed by (lowercase name, lowercase unit). A line that
  existed in the previous list keeps its id and checked flag;
- ingredients whose name whole-word matches a pantry staple are left out.

Different units of the "same" ingredient are never merged (no conversion).
"""
from __future__ import annotations
import logging
import re
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.domain.ShoppingItem import ShoppingItem
from homechef.logic.recipes.versioning import resolve_content
from homechef.utilities.ids import id_base

logger = logging.getLogger(__name__)

__all__ = ["staple_patterns", "is_staple", "plan_for_week", "aggregate", "rows_to_store"]

Key = Tuple[str, str]


def staple_patterns(pantry_staples: Sequence[str]) -> List[re.Pattern]:
    """Compile staples into whole-word, case-insensitive patterns.

    Staples are escaped, so regex characters match literally. Empty and
    non-string entries are skipped.
    """
    return [
        re.compile(rf"\b{re.escape(staple.strip())}\b", re.IGNORECASE)
        for staple in pantry_staples or []
        if isinstance(staple, str) and staple.strip()
    ]


def is_staple(name: str, patterns: Sequence[re.Pattern]) -> bool:
    return any(p.search(name or "") for p in patterns)


def plan_for_week(plan: Sequence[MealPlanItem], today: Optional[date] = None,
                  week_offset: int = 0) -> List[MealPlanItem]:
    """Items dated in [today + 7*offset, today + 7*offset + 7)."""
    today = today or date.today()
    start = today + timedelta(days=7 * week_offset)
    end = start + timedelta(days=7)
    return [p for p in plan if start <= p.date < end]


def aggregate(previous_list: Sequence[ShoppingItem], plan_in_scope: Sequence[MealPlanItem],
              recipes: Sequence[Recipe], pantry_staples: Sequence[str]) -> List[ShoppingItem]:
    """Merge the previous list with the ingredients required by `plan_in_scope`.

    Returns manual items (unchanged, original order) followed by one aggregate
    line per (name, unit) key, in first-seen order.
    """
    manual = [item for item in previous_list if item.is_manually_added]

    # Checked state is remembered for every previous row; ids only for generated
    # rows, so a generated line can never take a manual item's id.
    checked_by_key: Dict[Key, bool] = {}
    id_by_key: Dict[Key, int] = {}
    for item in previous_list:
        checked_by_key[item.key()] = item.checked
        if not item.is_manually_added:
            id_by_key[item.key()] = item.id

    recipe_index = {r.id: r for r in recipes}
    patterns = staple_patterns(pantry_staples)
    totals: Dict[Key, ShoppingItem] = {}
    fresh_base = id_base(item.id for item in previous_list)
    fresh_count = 0

    for meal in plan_in_scope:
        recipe = recipe_index.get(meal.recipe_id)
        if recipe is None:
            logger.debug("Plan item %s references missing recipe %s; skipped", meal.id, meal.recipe_id)
            continue
        content = resolve_content(recipe, meal.recipe_version)
        base_servings = content.servings_default or 1
        servings = meal.servings or base_servings
        scale = servings / base_servings

        for ing in content.ingredients:
            if is_staple(ing.item_name, patterns):
                continue
            key = ing.key()
            quantity = ing.quantity * scale
            line = totals.get(key)
            if line is not None:
                line.quantity += quantity
                continue
            if key in id_by_key:
                line_id = id_by_key[key]
            else:
                line_id = fresh_base + fresh_count
                fresh_count += 1
            totals[key] = ShoppingItem(
                id=line_id,
                item_name=ing.item_name,
                quantity=quantity,
                unit=ing.unit,
                category=ing.category,
                checked=checked_by_key.get(key, False),
                is_manually_added=False,
            )

    return manual + list(totals.values())


def rows_to_store(previous_list: Sequence[ShoppingItem], view: Sequence[ShoppingItem]) -> List[ShoppingItem]:
    """The stored list after showing `view` (an aggregate of one week).

    The view replaces the rows it covers. Generated rows of other weeks stay
    stored, so their ids and checked flags survive a switch between weeks.
    """
    shown = {item.key() for item in view if not item.is_manually_added}
    kept = [item for item in previous_list
            if not item.is_manually_added and item.key() not in shown]
    return list(view) + kept
