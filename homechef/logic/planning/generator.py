"""Greedy plan generator.

fill_window(plan, recipes, start_date) walks a window of candidate dates
starting at start_date. For every date that is not in the past and has no
meal yet, it scores every recipe and books the best one. Each booking goes
into the working plan straight away, so later dates in the same call see it.

Score per recipe and candidate date:

    quality * rating_weight + min(recency, recency_cap) * recency_weight
    - penalty(recency) + jitter

quality is the mean of the recipe's recorded ratings in the working plan.
Without any, it is the recipe's own rating, or the neutral default.
recency is the number of days since the most recent earlier occurrence, or
never_eaten_days if there is none. Penalties are soft: a recently eaten
recipe can still win when nothing else is available.
"""
from __future__ import annotations
import logging
import random
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.utilities import config as app_config
from homechef.utilities.ids import id_base

logger = logging.getLogger(__name__)

__all__ = ["ScoringConfig", "quality_score", "recency_days", "recency_penalty", "score_recipe", "fill_window"]


class ScoringConfig:
    """Empirical scoring constants. The defaults come from utilities.config."""

    def __init__(self,
                 neutral_rating: float = app_config.PLAN_NEUTRAL_RATING,
                 never_eaten_days: int = app_config.PLAN_NEVER_EATEN_DAYS,
                 recency_cap_days: int = app_config.PLAN_RECENCY_CAP_DAYS,
                 rating_weight: float = app_config.PLAN_RATING_WEIGHT,
                 recency_weight: float = app_config.PLAN_RECENCY_WEIGHT,
                 jitter: float = app_config.PLAN_JITTER,
                 penalties: Sequence[Tuple[int, float]] = app_config.PLAN_PENALTIES,
                 window_days: int = app_config.PLAN_WINDOW_DAYS):
        self.neutral_rating = neutral_rating
        self.never_eaten_days = never_eaten_days
        self.recency_cap_days = recency_cap_days
        self.rating_weight = rating_weight
        self.recency_weight = recency_weight
        self.jitter = jitter
        # ascending by threshold; first threshold >= recency applies
        self.penalties = tuple(sorted(penalties))
        self.window_days = window_days


def quality_score(recipe: Recipe, plan: Sequence[MealPlanItem], cfg: ScoringConfig) -> float:
    ratings = [p.rating for p in plan if p.recipe_id == recipe.id and p.rating]
    if ratings:
        return sum(ratings) / len(ratings)
    return recipe.rating or cfg.neutral_rating


def recency_days(recipe: Recipe, plan: Sequence[MealPlanItem], candidate: date, cfg: ScoringConfig) -> int:
    """Days since the latest occurrence strictly before `candidate`."""
    prior = [p.date for p in plan if p.recipe_id == recipe.id and p.date < candidate]
    if not prior:
        return cfg.never_eaten_days
    return (candidate - max(prior)).days


def recency_penalty(days: int, cfg: ScoringConfig) -> float:
    for threshold, penalty in cfg.penalties:
        if days <= threshold:
            return penalty
    return 0.0


def score_recipe(recipe: Recipe, plan: Sequence[MealPlanItem], candidate: date,
                 cfg: Optional[ScoringConfig] = None) -> float:
    """Pre-jitter score of `recipe` for `candidate` against the given plan."""
    cfg = cfg or ScoringConfig()
    quality = quality_score(recipe, plan, cfg)
    days = recency_days(recipe, plan, candidate, cfg)
    score = quality * cfg.rating_weight + min(days, cfg.recency_cap_days) * cfg.recency_weight
    return score - recency_penalty(days, cfg)


def fill_window(plan: Sequence[MealPlanItem], recipes: Sequence[Recipe], start_date: date, *,
                rng=None, today: Optional[date] = None,
                config: Optional[ScoringConfig] = None) -> List[MealPlanItem]:
    """Book the best recipe on every empty, non-past date of the window.

    Args:
        plan: existing plan items (not mutated).
        recipes: recipe catalog; each new item is pinned to the recipe's current version.
        start_date: first candidate date.
        rng: object exposing random() in [0, 1); defaults to the `random` module.
        today: local calendar date; defaults to date.today().
        config: scoring constants.

    Returns:
        The newly created items, in date order. The caller persists them.
    """
    cfg = config or ScoringConfig()
    rng = rng or random
    today = today or date.today()
    if not recipes:
        return []

    working: List[MealPlanItem] = list(plan)
    booked_dates = {p.date for p in working}
    base = id_base(p.id for p in working)
    created: List[MealPlanItem] = []

    for offset in range(cfg.window_days):
        candidate = start_date + timedelta(days=offset)
        if candidate < today or candidate in booked_dates:
            continue

        best: Optional[Recipe] = None
        best_score = float("-inf")
        for recipe in recipes:
            score = score_recipe(recipe, working, candidate, cfg) + rng.random() * cfg.jitter
            if score > best_score:
                best, best_score = recipe, score

        item = MealPlanItem(
            id=base + offset,
            date=candidate,
            recipe_id=best.id,
            recipe_version=best.version,
            servings=best.servings_default,
        )
        working.append(item)
        booked_dates.add(candidate)
        created.append(item)
        logger.debug("Planned %s for %s (score %.1f of %d candidates)",
                     best.title, candidate.isoformat(), best_score, len(recipes))

    return created
