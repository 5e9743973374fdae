"""Recipe versioning and pinned-version resolution.

update_recipe_with_versioning(existing, proposed) decides whether an edit is
content-affecting (ingredients or instructions changed) and, if so, bumps the
version and appends a snapshot of the pre-edit content to the history.

resolve_content(recipe, pinned_version) returns the content a plan item was
scheduled with. A missing snapshot falls back to the current content.
"""
from __future__ import annotations
import logging
from typing import Optional, Union

from homechef.domain.Recipe import Recipe, RecipeSnapshot

logger = logging.getLogger(__name__)

__all__ = ["content_changed", "update_recipe_with_versioning", "resolve_content"]


def content_changed(existing: Recipe, proposed: Recipe) -> bool:
    """True when ingredients or instructions differ structurally."""
    return existing.content_dict() != proposed.content_dict()


def update_recipe_with_versioning(existing: Optional[Recipe], proposed: Recipe) -> Recipe:
    """Return the recipe to persist for an edit of `existing` into `proposed`.

    Non-content fields (title, rating, images...) are taken from `proposed` in
    every case. Version and history always derive from `existing`; whatever
    the caller put in `proposed.version`/`proposed.history` is ignored.
    Neither argument is mutated. Last write wins.
    """
    final = proposed.copy()
    if existing is None:
        final.version = 1
        final.history = []
        return final

    if content_changed(existing, proposed):
        final.version = existing.version + 1
        final.history = list(existing.history) + [existing.snapshot()]
        logger.debug("Recipe %s content changed: v%s -> v%s", existing.id, existing.version, final.version)
    else:
        final.version = existing.version
        final.history = list(existing.history)
    return final


def resolve_content(recipe: Recipe, pinned_version: Optional[int]) -> Union[Recipe, RecipeSnapshot]:
    """Return the content valid at `pinned_version` (the recipe itself when current or unknown)."""
    if pinned_version is None or pinned_version == recipe.version:
        return recipe
    historical = recipe.find_version(pinned_version)
    if historical is not None:
        return historical
    logger.debug("Recipe %s has no snapshot for v%s; using current v%s",
                 recipe.id, pinned_version, recipe.version)
    return recipe
