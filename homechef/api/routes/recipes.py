from fastapi import APIRouter, HTTPException
import logging

from homechef.domain.Recipe import Recipe
from homechef.events.event_helpers import publish_version_bumped
from homechef.infra.Plan_Repository import PlanRepository
from homechef.infra.Recipe_Repository import RecipeRepository
from homechef.logic.recipes.versioning import update_recipe_with_versioning
from homechef.utilities.ids import new_id
from homechef.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes")
logger = logging.getLogger(__name__)


def _get_or_404(repo: RecipeRepository, recipe_id: int) -> Recipe:
    recipe = repo.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.get("")
def list_recipes():
    return [r.to_dict() for r in RecipeRepository().get_all()]


@router.get("/{recipe_id}")
def get_recipe(recipe_id: int):
    return _get_or_404(RecipeRepository(), recipe_id).to_dict()


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput):
    repo = RecipeRepository()
    data = payload.model_dump()
    data["id"] = new_id(r.id for r in repo.get_all())
    recipe = update_recipe_with_versioning(None, Recipe.from_dict(data))
    repo.save(recipe)
    logger.info(f"Recipe created: {recipe.title} (id={recipe.id})")
    return recipe.to_dict()


@router.put("/{recipe_id}")
def update_recipe(recipe_id: int, payload: RecipeInput):
    repo = RecipeRepository()
    existing = _get_or_404(repo, recipe_id)
    data = payload.model_dump()
    data["id"] = recipe_id
    final = update_recipe_with_versioning(existing, Recipe.from_dict(data))
    repo.save(final)
    if final.version != existing.version:
        logger.info(f"Recipe {final.title} bumped to v{final.version}")
        publish_version_bumped(final, existing.version)
    return final.to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: int):
    """Delete a recipe. Plan items that reference it stay and are skipped by the shopping list."""
    repo = RecipeRepository()
    recipe = _get_or_404(repo, recipe_id)
    repo.delete(recipe_id)
    logger.info(f"Recipe deleted: {recipe.title} (id={recipe_id})")
    return {"status": "deleted", "id": recipe_id}


@router.get("/{recipe_id}/versions/{version}")
def get_recipe_version(recipe_id: int, version: int):
    recipe = _get_or_404(RecipeRepository(), recipe_id)
    if version == recipe.version:
        return recipe.snapshot().to_dict()
    snapshot = recipe.find_version(version)
    if snapshot is None:
        raise HTTPException(status_code=404, detail=f"Version {version} not found")
    return snapshot.to_dict()


@router.get("/{recipe_id}/reviews")
def get_recipe_reviews(recipe_id: int):
    """Ratings and comments left on cooked meals of this recipe, newest first."""
    _get_or_404(RecipeRepository(), recipe_id)
    rated = [p for p in PlanRepository().get_all() if p.recipe_id == recipe_id and p.rating is not None]
    rated.sort(key=lambda p: p.date, reverse=True)
    return [
        {"date": p.date.isoformat(), "rating": p.rating, "comment": p.rating_comment, "recipe_version": p.recipe_version}
        for p in rated
    ]
