"""Recipe repository (file persistence)."""
from homechef.domain.Recipe import Recipe
from homechef.infra.paths import RECIPES_FILE_NAME
from homechef.infra.store import JsonCollection


class RecipeRepository(JsonCollection[Recipe]):
    def __init__(self, path=None):
        super().__init__(RECIPES_FILE_NAME, Recipe.from_dict, path)
