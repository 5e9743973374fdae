"""First-run seeding: sample recipes, a round-robin week, and the derived shopping list."""
import logging
from datetime import date
from typing import Optional

from homechef.domain.Recipe import Recipe
from homechef.infra.Plan_Repository import PlanRepository
from homechef.infra.Recipe_Repository import RecipeRepository
from homechef.infra.Settings_Repository import SettingsRepository
from homechef.infra.Shopping_Repository import ShoppingRepository
from homechef.logic.planning.editing import generate_initial_plan
from homechef.logic.shopping.list_builder import aggregate

logger = logging.getLogger(__name__)

SAMPLE_RECIPES = [
    {
        "id": 1,
        "title": "Swedish Meatballs",
        "description": "Classic meatballs with mashed potatoes, cream sauce, and lingonberries.",
        "cuisine": "Swedish",
        "servings_default": 4,
        "rating": 5,
        "instructions": [
            "Mix mince, onion, egg, and breadcrumbs.",
            "Roll into balls and fry in butter.",
            "Make sauce with cream and beef stock.",
            "Serve with potatoes and jam.",
        ],
        "ingredients": [
            {"item_name": "Ground Beef/Pork Mix", "quantity": 500, "unit": "g", "category": "Meat"},
            {"item_name": "Cream", "quantity": 2, "unit": "dl", "category": "Dairy"},
            {"item_name": "Potatoes", "quantity": 800, "unit": "g", "category": "Produce"},
            {"item_name": "Lingonberry Jam", "quantity": 100, "unit": "g", "category": "Pantry"},
            {"item_name": "Salt", "quantity": 1, "unit": "tsp", "category": "Pantry"},
            {"item_name": "Butter", "quantity": 50, "unit": "g", "category": "Dairy"},
        ],
    },
    {
        "id": 2,
        "title": "Oven Baked Salmon",
        "description": "Simple salmon fillet with lemon and dill sauce.",
        "cuisine": "Nordic",
        "servings_default": 4,
        "rating": 4,
        "instructions": [
            "Preheat oven to 200°C.",
            "Place salmon in dish, season with lemon and dill.",
            "Bake for 20 minutes.",
            "Mix yogurt with dill for sauce.",
        ],
        "ingredients": [
            {"item_name": "Salmon Fillet", "quantity": 600, "unit": "g", "category": "Meat"},
            {"item_name": "Lemon", "quantity": 1, "unit": "pc", "category": "Produce"},
            {"item_name": "Dill", "quantity": 1, "unit": "bunch", "category": "Produce"},
            {"item_name": "Greek Yogurt", "quantity": 2, "unit": "dl", "category": "Dairy"},
            {"item_name": "Salt for seasoning", "quantity": 1, "unit": "pinch", "category": "Pantry"},
        ],
    },
    {
        "id": 3,
        "title": "Vegetarian Tacos",
        "description": "Lentil based tacos with fresh salsa.",
        "cuisine": "Tex-Mex",
        "servings_default": 4,
        "rating": 4,
        "instructions": [
            "Cook lentils with taco spices.",
            "Chop tomatoes, onion and cucumber for the salsa.",
            "Warm the tortillas and fill.",
        ],
        "ingredients": [
            {"item_name": "Red Lentils", "quantity": 200, "unit": "g", "category": "Pantry"},
            {"item_name": "Tortillas", "quantity": 8, "unit": "pc", "category": "Bakery"},
            {"item_name": "Tomatoes", "quantity": 3, "unit": "pc", "category": "Produce"},
            {"item_name": "Red Onion", "quantity": 1, "unit": "pc", "category": "Produce"},
            {"item_name": "Cucumber", "quantity": 1, "unit": "pc", "category": "Produce"},
            {"item_name": "Taco Spice", "quantity": 1, "unit": "pack", "category": "Spices"},
        ],
    },
    {
        "id": 4,
        "title": "Chicken Curry",
        "description": "Mild yellow curry with rice.",
        "cuisine": "Indian",
        "servings_default": 4,
        "instructions": [
            "Brown the chicken with onion and curry paste.",
            "Add coconut milk and simmer for 20 minutes.",
            "Serve with rice.",
        ],
        "ingredients": [
            {"item_name": "Chicken Breast", "quantity": 600, "unit": "g", "category": "Meat"},
            {"item_name": "Coconut Milk", "quantity": 400, "unit": "ml", "category": "Canned"},
            {"item_name": "Yellow Onion", "quantity": 1, "unit": "pc", "category": "Produce"},
            {"item_name": "Curry Paste", "quantity": 2, "unit": "tbsp", "category": "Spices"},
            {"item_name": "Rice", "quantity": 300, "unit": "g", "category": "Pantry"},
        ],
    },
]


def seed_if_empty(recipes_repo: Optional[RecipeRepository] = None, plan_repo: Optional[PlanRepository] = None,
                  shopping_repo: Optional[ShoppingRepository] = None,
                  settings_repo: Optional[SettingsRepository] = None, today: Optional[date] = None) -> bool:
    """Populate an empty store. Returns True when seeding happened."""
    recipes_repo = recipes_repo or RecipeRepository()
    plan_repo = plan_repo or PlanRepository()
    shopping_repo = shopping_repo or ShoppingRepository()
    settings_repo = settings_repo or SettingsRepository()
    if not recipes_repo.is_empty():
        return False

    logger.info("Seeding database with sample data")
    recipes = [Recipe.from_dict(r) for r in SAMPLE_RECIPES]
    for recipe in recipes:
        recipes_repo.save(recipe)

    plan = generate_initial_plan(recipes, today)
    for item in plan:
        plan_repo.save(item)

    settings = settings_repo.get()
    settings_repo.save(settings)

    shopping = aggregate([], plan, recipes, settings["pantry_staples"])
    shopping_repo.save_all(shopping)
    return True
