"""
Statistics over the meal history.
Provides insights into cooking habits: favourites, ratings, cuisines and protein mix.
"""
from collections import Counter, defaultdict
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe

MEAT_CATEGORIES = ("Meat", "Fish", "Poultry", "Seafood")
PROTEIN_KEYWORDS = {
    "fish": ("salmon", "tuna", "cod", "fish", "shrimp", "prawn", "crab", "lobster", "seafood"),
    "poultry": ("chicken", "turkey", "duck", "goose", "hen", "poultry"),
    "beef": ("beef", "steak", "mince", "burger", "meatball", "veal", "ox"),
    "pork": ("pork", "bacon", "ham", "sausage", "chorizo"),
}


class MealPlannerStats:
    """Generate statistics from plan items dated up to today."""

    def __init__(self, plan: Sequence[MealPlanItem], recipes: Sequence[Recipe], today: Optional[date] = None):
        today = today or date.today()
        self.recipes: Dict[int, Recipe] = {r.id: r for r in recipes}
        # Items pointing at deleted recipes are ignored everywhere below
        self.history = [p for p in plan if p.date <= today and p.recipe_id in self.recipes]

    def most_cooked_recipe(self) -> Optional[dict]:
        counts = Counter(p.recipe_id for p in self.history)
        if not counts:
            return None
        recipe_id, count = counts.most_common(1)[0]
        return {"recipe_id": recipe_id, "title": self.recipes[recipe_id].title, "count": count}

    def best_rated_recipe(self) -> Optional[dict]:
        ratings: Dict[int, List[float]] = defaultdict(list)
        for p in self.history:
            if p.rating and p.rating > 0:
                ratings[p.recipe_id].append(p.rating)

        best_id, best_avg = None, 0.0
        for recipe_id, values in ratings.items():
            avg = sum(values) / len(values)
            more_votes = best_id is not None and len(values) > len(ratings[best_id])
            if avg > best_avg or (avg == best_avg and more_votes):
                best_id, best_avg = recipe_id, avg

        if best_id is None:
            seen = {p.recipe_id for p in self.history}
            candidates = sorted((self.recipes[i] for i in seen), key=lambda r: r.rating or 0, reverse=True)
            if not candidates:
                return None
            best_id, best_avg = candidates[0].id, candidates[0].rating or 0
        return {"recipe_id": best_id, "title": self.recipes[best_id].title, "average": round(best_avg, 2)}

    def top_cuisine(self) -> Optional[dict]:
        counts = Counter(self.recipes[p.recipe_id].cuisine for p in self.history
                         if self.recipes[p.recipe_id].cuisine)
        if not counts:
            return None
        cuisine, count = counts.most_common(1)[0]
        return {"cuisine": cuisine, "count": count}

    def protein_breakdown(self) -> Dict[str, int]:
        result = {"beef": 0, "pork": 0, "poultry": 0, "fish": 0, "vegetarian": 0}
        for p in self.history:
            recipe = self.recipes[p.recipe_id]
            meat = [i for i in recipe.ingredients if i.category in MEAT_CATEGORIES]
            if not meat:
                result["vegetarian"] += 1
                continue
            names = " ".join(i.item_name.lower() for i in meat)
            matched = False
            for kind, keywords in PROTEIN_KEYWORDS.items():
                if any(k in names for k in keywords):
                    result[kind] += 1
                    matched = True
            if not matched:
                result["beef"] += 1
        return result

    def vegetarian_ratio(self) -> int:
        """N in 'one in N meals is vegetarian'; 0 when none are."""
        veg = self.protein_breakdown()["vegetarian"]
        if not veg:
            return 0
        return max(1, round(len(self.history) / veg))

    def generate_report(self) -> Dict:
        """Generate comprehensive statistics report."""
        return {
            "total_meals": len(self.history),
            "most_cooked": self.most_cooked_recipe(),
            "best_rated": self.best_rated_recipe(),
            "top_cuisine": self.top_cuisine(),
            "protein_breakdown": self.protein_breakdown(),
            "vegetarian_one_in": self.vegetarian_ratio(),
            "generated_at": datetime.now().isoformat(),
        }
