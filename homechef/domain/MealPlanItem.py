"""MealPlanItem domain entity: one planned dinner on a calendar day, pinned to a recipe version."""
from datetime import date, datetime
from typing import Optional
from homechef.utilities.constants import DATE_FORMAT, DEFAULT_MEAL_TYPE


def parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value)[:10], DATE_FORMAT).date()


class MealPlanItem:
    def __init__(self, id: int, date: date, recipe_id: int, recipe_version: Optional[int] = None,
                 servings: Optional[int] = None, rating: Optional[float] = None,
                 rating_comment: Optional[str] = None, is_cooked: bool = False,
                 is_leftover: bool = False, meal_type: str = DEFAULT_MEAL_TYPE):
        self.id = id
        self.date = parse_date(date)
        self.recipe_id = recipe_id
        self.recipe_version = recipe_version
        self.servings = servings
        self.rating = rating
        self.rating_comment = rating_comment
        self.is_cooked = is_cooked
        self.is_leftover = is_leftover
        self.meal_type = meal_type

    def __str__(self) -> str:
        return f"{self.date.strftime(DATE_FORMAT)} - recipe {self.recipe_id} v{self.recipe_version} - {self.servings} servings"

    __repr__ = __str__

    def replace(self, **changes) -> "MealPlanItem":
        '''Return a copy with the given fields changed; the original is left untouched.'''
        data = self.to_dict()
        data.update(changes)
        return MealPlanItem.from_dict(data)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        rating = d.get("rating")
        version = d.get("recipe_version")
        servings = d.get("servings")
        return MealPlanItem(
            id=int(d["id"]),
            date=d["date"],
            recipe_id=int(d["recipe_id"]),
            recipe_version=int(version) if version is not None else None,
            servings=int(servings) if servings is not None else None,
            rating=float(rating) if rating is not None else None,
            rating_comment=d.get("rating_comment"),
            is_cooked=bool(d.get("is_cooked", False)),
            is_leftover=bool(d.get("is_leftover", False)),
            meal_type=d.get("meal_type") or d.get("type") or DEFAULT_MEAL_TYPE,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.strftime(DATE_FORMAT),
            "recipe_id": self.recipe_id,
            "recipe_version": self.recipe_version,
            "servings": self.servings,
            "rating": self.rating,
            "rating_comment": self.rating_comment,
            "is_cooked": self.is_cooked,
            "is_leftover": self.is_leftover,
            "meal_type": self.meal_type,
        }
