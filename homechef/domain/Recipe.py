"""Recipe domain entity plus the history snapshot type.

A Recipe carries its current content and an append-only list of
RecipeSnapshot entries, one per superseded version. Snapshots have no
history of their own: RecipeSnapshot.from_dict drops any nested 'history'
key, so feeding a full recipe dict in can never produce recursive growth.
"""
from typing import List, Optional
from homechef.domain.Ingredient import Ingredient


class RecipeSnapshot:
    def __init__(self, version: int = 1, title: str = "", description: str = "",
                 ingredients: Optional[List[Ingredient]] = None, instructions: Optional[List[str]] = None,
                 cuisine: Optional[str] = None, servings_default: int = 1):
        self.version = version
        self.title = title
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.cuisine = cuisine
        self.servings_default = servings_default

    def __str__(self) -> str:
        return f"{self.title} (v{self.version}) - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return RecipeSnapshot(
            version=int(d.get("version") or 1),
            title=d.get("title", ""),
            description=d.get("description", ""),
            ingredients=[Ingredient.from_dict(i) for i in d.get("ingredients", [])],
            instructions=list(d.get("instructions", [])),
            cuisine=d.get("cuisine"),
            servings_default=int(d.get("servings_default") or 1),
        )

    def to_dict(self):
        return {
            "version": self.version,
            "title": self.title,
            "description": self.description,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": list(self.instructions),
            "cuisine": self.cuisine,
            "servings_default": self.servings_default,
        }


class Recipe:
    def __init__(self, id: int = 0, title: str = "", description: str = "",
                 ingredients: Optional[List[Ingredient]] = None, instructions: Optional[List[str]] = None,
                 servings_default: int = 4, images: Optional[List[str]] = None, rating: Optional[float] = None,
                 cuisine: Optional[str] = None, version: int = 1, history: Optional[List[RecipeSnapshot]] = None):
        self.id = id
        self.title = title
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.servings_default = servings_default
        self.images = images[:] if images else []
        self.rating = rating
        self.cuisine = cuisine
        self.version = version
        self.history = history[:] if history else []

    def __str__(self) -> str:
        rating = f"{self.rating:g}" if self.rating is not None else "-"
        return f"{self.title} (v{self.version}) - {self.servings_default} servings - Rating: {rating}"

    __repr__ = __str__

    def snapshot(self) -> RecipeSnapshot:
        '''Capture the current content as an immutable history entry (no history field).'''
        return RecipeSnapshot(
            version=self.version,
            title=self.title,
            description=self.description,
            ingredients=[Ingredient.from_dict(i.to_dict()) for i in self.ingredients],
            instructions=list(self.instructions),
            cuisine=self.cuisine,
            servings_default=self.servings_default,
        )

    def content_dict(self):
        '''The version-relevant content, in a form suitable for structural comparison.'''
        return {
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": list(self.instructions),
        }

    def find_version(self, version: int) -> Optional[RecipeSnapshot]:
        for entry in self.history:
            if entry.version == version:
                return entry
        return None

    def copy(self) -> "Recipe":
        return Recipe.from_dict(self.to_dict())

    @staticmethod
    def from_dict(data):
        d = dict(data)
        rating = d.get("rating")
        return Recipe(
            id=int(d.get("id") or 0),
            title=d.get("title", ""),
            description=d.get("description", ""),
            ingredients=[Ingredient.from_dict(i) for i in d.get("ingredients", [])],
            instructions=list(d.get("instructions", [])),
            servings_default=int(d.get("servings_default") or 4),
            images=list(d.get("images", [])),
            rating=float(rating) if rating is not None else None,
            cuisine=d.get("cuisine"),
            version=int(d.get("version") or 1),
            history=[RecipeSnapshot.from_dict(h) for h in d.get("history") or []],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": list(self.instructions),
            "servings_default": self.servings_default,
            "images": list(self.images),
            "rating": self.rating,
            "cuisine": self.cuisine,
            "version": self.version,
            "history": [h.to_dict() for h in self.history],
        }
