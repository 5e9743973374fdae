"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal
from datetime import date as _date

from homechef.utilities.constants import SHOPPING_CATEGORIES


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    item_name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0, le=100000)
    unit: str = Field(default="", max_length=20)
    category: str = "Other"

    @field_validator('item_name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v not in SHOPPING_CATEGORIES:
            raise ValueError(f'Unknown category: {v}')
        return v


class RecipeInput(BaseModel):
    """Schema for recipe create/update validation."""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    ingredients: List[IngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    servings_default: int = Field(4, ge=1, le=50)
    images: List[str] = Field(default_factory=list)
    rating: Optional[float] = Field(None, ge=0, le=5)
    cuisine: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate recipe title."""
        if not v.strip():
            raise ValueError('Recipe title cannot be empty')
        return v.strip()

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]


class AddMealInput(BaseModel):
    date: _date
    recipe_id: int


class GeneratePlanInput(BaseModel):
    start_date: _date


class MoveMealInput(BaseModel):
    date: _date
    direction: Literal['up', 'down']


class ReorderMealInput(BaseModel):
    meal_id: int
    target_date: _date


class RatingInput(BaseModel):
    rating: float = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=1000)


class ServingsInput(BaseModel):
    servings: int = Field(..., ge=1, le=50)


class ShoppingItemInput(BaseModel):
    """Schema for a manually added shopping list item."""
    item_name: str = Field(..., min_length=1, max_length=100)


class ShoppingItemUpdate(BaseModel):
    item_name: Optional[str] = Field(None, min_length=1, max_length=100)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=20)
    category: Optional[str] = None

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v is not None and v not in SHOPPING_CATEGORIES:
            raise ValueError(f'Unknown category: {v}')
        return v


class StoreInput(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    category_order: List[str] = Field(default_factory=lambda: list(SHOPPING_CATEGORIES))


class SettingsInput(BaseModel):
    """Schema for household settings."""
    language: str = "en"
    default_adults: int = Field(2, ge=0, le=20)
    default_kids: int = Field(1, ge=0, le=20)
    week_start_day: int = Field(1, ge=0, le=6)
    pantry_staples: List[str] = Field(default_factory=list)
    stores: List[StoreInput] = Field(default_factory=list)

    @field_validator('pantry_staples')
    @classmethod
    def dedupe_staples(cls, v):
        """Trim staples and drop case-insensitive duplicates, keeping first spelling."""
        seen, result = set(), []
        for staple in v:
            s = staple.strip() if isinstance(staple, str) else ''
            if s and s.lower() not in seen:
                seen.add(s.lower())
                result.append(s)
        return result
