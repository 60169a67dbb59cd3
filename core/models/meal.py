from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


class Ingredient(BaseModel):
    name: str
    quantity: str = ""
    price: float = Field(0.0, ge=0)

    model_config = ConfigDict(frozen=True)


class Meal(BaseModel):
    id: str
    name: str
    type: MealType
    calories: int = Field(0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)
    fiber: float = Field(0.0, ge=0)
    price: float = Field(0.0, ge=0)
    prep_time: int = Field(0, ge=0)   # minutes
    tags: frozenset[str] = frozenset()
    ingredients: tuple[Ingredient, ...] = ()

    model_config = ConfigDict(frozen=True)
