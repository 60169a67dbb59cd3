# api/v1/schemas/recipe.py
from __future__ import annotations
from datetime import datetime
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

RecipeType = Literal["breakfast", "lunch", "dinner", "snack", "dessert"]
RecipeStatus = Literal["published", "pending", "draft", "rejected"]


class IngredientIn(BaseModel):
    name: str
    quantity: str = ""
    price: float = Field(0, ge=0)

    @field_validator("name", "quantity")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class RecipeIn(BaseModel):
    name: str
    description: str
    type: RecipeType
    prep_time: int = Field(..., ge=0)
    cook_time: int = Field(..., ge=0)
    ingredients: List[IngredientIn] = Field(..., min_length=1)
    instructions: List[str]
    author_id: str = Field(..., min_length=1)
    author_name: str = Field(..., min_length=1)
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    fiber: float = Field(0, ge=0)
    price: float = Field(0, ge=0)
    servings: int = Field(1, ge=1)
    tags: List[str] = []

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Recipe name must be at least 3 characters")
        return v

    @field_validator("description")
    @classmethod
    def _description(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 10:
            raise ValueError("Description must be at least 10 characters")
        return v

    @field_validator("instructions")
    @classmethod
    def _instructions(cls, v: List[str]) -> List[str]:
        steps = [s.strip() for s in v if s.strip()]
        if not steps:
            raise ValueError("At least one instruction step is required")
        return steps


class CommentIn(BaseModel):
    user_id: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)
    content: str

    @field_validator("content")
    @classmethod
    def _content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        return v


class CommentOut(CommentIn):
    id: str
    created_at: datetime


class RecipeOut(BaseModel):
    """
    A stored recipe. Mirrors the `recipes` table rather than the
    submission form, so seeded or imported rows list fine too.
    """
    id: str
    name: str
    description: str | None = None
    type: str
    prep_time: int = 0
    cook_time: int = 0
    ingredients: List[Any] = []
    instructions: List[str] = []
    author_id: str | None = None
    author_name: str | None = None
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    price: float = 0
    servings: int = 1
    tags: List[str] = []
    likes: int = 0
    comments: List[CommentOut] = []
    status: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("ingredients", "instructions", "tags", "comments", mode="before")
    @classmethod
    def _as_list(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class LikeIn(BaseModel):
    user_id: str | None = None


class LikeOut(BaseModel):
    likes: int


class StatusUpdate(BaseModel):
    status: RecipeStatus
