from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from .meal import Meal

DAYS_OF_WEEK: tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MIN_MEALS_PER_DAY = 2


class PreferenceSpec(BaseModel):
    budget: float = Field(..., gt=0)
    budget_period: Literal["daily", "weekly"] = "weekly"
    dietary_preference: str = "none"
    calorie_goal: int = Field(2000, gt=0)
    meals_per_day: int = 3
    selected_recipe_ids: List[str] = []

    @field_validator("meals_per_day", mode="before")
    @classmethod
    def _clamp_meals(cls, v):
        # fewer than two meals (or nothing at all) still yields breakfast + dinner
        if v is None:
            return MIN_MEALS_PER_DAY
        return max(int(v), MIN_MEALS_PER_DAY)

    @field_validator("selected_recipe_ids")
    @classmethod
    def _dedupe_ids(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))

    @property
    def daily_budget(self) -> float:
        return self.budget if self.budget_period == "daily" else self.budget / 7

    @property
    def weekly_budget(self) -> float:
        return self.budget if self.budget_period == "weekly" else self.budget * 7


class DayPlan(BaseModel):
    day: str
    meals: List[Meal] = []
    total_calories: int = 0
    total_cost: float = 0.0


class WeeklyPlan(BaseModel):
    weekly_plan: List[DayPlan]
    total_weekly_cost: float
    total_weekly_calories: int
    preferences: PreferenceSpec
    is_current: bool = False

    @property
    def within_budget(self) -> bool:
        """Informational only: the planner never rejects an over-budget week."""
        return self.total_weekly_cost <= self.preferences.weekly_budget
