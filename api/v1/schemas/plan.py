# api/v1/schemas/plan.py
from __future__ import annotations
from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from core.models.plan import DayPlan, PreferenceSpec, WeeklyPlan


class PlanRequest(PreferenceSpec):
    """Body of POST /plans/{user_id}/generate."""


class StoredPlan(BaseModel):
    id: int
    user_id: str
    is_current: bool
    preferences: PreferenceSpec
    weekly_plan: List[DayPlan]
    total_weekly_cost: float
    total_weekly_calories: int
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class GenerateResponse(BaseModel):
    plan: WeeklyPlan
    plan_id: int | None
    saved: bool
    error: str | None = None
    within_budget: bool


class DailySpend(BaseModel):
    day: str
    amount: float


class PlanAnalytics(BaseModel):
    total_budget: float
    total_spent: float
    spending_by_type: Dict[str, float]
    daily_spending: List[DailySpend]
    meals_planned: int
    average_cost_per_meal: float
    average_daily_calories: int
    within_budget: bool
