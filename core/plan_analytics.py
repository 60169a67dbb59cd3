"""
Spending analytics for a generated week.

Mirrors what the dashboard shows: budget vs. spend, spend per meal
type, spend per day and average cost per planned meal.
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd

from core.models.meal import MEAL_TYPES
from core.models.plan import WeeklyPlan


def plan_frame(plan: WeeklyPlan) -> pd.DataFrame:
    """One row per planned meal."""
    rows = [
        {
            "day": d.day,
            "meal_id": m.id,
            "type": m.type,
            "price": m.price,
            "calories": m.calories,
        }
        for d in plan.weekly_plan
        for m in d.meals
    ]
    return pd.DataFrame(rows, columns=["day", "meal_id", "type", "price", "calories"])


def summarize_plan(plan: WeeklyPlan) -> Dict[str, Any]:
    df = plan_frame(plan)

    by_type = (
        df.groupby("type")["price"].sum().reindex(list(MEAL_TYPES), fill_value=0.0)
    )
    spending_by_type = {t: round(float(v), 2) for t, v in by_type.items() if v > 0}

    daily = [
        {"day": d.day[:3], "amount": round(d.total_cost, 2)}
        for d in plan.weekly_plan
    ]

    meals_planned = len(df)
    total_spent = float(plan.total_weekly_cost)
    return {
        "total_budget": round(plan.preferences.weekly_budget, 2),
        "total_spent": round(total_spent, 2),
        "spending_by_type": spending_by_type,
        "daily_spending": daily,
        "meals_planned": meals_planned,
        "average_cost_per_meal": round(total_spent / meals_planned, 2) if meals_planned else 0.0,
        "average_daily_calories": round(plan.total_weekly_calories / len(plan.weekly_plan)) if plan.weekly_plan else 0,
        "within_budget": plan.within_budget,
    }
