"""
core/plan_assembler.py
────────────────────────────────────────────────────────────────────────
Builds a `WeeklyPlan` by running `core.day_planner.plan_day` for
Monday..Sunday.

Only the week-scoped set of already-scheduled *selected* recipes is
carried from one day to the next. Catalog meals may repeat across days.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.catalog import MealCatalog
from core.day_planner import TOP_K, Chooser, plan_day, random_chooser, slot_template
from core.models.meal import Meal
from core.models.plan import DAYS_OF_WEEK, DayPlan, PreferenceSpec, WeeklyPlan

_LOG = logging.getLogger(__name__)


def assemble_week(
    prefs: PreferenceSpec,
    catalog: Sequence[Meal],
    selected_pool: Sequence[Meal] = (),
    chooser: Chooser = random_chooser,
    top_k: int = TOP_K,
) -> WeeklyPlan:
    """
    `catalog` must already be dietary-filtered; `selected_pool` is taken
    as-is and keeps its order.
    """
    daily_budget = prefs.daily_budget
    slots = slot_template(prefs.meals_per_day)
    used: frozenset[str] = frozenset()

    days: list[DayPlan] = []
    for label in DAYS_OF_WEEK:
        res = plan_day(
            slots, catalog, selected_pool, used, daily_budget, prefs.calorie_goal,
            chooser=chooser, top_k=top_k,
        )
        used = res.used_selected
        if len(res.meals) < len(slots):
            _LOG.warning("%s: planned %d of %d meals", label, len(res.meals), len(slots))
        days.append(
            DayPlan(
                day=label,
                meals=res.meals,
                total_calories=res.total_calories,
                total_cost=res.total_cost,
            )
        )

    plan = WeeklyPlan(
        weekly_plan=days,
        total_weekly_cost=sum(d.total_cost for d in days),
        total_weekly_calories=sum(d.total_calories for d in days),
        preferences=prefs,
    )
    _LOG.debug(
        "week planned: cost=%.2f kcal=%d within_budget=%s",
        plan.total_weekly_cost, plan.total_weekly_calories, plan.within_budget,
    )
    return plan


def generate_plan(
    prefs: PreferenceSpec,
    catalog: MealCatalog,
    chooser: Chooser = random_chooser,
    top_k: int = TOP_K,
) -> WeeklyPlan:
    """
    Convenience wrapper: filter the catalog by dietary preference, resolve
    the selected ids (unfiltered, in request order) and assemble the week.
    """
    filtered = catalog.filtered(prefs.dietary_preference)
    pool = catalog.select(prefs.selected_recipe_ids)
    if not filtered and not pool:
        _LOG.warning("no meals match preference %r", prefs.dietary_preference)
    return assemble_week(prefs, filtered, pool, chooser=chooser, top_k=top_k)
