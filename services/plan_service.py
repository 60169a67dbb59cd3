"""
services/plan_service.py
────────────────────────────────────────────────────────────────────────
One generation request end to end:

    load catalog  →  generate_plan (pure)  →  save as current  →  notify

The generated plan is returned even when saving fails; the caller sees
`saved=False` plus the error and may retry the save.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from core.day_planner import Chooser, random_chooser
from core.models.plan import PreferenceSpec, WeeklyPlan
from core.plan_assembler import generate_plan
from services.catalog_source import load_catalog
from services.notifications import notify
from services.plan_repository import PersistenceError, PlanRepository

_LOG = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    plan: WeeklyPlan
    plan_id: int | None = None
    saved: bool = False
    error: str | None = None


async def generate_for_user(
    db: AsyncSession,
    user_id: str,
    prefs: PreferenceSpec,
    chooser: Chooser = random_chooser,
) -> GenerationResult:
    catalog = await load_catalog(db)
    plan = generate_plan(prefs, catalog, chooser=chooser, top_k=settings.top_candidates)

    try:
        plan_id = await PlanRepository(db).save_new_plan(user_id, plan)
    except PersistenceError as e:
        _LOG.error("plan for user %s generated but not saved: %s", user_id, e)
        return GenerationResult(plan=plan, error=str(e))

    plan.is_current = True
    await notify(
        db,
        user_id,
        title="Meal Plan Generated",
        message=(
            "Your personalized weekly meal plan is ready! "
            f"Total cost: ${plan.total_weekly_cost:.2f}"
        ),
        type="meal",
        plan_id=plan_id,
    )
    return GenerationResult(plan=plan, plan_id=plan_id, saved=True)
