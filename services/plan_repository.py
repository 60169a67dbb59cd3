"""
services/plan_repository.py
────────────────────────────────────────────────────────────────────────
Storage for generated weekly plans.

A user has at most one plan with `is_current = True`. Saving a new
current plan unflags the previous one inside the same transaction, and
`get_current_plan()` repairs any duplicates it finds (newest wins).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.models.plan import WeeklyPlan
from services.db import MealPlan

_LOG = logging.getLogger(__name__)


class PersistenceError(RuntimeError):
    """Raised when a plan cannot be written to storage."""


def plan_to_document(row: MealPlan) -> Dict[str, Any]:
    return {
        "id": row.id,
        "user_id": row.user_id,
        "is_current": row.is_current,
        "preferences": row.preferences,
        "weekly_plan": row.weekly_plan,
        "total_weekly_cost": row.total_weekly_cost,
        "total_weekly_calories": row.total_weekly_calories,
        "created_at": row.created_at,
    }


class PlanRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    def _newest_first(self, user_id: str):
        return (
            select(MealPlan)
            .where(MealPlan.user_id == user_id)
            .order_by(MealPlan.created_at.desc(), MealPlan.id.desc())
        )

    # ─────────────────────────── reads ────────────────────────────── #
    async def get_current_plan(self, user_id: str) -> MealPlan | None:
        rows = (
            await self._db.execute(self._newest_first(user_id).where(MealPlan.is_current.is_(True)))
        ).scalars().all()
        if not rows:
            return None

        if len(rows) > 1:
            _LOG.warning("user %s has %d current plans – keeping #%d", user_id, len(rows), rows[0].id)
            try:
                await self._db.execute(
                    update(MealPlan)
                    .where(MealPlan.id.in_([r.id for r in rows[1:]]))
                    .values(is_current=False)
                )
                await self._db.commit()
            except SQLAlchemyError as e:
                await self._db.rollback()
                raise PersistenceError(f"could not repair current plans for user {user_id}: {e}") from e
        return rows[0]

    async def list_plans(self, user_id: str) -> List[MealPlan]:
        return list((await self._db.execute(self._newest_first(user_id))).scalars().all())

    async def get(self, plan_id: int) -> MealPlan | None:
        return await self._db.get(MealPlan, plan_id)

    # ─────────────────────────── writes ───────────────────────────── #
    async def save_new_plan(self, user_id: str, plan: WeeklyPlan) -> int:
        """Store `plan` as the user's current plan and return its id."""
        doc = plan.model_dump(mode="json")
        row = MealPlan(
            user_id=user_id,
            is_current=True,
            preferences=doc["preferences"],
            weekly_plan=doc["weekly_plan"],
            total_weekly_cost=plan.total_weekly_cost,
            total_weekly_calories=plan.total_weekly_calories,
        )
        try:
            await self._unflag_current(user_id)
            self._db.add(row)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise PersistenceError(f"could not save plan for user {user_id}: {e}") from e
        return row.id

    async def set_current(self, plan_id: int) -> MealPlan | None:
        row = await self._db.get(MealPlan, plan_id)
        if row is None:
            return None
        try:
            await self._unflag_current(row.user_id, keep=plan_id)
            row.is_current = True
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise PersistenceError(f"could not mark plan {plan_id} current: {e}") from e
        return row

    async def delete_plan(self, plan_id: int) -> bool:
        row = await self._db.get(MealPlan, plan_id)
        if row is None:
            return False
        try:
            await self._db.delete(row)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise PersistenceError(f"could not delete plan {plan_id}: {e}") from e
        return True

    async def _unflag_current(self, user_id: str, keep: int | None = None) -> None:
        stmt = (
            update(MealPlan)
            .where(MealPlan.user_id == user_id, MealPlan.is_current.is_(True))
            .values(is_current=False)
        )
        if keep is not None:
            stmt = stmt.where(MealPlan.id != keep)
        await self._db.execute(stmt)
