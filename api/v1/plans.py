# api/v1/plans.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.day_planner import Chooser, random_chooser
from core.models.plan import WeeklyPlan
from core.plan_analytics import summarize_plan
from services.db import get_session
from services.plan_repository import PersistenceError, PlanRepository, plan_to_document
from services.plan_service import generate_for_user
from api.v1.schemas import GenerateResponse, PlanAnalytics, PlanRequest, StoredPlan

router = APIRouter()


def get_chooser() -> Chooser:
    """Top-k pick used by the planner; overridden in tests."""
    return random_chooser


# ───────────────────────── generate ─────────────────────────
@router.post(
    "/{user_id}/generate",
    response_model=GenerateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a weekly plan and make it the user's current plan",
)
async def generate(
    user_id: str,
    body: PlanRequest,
    db: AsyncSession = Depends(get_session),
    chooser: Chooser = Depends(get_chooser),
) -> GenerateResponse:
    result = await generate_for_user(db, user_id, body, chooser=chooser)
    return GenerateResponse(
        plan=result.plan,
        plan_id=result.plan_id,
        saved=result.saved,
        error=result.error,
        within_budget=result.plan.within_budget,
    )


# ───────────────────────── read ─────────────────────────────
async def _current_or_503(db: AsyncSession, user_id: str):
    try:
        return await PlanRepository(db).get_current_plan(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e


@router.get("/{user_id}", response_model=list[StoredPlan])
async def list_plans(
    user_id: str,
    db: AsyncSession = Depends(get_session),
) -> list[StoredPlan]:
    rows = await PlanRepository(db).list_plans(user_id)
    return [StoredPlan.model_validate(plan_to_document(r)) for r in rows]


@router.get("/{user_id}/current", response_model=StoredPlan | None)
async def current_plan(
    user_id: str,
    db: AsyncSession = Depends(get_session),
) -> StoredPlan | None:
    row = await _current_or_503(db, user_id)
    return StoredPlan.model_validate(plan_to_document(row)) if row else None


@router.get("/{user_id}/current/analytics", response_model=PlanAnalytics)
async def current_plan_analytics(
    user_id: str,
    db: AsyncSession = Depends(get_session),
) -> PlanAnalytics:
    row = await _current_or_503(db, user_id)
    if row is None:
        raise HTTPException(status_code=404, detail="No current plan")
    plan = WeeklyPlan.model_validate(plan_to_document(row))
    return PlanAnalytics(**summarize_plan(plan))


# ───────────────────────── update / delete ──────────────────
@router.put("/{plan_id}/current", response_model=StoredPlan)
async def make_current(
    plan_id: int,
    db: AsyncSession = Depends(get_session),
) -> StoredPlan:
    try:
        row = await PlanRepository(db).set_current(plan_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    if row is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return StoredPlan.model_validate(plan_to_document(row))


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(
    plan_id: int,
    db: AsyncSession = Depends(get_session),
) -> Response:
    try:
        deleted = await PlanRepository(db).delete_plan(plan_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    if not deleted:
        raise HTTPException(status_code=404, detail="Plan not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
