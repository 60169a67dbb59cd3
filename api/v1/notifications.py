# api/v1/notifications.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from services.db import get_session
from services.notifications import list_notifications, mark_all_read, mark_read
from api.v1.schemas import NotificationOut, ReadAllOut

router = APIRouter()


@router.get("/{user_id}", response_model=list[NotificationOut])
async def user_notifications(
    user_id: str,
    db: AsyncSession = Depends(get_session),
) -> list[NotificationOut]:
    """Latest notifications for `user_id`, newest first."""
    rows = await list_notifications(db, user_id)
    return [NotificationOut.model_validate(n, from_attributes=True) for n in rows]


@router.put("/{user_id}/read-all", response_model=ReadAllOut)
async def read_all(
    user_id: str,
    db: AsyncSession = Depends(get_session),
) -> ReadAllOut:
    return ReadAllOut(count=await mark_all_read(db, user_id))


@router.put("/{user_id}/{notification_id}/read", response_model=NotificationOut)
async def read_one(
    user_id: str,
    notification_id: int,
    db: AsyncSession = Depends(get_session),
) -> NotificationOut:
    note = await mark_read(db, user_id, notification_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Notification not found")
    return NotificationOut.model_validate(note, from_attributes=True)
