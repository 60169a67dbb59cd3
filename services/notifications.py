"""
Fire-and-forget user notifications.

`notify()` never raises: a failed insert is logged and rolled back so the
caller's own work (plan generation, moderation) is unaffected. Marking
notifications read is a normal write and lets errors propagate.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from services.db import Notification

_LOG = logging.getLogger(__name__)

MAX_LISTED = 50


async def notify(
    db: AsyncSession,
    user_id: str,
    title: str,
    message: str,
    type: str = "meal",
    plan_id: int | None = None,
    recipe_id: str | None = None,
) -> bool:
    if not user_id:
        _LOG.warning("notification %r dropped: no user id", title)
        return False
    try:
        db.add(
            Notification(
                user_id=user_id,
                type=type,
                title=title,
                message=message,
                plan_id=plan_id,
                recipe_id=recipe_id,
            )
        )
        await db.commit()
    except SQLAlchemyError as e:
        _LOG.error("failed to notify user %s: %s", user_id, e)
        await db.rollback()
        return False
    return True


async def list_notifications(db: AsyncSession, user_id: str) -> List[Notification]:
    res = await db.execute(
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(MAX_LISTED)
    )
    return list(res.scalars().all())


def _utcnow() -> datetime:
    # naive UTC, matching the server_default timestamps
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def mark_read(db: AsyncSession, user_id: str, notification_id: int) -> Notification | None:
    """Mark one of `user_id`'s notifications read; None if it isn't theirs."""
    note = await db.get(Notification, notification_id)
    if note is None or note.user_id != user_id:
        return None
    if not note.read:
        note.read = True
        note.read_at = _utcnow()
        await db.commit()
    return note


async def mark_all_read(db: AsyncSession, user_id: str) -> int:
    ids = (
        await db.execute(
            select(Notification.id).where(
                Notification.user_id == user_id, Notification.read.is_(False)
            )
        )
    ).scalars().all()
    if ids:
        await db.execute(
            update(Notification)
            .where(Notification.id.in_(ids))
            .values(read=True, read_at=_utcnow())
        )
        await db.commit()
    _LOG.debug("marked %d notifications read for %s", len(ids), user_id)
    return len(ids)
