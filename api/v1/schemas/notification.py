from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationOut(BaseModel):
    id: int
    user_id: str
    type: str
    title: str
    message: str
    plan_id: int | None = None
    recipe_id: str | None = None
    read: bool
    read_at: datetime | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ReadAllOut(BaseModel):
    count: int
