"""Re-export individual schema modules for easy imports."""

from .plan import GenerateResponse, PlanAnalytics, PlanRequest, StoredPlan
from .recipe import CommentIn, CommentOut, LikeIn, LikeOut, RecipeIn, RecipeOut, StatusUpdate
from .notification import NotificationOut, ReadAllOut

__all__ = [
    "GenerateResponse",
    "PlanAnalytics",
    "PlanRequest",
    "StoredPlan",
    "CommentIn",
    "CommentOut",
    "LikeIn",
    "LikeOut",
    "RecipeIn",
    "RecipeOut",
    "StatusUpdate",
    "NotificationOut",
    "ReadAllOut",
]
