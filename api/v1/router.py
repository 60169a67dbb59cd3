# api/v1/router.py
from fastapi import APIRouter

from . import notifications, plans, recipes

api_router = APIRouter()

api_router.include_router(plans.router, prefix="/plans", tags=["Plans"])
api_router.include_router(recipes.router, prefix="/recipes", tags=["Recipes"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
