"""
Loads the meal catalog for a planning run: published recipes first,
then the built-in static meals.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from core.catalog import MealCatalog
from core.static_catalog import STATIC_MEALS
from services.db import Recipe

_LOG = logging.getLogger(__name__)


async def published_recipes(db: AsyncSession) -> List[Recipe]:
    res = await db.execute(
        select(Recipe)
        .where(Recipe.status == "published")
        .order_by(Recipe.created_at.desc())
    )
    return list(res.scalars().all())


async def load_catalog(db: AsyncSession) -> MealCatalog:
    recipes: List[Dict[str, Any]] = [r.as_document() for r in await published_recipes(db)]
    static = STATIC_MEALS if settings.use_static_catalog else []
    catalog = MealCatalog.merge(recipes, static)
    _LOG.debug("catalog: %d recipes + %d static → %d meals", len(recipes), len(static), len(catalog))
    return catalog
