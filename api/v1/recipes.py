# api/v1/recipes.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from services.catalog_source import published_recipes
from services.db import Recipe, get_session
from services.notifications import notify
from api.v1.schemas import CommentIn, CommentOut, LikeIn, LikeOut, RecipeIn, RecipeOut, StatusUpdate

router = APIRouter()

_STATUS_MESSAGES = {
    "published": ("Recipe Approved", "Your recipe has been approved and published!"),
    "rejected": ("Recipe Rejected", "Your recipe was not approved. Please review and resubmit."),
}


async def _recipe_or_404(db: AsyncSession, recipe_id: str) -> Recipe:
    recipe = await db.get(Recipe, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.get("", response_model=list[RecipeOut])
async def list_published(
    db: AsyncSession = Depends(get_session),
) -> list[RecipeOut]:
    return [RecipeOut.model_validate(r, from_attributes=True) for r in await published_recipes(db)]


@router.post(
    "",
    response_model=RecipeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a community recipe (held for moderation)",
)
async def submit_recipe(
    body: RecipeIn,
    db: AsyncSession = Depends(get_session),
) -> RecipeOut:
    recipe = Recipe(**body.model_dump(), likes=0, comments=[], status="pending")
    db.add(recipe)
    await db.commit()
    return RecipeOut.model_validate(recipe, from_attributes=True)


@router.put("/{recipe_id}/status", response_model=RecipeOut)
async def update_status(
    recipe_id: str,
    body: StatusUpdate,
    db: AsyncSession = Depends(get_session),
) -> RecipeOut:
    recipe = await _recipe_or_404(db, recipe_id)

    recipe.status = body.status
    await db.commit()

    if recipe.author_id and body.status in _STATUS_MESSAGES:
        title, message = _STATUS_MESSAGES[body.status]
        await notify(db, recipe.author_id, title, message, type="recipe", recipe_id=recipe.id)

    return RecipeOut.model_validate(recipe, from_attributes=True)


# ───────────────────────── community ─────────────────────────
@router.post("/{recipe_id}/like", response_model=LikeOut)
async def like_recipe(
    recipe_id: str,
    body: LikeIn,
    db: AsyncSession = Depends(get_session),
) -> LikeOut:
    recipe = await _recipe_or_404(db, recipe_id)

    recipe.likes = (recipe.likes or 0) + 1
    await db.commit()

    # authors are not told about their own likes
    if recipe.author_id and body.user_id and body.user_id != recipe.author_id:
        await notify(
            db,
            recipe.author_id,
            title="New Like on Your Recipe",
            message=f'Someone liked your recipe "{recipe.name}"',
            type="recipe",
            recipe_id=recipe.id,
        )
    return LikeOut(likes=recipe.likes)


@router.post(
    "/{recipe_id}/comments",
    response_model=CommentOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    recipe_id: str,
    body: CommentIn,
    db: AsyncSession = Depends(get_session),
) -> CommentOut:
    recipe = await _recipe_or_404(db, recipe_id)

    comment = CommentOut(
        id=uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        **body.model_dump(),
    )
    # JSON column: assign a new list so the change is tracked
    recipe.comments = [*(recipe.comments or []), comment.model_dump(mode="json")]
    await db.commit()
    return comment
