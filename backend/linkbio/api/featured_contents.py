"""
API endpoints for featured content cards.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id, get_owned_profile
from ..crud import featured_content as featured_content_crud
from ..crud import profile as profile_crud
from ..db.models.featured_content import FeaturedContent
from ..db.session import get_db
from ..schemas.base import ReorderRequest
from ..schemas.featured_content import (
    FeaturedContentCreate,
    FeaturedContentCreateForProfile,
    FeaturedContentRead,
    FeaturedContentUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["featured-contents"])


async def _get_content(db: AsyncSession, content_id: int) -> FeaturedContent:
    content = await featured_content_crud.get_featured_content(db, content_id)
    if not content:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Featured content not found")
    return content


async def _get_owned_content(db: AsyncSession, content_id: int, user_id: int) -> FeaturedContent:
    content = await _get_content(db, content_id)
    await get_owned_profile(db, content.profile_id, user_id)
    return content


@router.get("/api/profile/{profile_id}/featured-contents", response_model=List[FeaturedContentRead])
async def list_featured_contents(profile_id: int, db: AsyncSession = Depends(get_db)):
    if not await profile_crud.get_profile(db, profile_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return await featured_content_crud.get_featured_contents(db, profile_id)


@router.post(
    "/api/profile/{profile_id}/featured-contents",
    response_model=FeaturedContentRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_featured_content_for_profile(
    profile_id: int,
    payload: FeaturedContentCreateForProfile,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, profile_id, user_id)
    return await featured_content_crud.create_featured_content(db, profile_id, payload)


@router.post(
    "/api/profile/{profile_id}/featured-contents/reorder",
    response_model=List[FeaturedContentRead],
)
async def reorder_featured_contents(
    profile_id: int,
    payload: ReorderRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, profile_id, user_id)
    return await featured_content_crud.reorder_featured_contents(db, profile_id, payload.ordered_ids)


@router.post("/api/featured-contents", response_model=FeaturedContentRead, status_code=status.HTTP_201_CREATED)
async def create_featured_content(
    payload: FeaturedContentCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, payload.profile_id, user_id)
    return await featured_content_crud.create_featured_content(db, payload.profile_id, payload)


@router.get("/api/featured-contents/{content_id}", response_model=FeaturedContentRead)
async def get_featured_content(content_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_content(db, content_id)


@router.patch("/api/featured-contents/{content_id}", response_model=FeaturedContentRead)
async def update_featured_content(
    content_id: int,
    payload: FeaturedContentUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    content = await _get_owned_content(db, content_id, user_id)
    return await featured_content_crud.update_featured_content(db, content, payload)


@router.delete("/api/featured-contents/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_featured_content(
    content_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    content = await _get_owned_content(db, content_id, user_id)
    await featured_content_crud.delete_featured_content(db, content)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
