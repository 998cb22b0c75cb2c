"""
API endpoints for social and knowledge links.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id, get_owned_profile
from ..crud import profile as profile_crud
from ..crud import social_link as social_link_crud
from ..db.models.social_link import SocialLink
from ..db.session import get_db
from ..schemas.social_link import (
    SocialLinkCategory,
    SocialLinkCategoryUpdate,
    SocialLinkCreate,
    SocialLinkCreateForProfile,
    SocialLinkRead,
    SocialLinkStats,
    SocialLinkUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["social-links"])


async def _require_profile(db: AsyncSession, profile_id: int) -> None:
    if not await profile_crud.get_profile(db, profile_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")


async def _get_link(db: AsyncSession, link_id: int) -> SocialLink:
    link = await social_link_crud.get_social_link(db, link_id)
    if not link:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Social link not found")
    return link


async def _get_owned_link(db: AsyncSession, link_id: int, user_id: int) -> SocialLink:
    link = await _get_link(db, link_id)
    await get_owned_profile(db, link.profile_id, user_id)
    return link


@router.get("/api/profile/{profile_id}/social-links", response_model=List[SocialLinkRead])
async def list_social_links(profile_id: int, db: AsyncSession = Depends(get_db)):
    await _require_profile(db, profile_id)
    return await social_link_crud.get_social_links(db, profile_id)


@router.get("/api/profile/{profile_id}/social-links/stats", response_model=SocialLinkStats)
async def social_link_stats(profile_id: int, db: AsyncSession = Depends(get_db)):
    await _require_profile(db, profile_id)
    return await social_link_crud.get_social_link_stats(db, profile_id)


@router.get("/api/profile/{profile_id}/social-links/category/{category}", response_model=List[SocialLinkRead])
async def list_social_links_by_category(
    profile_id: int,
    category: SocialLinkCategory,
    db: AsyncSession = Depends(get_db)
):
    await _require_profile(db, profile_id)
    return await social_link_crud.get_social_links(db, profile_id, category)


@router.post(
    "/api/profile/{profile_id}/social-links",
    response_model=SocialLinkRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_social_link_for_profile(
    profile_id: int,
    payload: SocialLinkCreateForProfile,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, profile_id, user_id)
    link = await social_link_crud.create_social_link(db, profile_id, payload)
    logger.info(f"[SOCIAL] Created link {link.id} ({link.category}) on profile {profile_id}")
    return link


@router.post("/api/social-links", response_model=SocialLinkRead, status_code=status.HTTP_201_CREATED)
async def create_social_link(
    payload: SocialLinkCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, payload.profile_id, user_id)
    link = await social_link_crud.create_social_link(db, payload.profile_id, payload)
    logger.info(f"[SOCIAL] Created link {link.id} ({link.category}) on profile {payload.profile_id}")
    return link


@router.get("/api/social-links/{link_id}", response_model=SocialLinkRead)
async def get_social_link(link_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_link(db, link_id)


@router.patch("/api/social-links/{link_id}", response_model=SocialLinkRead)
async def update_social_link(
    link_id: int,
    payload: SocialLinkUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    link = await _get_owned_link(db, link_id, user_id)
    return await social_link_crud.update_social_link(db, link, payload)


@router.patch("/api/social-links/{link_id}/category", response_model=SocialLinkRead)
async def update_social_link_category(
    link_id: int,
    payload: SocialLinkCategoryUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Move a link between the social and knowledge sections.
    """
    link = await _get_owned_link(db, link_id, user_id)
    return await social_link_crud.update_social_link(db, link, SocialLinkUpdate(category=payload.category))


@router.delete("/api/social-links/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_social_link(
    link_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    link = await _get_owned_link(db, link_id, user_id)
    await social_link_crud.delete_social_link(db, link)
    logger.info(f"[SOCIAL] Deleted link {link_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
