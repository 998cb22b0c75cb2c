"""
API endpoints for profiles: public payloads and owner-only partial updates.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id, get_owned_profile
from ..core.config import settings
from ..core.sections import visible_sections
from ..crud import featured_content as featured_content_crud
from ..crud import profile as profile_crud
from ..crud import social_link as social_link_crud
from ..crud import technology as technology_crud
from ..crud import user as user_crud
from ..db.models.profile import Profile
from ..db.session import get_db
from ..schemas.profile import (
    GithubSettingsUpdate,
    ProfileBackgroundUpdate,
    ProfileContactUpdate,
    ProfileImageUpdate,
    ProfileRead,
    ProfileUpdate,
    PublicProfileResponse,
    SectionVisibilityUpdate,
    TryHackMeSettingsUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/profile",
    tags=["profile"],
)


async def build_public_profile(db: AsyncSession, profile: Profile) -> Dict[str, Any]:
    """
    Collect a profile with its content and the sections to render.
    """
    return {
        "profile": profile,
        "social_links": await social_link_crud.get_social_links(db, profile.id),
        "featured_contents": await featured_content_crud.get_featured_contents(db, profile.id),
        "technologies": await technology_crud.get_technologies(db, profile.id),
        "sections": visible_sections(profile),
    }


async def _apply_update(db: AsyncSession, profile_id: int, user_id: int, obj_in: BaseModel) -> Profile:
    profile = await get_owned_profile(db, profile_id, user_id)
    updated = await profile_crud.update_profile(db, profile, obj_in)
    logger.info(f"[PROFILE] Updated profile {profile_id}: {sorted(obj_in.model_fields_set)}")
    return updated


@router.get("", response_model=PublicProfileResponse)
async def get_demo_profile(db: AsyncSession = Depends(get_db)):
    """
    Profile shown on the landing page: the user configured by DEMO_USER_ID,
    otherwise the first registered user.
    """
    if settings.DEMO_USER_ID is not None:
        user = await user_crud.get_user(db, settings.DEMO_USER_ID)
    else:
        user = await user_crud.get_first_user(db)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No users found")

    profile = await profile_crud.get_profile_by_user_id(db, user.id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return await build_public_profile(db, profile)


@router.get("/public/{username}", response_model=PublicProfileResponse)
async def get_public_profile(username: str, db: AsyncSession = Depends(get_db)):
    profile = await profile_crud.get_profile_by_username(db, username)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return await build_public_profile(db, profile)


@router.get("/user/{user_id}", response_model=ProfileRead)
async def get_profile_by_user(user_id: int, db: AsyncSession = Depends(get_db)):
    profile = await profile_crud.get_profile_by_user_id(db, user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.get("/{profile_id}", response_model=ProfileRead)
async def get_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    profile = await profile_crud.get_profile(db, profile_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.patch("/{profile_id}", response_model=ProfileRead)
async def update_profile(
    profile_id: int,
    payload: ProfileUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Merge the submitted fields onto the profile; omitted fields are unchanged.
    """
    return await _apply_update(db, profile_id, user_id, payload)


@router.patch("/{profile_id}/image", response_model=ProfileRead)
async def update_profile_image(
    profile_id: int,
    payload: ProfileImageUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await _apply_update(db, profile_id, user_id, payload)


@router.patch("/{profile_id}/background", response_model=ProfileRead)
async def update_profile_background(
    profile_id: int,
    payload: ProfileBackgroundUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await _apply_update(db, profile_id, user_id, payload)


@router.patch("/{profile_id}/contact", response_model=ProfileRead)
async def update_profile_contact(
    profile_id: int,
    payload: ProfileContactUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await _apply_update(db, profile_id, user_id, payload)


@router.patch("/{profile_id}/github-settings", response_model=ProfileRead)
@router.patch("/{profile_id}/github", response_model=ProfileRead, include_in_schema=False)
async def update_github_settings(
    profile_id: int,
    payload: GithubSettingsUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await _apply_update(db, profile_id, user_id, payload)


@router.patch("/{profile_id}/tryhackme-settings", response_model=ProfileRead)
async def update_tryhackme_settings(
    profile_id: int,
    payload: TryHackMeSettingsUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await _apply_update(db, profile_id, user_id, payload)


@router.patch("/{profile_id}/section-visibility", response_model=ProfileRead)
async def update_section_visibility(
    profile_id: int,
    payload: SectionVisibilityUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Update visibility flags and, optionally, the section order. The order is
    normalised: duplicates removed, missing sections appended, image and
    contact pinned first.
    """
    return await _apply_update(db, profile_id, user_id, payload)
