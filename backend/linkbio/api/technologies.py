"""
API endpoints for technology skills.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id, get_owned_profile
from ..crud import profile as profile_crud
from ..crud import technology as technology_crud
from ..db.models.technology import Technology
from ..db.session import get_db
from ..schemas.base import ReorderRequest
from ..schemas.technology import (
    TechnologyCategory,
    TechnologyCreate,
    TechnologyCreateForProfile,
    TechnologyRead,
    TechnologyUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["technologies"])


async def _get_technology(db: AsyncSession, technology_id: int) -> Technology:
    technology = await technology_crud.get_technology(db, technology_id)
    if not technology:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Technology not found")
    return technology


async def _get_owned_technology(db: AsyncSession, technology_id: int, user_id: int) -> Technology:
    technology = await _get_technology(db, technology_id)
    await get_owned_profile(db, technology.profile_id, user_id)
    return technology


async def _require_profile(db: AsyncSession, profile_id: int) -> None:
    if not await profile_crud.get_profile(db, profile_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")


@router.get("/api/profile/{profile_id}/technologies", response_model=List[TechnologyRead])
async def list_technologies(profile_id: int, db: AsyncSession = Depends(get_db)):
    await _require_profile(db, profile_id)
    return await technology_crud.get_technologies(db, profile_id)


@router.get("/api/profile/{profile_id}/technologies/category/{category}", response_model=List[TechnologyRead])
async def list_technologies_by_category(
    profile_id: int,
    category: TechnologyCategory,
    db: AsyncSession = Depends(get_db)
):
    await _require_profile(db, profile_id)
    return await technology_crud.get_technologies(db, profile_id, category)


@router.post(
    "/api/profile/{profile_id}/technologies",
    response_model=TechnologyRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_technology_for_profile(
    profile_id: int,
    payload: TechnologyCreateForProfile,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Add a technology. Without an explicit order it goes to the end of its
    category.
    """
    await get_owned_profile(db, profile_id, user_id)
    technology = await technology_crud.create_technology(db, profile_id, payload)
    logger.info(f"[TECHNOLOGIES] Created {technology.name} ({technology.category}) on profile {profile_id}")
    return technology


@router.post(
    "/api/profile/{profile_id}/technologies/category/{category}/reorder",
    response_model=List[TechnologyRead],
)
async def reorder_technologies(
    profile_id: int,
    category: TechnologyCategory,
    payload: ReorderRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, profile_id, user_id)
    return await technology_crud.reorder_technologies(db, profile_id, category, payload.ordered_ids)


@router.post("/api/technologies", response_model=TechnologyRead, status_code=status.HTTP_201_CREATED)
async def create_technology(
    payload: TechnologyCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, payload.profile_id, user_id)
    return await technology_crud.create_technology(db, payload.profile_id, payload)


@router.get("/api/technologies/{technology_id}", response_model=TechnologyRead)
async def get_technology(technology_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_technology(db, technology_id)


@router.patch("/api/technologies/{technology_id}", response_model=TechnologyRead)
async def update_technology(
    technology_id: int,
    payload: TechnologyUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    technology = await _get_owned_technology(db, technology_id, user_id)
    return await technology_crud.update_technology(db, technology, payload)


@router.delete("/api/technologies/{technology_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_technology(
    technology_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    technology = await _get_owned_technology(db, technology_id, user_id)
    await technology_crud.delete_technology(db, technology)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
