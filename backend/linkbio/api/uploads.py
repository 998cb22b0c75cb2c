"""
API endpoints for image uploads.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id, get_owned_profile
from ..core.uploads import UploadError, save_image
from ..crud import profile as profile_crud
from ..db.session import get_db
from ..schemas.upload import ProfileImageUploadResponse, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/upload/image", response_model=UploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    user_id: int = Depends(get_current_user_id)
):
    """
    Store an image (e.g. an issue screenshot) and return its public URL.
    """
    try:
        return await save_image(image, prefix="issue-image")
    except UploadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/profile/{profile_id}/upload-image", response_model=ProfileImageUploadResponse)
async def upload_profile_image(
    profile_id: int,
    image: Optional[UploadFile] = File(None),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Store a custom profile picture and make it the profile's image.
    """
    profile = await get_owned_profile(db, profile_id, user_id)
    try:
        stored = await save_image(image, prefix="profile-image")
    except UploadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    profile = await profile_crud.update_profile(db, profile, {"custom_image_url": stored["url"]})
    return {**stored, "image_url": stored["url"], "profile": profile}
