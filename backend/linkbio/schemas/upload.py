"""
Schemas for file uploads.
"""
from pydantic import Field

from .base import CamelModel
from .profile import ProfileRead


class UploadResponse(CamelModel):
    url: str = Field(..., description="Public path of the stored file")
    filename: str
    originalname: str = Field(..., description="File name as sent by the client")
    size: int


class ProfileImageUploadResponse(UploadResponse):
    image_url: str
    profile: ProfileRead
