"""
Pydantic schemas for featured content cards.
"""
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null


class FeaturedContentBase(CamelModel):
    title: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    link_url: Optional[str] = None
    order: int = 0
    is_visible: bool = True


class FeaturedContentCreate(FeaturedContentBase):
    """Body for POST /api/featured-contents."""
    profile_id: int


class FeaturedContentCreateForProfile(FeaturedContentBase):
    pass


class FeaturedContentUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = Field(None, min_length=1)
    link_url: Optional[str] = None
    order: Optional[int] = None
    is_visible: Optional[bool] = None

    @field_validator("title", "image_url", "order", "is_visible", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class FeaturedContentRead(FeaturedContentBase):
    id: int
    profile_id: int

