"""
Pydantic schemas for social and knowledge links.
"""
from typing import Dict, Literal, Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null

SocialLinkCategory = Literal["social", "knowledge"]


class SocialLinkBase(CamelModel):
    platform: str = Field(..., min_length=1, description="Platform name, e.g. GitHub")
    username: str = Field(..., min_length=1, description="Handle on the platform")
    url: str = Field(..., min_length=1, description="Link target")
    icon_name: str = Field(..., min_length=1, description="Client icon identifier")
    order: int = Field(0, description="Relative sort key")
    category: SocialLinkCategory = Field("social", description="social or knowledge")
    is_visible: bool = True


class SocialLinkCreate(SocialLinkBase):
    """Body for POST /api/social-links."""
    profile_id: int = Field(..., description="Owning profile")


class SocialLinkCreateForProfile(SocialLinkBase):
    """Body for POST /api/profile/{profile_id}/social-links."""
    pass


class SocialLinkUpdate(CamelModel):
    platform: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = Field(None, min_length=1)
    url: Optional[str] = Field(None, min_length=1)
    icon_name: Optional[str] = Field(None, min_length=1)
    order: Optional[int] = None
    category: Optional[SocialLinkCategory] = None
    is_visible: Optional[bool] = None

    @field_validator("platform", "username", "url", "icon_name", "order", "category", "is_visible", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class SocialLinkCategoryUpdate(CamelModel):
    category: SocialLinkCategory


class SocialLinkRead(SocialLinkBase):
    id: int
    profile_id: int


class SocialLinkStats(CamelModel):
    total: int
    social_count: int
    knowledge_count: int
    categories: Dict[str, int] = Field(..., description="Link count per category")
    visible: int
