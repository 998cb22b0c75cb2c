"""
Pydantic schemas for profiles.
"""
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ..core.sections import normalize_section_order
from .base import CamelModel, reject_null, validate_http_url
from .featured_content import FeaturedContentRead
from .social_link import SocialLinkRead
from .technology import TechnologyRead


class BackgroundGradient(BaseModel):
    """Custom page background, stored as JSON."""
    colorFrom: str = Field(..., description="Start colour, e.g. #0f172a")
    colorTo: str = Field(..., description="End colour")
    direction: str = Field("to bottom right", description="CSS gradient direction")


class ProfileRead(CamelModel):
    """Profile as returned by the API."""
    id: int
    user_id: int
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    cv_url: Optional[str] = None
    image_index: int = 0
    custom_image_url: Optional[str] = None
    background_index: int = 0
    background_gradient: Optional[BackgroundGradient] = None
    github_username: Optional[str] = None
    try_hack_me_user_id: Optional[str] = None
    show_image: bool = True
    show_contact: bool = True
    show_social: bool = True
    show_knowledge: bool = True
    show_featured: bool = True
    show_technologies: bool = True
    show_github_stats: bool = True
    show_try_hack_me: bool = False
    section_order: Optional[List[str]] = None


class SectionOrderMixin(CamelModel):
    section_order: Optional[List[str]] = Field(None, description="Section ids in render order")

    @field_validator("section_order")
    def check_section_order(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        return normalize_section_order(v)


class ProfileUpdate(SectionOrderMixin):
    """Partial update; omitted fields keep their current value."""
    name: Optional[str] = Field(None, min_length=1)
    bio: Optional[str] = None
    location: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    cv_url: Optional[str] = None
    image_index: Optional[int] = Field(None, ge=0, le=2)
    custom_image_url: Optional[str] = None
    background_index: Optional[int] = Field(None, ge=0, le=1)
    background_gradient: Optional[BackgroundGradient] = None
    github_username: Optional[str] = None
    try_hack_me_user_id: Optional[str] = None
    show_image: Optional[bool] = None
    show_contact: Optional[bool] = None
    show_social: Optional[bool] = None
    show_knowledge: Optional[bool] = None
    show_featured: Optional[bool] = None
    show_technologies: Optional[bool] = None
    show_github_stats: Optional[bool] = None
    show_try_hack_me: Optional[bool] = None

    @field_validator(
        "name", "image_index", "background_index",
        "show_image", "show_contact", "show_social", "show_knowledge",
        "show_featured", "show_technologies", "show_github_stats", "show_try_hack_me",
        mode="before",
    )
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)

    @field_validator("cv_url")
    def check_cv_url(cls, v):
        return validate_http_url(v)


class ProfileImageUpdate(CamelModel):
    image_index: int = Field(..., ge=0, le=2, description="Built-in avatar index")
    custom_image_url: Optional[str] = Field(None, description="Uploaded image URL, null to clear")


class ProfileBackgroundUpdate(CamelModel):
    background_index: int = Field(..., ge=0, le=1, description="Built-in background index")
    background_gradient: Optional[BackgroundGradient] = None


class ProfileContactUpdate(CamelModel):
    """Contact details; all fields are nullable to allow clearing them."""
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    cv_url: Optional[str] = None

    @field_validator("email", mode="before")
    def blank_email_is_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("cv_url")
    def check_cv_url(cls, v):
        return validate_http_url(v) or None


class GithubSettingsUpdate(CamelModel):
    github_username: Optional[str] = None
    show_github_stats: Optional[bool] = None

    @field_validator("show_github_stats", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class TryHackMeSettingsUpdate(CamelModel):
    try_hack_me_user_id: Optional[str] = None
    show_try_hack_me: Optional[bool] = None

    @field_validator("show_try_hack_me", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class SectionVisibilityUpdate(SectionOrderMixin):
    show_image: Optional[bool] = None
    show_contact: Optional[bool] = None
    show_social: Optional[bool] = None
    show_knowledge: Optional[bool] = None
    show_featured: Optional[bool] = None
    show_technologies: Optional[bool] = None
    show_github_stats: Optional[bool] = None
    show_try_hack_me: Optional[bool] = None

    @field_validator(
        "show_image", "show_contact", "show_social", "show_knowledge",
        "show_featured", "show_technologies", "show_github_stats", "show_try_hack_me",
        mode="before",
    )
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class PublicProfileResponse(CamelModel):
    """Everything needed to render a public profile page."""
    profile: ProfileRead
    social_links: List[SocialLinkRead] = Field(default_factory=list)
    featured_contents: List[FeaturedContentRead] = Field(default_factory=list)
    technologies: List[TechnologyRead] = Field(default_factory=list)
    sections: List[str] = Field(default_factory=list, description="Visible sections in render order")
