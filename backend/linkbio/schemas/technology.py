"""
Pydantic schemas for technology skills.
"""
from typing import Literal, Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null

TechnologyCategory = Literal[
    "frontend",
    "backend",
    "mobile",
    "devops",
    "database",
    "cloud",
    "testing",
    "design",
    "other",
]


class TechnologyBase(CamelModel):
    name: str = Field(..., min_length=1)
    logo_url: Optional[str] = None
    category: TechnologyCategory
    proficiency_level: int = Field(50, ge=0, le=100, description="Self-assessed level, 0-100")
    years_of_experience: Optional[float] = Field(None, ge=0, le=50)
    is_visible: bool = True


class TechnologyCreate(TechnologyBase):
    """Body for POST /api/technologies. Order defaults to the end of the category."""
    profile_id: int
    order: Optional[int] = None


class TechnologyCreateForProfile(TechnologyBase):
    order: Optional[int] = None


class TechnologyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    logo_url: Optional[str] = None
    category: Optional[TechnologyCategory] = None
    proficiency_level: Optional[int] = Field(None, ge=0, le=100)
    years_of_experience: Optional[float] = Field(None, ge=0, le=50)
    is_visible: Optional[bool] = None
    order: Optional[int] = None

    @field_validator("name", "category", "proficiency_level", "is_visible", "order", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class TechnologyRead(TechnologyBase):
    id: int
    profile_id: int
    order: int = 0
