"""
Pydantic schemas for the contact book.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null


class ContactProfileSummary(CamelModel):
    """Subset of a profile shown on a business card."""
    id: int
    user_id: int
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    image_index: int = 0
    custom_image_url: Optional[str] = None


class ContactCreate(CamelModel):
    contact_profile_id: int
    category: str = Field("default", min_length=1)
    notes: Optional[str] = None


class ContactUpdate(CamelModel):
    category: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None

    @field_validator("category", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class ContactRead(CamelModel):
    id: int
    user_id: int
    contact_profile_id: int
    category: str
    notes: Optional[str] = None
    added_at: datetime
    last_viewed_at: Optional[datetime] = None
    contact_profile: Optional[ContactProfileSummary] = None
