"""
Authentication schemas for username/password login.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.validators import validate_password, validate_username
from .base import CamelModel
from .profile import ProfileRead


class RegisterRequest(BaseModel):
    """Request model for account registration."""
    username: str = Field(..., description="Login name (min. 3 characters)")
    password: str = Field(..., description="Password (min. 6 characters)")

    @field_validator("username")
    def check_username(cls, v: str) -> str:
        is_valid, error = validate_username(v)
        if not is_valid:
            raise ValueError(error)
        return v.strip()

    @field_validator("password")
    def check_password(cls, v: str) -> str:
        is_valid, error = validate_password(v)
        if not is_valid:
            raise ValueError(error)
        return v


class LoginRequest(BaseModel):
    """Request model for username/password login."""
    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="Password")


class UserRead(CamelModel):
    id: int
    username: str


class AuthResponse(CamelModel):
    """Response model for successful authentication."""
    user: UserRead
    profile: Optional[ProfileRead] = None
    token: str = Field(..., description="Bearer token for authenticated requests")


class MeResponse(CamelModel):
    user: UserRead
    profile: Optional[ProfileRead] = None
