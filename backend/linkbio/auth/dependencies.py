"""
Authentication dependencies for FastAPI.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core import security
from ..core.config import settings
from ..crud import profile as profile_crud
from ..db.models.profile import Profile
from ..db.session import get_db

# Configure logging
logger = logging.getLogger(__name__)

# Bearer token scheme; missing tokens are reported by get_current_auth
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/auth/login",
    auto_error=False
)


@dataclass
class AuthContext:
    """Identity extracted from a verified bearer token."""
    user_id: int
    token: str


async def get_current_auth(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db)
) -> AuthContext:
    """
    Validate the bearer token.

    Raises:
        HTTPException 401: If no token is provided
        HTTPException 403: If the token is invalid, expired or (with
            ENFORCE_SESSION_REVOCATION) no longer backed by a session row
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = security.decode_access_token(token)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    if settings.ENFORCE_SESSION_REVOCATION:
        session = await security.get_session_by_token(db, token)
        if session is None:
            logger.info(f"[AUTH] Rejected revoked token for user {payload['userId']}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Session has been revoked",
            )

    return AuthContext(user_id=payload["userId"], token=token)


async def get_current_user_id(auth: AuthContext = Depends(get_current_auth)) -> int:
    return auth.user_id


def ensure_profile_owner(profile: Profile, user_id: int) -> None:
    """
    Raises:
        HTTPException 403: If the profile belongs to someone else
    """
    if profile.user_id != user_id:
        logger.warning(f"[AUTH] User {user_id} denied access to profile {profile.id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You don't have permission to modify this profile",
        )


async def get_owned_profile(db: AsyncSession, profile_id: int, user_id: int) -> Profile:
    """
    Load a profile and check that user_id owns it.

    Raises:
        HTTPException 404: If the profile does not exist
        HTTPException 403: If the profile belongs to someone else
    """
    profile = await profile_crud.get_profile(db, profile_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    ensure_profile_owner(profile, user_id)
    return profile
