import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
# Import passlib for hashing
from passlib.context import CryptContext
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.user import UserSession
from .config import settings

logger = logging.getLogger(__name__)

# --- Hashing Setup ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
# --- End Hashing Setup ---


# --- JWT ---
def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> tuple[str, datetime]:
    """
    Issue a signed token for a user.

    Returns:
        The encoded token and its expiry (aware UTC datetime)
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES))
    to_encode = {
        "userId": user_id,
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
        # Two logins in the same second must still yield distinct tokens
        "jti": uuid.uuid4().hex,
    }
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt, expire


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify signature and expiry.

    Returns:
        The payload, or None when the token is invalid or expired
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"[AUTH] Token rejected: {e}")
        return None
    if not isinstance(payload.get("userId"), int):
        return None
    return payload
# --- End JWT ---


async def create_session(
    db: AsyncSession,
    user_id: int,
    token: str,
    expires_at: datetime
) -> UserSession:
    """
    Persist an issued token so that logout can revoke it.
    """
    session = UserSession(user_id=user_id, token=token, expires_at=expires_at)
    db.add(session)
    await db.flush()
    logger.info(f"[AUTH] Stored session for user {user_id}")
    return session


async def get_session_by_token(db: AsyncSession, token: str) -> Optional[UserSession]:
    result = await db.execute(select(UserSession).where(UserSession.token == token))
    return result.scalar_one_or_none()


async def delete_session_by_token(db: AsyncSession, token: str) -> bool:
    """
    Remove the session row for a token.

    Returns:
        True if a row was deleted
    """
    result = await db.execute(delete(UserSession).where(UserSession.token == token))
    await db.flush()
    return bool(result.rowcount)
