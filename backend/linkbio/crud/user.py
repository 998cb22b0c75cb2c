"""
CRUD operations for users.
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.security import get_password_hash
from ..db.models.user import User

logger = logging.getLogger(__name__)


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_first_user(db: AsyncSession) -> Optional[User]:
    """
    Get the user with the lowest id, used when no demo user is configured.
    """
    result = await db.execute(select(User).order_by(User.id).limit(1))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, username: str, password: str) -> User:
    """
    Create a user, hashing the plain password.

    Args:
        db: Database session
        username: Unique login name
        password: Plain password

    Returns:
        User: Created user
    """
    user = User(username=username, password=get_password_hash(password))
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info(f"[USERS] Created user {user.id} ({username})")
    return user
