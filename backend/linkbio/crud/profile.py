"""
CRUD operations for profiles.
"""
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.profile import Profile
from ..db.models.user import User


async def get_profile(db: AsyncSession, profile_id: int) -> Optional[Profile]:
    """
    Get a profile by ID.

    Args:
        db: Database session
        profile_id: Profile ID

    Returns:
        Optional[Profile]: Profile if found, None otherwise
    """
    result = await db.execute(select(Profile).where(Profile.id == profile_id))
    return result.scalar_one_or_none()


async def get_profile_by_user_id(db: AsyncSession, user_id: int) -> Optional[Profile]:
    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    return result.scalar_one_or_none()


async def get_profile_by_username(db: AsyncSession, username: str) -> Optional[Profile]:
    """
    Get the profile owned by the user with the given login name.
    """
    stmt = select(Profile).join(User, User.id == Profile.user_id).where(User.username == username)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_profile(db: AsyncSession, user_id: int, name: str, **fields: Any) -> Profile:
    """
    Create the profile of a user. Remaining columns take their defaults.
    """
    db_profile = Profile(user_id=user_id, name=name, **fields)
    db.add(db_profile)
    await db.flush()
    await db.refresh(db_profile)
    return db_profile


async def update_profile(
    db: AsyncSession,
    db_obj: Profile,
    obj_in: Union[BaseModel, Dict[str, Any]]
) -> Profile:
    """
    Update an existing profile.

    Only fields explicitly present in obj_in are written; everything else keeps
    its stored value.

    Args:
        db: Database session.
        db_obj: The profile object to update.
        obj_in: Update schema or dict containing update data.

    Returns:
        The updated profile object.
    """
    if isinstance(obj_in, BaseModel):
        update_data = obj_in.model_dump(exclude_unset=True)
    else:
        update_data = obj_in

    for field, value in update_data.items():
        if hasattr(db_obj, field):
            setattr(db_obj, field, value)

    db.add(db_obj)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj
