"""
CRUD operations for the contact book.
"""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.contact import Contact
from ..schemas.contact import ContactCreate, ContactUpdate


async def get_contacts(db: AsyncSession, user_id: int) -> List[Contact]:
    """
    Get the contacts of a user with their profiles, most recently added first.
    """
    stmt = (
        select(Contact)
        .where(Contact.user_id == user_id)
        .order_by(Contact.added_at.desc(), Contact.id.desc())
    )
    result = await db.execute(stmt)
    return list(result.unique().scalars().all())


async def get_contact(db: AsyncSession, contact_id: int) -> Optional[Contact]:
    # populate_existing reloads the joined profile for objects already in the session
    stmt = select(Contact).where(Contact.id == contact_id).execution_options(populate_existing=True)
    result = await db.execute(stmt)
    return result.unique().scalar_one_or_none()


async def get_contact_by_profile(db: AsyncSession, user_id: int, contact_profile_id: int) -> Optional[Contact]:
    stmt = select(Contact).where(
        Contact.user_id == user_id,
        Contact.contact_profile_id == contact_profile_id,
    )
    result = await db.execute(stmt)
    return result.unique().scalar_one_or_none()


async def create_contact(db: AsyncSession, user_id: int, obj_in: ContactCreate) -> Contact:
    db_contact = Contact(user_id=user_id, **obj_in.model_dump())
    db.add(db_contact)
    await db.flush()
    return await get_contact(db, db_contact.id)


async def update_contact(db: AsyncSession, db_obj: Contact, obj_in: ContactUpdate) -> Contact:
    for field, value in obj_in.model_dump(exclude_unset=True).items():
        setattr(db_obj, field, value)
    await db.flush()
    return await get_contact(db, db_obj.id)


async def touch_contact(db: AsyncSession, db_obj: Contact) -> Contact:
    """
    Record that the owner just viewed this contact.
    """
    db_obj.last_viewed_at = datetime.now(timezone.utc)
    await db.flush()
    return await get_contact(db, db_obj.id)


async def delete_contact(db: AsyncSession, db_obj: Contact) -> None:
    await db.delete(db_obj)
    await db.flush()
