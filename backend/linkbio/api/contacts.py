"""
API endpoints for the business-card contact book.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id
from ..crud import contact as contact_crud
from ..crud import profile as profile_crud
from ..db.models.contact import Contact
from ..db.session import get_db
from ..schemas.contact import ContactCreate, ContactRead, ContactUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/contacts",
    tags=["contacts"],
)


async def _get_owned_contact(db: AsyncSession, contact_id: int, user_id: int) -> Contact:
    contact = await contact_crud.get_contact(db, contact_id)
    if not contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    if contact.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You don't have permission to access this contact",
        )
    return contact


@router.get("", response_model=List[ContactRead])
async def list_contacts(user_id: int = Depends(get_current_user_id), db: AsyncSession = Depends(get_db)):
    return await contact_crud.get_contacts(db, user_id)


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def add_contact(
    payload: ContactCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Save someone's profile, typically after scanning their QR code.
    """
    if not await profile_crud.get_profile(db, payload.contact_profile_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

    if await contact_crud.get_contact_by_profile(db, user_id, payload.contact_profile_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Contact already exists")

    contact = await contact_crud.create_contact(db, user_id, payload)
    logger.info(f"[CONTACTS] User {user_id} added profile {payload.contact_profile_id}")
    return contact


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(
    contact_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    contact = await _get_owned_contact(db, contact_id, user_id)
    return await contact_crud.touch_contact(db, contact)


@router.patch("/{contact_id}", response_model=ContactRead)
async def update_contact(
    contact_id: int,
    payload: ContactUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    contact = await _get_owned_contact(db, contact_id, user_id)
    return await contact_crud.update_contact(db, contact, payload)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    contact = await _get_owned_contact(db, contact_id, user_id)
    await contact_crud.delete_contact(db, contact)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
