"""
Username/password authentication routes.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.security import (
    create_access_token,
    create_session,
    delete_session_by_token,
    verify_password,
)
from ..crud import profile as profile_crud
from ..crud import user as user_crud
from ..db.models.user import User
from ..db.session import get_db
from ..schemas.auth import AuthResponse, LoginRequest, MeResponse, RegisterRequest
from ..schemas.base import MessageResponse
from .dependencies import AuthContext, get_current_auth, get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


async def _issue_token(db: AsyncSession, user: User) -> str:
    token, expires_at = create_access_token(user.id)
    await create_session(db, user.id, token, expires_at)
    return token


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """
    Create an account together with an empty profile named after the user.
    """
    logger.info(f"[AUTH] Registration attempt for username: {payload.username}")

    if await user_crud.get_user_by_username(db, payload.username):
        logger.warning(f"[AUTH] Username already taken: {payload.username}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    try:
        user = await user_crud.create_user(db, payload.username, payload.password)
    except IntegrityError:
        # A concurrent registration won the unique index
        await db.rollback()
        logger.warning(f"[AUTH] Username taken concurrently: {payload.username}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    profile = await profile_crud.create_profile(db, user_id=user.id, name=payload.username)
    token = await _issue_token(db, user)

    logger.info(f"[AUTH] Registered user {user.id}")
    return {"user": user, "profile": profile, "token": token}


@router.post("/login", response_model=AuthResponse)
async def login(credentials: LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Authenticate with username and password.

    Raises:
        HTTPException: 401 if the credentials are invalid
    """
    logger.info(f"[AUTH] Login attempt for username: {credentials.username}")

    user = await user_crud.get_user_by_username(db, credentials.username)
    if not user or not verify_password(credentials.password, user.password):
        logger.warning(f"[AUTH] Invalid credentials for username: {credentials.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    profile = await profile_crud.get_profile_by_user_id(db, user.id)
    token = await _issue_token(db, user)

    logger.info(f"[AUTH] Login successful for user {user.id}")
    return {"user": user, "profile": profile, "token": token}


@router.post("/logout", response_model=MessageResponse)
async def logout(auth: AuthContext = Depends(get_current_auth), db: AsyncSession = Depends(get_db)):
    """
    Delete the session row of the presented token.
    """
    removed = await delete_session_by_token(db, auth.token)
    if not removed:
        logger.info(f"[AUTH] Logout for user {auth.user_id} found no session row")
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=MeResponse)
async def me(user_id: int = Depends(get_current_user_id), db: AsyncSession = Depends(get_db)):
    user = await user_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    profile = await profile_crud.get_profile_by_user_id(db, user.id)
    return {"user": user, "profile": profile}
