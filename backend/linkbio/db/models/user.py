"""
User model for authentication and user management.
"""
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Text, func
from sqlalchemy.orm import relationship

from ..base import Base


class User(Base):
    """
    Account owning exactly one profile.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    # bcrypt hash, never the plain password
    password = Column(String(255), nullable=False)

    # Relationships
    profile = relationship("Profile", back_populates="user", uselist=False)
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")
    contacts = relationship("Contact", back_populates="user", cascade="all, delete-orphan")


class UserSession(Base):
    """
    Persisted mirror of an issued JWT, removed on logout.
    """
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    token = Column(Text, unique=True, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="sessions")
