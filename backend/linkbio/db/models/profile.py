"""
Public profile model.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Boolean
from sqlalchemy.orm import relationship

from ..base import Base, JSONType, TimestampMixin


class Profile(Base, TimestampMixin):
    """
    The link-in-bio page of a single user.
    """
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    bio = Column(Text)
    location = Column(String(255))

    # Contact details
    email = Column(String(255))
    phone = Column(String(64))
    cv_url = Column(Text)

    # Appearance
    image_index = Column(Integer, default=0)
    custom_image_url = Column(Text)
    background_index = Column(Integer, default=0)
    background_gradient = Column(JSONType)  # {colorFrom, colorTo, direction}

    # Integrations
    github_username = Column(String(255))
    try_hack_me_user_id = Column(String(255))

    # Section visibility
    show_image = Column(Boolean, default=True)
    show_contact = Column(Boolean, default=True)
    show_social = Column(Boolean, default=True)
    show_knowledge = Column(Boolean, default=True)
    show_featured = Column(Boolean, default=True)
    show_technologies = Column(Boolean, default=True)
    show_github_stats = Column(Boolean, default=True)
    show_try_hack_me = Column(Boolean, default=False)
    section_order = Column(JSONType)  # list of section ids

    # Relationships
    user = relationship("User", back_populates="profile")
    social_links = relationship("SocialLink", back_populates="profile", cascade="all, delete-orphan")
    featured_contents = relationship("FeaturedContent", back_populates="profile", cascade="all, delete-orphan")
    technologies = relationship("Technology", back_populates="profile", cascade="all, delete-orphan")
    issues = relationship("Issue", back_populates="profile", cascade="all, delete-orphan")
