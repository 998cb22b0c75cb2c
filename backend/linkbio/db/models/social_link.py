"""
Social and knowledge links shown on a profile.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Boolean
from sqlalchemy.orm import relationship

from ..base import Base


class SocialLink(Base):
    __tablename__ = "social_links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    platform = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)
    icon_name = Column(String(255), nullable=False)
    order = Column(Integer, default=0)
    # "social" or "knowledge"
    category = Column(String(32), default="social", nullable=False, index=True)
    is_visible = Column(Boolean, default=True)

    profile = relationship("Profile", back_populates="social_links")
