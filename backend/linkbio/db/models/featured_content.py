"""
Featured content cards shown on a profile.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Boolean
from sqlalchemy.orm import relationship

from ..base import Base


class FeaturedContent(Base):
    __tablename__ = "featured_contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False)
    link_url = Column(Text)
    order = Column(Integer, default=0)
    is_visible = Column(Boolean, default=True)

    profile = relationship("Profile", back_populates="featured_contents")
