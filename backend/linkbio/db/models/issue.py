"""
Issues reported against a profile site.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Boolean, DateTime, func
from sqlalchemy.orm import relationship

from ..base import Base


class Issue(Base):
    """
    Issue lifecycle: open -> in_progress -> resolved, reopen goes back to open.
    """
    __tablename__ = "issues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    image_url = Column(Text)
    severity = Column(String(16), default="medium", nullable=False)
    status = Column(String(16), default="open", nullable=False, index=True)
    is_resolved = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    resolved_at = Column(DateTime(timezone=True))

    profile = relationship("Profile", back_populates="issues")
