"""
Technology skills grouped by category.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Boolean, Float
from sqlalchemy.orm import relationship

from ..base import Base, TimestampMixin


class Technology(Base, TimestampMixin):
    __tablename__ = "technologies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    logo_url = Column(Text)
    category = Column(String(32), nullable=False, index=True)
    proficiency_level = Column(Integer, default=50)
    years_of_experience = Column(Float)
    is_visible = Column(Boolean, default=True)
    order = Column(Integer, default=0)

    profile = relationship("Profile", back_populates="technologies")
