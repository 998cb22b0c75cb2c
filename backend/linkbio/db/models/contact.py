"""
Business-card contact book entries.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, DateTime, UniqueConstraint, func
from sqlalchemy.orm import relationship

from ..base import Base


class Contact(Base):
    """
    A profile captured by a user, usually through a QR scan.
    """
    __tablename__ = "contacts"
    __table_args__ = (
        UniqueConstraint("user_id", "contact_profile_id", name="uq_contacts_user_id_contact_profile_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    contact_profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    category = Column(String(255), default="default", nullable=False)
    notes = Column(Text)
    added_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    last_viewed_at = Column(DateTime(timezone=True))

    user = relationship("User", back_populates="contacts")
    contact_profile = relationship("Profile", lazy="joined")
