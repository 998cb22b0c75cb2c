"""
Import all models to ensure they are registered with SQLAlchemy.
"""
from ..base import Base
from .user import User, UserSession
from .profile import Profile
from .social_link import SocialLink
from .featured_content import FeaturedContent
from .technology import Technology
from .issue import Issue
from .contact import Contact
