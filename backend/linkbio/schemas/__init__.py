"""
Pydantic schemas for the application.
"""
from . import auth
from . import profile
from . import social_link
from . import featured_content
from . import technology
from . import issue
from . import contact
from . import github
from . import upload

__all__ = [
    "auth",
    "profile",
    "social_link",
    "featured_content",
    "technology",
    "issue",
    "contact",
    "github",
    "upload",
]
