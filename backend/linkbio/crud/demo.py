"""
Demo data for an empty database.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.featured_content import FeaturedContent
from ..db.models.social_link import SocialLink
from ..db.models.technology import Technology
from . import profile as profile_crud
from . import user as user_crud

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo123"

DEMO_PROFILE = {
    "name": "Jane Doe",
    "bio": "Digital creator, photographer, and tech enthusiast sharing my journey and connecting with like-minded people.",
    "location": "New York, USA",
    "image_index": 0,
    "background_index": 0,
}

DEMO_SOCIAL_LINKS = [
    ("Instagram", "@janedoe", "https://instagram.com/janedoe", "instagram", "social"),
    ("X", "@janedoe", "https://x.com/janedoe", "x", "social"),
    ("Facebook", "Jane Doe", "https://facebook.com/janedoe", "facebook", "social"),
    ("WhatsApp", "+1 234 567 890", "https://wa.me/1234567890", "whatsapp", "social"),
    ("Telegram", "@janedoe", "https://t.me/janedoe", "telegram", "social"),
    ("LinkedIn", "in/janedoe", "https://linkedin.com/in/janedoe", "linkedin", "social"),
    ("YouTube", "@janedoecreates", "https://youtube.com/@janedoecreates", "youtube", "knowledge"),
    ("TikTok", "@janedoe", "https://tiktok.com/@janedoe", "tiktok", "social"),
]

DEMO_FEATURED_CONTENTS = [
    (
        "Travel Photography",
        "https://images.unsplash.com/photo-1492684223066-81342ee5ff30?ixlib=rb-1.2.1&auto=format&fit=crop&w=400&h=300&q=80",
        "https://example.com/travel",
    ),
    (
        "Tech Reviews",
        "https://images.unsplash.com/photo-1498049794561-7780e7231661?ixlib=rb-1.2.1&auto=format&fit=crop&w=400&h=300&q=80",
        "https://example.com/tech",
    ),
]

DEMO_TECHNOLOGIES = [
    ("React", "frontend", 85, 4.0),
    ("TypeScript", "frontend", 80, 3.0),
    ("Python", "backend", 75, 5.0),
    ("PostgreSQL", "database", 70, 4.0),
    ("Docker", "devops", 65, 2.0),
]


async def initialize_demo_data(db: AsyncSession) -> bool:
    """
    Create the demo user, profile and content when no user exists yet.

    Returns:
        True if data was created, False if the database was not empty
    """
    if await user_crud.get_first_user(db) is not None:
        logger.info("[DEMO] Users already exist, skipping demo data")
        return False

    user = await user_crud.create_user(db, DEMO_USERNAME, DEMO_PASSWORD)
    profile = await profile_crud.create_profile(db, user_id=user.id, **DEMO_PROFILE)

    for index, (platform, username, url, icon_name, category) in enumerate(DEMO_SOCIAL_LINKS):
        db.add(SocialLink(
            profile_id=profile.id,
            platform=platform,
            username=username,
            url=url,
            icon_name=icon_name,
            category=category,
            order=index,
        ))

    for index, (title, image_url, link_url) in enumerate(DEMO_FEATURED_CONTENTS):
        db.add(FeaturedContent(
            profile_id=profile.id,
            title=title,
            image_url=image_url,
            link_url=link_url,
            order=index,
        ))

    orders = {}
    for name, category, proficiency, years in DEMO_TECHNOLOGIES:
        db.add(Technology(
            profile_id=profile.id,
            name=name,
            category=category,
            proficiency_level=proficiency,
            years_of_experience=years,
            order=orders.get(category, 0),
        ))
        orders[category] = orders.get(category, 0) + 1

    await db.flush()
    logger.info(f"[DEMO] Demo data created for user {user.id} (profile {profile.id})")
    return True
