"""
CRUD operations for social and knowledge links.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.social_link import SocialLink
from ..schemas.social_link import SocialLinkBase, SocialLinkUpdate


async def get_social_links(
    db: AsyncSession,
    profile_id: int,
    category: Optional[str] = None
) -> List[SocialLink]:
    """
    Get the links of a profile sorted by order, optionally for one category.
    """
    stmt = select(SocialLink).where(SocialLink.profile_id == profile_id)
    if category is not None:
        stmt = stmt.where(SocialLink.category == category)
    result = await db.execute(stmt.order_by(SocialLink.order, SocialLink.id))
    return list(result.scalars().all())


async def get_social_link(db: AsyncSession, link_id: int) -> Optional[SocialLink]:
    result = await db.execute(select(SocialLink).where(SocialLink.id == link_id))
    return result.scalar_one_or_none()


async def create_social_link(db: AsyncSession, profile_id: int, obj_in: SocialLinkBase) -> SocialLink:
    data = obj_in.model_dump(exclude={"profile_id"})
    db_link = SocialLink(profile_id=profile_id, **data)
    db.add(db_link)
    await db.flush()
    await db.refresh(db_link)
    return db_link


async def update_social_link(db: AsyncSession, db_obj: SocialLink, obj_in: SocialLinkUpdate) -> SocialLink:
    for field, value in obj_in.model_dump(exclude_unset=True).items():
        setattr(db_obj, field, value)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj


async def delete_social_link(db: AsyncSession, db_obj: SocialLink) -> None:
    await db.delete(db_obj)
    await db.flush()


async def get_social_link_stats(db: AsyncSession, profile_id: int) -> Dict[str, Any]:
    """
    Count links per category for the admin panel.
    """
    links = await get_social_links(db, profile_id)
    social_count = sum(1 for link in links if link.category == "social")
    knowledge_count = sum(1 for link in links if link.category == "knowledge")
    return {
        "total": len(links),
        "social_count": social_count,
        "knowledge_count": knowledge_count,
        "categories": {"social": social_count, "knowledge": knowledge_count},
        "visible": sum(1 for link in links if link.is_visible),
    }
