"""
CRUD operations for featured content cards.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.featured_content import FeaturedContent
from ..schemas.featured_content import FeaturedContentBase, FeaturedContentUpdate


async def get_featured_contents(db: AsyncSession, profile_id: int) -> List[FeaturedContent]:
    stmt = (
        select(FeaturedContent)
        .where(FeaturedContent.profile_id == profile_id)
        .order_by(FeaturedContent.order, FeaturedContent.id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_featured_content(db: AsyncSession, content_id: int) -> Optional[FeaturedContent]:
    result = await db.execute(select(FeaturedContent).where(FeaturedContent.id == content_id))
    return result.scalar_one_or_none()


async def create_featured_content(
    db: AsyncSession,
    profile_id: int,
    obj_in: FeaturedContentBase
) -> FeaturedContent:
    db_content = FeaturedContent(profile_id=profile_id, **obj_in.model_dump(exclude={"profile_id"}))
    db.add(db_content)
    await db.flush()
    await db.refresh(db_content)
    return db_content


async def update_featured_content(
    db: AsyncSession,
    db_obj: FeaturedContent,
    obj_in: FeaturedContentUpdate
) -> FeaturedContent:
    for field, value in obj_in.model_dump(exclude_unset=True).items():
        setattr(db_obj, field, value)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj


async def delete_featured_content(db: AsyncSession, db_obj: FeaturedContent) -> None:
    await db.delete(db_obj)
    await db.flush()


async def reorder_featured_contents(
    db: AsyncSession,
    profile_id: int,
    ordered_ids: List[int]
) -> List[FeaturedContent]:
    """
    Set order = position in ordered_ids. Ids of other profiles are ignored.
    """
    positions = {content_id: index for index, content_id in enumerate(ordered_ids)}
    for content in await get_featured_contents(db, profile_id):
        if content.id in positions:
            content.order = positions[content.id]
    await db.flush()
    return await get_featured_contents(db, profile_id)
