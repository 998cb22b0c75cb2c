"""
CRUD operations for technology skills.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.technology import Technology
from ..schemas.technology import TechnologyBase, TechnologyUpdate

logger = logging.getLogger(__name__)


async def get_technologies(
    db: AsyncSession,
    profile_id: int,
    category: Optional[str] = None
) -> List[Technology]:
    """
    Get the technologies of a profile, sorted by category then order.
    """
    stmt = select(Technology).where(Technology.profile_id == profile_id)
    if category is not None:
        stmt = stmt.where(Technology.category == category)
    result = await db.execute(stmt.order_by(Technology.category, Technology.order, Technology.id))
    return list(result.scalars().all())


async def get_technology(db: AsyncSession, technology_id: int) -> Optional[Technology]:
    result = await db.execute(select(Technology).where(Technology.id == technology_id))
    return result.scalar_one_or_none()


async def get_next_order(db: AsyncSession, profile_id: int, category: str) -> int:
    """
    Order value placing a new technology at the end of its category.
    """
    result = await db.execute(
        select(func.max(Technology.order)).where(
            Technology.profile_id == profile_id,
            Technology.category == category,
        )
    )
    current_max = result.scalar_one_or_none()
    return 0 if current_max is None else current_max + 1


async def create_technology(db: AsyncSession, profile_id: int, obj_in: TechnologyBase) -> Technology:
    data = obj_in.model_dump(exclude={"profile_id"})
    if data.get("order") is None:
        data["order"] = await get_next_order(db, profile_id, data["category"])

    db_technology = Technology(profile_id=profile_id, **data)
    db.add(db_technology)
    await db.flush()
    await db.refresh(db_technology)
    return db_technology


async def update_technology(db: AsyncSession, db_obj: Technology, obj_in: TechnologyUpdate) -> Technology:
    for field, value in obj_in.model_dump(exclude_unset=True).items():
        setattr(db_obj, field, value)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj


async def delete_technology(db: AsyncSession, db_obj: Technology) -> None:
    await db.delete(db_obj)
    await db.flush()


async def reorder_technologies(
    db: AsyncSession,
    profile_id: int,
    category: str,
    ordered_ids: List[int]
) -> List[Technology]:
    """
    Reorder the technologies of one (profile, category) pair.

    Each listed technology gets order = its index in ordered_ids. Ids that do
    not belong to the pair are ignored; other categories are left untouched.

    Returns:
        The pair's technologies sorted by their new order
    """
    positions = {technology_id: index for index, technology_id in enumerate(ordered_ids)}
    technologies = await get_technologies(db, profile_id, category)

    ignored = set(positions) - {technology.id for technology in technologies}
    if ignored:
        logger.info(f"[TECHNOLOGIES] Reorder ignored ids outside {profile_id}/{category}: {sorted(ignored)}")

    for technology in technologies:
        if technology.id in positions:
            technology.order = positions[technology.id]
    await db.flush()
    return await get_technologies(db, profile_id, category)
