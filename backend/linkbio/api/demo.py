"""
Demo data endpoint.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud.demo import initialize_demo_data
from ..db.session import get_db
from ..schemas.base import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["demo"])


@router.post("/reinitialize-demo-data", response_model=MessageResponse)
async def reinitialize_demo_data(db: AsyncSession = Depends(get_db)):
    """
    Seed the demo account if the database has no users. Existing data is
    never touched.
    """
    created = await initialize_demo_data(db)
    if created:
        return {"message": "Demo data has been reinitialized successfully"}
    return {"message": "Demo data already present"}
