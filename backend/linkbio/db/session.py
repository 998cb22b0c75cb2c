"""
Database session management module.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import settings

DATABASE_URL = settings.DATABASE_URL


def _engine_options(url: str) -> dict:
    """
    Pool options per backend. SQLite (demo / tests) shares one connection so an
    in-memory database survives across sessions.
    """
    if url.startswith("sqlite"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    }


# Create SQLAlchemy engine
engine = create_async_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session.
    Handles commit on success and rollback on failure.

    Yields:
        AsyncSession: Database session
    """
    async with SessionLocal() as session:
        try:
            yield session
            # If the request handler completed successfully, commit the transaction
            await session.commit()
        except Exception:
            # If any exception occurred during the request handling, rollback
            await session.rollback()
            raise  # Re-raise the exception so FastAPI can handle it
        finally:
            await session.close()
