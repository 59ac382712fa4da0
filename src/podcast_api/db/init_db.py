"""
podcast_api.db.init_db

DB initialization helpers (dev/test convenience).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from podcast_api.db import models  # noqa: F401  # register tables on Base.metadata
from podcast_api.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist.
    Production relies on Alembic migrations instead (see `alembic/`).
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
