"""
podcast_api.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Liveness probe (`/healthz`) that never touches the database.
- Readiness probe (`/readyz`) that checks the database behind the GraphQL endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.api.deps import db_session

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: the process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Readiness: the database must answer.
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# These stay plain REST routes so orchestrators can probe without speaking GraphQL.
