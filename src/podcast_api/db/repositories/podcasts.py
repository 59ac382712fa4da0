"""
podcast_api.db.repositories.podcasts

Repository for `Podcast` entities.

Responsibilities:
- Create, load, list, and delete podcasts.
- Eager-load episodes so resolvers never trigger lazy IO on an async session.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from podcast_api.db.models import Podcast


class PodcastRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, creator_id: int, title: str, category: str) -> Podcast:
        podcast = Podcast(creator_id=creator_id, title=title, category=category, episodes=[])
        self._session.add(podcast)
        await self._session.flush()
        return podcast

    async def get(self, podcast_id: int) -> Podcast | None:
        stmt = (
            select(Podcast)
            .where(Podcast.id == podcast_id)
            .options(selectinload(Podcast.episodes))
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_all(self) -> list[Podcast]:
        stmt = select(Podcast).options(selectinload(Podcast.episodes)).order_by(Podcast.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, podcast: Podcast) -> None:
        # ORM cascade removes the (already loaded) episodes as well.
        await self._session.delete(podcast)
        await self._session.flush()
