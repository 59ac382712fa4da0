"""
podcast_api.db.repositories.episodes

Repository for `Episode` entities.

Responsibilities:
- Create, list, and delete episodes.
- Look episodes up scoped to their podcast.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.db.models import Episode


class EpisodeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, podcast_id: int, title: str, category: str) -> Episode:
        episode = Episode(podcast_id=podcast_id, title=title, category=category)
        self._session.add(episode)
        await self._session.flush()
        return episode

    async def get_in_podcast(self, *, podcast_id: int, episode_id: int) -> Episode | None:
        # Scoped lookup: an episode of another podcast is reported as missing.
        stmt = select(Episode).where(Episode.id == episode_id, Episode.podcast_id == podcast_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_for_podcast(self, podcast_id: int) -> list[Episode]:
        stmt = select(Episode).where(Episode.podcast_id == podcast_id).order_by(Episode.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, episode: Episode) -> None:
        await self._session.delete(episode)
        await self._session.flush()
