"""
podcast_api.services.podcasts

Podcast and episode management service (transaction + ownership owner).

Responsibilities:
- CRUD for podcasts and their episodes.
- Ownership checks: only the podcast's creator may mutate it or its episodes.
- Rating bounds validation.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.db.models import MAX_RATING, MIN_RATING, Episode, Podcast, User
from podcast_api.db.repositories.episodes import EpisodeRepo
from podcast_api.db.repositories.podcasts import PodcastRepo
from podcast_api.observability.logging import get_logger
from podcast_api.services.errors import (
    NotFoundError,
    OwnershipError,
    ValidationError,
)

log = get_logger(__name__)


class PodcastService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._podcasts = PodcastRepo(session)
        self._episodes = EpisodeRepo(session)

    # -- podcasts ----------------------------------------------------------

    async def create_podcast(self, *, host: User, title: str, category: str) -> Podcast:
        title = _required_text("Title", title)
        category = _required_text("Category", category)
        podcast = await self._podcasts.create(creator_id=host.id, title=title, category=category)
        await self._session.commit()
        log.info("podcast_created", podcast_id=podcast.id, user_id=host.id)
        return podcast

    async def list_podcasts(self) -> list[Podcast]:
        return await self._podcasts.list_all()

    async def get_podcast(self, podcast_id: int) -> Podcast:
        podcast = await self._podcasts.get(podcast_id)
        if podcast is None:
            raise NotFoundError(f"Podcast with id {podcast_id} not found")
        return podcast

    async def update_podcast(
        self,
        *,
        host: User,
        podcast_id: int,
        title: str | None = None,
        category: str | None = None,
        rating: int | None = None,
    ) -> Podcast:
        podcast = await self._owned_podcast(host=host, podcast_id=podcast_id)
        if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
        title = _optional_text("Title", title)
        category = _optional_text("Category", category)

        if title is not None:
            podcast.title = title
        if category is not None:
            podcast.category = category
        if rating is not None:
            podcast.rating = rating
        await self._session.commit()
        log.info("podcast_updated", podcast_id=podcast.id, user_id=host.id)
        return podcast

    async def delete_podcast(self, *, host: User, podcast_id: int) -> None:
        podcast = await self._owned_podcast(host=host, podcast_id=podcast_id)
        await self._podcasts.delete(podcast)
        await self._session.commit()
        log.info("podcast_deleted", podcast_id=podcast_id, user_id=host.id)

    # -- episodes ----------------------------------------------------------

    async def list_episodes(self, podcast_id: int) -> list[Episode]:
        podcast = await self.get_podcast(podcast_id)
        return await self._episodes.list_for_podcast(podcast.id)

    async def create_episode(
        self,
        *,
        host: User,
        podcast_id: int,
        title: str,
        category: str,
    ) -> Episode:
        title = _required_text("Title", title)
        category = _required_text("Category", category)
        podcast = await self._owned_podcast(host=host, podcast_id=podcast_id)
        episode = await self._episodes.create(podcast_id=podcast.id, title=title, category=category)
        await self._session.commit()
        log.info("episode_created", podcast_id=podcast.id, episode_id=episode.id, user_id=host.id)
        return episode

    async def update_episode(
        self,
        *,
        host: User,
        podcast_id: int,
        episode_id: int,
        title: str | None = None,
        category: str | None = None,
    ) -> Episode:
        title = _optional_text("Title", title)
        category = _optional_text("Category", category)
        episode = await self._owned_episode(host=host, podcast_id=podcast_id, episode_id=episode_id)
        if title is not None:
            episode.title = title
        if category is not None:
            episode.category = category
        await self._session.commit()
        log.info("episode_updated", podcast_id=podcast_id, episode_id=episode.id, user_id=host.id)
        return episode

    async def delete_episode(self, *, host: User, podcast_id: int, episode_id: int) -> None:
        episode = await self._owned_episode(host=host, podcast_id=podcast_id, episode_id=episode_id)
        await self._episodes.delete(episode)
        await self._session.commit()
        log.info("episode_deleted", podcast_id=podcast_id, episode_id=episode_id, user_id=host.id)

    # -- ownership ---------------------------------------------------------

    async def _owned_podcast(self, *, host: User, podcast_id: int) -> Podcast:
        podcast = await self.get_podcast(podcast_id)
        if podcast.creator_id != host.id:
            log.info("ownership_denied", podcast_id=podcast_id, user_id=host.id)
            raise OwnershipError(f"You are not the host of podcast {podcast_id}")
        return podcast

    async def _owned_episode(self, *, host: User, podcast_id: int, episode_id: int) -> Episode:
        await self._owned_podcast(host=host, podcast_id=podcast_id)
        episode = await self._episodes.get_in_podcast(podcast_id=podcast_id, episode_id=episode_id)
        if episode is None:
            raise NotFoundError(
                f"Episode with id {episode_id} not found in podcast with id {podcast_id}"
            )
        return episode


def _required_text(field: str, value: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError(f"{field} must not be empty")
    return value


def _optional_text(field: str, value: str | None) -> str | None:
    return None if value is None else _required_text(field, value)
