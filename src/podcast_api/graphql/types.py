"""
podcast_api.graphql.types

GraphQL object types, inputs, and result envelopes.

Every mutation/query result is `{ ok, error, ...payload }`; domain failures set
`ok: false` and a message instead of raising.
"""

from datetime import datetime
from typing import TypeVar

import strawberry

from podcast_api.db.models import Episode, Podcast, User, UserRole
from podcast_api.services.errors import DomainError

strawberry.enum(UserRole, name="UserRole", description="What an account may do.")


# -- entities ---------------------------------------------------------------


@strawberry.type(name="User")
class UserType:
    id: int
    created_at: datetime
    updated_at: datetime
    email: str
    role: UserRole

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=user.id,
            created_at=user.created_at,
            updated_at=user.updated_at,
            email=user.email,
            role=user.role,
        )


@strawberry.type(name="Episode")
class EpisodeType:
    id: int
    created_at: datetime
    updated_at: datetime
    title: str
    category: str
    podcast_id: int

    @classmethod
    def from_model(cls, episode: Episode) -> "EpisodeType":
        return cls(
            id=episode.id,
            created_at=episode.created_at,
            updated_at=episode.updated_at,
            title=episode.title,
            category=episode.category,
            podcast_id=episode.podcast_id,
        )


@strawberry.type(name="Podcast")
class PodcastType:
    id: int
    created_at: datetime
    updated_at: datetime
    title: str
    category: str
    rating: int
    creator_id: int
    episodes: list[EpisodeType]

    @classmethod
    def from_model(cls, podcast: Podcast) -> "PodcastType":
        # `episodes` must already be loaded (see PodcastRepo).
        return cls(
            id=podcast.id,
            created_at=podcast.created_at,
            updated_at=podcast.updated_at,
            title=podcast.title,
            category=podcast.category,
            rating=podcast.rating,
            creator_id=podcast.creator_id,
            episodes=[EpisodeType.from_model(e) for e in podcast.episodes],
        )


# -- inputs -----------------------------------------------------------------


@strawberry.input
class CreateAccountInput:
    email: str
    password: str
    role: UserRole


@strawberry.input
class LoginInput:
    email: str
    password: str


@strawberry.input
class EditProfileInput:
    email: str | None = None
    password: str | None = None


@strawberry.input
class CreatePodcastInput:
    title: str
    category: str


@strawberry.input
class PodcastSearchInput:
    id: int


@strawberry.input
class UpdatePodcastPayload:
    title: str | None = None
    category: str | None = None
    rating: int | None = None


@strawberry.input
class UpdatePodcastInput:
    id: int
    payload: UpdatePodcastPayload


@strawberry.input
class CreateEpisodeInput:
    title: str
    category: str
    podcast_id: int


@strawberry.input
class EpisodesSearchInput:
    podcast_id: int
    episode_id: int


@strawberry.input
class UpdateEpisodeInput:
    podcast_id: int
    episode_id: int
    title: str | None = None
    category: str | None = None


# -- outputs ----------------------------------------------------------------


@strawberry.type
class CoreOutput:
    ok: bool
    error: str | None = None


@strawberry.type
class CreateAccountOutput(CoreOutput):
    pass


@strawberry.type
class LoginOutput(CoreOutput):
    token: str | None = None


@strawberry.type
class UserProfileOutput(CoreOutput):
    user: UserType | None = None


@strawberry.type
class EditProfileOutput(CoreOutput):
    pass


@strawberry.type
class CreatePodcastOutput(CoreOutput):
    id: int | None = None


@strawberry.type
class CreateEpisodeOutput(CoreOutput):
    id: int | None = None


@strawberry.type
class GetAllPodcastsOutput(CoreOutput):
    podcasts: list[PodcastType] | None = None


@strawberry.type
class PodcastOutput(CoreOutput):
    podcast: PodcastType | None = None


@strawberry.type
class EpisodesOutput(CoreOutput):
    episodes: list[EpisodeType] | None = None


OutputT = TypeVar("OutputT", bound=CoreOutput)


def failed(output_cls: type[OutputT], error: DomainError) -> OutputT:
    return output_cls(ok=False, error=error.message)
