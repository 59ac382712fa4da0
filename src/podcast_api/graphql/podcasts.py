"""
podcast_api.graphql.podcasts

Podcast and episode resolvers.

Reads are open to any authenticated user; writes require the Host role, and the
service layer additionally checks that the host owns the podcast.
"""

import strawberry
from strawberry.types import Info

from podcast_api.graphql.context import GraphQLContext
from podcast_api.graphql.permissions import IsAuthenticated, IsHost
from podcast_api.graphql.types import (
    CoreOutput,
    CreateEpisodeInput,
    CreateEpisodeOutput,
    CreatePodcastInput,
    CreatePodcastOutput,
    EpisodesOutput,
    EpisodesSearchInput,
    EpisodeType,
    GetAllPodcastsOutput,
    PodcastOutput,
    PodcastSearchInput,
    PodcastType,
    UpdateEpisodeInput,
    UpdatePodcastInput,
    failed,
)
from podcast_api.services.errors import DomainError
from podcast_api.services.podcasts import PodcastService


def _service(info: Info[GraphQLContext, None]) -> PodcastService:
    return PodcastService(session=info.context.session)


@strawberry.type
class PodcastQuery:
    @strawberry.field(permission_classes=[IsAuthenticated])
    async def get_all_podcasts(self, info: Info[GraphQLContext, None]) -> GetAllPodcastsOutput:
        podcasts = await _service(info).list_podcasts()
        return GetAllPodcastsOutput(
            ok=True, podcasts=[PodcastType.from_model(p) for p in podcasts]
        )

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def get_podcast(
        self, info: Info[GraphQLContext, None], input: PodcastSearchInput
    ) -> PodcastOutput:
        try:
            podcast = await _service(info).get_podcast(input.id)
        except DomainError as e:
            return failed(PodcastOutput, e)
        return PodcastOutput(ok=True, podcast=PodcastType.from_model(podcast))

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def get_episodes(
        self, info: Info[GraphQLContext, None], input: PodcastSearchInput
    ) -> EpisodesOutput:
        try:
            episodes = await _service(info).list_episodes(input.id)
        except DomainError as e:
            return failed(EpisodesOutput, e)
        return EpisodesOutput(ok=True, episodes=[EpisodeType.from_model(e) for e in episodes])


@strawberry.type
class PodcastMutation:
    @strawberry.mutation(permission_classes=[IsHost])
    async def create_podcast(
        self, info: Info[GraphQLContext, None], input: CreatePodcastInput
    ) -> CreatePodcastOutput:
        try:
            podcast = await _service(info).create_podcast(
                host=info.context.user, title=input.title, category=input.category
            )
        except DomainError as e:
            return failed(CreatePodcastOutput, e)
        return CreatePodcastOutput(ok=True, id=podcast.id)

    @strawberry.mutation(permission_classes=[IsHost])
    async def update_podcast(
        self, info: Info[GraphQLContext, None], input: UpdatePodcastInput
    ) -> CoreOutput:
        try:
            await _service(info).update_podcast(
                host=info.context.user,
                podcast_id=input.id,
                title=input.payload.title,
                category=input.payload.category,
                rating=input.payload.rating,
            )
        except DomainError as e:
            return failed(CoreOutput, e)
        return CoreOutput(ok=True)

    @strawberry.mutation(permission_classes=[IsHost])
    async def delete_podcast(
        self, info: Info[GraphQLContext, None], input: PodcastSearchInput
    ) -> CoreOutput:
        try:
            await _service(info).delete_podcast(host=info.context.user, podcast_id=input.id)
        except DomainError as e:
            return failed(CoreOutput, e)
        return CoreOutput(ok=True)

    @strawberry.mutation(permission_classes=[IsHost])
    async def create_episode(
        self, info: Info[GraphQLContext, None], input: CreateEpisodeInput
    ) -> CreateEpisodeOutput:
        try:
            episode = await _service(info).create_episode(
                host=info.context.user,
                podcast_id=input.podcast_id,
                title=input.title,
                category=input.category,
            )
        except DomainError as e:
            return failed(CreateEpisodeOutput, e)
        return CreateEpisodeOutput(ok=True, id=episode.id)

    @strawberry.mutation(permission_classes=[IsHost])
    async def update_episode(
        self, info: Info[GraphQLContext, None], input: UpdateEpisodeInput
    ) -> CoreOutput:
        try:
            await _service(info).update_episode(
                host=info.context.user,
                podcast_id=input.podcast_id,
                episode_id=input.episode_id,
                title=input.title,
                category=input.category,
            )
        except DomainError as e:
            return failed(CoreOutput, e)
        return CoreOutput(ok=True)

    @strawberry.mutation(permission_classes=[IsHost])
    async def delete_episode(
        self, info: Info[GraphQLContext, None], input: EpisodesSearchInput
    ) -> CoreOutput:
        try:
            await _service(info).delete_episode(
                host=info.context.user,
                podcast_id=input.podcast_id,
                episode_id=input.episode_id,
            )
        except DomainError as e:
            return failed(CoreOutput, e)
        return CoreOutput(ok=True)
