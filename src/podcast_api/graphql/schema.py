"""
podcast_api.graphql.schema

Root Query/Mutation types and the FastAPI router serving them.
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from podcast_api.graphql.context import get_context
from podcast_api.graphql.podcasts import PodcastMutation, PodcastQuery
from podcast_api.graphql.users import UserMutation, UserQuery
from podcast_api.settings import Settings


@strawberry.type
class Query(UserQuery, PodcastQuery):
    pass


@strawberry.type
class Mutation(UserMutation, PodcastMutation):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    ide = "graphiql" if settings.graphiql and settings.env != "prod" else None
    return GraphQLRouter(schema, context_getter=get_context, graphql_ide=ide)
