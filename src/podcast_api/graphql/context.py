"""
podcast_api.graphql.context

Per-request GraphQL context.

Responsibilities:
- Carry the request-scoped DB session, settings, and authenticated user to resolvers.
- Bind the user id into the structlog context for every log line of the request.
"""

import structlog
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from podcast_api.api.deps import db_session, settings_dep
from podcast_api.auth.deps import current_user
from podcast_api.db.models import User
from podcast_api.settings import Settings


class GraphQLContext(BaseContext):
    def __init__(self, *, session: AsyncSession, settings: Settings, user: User | None) -> None:
        super().__init__()
        self.session = session
        self.settings = settings
        self.user = user


async def get_context(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
    user: User | None = Depends(current_user),
) -> GraphQLContext:
    if user is not None:
        structlog.contextvars.bind_contextvars(user_id=user.id)
    return GraphQLContext(session=session, settings=settings, user=user)
