"""
podcast_api.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert the session header into the authenticated `User` (or None).

Rejection of anonymous callers happens in the GraphQL permission classes, not here:
public operations (createAccount, login) share the same endpoint.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.api.deps import db_session, settings_dep
from podcast_api.auth.jwt import (
    JwtConfig,
    JwtValidationError,
    decode_and_validate,
    subject_user_id,
)
from podcast_api.db.models import User
from podcast_api.db.repositories.users import UserRepo
from podcast_api.observability.logging import get_logger
from podcast_api.settings import Settings

log = get_logger(__name__)


async def current_user(
    request: Request,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> User | None:
    token = request.headers.get(settings.jwt_header)
    if not token:
        return None

    try:
        payload = decode_and_validate(cfg=JwtConfig.from_settings(settings), token=token)
        user_id = subject_user_id(payload)
    except JwtValidationError as e:
        log.info("token_rejected", reason=str(e))
        return None

    # The token may outlive the account it was issued for.
    user = await UserRepo(session).get(user_id)
    if user is None:
        log.info("token_rejected", reason="unknown user", user_id=user_id)
    return user


# --- Module Notes -----------------------------------------------------------
# Used by `graphql.context.get_context`; the resolved user lives on the GraphQL context.
