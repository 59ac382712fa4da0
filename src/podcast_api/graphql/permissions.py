"""
podcast_api.graphql.permissions

Resolver guards.

A failed guard aborts the field with a GraphQL error; since guarded fields are
non-null, the error bubbles up and the response carries `data: null`.
"""

from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from podcast_api.db.models import UserRole

FORBIDDEN = "Forbidden resource"


class IsAuthenticated(BasePermission):
    message = FORBIDDEN

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        return info.context.user is not None


class IsHost(BasePermission):
    message = FORBIDDEN

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        user = info.context.user
        return user is not None and user.role == UserRole.Host
