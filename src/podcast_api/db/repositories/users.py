"""
podcast_api.db.repositories.users

Repository for `User` entities.

Responsibilities:
- Create accounts and load them by id or email.
- Answer email-uniqueness questions for the account service.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.db.models import User, UserRole


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, email: str, password_hash: str, role: UserRole) -> User:
        user = User(email=email, password=password_hash, role=role)
        self._session.add(user)
        await self._session.flush()
        return user

    async def get(self, user_id: int) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def email_taken(self, email: str, *, exclude_user_id: int | None = None) -> bool:
        stmt = select(User.id).where(User.email == email)
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        return (await self._session.execute(stmt.limit(1))).first() is not None
