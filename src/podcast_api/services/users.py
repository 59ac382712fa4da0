"""
podcast_api.services.users

Account lifecycle service.

Responsibilities:
- Create accounts with hashed passwords and unique emails.
- Verify credentials and issue session tokens.
- Load and edit user profiles.
"""

from __future__ import annotations

from datetime import timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.auth.jwt import JwtConfig, issue_token
from podcast_api.auth.passwords import hash_password, verify_password
from podcast_api.db.models import User, UserRole
from podcast_api.db.repositories.users import UserRepo
from podcast_api.observability.logging import get_logger
from podcast_api.services.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from podcast_api.settings import Settings

log = get_logger(__name__)

EMAIL_TAKEN = "There is a user with that email already"


class UserService:
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings
        self._users = UserRepo(session)

    async def create_account(self, *, email: str, password: str, role: UserRole) -> User:
        email = _normalize_email(email)
        if not password:
            raise ValidationError("Password must not be empty")
        if await self._users.email_taken(email):
            raise ConflictError(EMAIL_TAKEN)

        try:
            user = await self._users.create(
                email=email, password_hash=hash_password(password), role=role
            )
            await self._session.commit()
        except IntegrityError as e:
            # A concurrent request won the race for the unique email.
            await self._session.rollback()
            raise ConflictError(EMAIL_TAKEN) from e

        log.info("account_created", user_id=user.id, role=user.role.value)
        return user

    async def login(self, *, email: str, password: str) -> str:
        user = await self._users.get_by_email(_normalize_email(email))
        if user is None:
            log.info("login_failed", reason="unknown email")
            raise InvalidCredentialsError("User not found")
        if not verify_password(password, user.password):
            log.info("login_failed", reason="wrong password", user_id=user.id)
            raise InvalidCredentialsError("Wrong password")

        log.info("login_succeeded", user_id=user.id)
        return issue_token(
            cfg=JwtConfig.from_settings(self._settings),
            subject=str(user.id),
            roles=[user.role.value],
            ttl=timedelta(minutes=self._settings.jwt_ttl_minutes),
        )

    async def get_profile(self, user_id: int) -> User:
        user = await self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found")
        return user

    async def edit_profile(
        self,
        *,
        user: User,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        # Validate everything before touching the entity so a failure leaves it unchanged.
        if password is not None and not password:
            raise ValidationError("Password must not be empty")
        if email is not None:
            email = _normalize_email(email)
            if await self._users.email_taken(email, exclude_user_id=user.id):
                raise ConflictError(EMAIL_TAKEN)

        if email is not None:
            user.email = email
        if password is not None:
            user.password = hash_password(password)

        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise ConflictError(EMAIL_TAKEN) from e

        log.info(
            "profile_edited",
            user_id=user.id,
            email_changed=email is not None,
            password_changed=password is not None,
        )
        return user


def _normalize_email(email: str) -> str:
    email = email.strip().lower()
    if "@" not in email:
        raise ValidationError("Invalid email address")
    return email


# --- Module Notes -----------------------------------------------------------
# Password hashes never leave this service; GraphQL types do not expose the column.
