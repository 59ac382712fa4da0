"""
podcast_api.db.models

Persistence schema for the podcast platform.

Responsibilities:
- Define ORM models:
  - User: account with a unique email, bcrypt password hash and a role
  - Podcast: show owned by a Host user
  - Episode: entry that always belongs to one podcast
"""

from __future__ import annotations

import enum

from sqlalchemy import CheckConstraint, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from podcast_api.db.base import Base, TimestampedMixin

MIN_RATING = 0
MAX_RATING = 5


class UserRole(enum.StrEnum):
    # Member names double as GraphQL enum values (`role: Host`).
    Host = "Host"
    Listener = "Listener"


class User(TimestampedMixin, Base):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(Enum(UserRole), nullable=False)

    podcasts: Mapped[list[Podcast]] = relationship(
        back_populates="creator", cascade="all, delete-orphan"
    )


class Podcast(TimestampedMixin, Base):
    __tablename__ = "podcasts"

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    category: Mapped[str] = mapped_column(String(128), nullable=False)
    rating: Mapped[int] = mapped_column(nullable=False, default=MIN_RATING)

    creator_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    creator: Mapped[User] = relationship(back_populates="podcasts")
    episodes: Mapped[list[Episode]] = relationship(
        back_populates="podcast",
        cascade="all, delete-orphan",
        order_by="Episode.id",
    )

    __table_args__ = (
        CheckConstraint(f"rating >= {MIN_RATING} AND rating <= {MAX_RATING}", name="ck_rating"),
    )


class Episode(TimestampedMixin, Base):
    __tablename__ = "episodes"

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    category: Mapped[str] = mapped_column(String(128), nullable=False)

    podcast_id: Mapped[int] = mapped_column(
        ForeignKey("podcasts.id", ondelete="CASCADE"), nullable=False, index=True
    )

    podcast: Mapped[Podcast] = relationship(back_populates="episodes")


# --- Module Notes -----------------------------------------------------------
# Relationships are never lazy-loaded under the async session; repositories request
# what they need with `selectinload`.
