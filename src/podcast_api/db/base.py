"""
podcast_api.db.base

SQLAlchemy declarative base and shared columns.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    # Naive UTC timestamps; SQLite has no timezone-aware column type.
    return datetime.utcnow()


class Base(DeclarativeBase):
    pass


class TimestampedMixin:
    """Columns every entity carries: integer id plus created/updated timestamps."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow, onupdate=utcnow)


# --- Module Notes -----------------------------------------------------------
# All ORM models should inherit from `Base` so Alembic and metadata discovery work.
