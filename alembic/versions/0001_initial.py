"""users, podcasts, episodes

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum("Host", "Listener", name="userrole")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", user_role, nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "podcasts",
        *_timestamps(),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("category", sa.String(128), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column(
            "creator_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.CheckConstraint("rating >= 0 AND rating <= 5", name="ck_rating"),
    )
    op.create_index("ix_podcasts_creator_id", "podcasts", ["creator_id"])

    op.create_table(
        "episodes",
        *_timestamps(),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("category", sa.String(128), nullable=False),
        sa.Column(
            "podcast_id",
            sa.Integer(),
            sa.ForeignKey("podcasts.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_episodes_podcast_id", "episodes", ["podcast_id"])


def downgrade() -> None:
    op.drop_index("ix_episodes_podcast_id", table_name="episodes")
    op.drop_table("episodes")
    op.drop_index("ix_podcasts_creator_id", table_name="podcasts")
    op.drop_table("podcasts")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    user_role.drop(op.get_bind(), checkfirst=True)
