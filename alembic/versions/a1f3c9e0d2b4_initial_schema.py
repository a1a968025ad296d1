"""initial schema: users, modules, terms, collections, term progress

Revision ID: a1f3c9e0d2b4
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1f3c9e0d2b4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TERM_STATUSES = ("not_started", "in_progress", "completed")


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def _term_status(create_type: bool):
    """Тип term_status: в PostgreSQL создается один раз, далее переиспользуется."""
    return sa.Enum(*TERM_STATUSES, name="term_status").with_variant(
        postgresql.ENUM(*TERM_STATUSES, name="term_status", create_type=create_type),
        "postgresql",
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("profile_picture", sa.String(length=1024), nullable=True),
        sa.Column("role", sa.Enum("admin", "user", name="role"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "modules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_private", sa.Boolean(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
        sa.UniqueConstraint("title"),
    )
    op.create_index("ix_modules_owner_id", "modules", ["owner_id"])

    op.create_table(
        "terms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("module_id", sa.Integer(), nullable=False),
        sa.Column("term", sa.String(length=512), nullable=False),
        sa.Column("definition", sa.Text(), nullable=False),
        sa.Column("status", _term_status(create_type=True), nullable=False),
        sa.Column("is_starred", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["module_id"], ["modules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("module_id", "term", name="uq_terms_module_term"),
    )
    op.create_index("ix_terms_module_id", "terms", ["module_id"])

    op.create_table(
        "user_modules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("module_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["module_id"], ["modules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "module_id", name="uq_user_modules_user_module"),
    )
    op.create_index("ix_user_modules_user_id", "user_modules", ["user_id"])
    op.create_index("ix_user_modules_module_id", "user_modules", ["module_id"])

    op.create_table(
        "user_term_progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("term_id", sa.Integer(), nullable=False),
        sa.Column("status", _term_status(create_type=False), nullable=False),
        sa.Column("is_starred", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["term_id"], ["terms.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "term_id", name="uq_user_term_progress_user_term"),
    )
    op.create_index("ix_user_term_progress_user_id", "user_term_progress", ["user_id"])
    op.create_index("ix_user_term_progress_term_id", "user_term_progress", ["term_id"])


def downgrade() -> None:
    op.drop_table("user_term_progress")
    op.drop_table("user_modules")
    op.drop_table("terms")
    op.drop_table("modules")
    op.drop_table("users")
    # Типы ENUM в PostgreSQL не удаляются вместе с таблицами
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        sa.Enum(name="term_status").drop(bind, checkfirst=True)
        sa.Enum(name="role").drop(bind, checkfirst=True)
