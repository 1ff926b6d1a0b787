"""
Initial schema: REST album records and the collection tables.

Revision ID: 20250101_000000_initial_schema
Revises:
Create Date: 2025-01-01 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20250101_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamp(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    # album_records (REST service)
    op.create_table(
        "album_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("artist", sa.String(length=255), nullable=True),
        _timestamp(),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="album_records_pkey"),
    )

    # users
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        _timestamp(),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("username", name="users_username_key"),
    )

    # artists
    op.create_table(
        "artists",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        _timestamp(),
        sa.PrimaryKeyConstraint("id", name="artists_pkey"),
        sa.UniqueConstraint("name", name="artists_name_key"),
    )

    # masters
    op.create_table(
        "masters",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("artist_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], ondelete="CASCADE", name="masters_artist_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="masters_pkey"),
        sa.UniqueConstraint("artist_id", "title", name="masters_artist_id_title_key"),
    )
    op.create_index("idx_masters_artist", "masters", ["artist_id"])

    # albums
    op.create_table(
        "albums",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("artist_id", sa.Uuid(), nullable=False),
        sa.Column("master_id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("art", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        _timestamp(),
        sa.ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], ondelete="CASCADE", name="albums_artist_id_fkey"
        ),
        sa.ForeignKeyConstraint(
            ["master_id"], ["masters.id"], ondelete="CASCADE", name="albums_master_id_fkey"
        ),
        sa.ForeignKeyConstraint(
            ["owner_id"], ["users.id"], ondelete="CASCADE", name="albums_owner_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="albums_pkey"),
    )
    op.create_index("idx_albums_artist", "albums", ["artist_id"])
    op.create_index("idx_albums_master", "albums", ["master_id"])
    op.create_index("idx_albums_owner", "albums", ["owner_id"])


def downgrade() -> None:
    op.drop_index("idx_albums_owner", table_name="albums")
    op.drop_index("idx_albums_master", table_name="albums")
    op.drop_index("idx_albums_artist", table_name="albums")
    op.drop_table("albums")
    op.drop_index("idx_masters_artist", table_name="masters")
    op.drop_table("masters")
    op.drop_table("artists")
    op.drop_table("users")
    op.drop_table("album_records")
