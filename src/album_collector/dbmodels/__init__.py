"""
Database models for Album Collector (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.

`AlbumRecords` backs the REST album service. `Users`, `Artists`, `Masters` and
`Albums` back the GraphQL collection service.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    DateTime,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utcnow() -> datetime:
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware timestamp.

    SQLite keeps no offset, so naive values read back are UTC (the only zone
    written) and get it attached.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class AlbumRecords(Base):
    __tablename__ = "album_records"
    __table_args__ = (PrimaryKeyConstraint("id", name="album_records_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    artist: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, server_default=text("CURRENT_TIMESTAMP")
    )


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("username", name="users_username_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, server_default=text("CURRENT_TIMESTAMP")
    )

    albums: Mapped[list["Albums"]] = relationship("Albums", uselist=True, back_populates="owner")


class Artists(Base):
    __tablename__ = "artists"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="artists_pkey"),
        UniqueConstraint("name", name="artists_name_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, server_default=text("CURRENT_TIMESTAMP")
    )

    masters: Mapped[list["Masters"]] = relationship(
        "Masters", uselist=True, back_populates="artist"
    )
    albums: Mapped[list["Albums"]] = relationship("Albums", uselist=True, back_populates="artist")


class Masters(Base):
    __tablename__ = "masters"
    __table_args__ = (
        ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], ondelete="CASCADE", name="masters_artist_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="masters_pkey"),
        UniqueConstraint("artist_id", "title", name="masters_artist_id_title_key"),
        Index("idx_masters_artist", "artist_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    artist_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, server_default=text("CURRENT_TIMESTAMP")
    )

    artist: Mapped["Artists"] = relationship("Artists", back_populates="masters")
    albums: Mapped[list["Albums"]] = relationship("Albums", uselist=True, back_populates="master")


class Albums(Base):
    __tablename__ = "albums"
    __table_args__ = (
        ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], ondelete="CASCADE", name="albums_artist_id_fkey"
        ),
        ForeignKeyConstraint(
            ["master_id"], ["masters.id"], ondelete="CASCADE", name="albums_master_id_fkey"
        ),
        ForeignKeyConstraint(
            ["owner_id"], ["users.id"], ondelete="CASCADE", name="albums_owner_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="albums_pkey"),
        Index("idx_albums_artist", "artist_id"),
        Index("idx_albums_master", "master_id"),
        Index("idx_albums_owner", "owner_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    artist_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    master_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    owner_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    art: Mapped[str | None] = mapped_column(Text)
    year: Mapped[int | None] = mapped_column(Integer)
    rating: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, server_default=text("CURRENT_TIMESTAMP")
    )

    artist: Mapped["Artists"] = relationship("Artists", back_populates="albums")
    master: Mapped["Masters"] = relationship("Masters", back_populates="albums")
    owner: Mapped["Users"] = relationship("Users", back_populates="albums")


target_metadata = Base.metadata

__all__ = [
    "AlbumRecords",
    "Albums",
    "Artists",
    "Base",
    "Masters",
    "Users",
    "target_metadata",
]
