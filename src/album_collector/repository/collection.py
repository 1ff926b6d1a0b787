"""Repository helpers for the GraphQL collection service.

Besides plain lookups this module owns the relation resolution done when an
album is added to a collection: the album's artist and master are reused when
they already exist and created otherwise. Masters are identified by the
(artist, title) pair, never by title alone.

The existence checks are optimistic. Two concurrent requests introducing the
same new artist or master can both observe "absent"; the unique constraints on
``artists.name`` and ``masters(artist_id, title)`` make the slower one fail with
an integrity error instead of writing a duplicate.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Albums, Artists, Base, Masters, Users
from ..errors import DuplicateError, NotFoundError
from ..logging import get_logger

logger = get_logger(__name__)

RowT = TypeVar("RowT", bound=Base)


@dataclass
class AlbumLinks:
    """Artist and master an album will reference, and which of them are new."""

    artist: Artists
    master: Masters
    artist_created: bool = False
    master_created: bool = False


async def _add(session: AsyncSession, row: RowT) -> RowT:
    session.add(row)
    await session.flush()
    return row


async def load_by_ids(
    session: AsyncSession, model: type[RowT], keys: Sequence[UUID]
) -> list[RowT | None]:
    """Fetch rows of ``model`` for ``keys``, preserving key order (None when absent)."""
    stmt = select(model).where(model.id.in_(keys))  # type: ignore[attr-defined]
    result = await session.execute(stmt)
    rows = {row.id: row for row in result.scalars().all()}
    return [rows.get(key) for key in keys]


# Users
async def get_user(session: AsyncSession, user_id: UUID) -> Users | None:
    return await session.get(Users, user_id)


async def list_users(session: AsyncSession) -> list[Users]:
    result = await session.execute(select(Users).order_by(Users.created_at))
    return list(result.scalars().all())


async def create_user(session: AsyncSession, username: str) -> Users:
    existing = await session.execute(select(Users.id).where(Users.username == username))
    if existing.scalar_one_or_none() is not None:
        raise DuplicateError("username", username)
    return await _add(session, Users(username=username))


# Artists
async def get_artist(session: AsyncSession, artist_id: UUID) -> Artists | None:
    return await session.get(Artists, artist_id)


async def get_artist_by_name(session: AsyncSession, name: str) -> Artists | None:
    result = await session.execute(select(Artists).where(Artists.name == name))
    return result.scalar_one_or_none()


async def list_artists(session: AsyncSession) -> list[Artists]:
    result = await session.execute(select(Artists).order_by(Artists.name))
    return list(result.scalars().all())


async def create_artist(session: AsyncSession, name: str) -> Artists:
    if await get_artist_by_name(session, name) is not None:
        raise DuplicateError("name", name)
    return await _add(session, Artists(name=name))


# Masters
async def get_master(session: AsyncSession, master_id: UUID) -> Masters | None:
    return await session.get(Masters, master_id)


async def find_master(session: AsyncSession, *, artist_id: UUID, title: str) -> Masters | None:
    stmt = select(Masters).where(Masters.artist_id == artist_id, Masters.title == title)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def list_masters(session: AsyncSession, artist_id: UUID | None = None) -> list[Masters]:
    stmt = select(Masters).order_by(Masters.title)
    if artist_id is not None:
        stmt = stmt.where(Masters.artist_id == artist_id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


# Albums
async def get_album(session: AsyncSession, album_id: UUID) -> Albums | None:
    return await session.get(Albums, album_id)


async def list_albums(
    session: AsyncSession,
    *,
    owner_id: UUID | None = None,
    artist_id: UUID | None = None,
    master_id: UUID | None = None,
) -> list[Albums]:
    stmt = select(Albums).order_by(Albums.created_at)
    if owner_id is not None:
        stmt = stmt.where(Albums.owner_id == owner_id)
    if artist_id is not None:
        stmt = stmt.where(Albums.artist_id == artist_id)
    if master_id is not None:
        stmt = stmt.where(Albums.master_id == master_id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def resolve_album_links(session: AsyncSession, *, artist_name: str, title: str) -> AlbumLinks:
    """Find or create the artist and master for an album titled ``title``.

    - unknown artist: create the artist and a master for it
    - known artist, no master with this title for that artist: create the master
    - known artist and master: reuse both
    """
    artist = await get_artist_by_name(session, artist_name)
    if artist is None:
        artist = await _add(session, Artists(name=artist_name))
        master = await _add(session, Masters(artist_id=artist.id, title=title))
        return AlbumLinks(artist=artist, master=master, artist_created=True, master_created=True)

    master = await find_master(session, artist_id=artist.id, title=title)
    if master is None:
        master = await _add(session, Masters(artist_id=artist.id, title=title))
        return AlbumLinks(artist=artist, master=master, master_created=True)

    return AlbumLinks(artist=artist, master=master)


async def create_album(
    session: AsyncSession,
    *,
    title: str,
    artist_name: str,
    owner_id: UUID,
    art: str | None = None,
    year: int | None = None,
    rating: int | None = None,
) -> tuple[Albums, AlbumLinks]:
    """Create an album owned by ``owner_id``, linking or creating artist and master.

    Raises:
        NotFoundError: if ``owner_id`` does not reference an existing user
    """
    if await get_user(session, owner_id) is None:
        raise NotFoundError("User", owner_id)

    links = await resolve_album_links(session, artist_name=artist_name, title=title)
    album = await _add(
        session,
        Albums(
            title=title,
            artist_id=links.artist.id,
            master_id=links.master.id,
            owner_id=owner_id,
            art=art,
            year=year,
            rating=rating,
        ),
    )
    logger.info(
        "Album created",
        album_id=str(album.id),
        artist_id=str(links.artist.id),
        master_id=str(links.master.id),
        artist_created=links.artist_created,
        master_created=links.master_created,
    )
    return album, links
