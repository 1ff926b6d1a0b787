from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...dbmodels import Albums
from ...logging import get_logger
from ...repository import collection
from ...validation import CollectionAlbumCreate, validate_payload
from . import get_database

if TYPE_CHECKING:
    from ..mutations.root import CreateAlbumInput
    from ..types.album import Album
    from ..types.artist import Artist
    from ..types.master import Master
    from ..types.user import User

logger = get_logger(__name__)


def album_to_type(album: Albums) -> Album:
    from ..types.album import Album as AlbumType

    return AlbumType(
        id=album.id,
        title=album.title,
        artist_id=album.artist_id,
        master_id=album.master_id,
        owner_id=album.owner_id,
        art=album.art,
        year=album.year,
        rating=album.rating,
        created_at=album.created_at,
    )


# Query resolvers
async def resolve_album_by_id(info: strawberry.Info, id: UUID) -> Album | None:
    async with get_database(info).session() as session:
        album = await collection.get_album(session, id)
        if album is None:
            logger.info("Album not found", album_id=str(id))
            return None
        return album_to_type(album)


async def resolve_albums(info: strawberry.Info) -> list[Album]:
    async with get_database(info).session() as session:
        albums = await collection.list_albums(session)
        return [album_to_type(album) for album in albums]


async def resolve_user_albums(user: User, info: strawberry.Info) -> list[Album]:
    async with get_database(info).session() as session:
        albums = await collection.list_albums(session, owner_id=user.id)
        return [album_to_type(album) for album in albums]


async def resolve_artist_albums(artist: Artist, info: strawberry.Info) -> list[Album]:
    async with get_database(info).session() as session:
        albums = await collection.list_albums(session, artist_id=artist.id)
        return [album_to_type(album) for album in albums]


async def resolve_master_albums(master: Master, info: strawberry.Info) -> list[Album]:
    async with get_database(info).session() as session:
        albums = await collection.list_albums(session, master_id=master.id)
        return [album_to_type(album) for album in albums]


# Mutation resolvers
async def create_album(info: strawberry.Info, input: CreateAlbumInput) -> Album:
    """
    Add an album to the owner's collection.

    The artist is matched by exact name and the master by exact title within
    that artist; whichever is missing is created in the same transaction as
    the album.
    """
    data = validate_payload(
        CollectionAlbumCreate,
        {
            "title": input.title,
            "artist": input.artist,
            "owner": input.owner,
            "art": input.art,
            "year": input.year,
            "rating": input.rating,
        },
    )

    async with get_database(info).session() as session:
        album, _ = await collection.create_album(
            session,
            title=data.title,
            artist_name=data.artist,
            owner_id=data.owner,
            art=data.art,
            year=data.year,
            rating=data.rating,
        )
        return album_to_type(album)
