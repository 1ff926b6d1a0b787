from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...dbmodels import Artists
from ...errors import NotFoundError, ValidationError
from ...logging import get_logger
from ...repository import collection
from ...validation import ArtistCreate, validate_payload
from . import get_database, get_loaders

if TYPE_CHECKING:
    from ..types.artist import Artist

logger = get_logger(__name__)


def artist_to_type(artist: Artists) -> Artist:
    from ..types.artist import Artist as ArtistType

    return ArtistType(id=artist.id, name=artist.name, created_at=artist.created_at)


async def resolve_artist(
    info: strawberry.Info, id: UUID | None = None, name: str | None = None
) -> Artist | None:
    """Resolve an artist by ID or by its (unique) name."""
    if id is None and name is None:
        raise ValidationError({"artist": "Provide an artist id or name."})

    async with get_database(info).session() as session:
        if id is not None:
            artist = await collection.get_artist(session, id)
        else:
            artist = await collection.get_artist_by_name(session, name or "")

        if artist is None:
            logger.info("Artist not found", artist_id=str(id) if id else None, name=name)
            return None
        return artist_to_type(artist)


async def resolve_artist_by_id_loader(info: strawberry.Info, id: UUID) -> Artist:
    artist = await get_loaders(info).artist_loader.load(id)
    if artist is None:
        raise NotFoundError("Artist", id)
    return artist_to_type(artist)


async def resolve_artists(info: strawberry.Info) -> list[Artist]:
    async with get_database(info).session() as session:
        artists = await collection.list_artists(session)
        return [artist_to_type(artist) for artist in artists]


async def create_artist(info: strawberry.Info, name: str) -> Artist:
    data = validate_payload(ArtistCreate, {"name": name})
    async with get_database(info).session() as session:
        artist = await collection.create_artist(session, data.name)
        logger.info("Artist created", artist_id=str(artist.id), name=artist.name)
        return artist_to_type(artist)
