from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...dbmodels import Masters
from ...errors import NotFoundError, ValidationError
from ...logging import get_logger
from ...repository import collection
from . import get_database, get_loaders

if TYPE_CHECKING:
    from ..types.artist import Artist
    from ..types.master import Master

logger = get_logger(__name__)


def master_to_type(master: Masters) -> Master:
    from ..types.master import Master as MasterType

    return MasterType(
        id=master.id,
        title=master.title,
        artist_id=master.artist_id,
        created_at=master.created_at,
    )


async def resolve_master(
    info: strawberry.Info,
    id: UUID | None = None,
    artist: str | None = None,
    title: str | None = None,
) -> Master | None:
    """
    Resolve a master by ID, or by artist name and title.

    Titles are only unique per artist, so a title lookup needs the artist too.
    """
    if id is None and (artist is None or title is None):
        raise ValidationError({"master": "Provide a master id, or both artist and title."})

    async with get_database(info).session() as session:
        if id is not None:
            master = await collection.get_master(session, id)
        else:
            found = await collection.get_artist_by_name(session, artist or "")
            master = (
                await collection.find_master(session, artist_id=found.id, title=title or "")
                if found is not None
                else None
            )

        if master is None:
            logger.info(
                "Master not found",
                master_id=str(id) if id else None,
                artist=artist,
                title=title,
            )
            return None
        return master_to_type(master)


async def resolve_master_by_id_loader(info: strawberry.Info, id: UUID) -> Master:
    master = await get_loaders(info).master_loader.load(id)
    if master is None:
        raise NotFoundError("Master", id)
    return master_to_type(master)


async def resolve_masters(info: strawberry.Info) -> list[Master]:
    async with get_database(info).session() as session:
        masters = await collection.list_masters(session)
        return [master_to_type(master) for master in masters]


async def resolve_artist_masters(artist: Artist, info: strawberry.Info) -> list[Master]:
    async with get_database(info).session() as session:
        masters = await collection.list_masters(session, artist_id=artist.id)
        return [master_to_type(master) for master in masters]
