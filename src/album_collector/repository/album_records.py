"""Repository helpers for the REST album service."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import AlbumRecords
from ..errors import NotFoundError


async def list_records(session: AsyncSession) -> list[AlbumRecords]:
    stmt = select(AlbumRecords).order_by(AlbumRecords.created_at)
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def get_record(session: AsyncSession, album_id: UUID) -> AlbumRecords | None:
    return await session.get(AlbumRecords, album_id)


async def require_record(session: AsyncSession, album_id: UUID) -> AlbumRecords:
    record = await get_record(session, album_id)
    if record is None:
        raise NotFoundError("Album", album_id)
    return record


async def create_record(
    session: AsyncSession, *, title: str, artist: str | None = None
) -> AlbumRecords:
    record = AlbumRecords(title=title, artist=artist)
    session.add(record)
    await session.flush()
    return record


async def update_record(session: AsyncSession, album_id: UUID, changes: dict) -> AlbumRecords:
    """Apply ``changes`` (a partial field mapping) to an existing record."""
    record = await require_record(session, album_id)
    for key, value in changes.items():
        setattr(record, key, value)
    record.updated_at = datetime.now(UTC)
    await session.flush()
    return record


async def delete_record(session: AsyncSession, album_id: UUID) -> None:
    record = await require_record(session, album_id)
    await session.delete(record)
    await session.flush()
