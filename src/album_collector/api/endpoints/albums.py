"""Album record endpoints of the REST service."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from ...database.connection import get_db_session
from ...logging import get_logger
from ...repository import album_records
from ...validation import AlbumRecordCreate, AlbumRecordUpdate, validate_payload

logger = get_logger(__name__)


router = APIRouter()


class AlbumRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    artist: str | None
    created_at: datetime
    updated_at: datetime


class AlbumDeletedResponse(BaseModel):
    message: str


@router.get("/", response_model=list[AlbumRecordResponse])
async def list_albums(
    db: AsyncSession = Depends(get_db_session),
) -> list[AlbumRecordResponse]:
    """Return every album."""
    records = await album_records.list_records(db)
    return [AlbumRecordResponse.model_validate(record) for record in records]


@router.post(
    "/create", response_model=AlbumRecordResponse, status_code=status.HTTP_201_CREATED
)
async def create_album(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db_session),
) -> AlbumRecordResponse:
    """Create an album from ``{title, artist}`` and return it."""
    data = validate_payload(AlbumRecordCreate, body)
    record = await album_records.create_record(db, title=data.title, artist=data.artist)
    await db.commit()
    logger.info("Album record created", album_id=str(record.id))
    return AlbumRecordResponse.model_validate(record)


@router.get("/{album_id}", response_model=AlbumRecordResponse)
async def get_album(
    album_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> AlbumRecordResponse:
    record = await album_records.require_record(db, album_id)
    return AlbumRecordResponse.model_validate(record)


@router.post("/{album_id}/update", response_model=AlbumRecordResponse)
async def update_album(
    album_id: UUID,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db_session),
) -> AlbumRecordResponse:
    """Apply a partial update; fields absent from the body are left untouched."""
    data = validate_payload(AlbumRecordUpdate, body)
    changes = data.model_dump(exclude_unset=True)
    record = await album_records.update_record(db, album_id, changes)
    await db.commit()
    logger.info("Album record updated", album_id=str(album_id), fields=sorted(changes))
    return AlbumRecordResponse.model_validate(record)


@router.delete("/{album_id}", response_model=AlbumDeletedResponse)
async def delete_album(
    album_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> AlbumDeletedResponse:
    await album_records.delete_record(db, album_id)
    await db.commit()
    logger.info("Album record deleted", album_id=str(album_id))
    return AlbumDeletedResponse(message=f"Album {album_id} deleted")
