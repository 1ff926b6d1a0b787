"""
Master GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

if TYPE_CHECKING:
    from .album import Album
    from .artist import Artist


@strawberry.type
class Master:
    """Canonical release shared by the albums (copies) that collectors own."""

    id: UUID
    title: str
    artist_id: UUID
    created_at: datetime

    @strawberry.field
    async def artist(
        self, info: strawberry.Info
    ) -> Annotated["Artist", strawberry.lazy(".artist")]:
        """Get the artist of this master."""
        from ..resolvers.artist import resolve_artist_by_id_loader

        return await resolve_artist_by_id_loader(info, self.artist_id)

    @strawberry.field
    async def albums(
        self, info: strawberry.Info
    ) -> list[Annotated["Album", strawberry.lazy(".album")]]:
        """Get collected copies of this master."""
        from ..resolvers.album import resolve_master_albums

        return await resolve_master_albums(self, info)
