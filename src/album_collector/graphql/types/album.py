"""
Album GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

if TYPE_CHECKING:
    from .artist import Artist
    from .master import Master
    from .user import User


@strawberry.type
class Album:
    """An owned copy of a master."""

    id: UUID
    title: str
    artist_id: UUID
    master_id: UUID
    owner_id: UUID
    art: str | None
    year: int | None
    rating: int | None
    created_at: datetime

    @strawberry.field
    async def artist(
        self, info: strawberry.Info
    ) -> Annotated["Artist", strawberry.lazy(".artist")]:
        """Get the artist of this album."""
        from ..resolvers.artist import resolve_artist_by_id_loader

        return await resolve_artist_by_id_loader(info, self.artist_id)

    @strawberry.field
    async def master(
        self, info: strawberry.Info
    ) -> Annotated["Master", strawberry.lazy(".master")]:
        """Get the master this album is a copy of."""
        from ..resolvers.master import resolve_master_by_id_loader

        return await resolve_master_by_id_loader(info, self.master_id)

    @strawberry.field
    async def owner(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")]:
        """Get the user owning this album."""
        from ..resolvers.user import resolve_user_by_id_loader

        return await resolve_user_by_id_loader(info, self.owner_id)
