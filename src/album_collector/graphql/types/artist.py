"""
Artist GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

if TYPE_CHECKING:
    from .album import Album
    from .master import Master


@strawberry.type
class Artist:
    """Artist type for GraphQL API."""

    id: UUID
    name: str
    created_at: datetime

    @strawberry.field
    async def masters(
        self, info: strawberry.Info
    ) -> list[Annotated["Master", strawberry.lazy(".master")]]:
        """Get masters released by this artist."""
        from ..resolvers.master import resolve_artist_masters

        return await resolve_artist_masters(self, info)

    @strawberry.field
    async def albums(
        self, info: strawberry.Info
    ) -> list[Annotated["Album", strawberry.lazy(".album")]]:
        """Get collected albums by this artist."""
        from ..resolvers.album import resolve_artist_albums

        return await resolve_artist_albums(self, info)
