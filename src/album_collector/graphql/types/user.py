"""
User GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

if TYPE_CHECKING:
    from .album import Album


@strawberry.type
class User:
    """A collector owning albums."""

    id: UUID
    username: str
    created_at: datetime

    @strawberry.field
    async def albums(
        self, info: strawberry.Info
    ) -> list[Annotated["Album", strawberry.lazy(".album")]]:
        """Albums in this user's collection."""
        from ..resolvers.album import resolve_user_albums

        return await resolve_user_albums(self, info)
