"""
Root GraphQL query definitions
"""

from uuid import UUID

import strawberry

from ..types.album import Album
from ..types.artist import Artist
from ..types.master import Master
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def user(self, info: strawberry.Info, id: UUID) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def artist(
        self, info: strawberry.Info, id: UUID | None = None, name: str | None = None
    ) -> Artist | None:
        """Get an artist by ID or name."""
        from ..resolvers.artist import resolve_artist

        return await resolve_artist(info, id, name)

    @strawberry.field
    async def artists(self, info: strawberry.Info) -> list[Artist]:
        """Get all artists."""
        from ..resolvers.artist import resolve_artists

        return await resolve_artists(info)

    @strawberry.field
    async def album(self, info: strawberry.Info, id: UUID) -> Album | None:
        """Get an album by ID."""
        from ..resolvers.album import resolve_album_by_id

        return await resolve_album_by_id(info, id)

    @strawberry.field
    async def albums(self, info: strawberry.Info) -> list[Album]:
        """Get all albums."""
        from ..resolvers.album import resolve_albums

        return await resolve_albums(info)

    @strawberry.field
    async def master(
        self,
        info: strawberry.Info,
        id: UUID | None = None,
        artist: str | None = None,
        title: str | None = None,
    ) -> Master | None:
        """Get a master by ID, or by artist name and title."""
        from ..resolvers.master import resolve_master

        return await resolve_master(info, id, artist, title)

    @strawberry.field
    async def masters(self, info: strawberry.Info) -> list[Master]:
        """Get all masters."""
        from ..resolvers.master import resolve_masters

        return await resolve_masters(info)
