"""
Root GraphQL mutation definitions
"""

from uuid import UUID

import strawberry

from ..types.album import Album
from ..types.artist import Artist
from ..types.user import User


@strawberry.input
class CreateAlbumInput:
    """Input for adding an album to a collection."""

    title: str
    artist: str  # artist name; created when unknown
    owner: UUID
    art: str | None = None
    year: int | None = None
    rating: int | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, username: str) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, username)

    @strawberry.mutation(name="createArtist")
    async def create_artist(self, info: strawberry.Info, name: str) -> Artist:
        """Create a new artist."""
        from ..resolvers.artist import create_artist

        return await create_artist(info, name)

    @strawberry.mutation(name="createAlbum")
    async def create_album(self, info: strawberry.Info, input: CreateAlbumInput) -> Album:
        """Create an album, reusing or creating its artist and master."""
        from ..resolvers.album import create_album

        return await create_album(info, input)
