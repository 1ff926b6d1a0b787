"""
Tests for the collection GraphQL queries
"""

import uuid

import pytest
import pytest_asyncio

from album_collector.dbmodels import Users
from album_collector.repository import collection

USER_WITH_ALBUMS = """
    query UserWithAlbums($id: UUID!) {
        user(id: $id) {
            username
            albums { title artist { name } }
        }
    }
"""

ARTIST = """
    query Artist($id: UUID, $name: String) {
        artist(id: $id, name: $name) {
            id
            name
            masters { title }
            albums { title owner { username } }
        }
    }
"""

MASTER = """
    query Master($id: UUID, $artist: String, $title: String) {
        master(id: $id, artist: $artist, title: $title) {
            id
            title
            artist { name }
            albums { id }
        }
    }
"""


@pytest_asyncio.fixture
async def seeded(db_session) -> Users:
    """Two collectors sharing a Sun Ra master, plus an Alice Coltrane album."""
    digger = await collection.create_user(db_session, "digger")
    other = await collection.create_user(db_session, "crate-digger")
    await collection.create_album(
        db_session, title="Lanquidity", artist_name="Sun Ra", owner_id=digger.id, year=1978
    )
    await collection.create_album(
        db_session, title="Lanquidity", artist_name="Sun Ra", owner_id=other.id
    )
    await collection.create_album(
        db_session,
        title="Journey in Satchidananda",
        artist_name="Alice Coltrane",
        owner_id=digger.id,
    )
    await db_session.commit()
    return digger


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_user_with_albums(self, run_graphql, seeded: Users):
        result = await run_graphql(USER_WITH_ALBUMS, {"id": str(seeded.id)})

        user = result["data"]["user"]
        assert user["username"] == "digger"
        assert {(a["title"], a["artist"]["name"]) for a in user["albums"]} == {
            ("Lanquidity", "Sun Ra"),
            ("Journey in Satchidananda", "Alice Coltrane"),
        }

    @pytest.mark.asyncio
    async def test_missing_user_is_null(self, run_graphql):
        result = await run_graphql(USER_WITH_ALBUMS, {"id": str(uuid.uuid4())})

        assert "errors" not in result
        assert result["data"]["user"] is None

    @pytest.mark.asyncio
    async def test_users(self, run_graphql, seeded: Users):
        result = await run_graphql("{ users { username } }")

        usernames = {user["username"] for user in result["data"]["users"]}
        assert usernames == {"digger", "crate-digger"}


class TestArtistQueries:
    @pytest.mark.asyncio
    async def test_artist_by_name(self, run_graphql, seeded: Users):
        result = await run_graphql(ARTIST, {"name": "Sun Ra"})

        artist = result["data"]["artist"]
        assert artist["name"] == "Sun Ra"
        assert artist["masters"] == [{"title": "Lanquidity"}]
        owners = sorted(album["owner"]["username"] for album in artist["albums"])
        assert owners == ["crate-digger", "digger"]

    @pytest.mark.asyncio
    async def test_artist_by_id(self, run_graphql, seeded: Users):
        by_name = (await run_graphql(ARTIST, {"name": "Alice Coltrane"}))["data"]["artist"]

        result = await run_graphql(ARTIST, {"id": by_name["id"]})

        assert result["data"]["artist"]["name"] == "Alice Coltrane"

    @pytest.mark.asyncio
    async def test_unknown_artist_is_null(self, run_graphql, seeded: Users):
        result = await run_graphql(ARTIST, {"name": "Pharoah Sanders"})

        assert result["data"]["artist"] is None

    @pytest.mark.asyncio
    async def test_artist_needs_id_or_name(self, run_graphql):
        result = await run_graphql(ARTIST)

        assert "Provide an artist id or name." in result["errors"][0]["message"]

    @pytest.mark.asyncio
    async def test_artists_are_ordered_by_name(self, run_graphql, seeded: Users):
        result = await run_graphql("{ artists { name } }")

        assert [a["name"] for a in result["data"]["artists"]] == ["Alice Coltrane", "Sun Ra"]


class TestMasterQueries:
    @pytest.mark.asyncio
    async def test_master_by_artist_and_title(self, run_graphql, seeded: Users):
        result = await run_graphql(MASTER, {"artist": "Sun Ra", "title": "Lanquidity"})

        master = result["data"]["master"]
        assert master["title"] == "Lanquidity"
        assert master["artist"]["name"] == "Sun Ra"
        assert len(master["albums"]) == 2

    @pytest.mark.asyncio
    async def test_master_by_id(self, run_graphql, seeded: Users):
        found = (await run_graphql(MASTER, {"artist": "Sun Ra", "title": "Lanquidity"}))["data"]

        result = await run_graphql(MASTER, {"id": found["master"]["id"]})

        assert result["data"]["master"]["id"] == found["master"]["id"]

    @pytest.mark.asyncio
    async def test_title_under_wrong_artist_is_null(self, run_graphql, seeded: Users):
        result = await run_graphql(MASTER, {"artist": "Alice Coltrane", "title": "Lanquidity"})

        assert result["data"]["master"] is None

    @pytest.mark.asyncio
    async def test_title_alone_is_rejected(self, run_graphql, seeded: Users):
        result = await run_graphql(MASTER, {"title": "Lanquidity"})

        assert result["errors"]

    @pytest.mark.asyncio
    async def test_masters(self, run_graphql, seeded: Users):
        result = await run_graphql("{ masters { title } }")

        titles = [m["title"] for m in result["data"]["masters"]]
        assert titles == ["Journey in Satchidananda", "Lanquidity"]


class TestAlbumQueries:
    @pytest.mark.asyncio
    async def test_albums_with_relations(self, run_graphql, seeded: Users):
        result = await run_graphql(
            "{ albums { title year master { title } owner { username } } }"
        )

        albums = result["data"]["albums"]
        assert len(albums) == 3
        first = next(a for a in albums if a["year"] == 1978)
        assert first["master"]["title"] == "Lanquidity"
        assert first["owner"]["username"] == "digger"

    @pytest.mark.asyncio
    async def test_album_by_id(self, run_graphql, seeded: Users):
        ids = [a["id"] for a in (await run_graphql("{ albums { id } }"))["data"]["albums"]]

        result = await run_graphql(
            "query One($id: UUID!) { album(id: $id) { id } }", {"id": ids[0]}
        )

        assert result["data"]["album"]["id"] == ids[0]

    @pytest.mark.asyncio
    async def test_missing_album_is_null(self, run_graphql):
        result = await run_graphql(
            "query One($id: UUID!) { album(id: $id) { id } }", {"id": str(uuid.uuid4())}
        )

        assert result["data"]["album"] is None
