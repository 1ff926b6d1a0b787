"""
Tests for the REST album endpoints
"""

import uuid
from datetime import datetime

import pytest
from httpx import AsyncClient

SPACE_IS_THE_PLACE = {"title": "Space Is the Place", "artist": "Sun Ra"}
LANQUIDITY = {"title": "Lanquidity", "artist": "Sun Ra"}


async def create(client: AsyncClient, body: dict) -> dict:
    response = await client.post("/create", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestListAlbums:
    @pytest.mark.asyncio
    async def test_returns_all_albums(self, rest_client: AsyncClient):
        await create(rest_client, SPACE_IS_THE_PLACE)
        await create(rest_client, LANQUIDITY)

        response = await rest_client.get("/")

        assert response.status_code == 200
        titles = {album["title"] for album in response.json()}
        assert titles == {"Space Is the Place", "Lanquidity"}

    @pytest.mark.asyncio
    async def test_empty_collection(self, rest_client: AsyncClient):
        response = await rest_client.get("/")

        assert response.status_code == 200
        assert response.json() == []


class TestCreateAlbum:
    @pytest.mark.asyncio
    async def test_returns_201_with_created_album(self, rest_client: AsyncClient):
        response = await rest_client.post("/create", json=SPACE_IS_THE_PLACE)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Space Is the Place"
        assert body["artist"] == "Sun Ra"
        assert uuid.UUID(body["id"])

    @pytest.mark.asyncio
    async def test_created_album_is_listed(self, rest_client: AsyncClient):
        await create(rest_client, SPACE_IS_THE_PLACE)

        response = await rest_client.get("/")

        assert "Space Is the Place" in response.text

    @pytest.mark.asyncio
    async def test_numeric_title_is_stored_as_text(self, rest_client: AsyncClient):
        body = await create(rest_client, {"title": 1, "artist": "Sun Ra"})

        assert body["title"] == "1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"artist": "Sun Ra"}, {"title": ""}, {"title": None}])
    async def test_title_is_required(self, rest_client: AsyncClient, body: dict):
        response = await rest_client.post("/create", json=body)

        assert response.status_code == 422
        assert response.json()["errors"] == {"title": "Title is required."}

    @pytest.mark.asyncio
    async def test_title_longer_than_column_is_rejected(self, rest_client: AsyncClient):
        response = await rest_client.post("/create", json={"title": "x" * 256, "artist": "Sun Ra"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"title": "Title must be at most 255 characters."}
        assert (await rest_client.get("/")).json() == []

    @pytest.mark.asyncio
    async def test_title_at_column_length_is_accepted(self, rest_client: AsyncClient):
        body = await create(rest_client, {"title": "x" * 255})

        assert len(body["title"]) == 255

    @pytest.mark.asyncio
    async def test_empty_body_is_rejected(self, rest_client: AsyncClient):
        response = await rest_client.post("/create")

        assert response.status_code == 422
        assert response.json()["errors"] == {"body": "Expected a JSON object."}

    @pytest.mark.asyncio
    async def test_malformed_json_is_rejected(self, rest_client: AsyncClient):
        response = await rest_client.post(
            "/create", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"body": "Malformed JSON body."}
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_rejects_non_object_body(self, rest_client: AsyncClient):
        response = await rest_client.post("/create", json=["Space Is the Place"])

        assert response.status_code == 422
        assert "body" in response.json()["errors"]


class TestGetAlbum:
    @pytest.mark.asyncio
    async def test_returns_album(self, rest_client: AsyncClient):
        created = await create(rest_client, SPACE_IS_THE_PLACE)

        response = await rest_client.get(f"/{created['id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Space Is the Place"
        assert response.json()["artist"] == "Sun Ra"

    @pytest.mark.asyncio
    async def test_malformed_id_is_422(self, rest_client: AsyncClient):
        response = await rest_client.get("/not-a-uuid")

        assert response.status_code == 422
        assert "album_id" in response.json()["errors"]

    @pytest.mark.asyncio
    async def test_missing_album_is_404(self, rest_client: AsyncClient):
        missing = uuid.uuid4()

        response = await rest_client.get(f"/{missing}")

        assert response.status_code == 404
        assert str(missing) in response.json()["error"]


class TestUpdateAlbum:
    @pytest.mark.asyncio
    async def test_updates_only_given_fields(self, rest_client: AsyncClient):
        created = await create(rest_client, SPACE_IS_THE_PLACE)

        response = await rest_client.post(
            f"/{created['id']}/update", json={"title": "Space Is the Place (Expanded)"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["title"] == "Space Is the Place (Expanded)"
        assert body["artist"] == "Sun Ra"

        fetched = (await rest_client.get(f"/{created['id']}")).json()
        assert fetched["title"] == "Space Is the Place (Expanded)"
        assert fetched["artist"] == "Sun Ra"

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, rest_client: AsyncClient):
        created = await create(rest_client, SPACE_IS_THE_PLACE)

        response = await rest_client.post(f"/{created['id']}/update", json={"title": "  "})

        assert response.status_code == 422
        assert response.json()["errors"] == {"title": "Title is required."}
        fetched = (await rest_client.get(f"/{created['id']}")).json()
        assert fetched["title"] == "Space Is the Place"

    @pytest.mark.asyncio
    async def test_long_artist_is_rejected(self, rest_client: AsyncClient):
        created = await create(rest_client, SPACE_IS_THE_PLACE)

        response = await rest_client.post(f"/{created['id']}/update", json={"artist": "y" * 300})

        assert response.status_code == 422
        assert response.json()["errors"] == {"artist": "Artist must be at most 255 characters."}

    @pytest.mark.asyncio
    async def test_timestamps_are_utc_after_update(self, rest_client: AsyncClient):
        created = await create(rest_client, SPACE_IS_THE_PLACE)

        response = await rest_client.post(f"/{created['id']}/update", json={"title": "Lanquidity"})

        body = response.json()
        created_at = datetime.fromisoformat(body["created_at"])
        updated_at = datetime.fromisoformat(body["updated_at"])
        assert created_at.utcoffset() is not None and created_at.utcoffset().total_seconds() == 0
        assert updated_at.utcoffset() is not None and updated_at.utcoffset().total_seconds() == 0
        assert updated_at >= created_at

    @pytest.mark.asyncio
    async def test_missing_album_is_404(self, rest_client: AsyncClient):
        response = await rest_client.post(f"/{uuid.uuid4()}/update", json={"title": "x"})

        assert response.status_code == 404


class TestDeleteAlbum:
    @pytest.mark.asyncio
    async def test_removes_album_from_list(self, rest_client: AsyncClient):
        first = await create(rest_client, SPACE_IS_THE_PLACE)
        await create(rest_client, LANQUIDITY)

        response = await rest_client.delete(f"/{first['id']}")

        assert response.status_code == 200
        assert first["id"] in response.json()["message"]

        titles = {album["title"] for album in (await rest_client.get("/")).json()}
        assert titles == {"Lanquidity"}

    @pytest.mark.asyncio
    async def test_missing_album_is_404(self, rest_client: AsyncClient):
        response = await rest_client.delete(f"/{uuid.uuid4()}")

        assert response.status_code == 404


@pytest.mark.asyncio
async def test_health(rest_client: AsyncClient):
    response = await rest_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "rest"


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(rest_client: AsyncClient):
    response = await rest_client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
