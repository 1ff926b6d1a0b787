"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from album_collector.database import Database


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """A Database on a throwaway SQLite file with the full schema created."""
    db = Database(f"sqlite:///{tmp_path / 'album_collector.db'}", echo=False)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """An async SQLAlchemy session that commits when the test finishes."""
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def rest_client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    from album_collector.api.app import create_rest_app

    app = create_rest_app(database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def graphql_client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    from album_collector.api.app import create_graphql_app

    app = create_graphql_app(database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def run_graphql(graphql_client: AsyncClient):
    """Post a GraphQL document and return the decoded response body."""

    async def execute(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        response = await graphql_client.post(
            "/graphql", json={"query": query, "variables": variables or {}}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
