"""
Database connection management
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..dbmodels import Base
from ..logging import get_logger

logger = get_logger(__name__)


def get_async_url(database_url: str) -> str:
    """Map a plain database URL onto its asyncio driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    _ = connection_record
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """An async engine and its session factory.

    One instance is built when an application is created and handed to every
    request through ``app.state.database``.
    """

    def __init__(self, database_url: str | None = None, echo: bool | None = None):
        self.url = get_async_url(database_url or settings.database_url or "")
        engine_options: dict[str, Any] = {
            "echo": settings.sql_echo if echo is None else echo,
        }
        if self.url.startswith("postgresql"):
            engine_options["pool_size"] = settings.database_pool_size
            engine_options["max_overflow"] = settings.database_max_overflow

        self.engine: AsyncEngine = create_async_engine(self.url, **engine_options)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database initialized", database_url=self.engine.url.render_as_string())

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on success and rolls back on error."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every table known to the ORM metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def check_connection(self) -> tuple[bool, str | None]:
        """
        Test the database connection and return a helpful error message.

        Returns:
            tuple: (success: bool, error_message: str | None)
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True, None
        except Exception as e:
            error_str = str(e)
            if "Connection refused" in error_str or "could not connect" in error_str:
                return False, (
                    f"Cannot connect to database server: {error_str}\n"
                    f"The database server appears to be down or unreachable."
                )
            if "password authentication failed" in error_str:
                return False, (
                    f"Database authentication failed: {error_str}\n"
                    f"Please check your database credentials."
                )
            if "does not exist" in error_str:
                db_name = self.engine.url.database
                return False, (
                    f"Cannot connect to database: {error_str}\n"
                    f"Check that the database '{db_name}' exists and run migrations."
                )
            return False, f"Database connection error ({type(e).__name__}): {error_str}"

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """The Database attached to the application serving ``request``."""
    return request.app.state.database


# Dependency for FastAPI
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_database(request).session() as session:
        yield session
