"""
FastAPI applications for Album Collector.

Two independent services are built here: the REST album service and the
GraphQL collection service. Each gets its own ``Database`` instance, passed in
by the caller or built from settings, stored on ``app.state.database``.
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..database import Database
from ..errors import AlbumCollectorError, ValidationError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..validation import error_messages

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


def _lifespan(service: str) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan manager."""
        database: Database = app.state.database
        logger.info("Starting service", service=service)

        connected, error = await database.check_connection()
        if connected:
            logger.info("Database connection validation successful")
        else:
            logger.error("Database connection validation failed", error=error)

        if settings.auto_create_schema:
            await database.create_all()

        yield

        logger.info("Shutting down service", service=service)
        await database.dispose()

    return lifespan


async def album_collector_error_handler(
    request: Request, exc: AlbumCollectorError
) -> JSONResponse:
    logger.info(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report FastAPI request parsing failures in the same shape as ``ValidationError``."""
    error = ValidationError(error_messages(exc.errors()))
    return await album_collector_error_handler(request, error)


def _base_app(service: str, title: str, description: str, database: Database | None) -> FastAPI:
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=_lifespan(service),
        debug=settings.debug,
    )
    app.state.database = database or Database()

    app.add_middleware(LoggingContextMiddleware, service=service)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AlbumCollectorError, album_collector_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "service": service, "version": __version__}

    return app


def create_rest_app(database: Database | None = None) -> FastAPI:
    """Create the REST album service."""
    app = _base_app(
        "rest",
        "Album Collector REST API",
        "List, create, update and delete albums",
        database,
    )

    from .endpoints import albums

    app.include_router(albums.router, tags=["Albums"])
    return app


def create_graphql_app(database: Database | None = None) -> FastAPI:
    """Create the GraphQL collection service."""
    app = _base_app(
        "graphql",
        "Album Collector GraphQL API",
        "Users, artists, masters and the albums in their collections",
        database,
    )

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast on unresolved types rather than returning 404s at runtime
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    return app
