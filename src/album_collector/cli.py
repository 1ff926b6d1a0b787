#!/usr/bin/env python3
"""
Main CLI entry point for the Album Collector services.
"""

import asyncio
import os
import sys

import click
import uvicorn

from album_collector import __version__
from album_collector.config import settings
from album_collector.logging import configure_logging, get_logger

logger = get_logger(__name__)

APP_FACTORIES = {
    "rest": "album_collector.api.app:create_rest_app",
    "graphql": "album_collector.api.app:create_graphql_app",
}


@click.group()
@click.version_option(version=__version__, prog_name="album-collector")
def cli() -> None:
    """Album Collector CLI - run the services and manage the database."""
    pass


@cli.command()
@click.argument("service", type=click.Choice(sorted(APP_FACTORIES)))
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: settings.api_host)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: PORT for rest, settings.graphql_port for graphql)",
)
@click.option(
    "--reload/--no-reload",
    default=lambda: settings.api_reload,
    help="Auto-reload on code changes (default: settings.api_reload)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    service: str, host: str | None, port: int | None, reload: bool, log_level: str
) -> None:
    """Start the REST or GraphQL service."""

    configure_logging(debug=(log_level == "debug"))

    host = host or settings.api_host
    if port is None:
        port = settings.api_port if service == "rest" else settings.graphql_port

    logger.info(
        "Starting Album Collector service",
        service=service,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The application is imported by uvicorn, so pass settings through the environment
    if log_level == "debug":
        os.environ["ALBUM_COLLECTOR_DEBUG"] = "true"
    else:
        os.environ.setdefault("ALBUM_COLLECTOR_DEBUG", "false")
    os.environ.setdefault("ALBUM_COLLECTOR_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            APP_FACTORIES[service],
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option(
    "--drop",
    is_flag=True,
    default=False,
    help="Drop existing tables first",
)
def init_db(drop: bool) -> None:
    """Create all tables directly from the ORM models."""
    from album_collector.database import Database

    configure_logging()

    async def do_init() -> None:
        database = Database()
        try:
            if drop:
                await database.drop_all()
            await database.create_all()
        finally:
            await database.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database tables created")


if __name__ == "__main__":
    cli()
