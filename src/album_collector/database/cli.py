#!/usr/bin/env python3
"""
Database migration commands (``album-collector-migrate``).

Thin click wrappers around Alembic. Migration scripts live in ``alembic/`` at
the project root and target ``settings.database_url`` unless
``--database-url`` is given.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from alembic import command
from alembic.config import Config
from album_collector import __version__
from album_collector.logging import configure_logging, get_logger

logger = get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config(database_url: str | None = None) -> Config:
    """Build the Alembic config from the project's alembic.ini."""
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    if database_url:
        # ConfigParser interpolation
        config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def _run(
    ctx: click.Context, name: str, operation: Callable[[Config], Any], **fields: Any
) -> None:
    """Run one Alembic command, exiting with status 1 when it fails."""
    try:
        config = get_alembic_config(ctx.obj.get("database_url"))
        logger.info("Running migration command", command=name, **fields)
        operation(config)
    except Exception as e:
        logger.error("Migration command failed", command=name, error=str(e))
        sys.exit(1)
    logger.info("Migration command finished", command=name)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--database-url",
    default=None,
    help="Database to migrate (default: settings.database_url)",
)
@click.version_option(version=__version__, prog_name="album-collector-migrate")
@click.pass_context
def main(ctx: click.Context, log_level: str, database_url: str | None) -> None:
    """Manage the Album Collector database schema."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)
    ctx.ensure_object(dict)
    ctx.obj["database_url"] = database_url


@main.command()
@click.argument("revision", default="head")
@click.pass_context
def upgrade(ctx: click.Context, revision: str) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    _run(ctx, "upgrade", lambda config: command.upgrade(config, revision), revision=revision)


@main.command()
@click.argument("revision", default="-1")
@click.pass_context
def downgrade(ctx: click.Context, revision: str) -> None:
    """Downgrade the schema to REVISION (default: one step back)."""
    _run(ctx, "downgrade", lambda config: command.downgrade(config, revision), revision=revision)


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Compare against the models")
@click.pass_context
def revision(ctx: click.Context, message: str, autogenerate: bool) -> None:
    """Create a new migration script."""
    _run(
        ctx,
        "revision",
        lambda config: command.revision(config, message=message, autogenerate=autogenerate),
        message=message,
        autogenerate=autogenerate,
    )


@main.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Show the revision the database is at."""
    _run(ctx, "current", command.current)


@main.command()
@click.pass_context
def history(ctx: click.Context) -> None:
    """List migration scripts."""
    _run(ctx, "history", command.history)


if __name__ == "__main__":
    main()
