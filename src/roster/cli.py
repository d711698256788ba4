#!/usr/bin/env python3
"""
Main CLI entry point for Roster backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from roster import __version__
from roster.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="roster")
def cli() -> None:
    """Roster CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: ROSTER_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: PORT / ROSTER_API_PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the Roster API server."""
    from roster.config import settings

    configure_logging(debug=(log_level == "debug"))

    host = host or settings.api_host
    port = port or settings.api_port

    logger.info("Starting Roster API server", host=host, port=port, reload=reload, log_level=log_level)

    # Propagate to the app process when uvicorn re-imports it
    if log_level == "debug":
        os.environ["ROSTER_DEBUG"] = "true"
        os.environ["ROSTER_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("ROSTER_DEBUG", "false")
        os.environ.setdefault("ROSTER_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "roster.api.app:get_app",
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


def _open_store():
    """Build the configured store, reporting a bad configuration as a CLI failure."""
    from pymongo.errors import PyMongoError

    from roster.store import create_store

    try:
        return create_store()
    except (ValueError, PyMongoError) as e:
        logger.error("Invalid store configuration", error=str(e))
        click.echo(f"✗ Invalid store configuration: {e}", err=True)
        sys.exit(1)


@cli.command("init-db")
def init_db() -> None:
    """Create the unique indexes the API relies on."""
    from roster.errors import RosterError

    configure_logging()
    store = _open_store()

    async def do_init():
        try:
            await store.connect()
        finally:
            await store.close()

    try:
        asyncio.run(do_init())
    except RosterError as e:
        logger.error("Database initialization failed", error=e.message)
        click.echo(f"✗ Error initializing database: {e.message}", err=True)
        sys.exit(1)

    click.echo("✓ Database indexes are in place")


@cli.command("check-db")
def check_db() -> None:
    """Check that the configured store is reachable."""
    configure_logging()
    store = _open_store()

    async def do_check() -> tuple[bool, str | None]:
        try:
            return await store.ping()
        finally:
            await store.close()

    ok, error = asyncio.run(do_check())
    if not ok:
        logger.error("Store check failed", error=error)
        click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    click.echo("✓ Store is reachable")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
