#!/usr/bin/env python3
"""
Main CLI entry point for the Inkwell server.
"""

import os
import sys

import click
import uvicorn

from inkwell import __version__
from inkwell.config import settings
from inkwell.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="inkwell")
def cli() -> None:
    """Inkwell CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload/--no-reload",
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help=f"Log level (default: {settings.log_level.lower()})",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Inkwell API server.

    State lives in process memory, so the server always runs a single worker.
    """
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Inkwell API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    if log_level == "debug":
        os.environ["INKWELL_DEBUG"] = "true"
        os.environ["INKWELL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("INKWELL_DEBUG", "false")
        os.environ.setdefault("INKWELL_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "inkwell.api.app:get_app",
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


@cli.command("schema")
def print_schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from inkwell.graphql.schema import schema

    click.echo(schema.as_str())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
