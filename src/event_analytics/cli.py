#!/usr/bin/env python3
"""
Main CLI entry point for the event analytics subgraph.
"""

import asyncio
import os
import sys
from pathlib import Path

import click
import uvicorn

from event_analytics import __version__
from event_analytics.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="event-analytics")
def cli() -> None:
    """Event analytics CLI - run the subgraph and inspect analytics."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: ANALYTICS_API_HOST, else 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: ANALYTICS_API_PORT, else 4001)",
)
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload for development (default: ANALYTICS_API_RELOAD)",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Log level (default: ANALYTICS_LOG_LEVEL, else info)",
)
def serve(
    host: str | None,
    port: int | None,
    reload: bool | None,
    workers: int,
    log_level: str | None,
) -> None:
    """Start the analytics subgraph server."""
    # Importing the app module configures logging from settings; the options below take over
    from event_analytics.api.app import create_app
    from event_analytics.config import settings

    host = host or settings.api_host
    port = settings.api_port if port is None else port
    reload = settings.api_reload if reload is None else reload
    log_level = (log_level or settings.log_level).lower()
    debug = log_level == "debug"

    configure_logging(debug=debug, level=log_level)

    logger.info(
        "Starting event analytics subgraph",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    try:
        if reload or workers > 1:
            # Reloaded and worker processes import the app and read settings from the environment
            os.environ["ANALYTICS_DEBUG"] = "true" if debug else "false"
            os.environ["ANALYTICS_LOG_LEVEL"] = log_level
            uvicorn.run(
                "event_analytics.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            app = create_app(settings.model_copy(update={"debug": debug, "log_level": log_level}))
            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: Path | None) -> None:
    """Print the subgraph SDL for composition into the supergraph."""
    from event_analytics.graphql.schema import export_sdl

    sdl = export_sdl()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


@cli.command()
@click.option("--calendar-id", default=None, help="Calendar to analyse (default: all)")
@click.option("--limit", default=10, type=click.IntRange(min=0), help="Maximum events (default: 10)")
@click.option(
    "--mock/--live",
    default=None,
    help="Serve the mock data fixture or query the supergraph (default: from settings)",
)
def report(calendar_id: str | None, limit: int, mock: bool | None) -> None:
    """Compute event analytics once and print them as JSON."""
    from event_analytics.analytics.base import FixtureError, UpstreamError
    from event_analytics.analytics.factory import create_analytics_provider
    from event_analytics.config import settings

    # stdout carries the JSON report
    configure_logging(level="warning", stream=sys.stderr)

    if mock is not None:
        settings = settings.model_copy(update={"use_mock_data": mock})

    provider = create_analytics_provider(settings)

    try:
        result = asyncio.run(provider.get_event_analytics(calendar_id=calendar_id, limit=limit))
    except (UpstreamError, FixtureError) as e:
        logger.error("Failed to compute event analytics", error=str(e))
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(result.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    cli()
