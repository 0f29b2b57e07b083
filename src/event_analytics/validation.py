"""
Configuration validation for the event analytics subgraph.

Checks that the configured analytics data source is usable before the
server starts accepting requests.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from .analytics.base import FixtureError
from .analytics.fixture import FixtureAnalyticsProvider
from .config import Settings
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_mock_data(settings: Settings) -> dict[str, Any]:
    """Validate that the mock data fixture loads and matches the result shape."""
    path = settings.resolved_mock_data_path()
    results: dict[str, Any] = {
        "valid": True,
        "mode": "mock",
        "errors": [],
        "path": str(path),
    }

    try:
        fixture = await FixtureAnalyticsProvider(path).load()
        results["total_events"] = fixture.total_events
        logger.info("Mock data fixture validated", path=str(path))
    except FixtureError as e:
        results["valid"] = False
        results["errors"].append(str(e))
        logger.error("Mock data fixture validation failed", error=str(e))

    return results


def validate_supergraph_url(settings: Settings) -> dict[str, Any]:
    """Validate that the supergraph endpoint is an absolute http(s) URL."""
    results: dict[str, Any] = {
        "valid": True,
        "mode": "supergraph",
        "errors": [],
        "supergraph_url": settings.supergraph_url,
    }

    parsed = urlparse(settings.supergraph_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        results["valid"] = False
        results["errors"].append(
            f"Supergraph URL must be an absolute http(s) URL, got {settings.supergraph_url!r}"
        )
        logger.error("Supergraph URL validation failed", supergraph_url=settings.supergraph_url)
    else:
        logger.info("Supergraph URL validated", supergraph_url=settings.supergraph_url)

    return results


async def validate_startup_configuration(settings: Settings) -> dict[str, Any]:
    """
    Validate the analytics data source configuration.

    Returns:
        Dictionary with ``overall_valid`` and the ``data_source`` results

    Raises:
        ValidationError: If validation fails in a production environment
    """
    if settings.use_mock_data:
        data_source = await validate_mock_data(settings)
    else:
        data_source = validate_supergraph_url(settings)

    results = {
        "overall_valid": data_source["valid"],
        "data_source": data_source,
    }

    if not results["overall_valid"]:
        logger.error(
            "Application configuration validation failed",
            data_source_errors=data_source["errors"],
        )
        if settings.is_production:
            raise ValidationError("Critical configuration validation failed in production")

    return results
