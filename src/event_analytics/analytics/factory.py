"""Factory selecting the analytics provider from configuration."""

from ..config import Settings
from ..logging import get_logger
from .aggregator import AnalyticsAggregator
from .base import AnalyticsProvider
from .fixture import FixtureAnalyticsProvider

logger = get_logger(__name__)


def create_analytics_provider(settings: Settings | None = None) -> AnalyticsProvider:
    """Create the analytics provider for the given settings.

    Args:
        settings: Settings to read; the global settings when omitted

    Returns:
        A fixture-backed provider in mock mode, a live aggregator otherwise
    """
    if settings is None:
        from ..config import settings as default_settings

        settings = default_settings

    if settings.use_mock_data:
        path = settings.resolved_mock_data_path()
        logger.info("Using mock data fixture for event analytics", path=str(path))
        return FixtureAnalyticsProvider(path)

    logger.info("Using supergraph for event analytics", supergraph_url=settings.supergraph_url)
    return AnalyticsAggregator(settings.supergraph_url, timeout=settings.supergraph_timeout)
