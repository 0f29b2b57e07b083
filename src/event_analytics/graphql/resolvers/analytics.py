"""
Analytics resolvers for GraphQL API
"""

import strawberry

from ...analytics.base import AnalyticsProvider
from ...logging import get_logger
from ..types.analytics import AnalyticsResult

logger = get_logger(__name__)

DEFAULT_EVENT_LIMIT = 10


def get_analytics_provider(info: strawberry.Info) -> AnalyticsProvider:
    """Get the analytics provider placed in the GraphQL context."""
    provider = info.context.get("analytics_provider")
    if provider is None:
        raise RuntimeError("No analytics provider configured in GraphQL context")
    return provider


async def resolve_event_analytics(
    info: strawberry.Info,
    calendar_id: str | None = None,
    limit: int | None = DEFAULT_EVENT_LIMIT,
) -> AnalyticsResult:
    """Resolve analytics for the events of a calendar.

    Args:
        info: GraphQL info context
        calendar_id: Optional calendar filter, passed to the upstream unchanged
        limit: Maximum number of events to request; null means the default

    Returns:
        Aggregated analytics

    Raises:
        UpstreamError: If the supergraph cannot be queried
    """
    provider = get_analytics_provider(info)

    result = await provider.get_event_analytics(
        calendar_id=calendar_id,
        limit=DEFAULT_EVENT_LIMIT if limit is None else limit,
    )

    return AnalyticsResult.from_model(result)
