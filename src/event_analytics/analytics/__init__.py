"""
Event analytics: providers, aggregation and value types.
"""

from .aggregator import (
    AnalyticsAggregator,
    aggregate_event_summaries,
    resolve_location,
    summarize_event,
)
from .base import AnalyticsProvider, FixtureError, UpstreamError
from .factory import create_analytics_provider
from .fixture import FixtureAnalyticsProvider
from .models import AnalyticsResult, EventQueryParams, EventSummary

__all__ = [
    "AnalyticsProvider",
    "AnalyticsAggregator",
    "FixtureAnalyticsProvider",
    "create_analytics_provider",
    "aggregate_event_summaries",
    "summarize_event",
    "resolve_location",
    "AnalyticsResult",
    "EventSummary",
    "EventQueryParams",
    "UpstreamError",
    "FixtureError",
]
