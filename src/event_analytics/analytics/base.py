"""Analytics provider interface and exceptions."""

from abc import ABC, abstractmethod

from .models import AnalyticsResult


class UpstreamError(Exception):
    """Raised when event analytics cannot be computed from the supergraph."""

    pass


class FixtureError(Exception):
    """Raised when the mock-data fixture is missing or malformed."""

    pass


class AnalyticsProvider(ABC):
    """Source of event analytics.

    Implementations either aggregate live supergraph data or serve a
    pre-recorded result; callers cannot tell them apart.
    """

    @abstractmethod
    async def get_event_analytics(
        self, calendar_id: str | None = None, limit: int = 10
    ) -> AnalyticsResult:
        """Compute analytics for up to ``limit`` events of a calendar."""
        pass
