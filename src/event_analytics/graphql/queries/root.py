"""
Root GraphQL query definitions
"""

import strawberry

from ..types.analytics import AnalyticsResult


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def event_analytics(
        self,
        info: strawberry.Info,
        calendar_id: strawberry.ID | None = None,
        limit: int | None = 10,
    ) -> AnalyticsResult:
        """Attendance analytics aggregated over the events of a calendar."""
        from ..resolvers.analytics import resolve_event_analytics

        return await resolve_event_analytics(info, calendar_id, limit)
