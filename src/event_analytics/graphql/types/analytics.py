"""
Analytics GraphQL type definitions
"""

import strawberry

from ...analytics import models


@strawberry.type
class EventSummary:
    """Attendance summary of a single event."""

    id: strawberry.ID
    name: str | None
    date: str | None
    attendee_count: int
    checked_in_count: int
    location: str | None

    @classmethod
    def from_model(cls, summary: models.EventSummary) -> "EventSummary":
        return cls(
            id=strawberry.ID(summary.id),
            name=summary.name,
            date=summary.date,
            attendee_count=summary.attendee_count,
            checked_in_count=summary.checked_in_count,
            location=summary.location,
        )


@strawberry.type
class AnalyticsResult:
    """Aggregated attendance analytics over a page of events."""

    total_events: int
    total_attendees: int
    average_attendees_per_event: float
    check_in_rate: float
    events: list[EventSummary]

    @classmethod
    def from_model(cls, result: models.AnalyticsResult) -> "AnalyticsResult":
        return cls(
            total_events=result.total_events,
            total_attendees=result.total_attendees,
            average_attendees_per_event=result.average_attendees_per_event,
            check_in_rate=result.check_in_rate,
            events=[EventSummary.from_model(summary) for summary in result.events],
        )
