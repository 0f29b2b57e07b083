"""
Event analytics aggregated from live supergraph data.

One query lists the events of a calendar, then one guest-list query per event
is issued concurrently. The combined data is reduced into totals, an average
attendance per event and an overall check-in rate.
"""

import asyncio
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from ..logging import get_logger
from ..supergraph.client import SupergraphClient
from ..supergraph.exceptions import SupergraphError
from ..supergraph.queries import EVENT_GUESTS_QUERY, EVENTS_QUERY
from .base import AnalyticsProvider, UpstreamError
from .models import (
    AnalyticsResult,
    EventQueryParams,
    EventsPage,
    EventSummary,
    GeoAddress,
    GuestsPage,
    RawEventEntry,
    RawGuestEntry,
)

logger = get_logger(__name__)


def resolve_location(geo: GeoAddress | None) -> str | None:
    """Pick the display location: city/state, then full address, then nothing."""
    if geo is None:
        return None
    return geo.city_state or geo.full_address or None


def summarize_event(entry: RawEventEntry, guests: Sequence[RawGuestEntry]) -> EventSummary:
    """Build the summary of one event from its guest list."""
    event = entry.event
    return EventSummary(
        id=event.id,
        name=event.name,
        date=event.start_at,
        attendee_count=len(guests),
        checked_in_count=sum(1 for guest in guests if guest.is_checked_in),
        location=resolve_location(event.geo_address_json),
    )


def aggregate_event_summaries(summaries: Sequence[EventSummary]) -> AnalyticsResult:
    """Reduce per-event summaries into an analytics result.

    Ratios fall back to 0 when their denominator is 0.
    """
    total_events = len(summaries)
    total_attendees = sum(summary.attendee_count for summary in summaries)
    total_checked_in = sum(summary.checked_in_count for summary in summaries)

    return AnalyticsResult(
        total_events=total_events,
        total_attendees=total_attendees,
        average_attendees_per_event=total_attendees / total_events if total_events > 0 else 0,
        check_in_rate=total_checked_in / total_attendees if total_attendees > 0 else 0,
        events=list(summaries),
    )


class AnalyticsAggregator(AnalyticsProvider):
    """Compute event analytics by querying the supergraph."""

    def __init__(
        self,
        supergraph_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.supergraph_url = supergraph_url
        self.timeout = timeout
        self._transport = transport

    def _create_client(self) -> SupergraphClient:
        return SupergraphClient(self.supergraph_url, timeout=self.timeout, transport=self._transport)

    async def get_event_analytics(
        self, calendar_id: str | None = None, limit: int = 10
    ) -> AnalyticsResult:
        """Aggregate analytics for up to ``limit`` events of ``calendar_id``.

        Raises:
            pydantic.ValidationError: If ``limit`` is negative
            UpstreamError: If the event listing or any guest listing fails
        """
        params = EventQueryParams(calendar_id=calendar_id, limit=limit)

        logger.info(
            "Fetching event analytics", calendar_id=params.calendar_id, limit=params.limit
        )

        try:
            async with self._create_client() as client:
                entries = await self._fetch_events(client, params)
                if not entries:
                    logger.info("No events found", calendar_id=params.calendar_id)
                    return AnalyticsResult.empty()

                # Fan out one guest query per event; the first failure fails the call
                guest_lists = await asyncio.gather(
                    *(self._fetch_guests(client, entry.event.id) for entry in entries)
                )
        except (SupergraphError, ValidationError) as e:
            logger.error(
                "Error fetching event analytics",
                calendar_id=params.calendar_id,
                error=str(e),
            )
            raise UpstreamError(f"Failed to fetch event analytics: {e}") from e

        summaries = [
            summarize_event(entry, guests)
            for entry, guests in zip(entries, guest_lists, strict=True)
        ]
        result = aggregate_event_summaries(summaries)

        logger.info(
            "Event analytics computed",
            calendar_id=params.calendar_id,
            total_events=result.total_events,
            total_attendees=result.total_attendees,
        )
        return result

    async def _fetch_events(
        self, client: SupergraphClient, params: EventQueryParams
    ) -> list[RawEventEntry]:
        data = await client.execute(
            EVENTS_QUERY, {"calendarId": params.calendar_id, "limit": params.limit}
        )
        page = EventsPage.model_validate((data or {}).get("events") or {})
        return page.entries or []

    async def _fetch_guests(self, client: SupergraphClient, event_id: str) -> list[RawGuestEntry]:
        data = await client.execute(EVENT_GUESTS_QUERY, {"eventId": event_id})
        # A missing guest container counts as an event without guests
        page = GuestsPage.model_validate((data or {}).get("eventGuests") or {})
        return page.entries or []
