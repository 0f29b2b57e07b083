"""
Value types for event analytics.

Upstream records (``Raw*``) mirror the supergraph's camelCase payloads; the
summary types are what the subgraph returns. All of them are request-scoped
and immutable once built.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model reading and writing camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )


class EventQueryParams(CamelModel):
    """Arguments of one analytics request."""

    calendar_id: str | None = None
    limit: int = Field(default=10, ge=0)


# Upstream records


class GeoAddress(CamelModel):
    city_state: str | None = None
    full_address: str | None = None


class RawEvent(CamelModel):
    id: str
    name: str | None = None
    start_at: str | None = None
    geo_address_json: GeoAddress | None = None


class RawEventEntry(CamelModel):
    api_id: str | None = None
    event: RawEvent


class EventsPage(CamelModel):
    entries: list[RawEventEntry] | None = None


class RawGuest(CamelModel):
    id: str | None = None
    checked_in_at: str | None = None


class RawGuestEntry(CamelModel):
    guest: RawGuest

    @property
    def is_checked_in(self) -> bool:
        return bool(self.guest.checked_in_at)


class GuestsPage(CamelModel):
    entries: list[RawGuestEntry] | None = None


# Derived summaries


class EventSummary(CamelModel):
    """Attendance summary of a single event."""

    id: str
    name: str | None = None
    date: str | None = None
    attendee_count: int = Field(ge=0)
    checked_in_count: int = Field(ge=0)
    location: str | None = None

    @model_validator(mode="after")
    def check_counts(self) -> "EventSummary":
        if self.checked_in_count > self.attendee_count:
            raise ValueError("checkedInCount cannot exceed attendeeCount")
        return self


class AnalyticsResult(CamelModel):
    """Aggregated analytics over a page of events."""

    total_events: int = Field(ge=0)
    total_attendees: int = Field(ge=0)
    average_attendees_per_event: float = Field(ge=0)
    check_in_rate: float = Field(ge=0, le=1)
    events: list[EventSummary] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "AnalyticsResult":
        """Result returned when the upstream has no events."""
        return cls(
            total_events=0,
            total_attendees=0,
            average_attendees_per_event=0,
            check_in_rate=0,
            events=[],
        )
