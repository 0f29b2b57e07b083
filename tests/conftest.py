"""
Shared pytest fixtures and configuration for all tests.
"""

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from event_analytics.config import Settings

SUPERGRAPH_URL = "http://supergraph.test/"

Handler = Callable[[str, dict[str, Any]], dict[str, Any] | httpx.Response]


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def make_event_entry(
    event_id: str,
    name: str | None = None,
    start_at: str = "2025-03-12T18:00:00.000Z",
    city_state: str | None = None,
    full_address: str | None = None,
) -> dict[str, Any]:
    """Build an upstream event entry as the supergraph returns it."""
    geo = None
    if city_state is not None or full_address is not None:
        geo = {"cityState": city_state, "fullAddress": full_address}
    return {
        "apiId": f"api-{event_id}",
        "event": {
            "id": event_id,
            "name": name or f"Event {event_id}",
            "startAt": start_at,
            "geoAddressJson": geo,
        },
    }


def make_guest_entries(total: int, checked_in: int) -> list[dict[str, Any]]:
    """Build ``total`` upstream guest entries, the first ``checked_in`` of them checked in."""
    return [
        {
            "guest": {
                "id": f"gst-{i}",
                "checkedInAt": "2025-03-12T18:05:00.000Z" if i < checked_in else None,
            }
        }
        for i in range(total)
    ]


def operation_of(body: dict[str, Any]) -> str:
    return "GetEventGuests" if "GetEventGuests" in body["query"] else "GetEvents"


class FakeSupergraph:
    """Routes supergraph POSTs by operation to a handler and records them.

    ``handler(operation, variables)`` returns either a JSON body (dict) or a
    ready-made ``httpx.Response``.
    """

    def __init__(self, handler: Handler):
        self.handler = handler
        self.requests: list[dict[str, Any]] = []
        self.headers: list[httpx.Headers] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        self.headers.append(request.headers)

        result = self.handler(operation_of(body), body.get("variables") or {})
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def operations(self) -> list[str]:
        return [operation_of(body) for body in self.requests]


@pytest.fixture
def mock_data_file(tmp_path: Path) -> Path:
    """A fixture document in the mock-data format."""
    document = {
        "eventAnalytics": {
            "totalEvents": 2,
            "totalAttendees": 10,
            "averageAttendeesPerEvent": 5,
            "checkInRate": 0.5,
            "events": [
                {
                    "id": "evt-1",
                    "name": "Launch Party",
                    "date": "2025-01-01T19:00:00.000Z",
                    "attendeeCount": 6,
                    "checkedInCount": 4,
                    "location": "Austin, TX",
                },
                {
                    "id": "evt-2",
                    "name": "Retro",
                    "date": "2025-01-08T19:00:00.000Z",
                    "attendeeCount": 4,
                    "checkedInCount": 1,
                    "location": None,
                },
            ],
        }
    }
    path = tmp_path / "mock-data.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def mock_settings(mock_data_file: Path) -> Settings:
    return Settings(use_mock_data=True, mock_data_path=str(mock_data_file), debug=False)


@pytest.fixture
def live_settings() -> Settings:
    return Settings(use_mock_data=False, supergraph_url=SUPERGRAPH_URL, debug=False)
