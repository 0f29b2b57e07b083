"""
Tests for the mock-data fixture provider and provider selection.
"""

import json
from pathlib import Path

import pytest

from event_analytics.analytics.aggregator import AnalyticsAggregator
from event_analytics.analytics.base import FixtureError
from event_analytics.analytics.factory import create_analytics_provider
from event_analytics.analytics.fixture import FixtureAnalyticsProvider
from event_analytics.config import DEFAULT_MOCK_DATA_PATH, Settings


class TestFixtureAnalyticsProvider:
    @pytest.mark.asyncio
    async def test_returns_fixture_verbatim(self, mock_data_file: Path):
        provider = FixtureAnalyticsProvider(mock_data_file)
        expected = json.loads(mock_data_file.read_text())["eventAnalytics"]

        result = await provider.get_event_analytics()

        assert result.model_dump(by_alias=True) == expected

    @pytest.mark.asyncio
    async def test_ignores_arguments(self, mock_data_file: Path):
        provider = FixtureAnalyticsProvider(mock_data_file)

        first = await provider.get_event_analytics("cal-1", 1)
        second = await provider.get_event_analytics("cal-2", 500)

        assert first == second
        assert first.total_events == 2

    @pytest.mark.asyncio
    async def test_packaged_fixture_is_valid(self):
        result = await FixtureAnalyticsProvider(DEFAULT_MOCK_DATA_PATH).load()

        assert result.total_events == len(result.events)
        assert result.total_attendees == sum(e.attendee_count for e in result.events)

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path):
        provider = FixtureAnalyticsProvider(tmp_path / "missing.json")

        with pytest.raises(FixtureError, match="Cannot read mock data fixture"):
            await provider.get_event_analytics()

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(FixtureError, match="not valid JSON"):
            await FixtureAnalyticsProvider(path).load()

    @pytest.mark.asyncio
    async def test_missing_event_analytics_member(self, tmp_path: Path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"somethingElse": {}}), encoding="utf-8")

        with pytest.raises(FixtureError, match="no 'eventAnalytics' member"):
            await FixtureAnalyticsProvider(path).load()

    @pytest.mark.asyncio
    async def test_wrong_shape(self, tmp_path: Path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"eventAnalytics": {"totalEvents": "many"}}), encoding="utf-8")

        with pytest.raises(FixtureError, match="is malformed"):
            await FixtureAnalyticsProvider(path).load()


class TestCreateAnalyticsProvider:
    def test_mock_mode_uses_fixture(self, mock_settings: Settings, mock_data_file: Path):
        provider = create_analytics_provider(mock_settings)

        assert isinstance(provider, FixtureAnalyticsProvider)
        assert provider.path == mock_data_file

    def test_mock_mode_defaults_to_packaged_fixture(self):
        provider = create_analytics_provider(Settings(use_mock_data=True))

        assert isinstance(provider, FixtureAnalyticsProvider)
        assert provider.path == DEFAULT_MOCK_DATA_PATH

    def test_live_mode_uses_aggregator(self):
        settings = Settings(
            use_mock_data=False, supergraph_url="http://router:4000/", supergraph_timeout=5.0
        )

        provider = create_analytics_provider(settings)

        assert isinstance(provider, AnalyticsAggregator)
        assert provider.supergraph_url == "http://router:4000/"
        assert provider.timeout == 5.0

    def test_mode_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ANALYTICS_USE_MOCK_DATA", "true")

        provider = create_analytics_provider(Settings())

        assert isinstance(provider, FixtureAnalyticsProvider)

    @pytest.mark.asyncio
    async def test_mock_mode_makes_no_network_requests(
        self, mock_settings: Settings, monkeypatch: pytest.MonkeyPatch
    ):
        import httpx

        def fail(*args, **kwargs):
            raise AssertionError("network access in mock mode")

        monkeypatch.setattr(httpx.AsyncClient, "send", fail)

        result = await create_analytics_provider(mock_settings).get_event_analytics("cal-1", 3)

        assert result.total_events == 2
