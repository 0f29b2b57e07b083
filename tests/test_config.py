"""
Tests for settings loading.
"""

from pathlib import Path

import pytest

from event_analytics.config import DEFAULT_MOCK_DATA_PATH, Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)  # keep a developer .env out of the way

        settings = Settings()

        assert settings.supergraph_url == "http://localhost:4000"
        assert settings.use_mock_data is False
        assert settings.api_port == 4001
        assert settings.resolved_mock_data_path() == DEFAULT_MOCK_DATA_PATH

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ANALYTICS_SUPERGRAPH_URL", "http://router:4000/graphql")
        monkeypatch.setenv("ANALYTICS_USE_MOCK_DATA", "true")
        monkeypatch.setenv("ANALYTICS_MOCK_DATA_PATH", "/data/fixture.json")
        monkeypatch.setenv("ANALYTICS_SUPERGRAPH_TIMEOUT", "2.5")

        settings = Settings()

        assert settings.supergraph_url == "http://router:4000/graphql"
        assert settings.use_mock_data is True
        assert settings.supergraph_timeout == 2.5
        assert settings.resolved_mock_data_path() == Path("/data/fixture.json")

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), ("PROD", True), ("staging", False), ("development", False)],
    )
    def test_is_production(self, environment: str, expected: bool):
        assert Settings(environment=environment).is_production is expected
