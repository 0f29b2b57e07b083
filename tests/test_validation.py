"""
Tests for startup configuration validation.
"""

from pathlib import Path

import pytest

from event_analytics.config import Settings
from event_analytics.validation import ValidationError, validate_startup_configuration


class TestValidateStartupConfiguration:
    @pytest.mark.asyncio
    async def test_valid_mock_fixture(self, mock_settings: Settings):
        results = await validate_startup_configuration(mock_settings)

        assert results["overall_valid"] is True
        assert results["data_source"]["mode"] == "mock"
        assert results["data_source"]["total_events"] == 2

    @pytest.mark.asyncio
    async def test_missing_fixture_in_development(self, tmp_path: Path):
        settings = Settings(use_mock_data=True, mock_data_path=str(tmp_path / "nope.json"))

        results = await validate_startup_configuration(settings)

        assert results["overall_valid"] is False
        assert "Cannot read mock data fixture" in results["data_source"]["errors"][0]

    @pytest.mark.asyncio
    async def test_missing_fixture_in_production_raises(self, tmp_path: Path):
        settings = Settings(
            use_mock_data=True,
            mock_data_path=str(tmp_path / "nope.json"),
            environment="production",
        )

        with pytest.raises(ValidationError):
            await validate_startup_configuration(settings)

    @pytest.mark.asyncio
    async def test_valid_supergraph_url(self, live_settings: Settings):
        results = await validate_startup_configuration(live_settings)

        assert results["overall_valid"] is True
        assert results["data_source"]["mode"] == "supergraph"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["localhost:4000", "ftp://router", "not a url"])
    async def test_invalid_supergraph_url(self, url: str):
        results = await validate_startup_configuration(Settings(supergraph_url=url))

        assert results["overall_valid"] is False
        assert "absolute http(s) URL" in results["data_source"]["errors"][0]

    @pytest.mark.asyncio
    async def test_invalid_supergraph_url_in_production_raises(self):
        settings = Settings(supergraph_url="router", environment="prod")

        with pytest.raises(ValidationError):
            await validate_startup_configuration(settings)
