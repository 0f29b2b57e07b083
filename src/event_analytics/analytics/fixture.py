"""Analytics served from a recorded JSON fixture (mock mode)."""

import json
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from ..logging import get_logger
from .base import AnalyticsProvider, FixtureError
from .models import AnalyticsResult

logger = get_logger(__name__)


class FixtureAnalyticsProvider(AnalyticsProvider):
    """Return the ``eventAnalytics`` member of a JSON document, whatever the arguments.

    The file is read on every call so edits to the fixture are picked up
    without a restart. No network requests are made.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def load(self) -> AnalyticsResult:
        """Read and validate the fixture.

        Raises:
            FixtureError: If the file cannot be read or does not hold a valid
                ``eventAnalytics`` document
        """
        try:
            async with aiofiles.open(self.path, encoding="utf-8") as f:
                raw = await f.read()
        except OSError as e:
            raise FixtureError(f"Cannot read mock data fixture {self.path}: {e}") from e

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FixtureError(f"Mock data fixture {self.path} is not valid JSON: {e}") from e

        if not isinstance(document, dict) or "eventAnalytics" not in document:
            raise FixtureError(f"Mock data fixture {self.path} has no 'eventAnalytics' member")

        try:
            return AnalyticsResult.model_validate(document["eventAnalytics"])
        except ValidationError as e:
            raise FixtureError(f"Mock data fixture {self.path} is malformed: {e}") from e

    async def get_event_analytics(
        self, calendar_id: str | None = None, limit: int = 10
    ) -> AnalyticsResult:
        _ = calendar_id, limit  # the fixture is returned verbatim

        logger.info("Serving event analytics from fixture", path=str(self.path))
        return await self.load()
