"""HTTP client for querying the supergraph over GraphQL."""

from types import TracebackType
from typing import Any

import httpx

from ..logging import get_logger, get_request_id
from .exceptions import UpstreamGraphQLError, UpstreamTransportError

logger = get_logger(__name__)


class SupergraphClient:
    """Async GraphQL client bound to one supergraph endpoint.

    Use as an async context manager so a single connection pool serves every
    query issued within one aggregation:

        async with SupergraphClient(url) as client:
            data = await client.execute(EVENTS_QUERY, {"limit": 10})
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SupergraphClient":
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id
        return headers

    async def execute(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """POST a GraphQL document and return the ``data`` member of the response.

        Args:
            query: GraphQL document
            variables: Variables for the document

        Returns:
            The response ``data`` (may be None when the upstream returns no data)

        Raises:
            UpstreamTransportError: On network failure, non-success status or an
                undecodable body
            UpstreamGraphQLError: If the response carries a GraphQL errors array
        """
        if self._client is None:
            raise RuntimeError("SupergraphClient must be used as an async context manager")

        logger.debug("Querying supergraph", url=self.url, variables=variables)

        try:
            response = await self._client.post(
                self.url,
                json={"query": query, "variables": variables or {}},
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            raise UpstreamTransportError(f"Supergraph query failed: {e}") from e

        if not response.is_success:
            raise UpstreamTransportError(
                f"Supergraph query failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise UpstreamTransportError(
                "Supergraph returned a non-JSON response", status_code=response.status_code
            ) from e

        if not isinstance(result, dict):
            raise UpstreamTransportError(
                "Supergraph returned an unexpected response body",
                status_code=response.status_code,
            )

        errors = result.get("errors")
        if errors:
            raise UpstreamGraphQLError(errors if isinstance(errors, list) else [errors])

        data = result.get("data")
        if data is not None and not isinstance(data, dict):
            raise UpstreamTransportError(
                "Supergraph returned an unexpected data payload",
                status_code=response.status_code,
            )
        return data
