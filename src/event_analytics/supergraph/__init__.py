"""Supergraph access: GraphQL documents, HTTP client and its exceptions."""

from .client import SupergraphClient
from .exceptions import SupergraphError, UpstreamGraphQLError, UpstreamTransportError
from .queries import EVENT_GUESTS_QUERY, EVENTS_QUERY

__all__ = [
    "SupergraphClient",
    "SupergraphError",
    "UpstreamTransportError",
    "UpstreamGraphQLError",
    "EVENTS_QUERY",
    "EVENT_GUESTS_QUERY",
]
