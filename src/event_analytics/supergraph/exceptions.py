"""Exceptions raised by the supergraph client."""

from typing import Any


class SupergraphError(Exception):
    """Base exception for supergraph queries."""

    pass


class UpstreamTransportError(SupergraphError):
    """The supergraph could not be reached or answered with a failure status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamGraphQLError(SupergraphError):
    """The supergraph answered with a GraphQL ``errors`` payload."""

    def __init__(self, errors: list[Any]):
        self.errors = errors
        messages = [
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in errors
        ]
        super().__init__(f"GraphQL errors: {'; '.join(messages)}")
