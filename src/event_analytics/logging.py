"""
Structured logging for the subgraph.

Log lines are rendered by structlog on top of the stdlib ``logging`` module:
coloured console output while developing, one JSON object per line otherwise.
Every line logged while a request is being served carries that request's id,
which is also forwarded to the supergraph so both sides can be correlated.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def add_request_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor stamping the current request id on each event."""
    request_id = _request_id.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def _level_for(debug: bool, level: str | None) -> int:
    if not level:
        return logging.DEBUG if debug else logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    debug: bool = False, level: str | None = None, stream: TextIO | None = None
) -> None:
    """Route structlog through stdlib logging.

    Args:
        debug: Render for humans instead of as JSON
        level: Level name such as "warning"; DEBUG or INFO depending on
            ``debug`` when omitted
        stream: Where log lines go, stdout by default. Commands that print
            machine-readable output pass stderr.
    """
    logging.basicConfig(
        level=_level_for(debug, level),
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    if debug:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_id,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a 14 character URL-safe id.

    The first six bytes are the millisecond clock, so ids sort roughly by
    arrival; the last four are random.
    """
    millis = time.time_ns() // 1_000_000
    raw = millis.to_bytes(6, byteorder="big") + secrets.token_bytes(4)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Make ``request_id`` (or a new id) the current request's id and return it."""
    request_id = request_id or generate_request_id()
    _request_id.set(request_id)
    return request_id


def clear_request_context() -> None:
    _request_id.set(None)


def get_request_id() -> str | None:
    return _request_id.get()
