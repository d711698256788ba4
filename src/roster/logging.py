"""
Structured logging for the Roster API.

Every log line goes through structlog. Lines emitted while a request is being
served carry its ``request_id`` and, once someone has signed up or logged in,
their ``username``.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_username: ContextVar[str | None] = ContextVar("username", default=None)


def add_request_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor that stamps the current request's identity on an event."""
    for key, var in (("request_id", _request_id), ("username", _username)):
        value = var.get()
        if value:
            event_dict.setdefault(key, value)
    return event_dict


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Colored console lines at DEBUG level; otherwise JSON at INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
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
    """Return a 14-character urlsafe id: 8 bytes of microsecond clock, 2 random."""
    raw = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def start_request_context(request_id: str | None = None) -> str:
    """Begin logging for a new request and return its id."""
    request_id = request_id or generate_request_id()
    _request_id.set(request_id)
    _username.set(None)
    return request_id


def bind_username(username: str) -> None:
    """Attach an authenticated username to the current request's log lines."""
    _username.set(username)


def clear_request_context() -> None:
    _request_id.set(None)
    _username.set(None)
