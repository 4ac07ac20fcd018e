"""Structured logging with request_id support.

Uses structlog for structured logging with JSON output.  Every log entry
carries the request_id of the analytics call that produced it, so all
lines emitted for one snapshot can be correlated.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Iterator

import structlog

if TYPE_CHECKING:
    from ..core.config import Settings

_request_id: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """Current request ID, or an empty string outside a request."""
    return _request_id.get()


@contextmanager
def request_scope() -> Iterator[str]:
    """Bind a fresh request ID for the duration of the block.

    The previous ID is restored on exit, so log lines emitted by the
    caller afterwards do not carry this request's ID.
    """
    rid = uuid.uuid4().hex
    token = _request_id.set(rid)
    try:
        yield rid
    finally:
        _request_id.reset(token)


def _add_request_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add request_id when one is bound."""
    rid = _request_id.get()
    if rid:
        event_dict["request_id"] = rid
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for production, "console" for development.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        _add_request_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    """Apply the ``observability`` section of ``settings``."""
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
