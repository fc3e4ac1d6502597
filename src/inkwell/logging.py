"""
Centralized logging configuration using structlog

Every log line emitted while a request is in flight carries the request id
and, for ``/graphql`` calls, the GraphQL operation name.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Per-request logging context, set by LoggingContextMiddleware
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


class RequestContextFilter:
    """Add the request id and GraphQL operation to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # Required by the structlog processor interface
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict["request_id"] = request_id

        # Explicit keyword wins over the ambient operation
        graphql_operation = graphql_operation_ctx.get()
        if graphql_operation:
            event_dict.setdefault("graphql_operation", graphql_operation)

        return event_dict


def configure_logging(debug: bool = False) -> None:
    """Configure structlog for the Inkwell server.

    Args:
        debug: If True, render colored console output at DEBUG level.
            Otherwise emit one JSON object per line at INFO level.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    # structlog hands finished lines to stdlib logging, which only prints them
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        # Drop events below the stdlib level before doing any work
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        # Render exc_info into an "exception" string
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact, roughly time-ordered request id.

    Eight bytes of microsecond timestamp plus two random bytes, url-safe
    base64 encoded without padding (14 characters, e.g. 'AAYJd3Xr9mF2xQ').
    """
    timestamp_us = int(time.time() * 1_000_000)
    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Set the logging context for the current request.

    Args:
        request_id: Request id to use (generates one if None)
        graphql_operation: Operation name of a ``/graphql`` call, if any

    Returns:
        The request id now in effect
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    graphql_operation_ctx.set(graphql_operation)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    graphql_operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def get_graphql_operation() -> str | None:
    return graphql_operation_ctx.get()
