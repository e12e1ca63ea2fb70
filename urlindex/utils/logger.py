"""
Logging for urlindex.

All modules log through the loguru ``logger`` exported here. Output goes to
STDERR so that command output on STDOUT (trees, JSON, snippets) stays clean
for piping.

Correlation ID Support:
- Each rescan runs under its own correlation ID (``with_correlation_id``)
- A patcher copies the active ID into ``record["extra"]["correlation_id"]``
- Log lines emitted by concurrent read workers carry the ID of their rescan
  when the caller propagates the context (see RouteIndex.rescan)
"""

import os
import secrets
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Generator

from loguru import logger as loguru_logger

# ============================================================================
# Request Context
# ============================================================================


@dataclass
class RequestContext:
    """Request context for correlation ID tracking."""

    correlation_id: str
    operation: str | None = None
    start_time: float | None = None


_request_context: ContextVar[RequestContext | None] = ContextVar(
    "request_context", default=None
)


def generate_request_id() -> str:
    """
    Generate a unique request ID for correlation.

    Format: req_<timestamp_base36>_<random_hex>
    """
    timestamp = int(time.time() * 1000)
    random_part = secrets.token_hex(4)
    return f"req_{base36_encode(timestamp)}_{random_part}"


def base36_encode(number: int) -> str:
    """Encode a non-negative integer to base36 string."""
    if number == 0:
        return "0"

    chars = "0123456789abcdefghijklmnopqrstuvwxyz"
    result = []
    while number:
        result.append(chars[number % 36])
        number //= 36
    return "".join(reversed(result))


def get_request_context() -> RequestContext | None:
    """Get the current request context (if any)."""
    return _request_context.get()


def get_correlation_id() -> str | None:
    """Get the current correlation ID (if any)."""
    ctx = get_request_context()
    return ctx.correlation_id if ctx else None


@contextmanager
def with_correlation_id(
    correlation_id: str,
    operation: str | None = None,
) -> Generator[RequestContext, None, None]:
    """
    Context manager for running code with a correlation ID.

    All log messages within this context include the correlation ID.

    Args:
        correlation_id: The correlation ID to use
        operation: Optional operation name for additional context

    Yields:
        The RequestContext object
    """
    context = RequestContext(
        correlation_id=correlation_id,
        operation=operation,
        start_time=time.time(),
    )
    token = _request_context.set(context)
    try:
        yield context
    finally:
        _request_context.reset(token)


# ============================================================================
# Logger Configuration
# ============================================================================

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[correlation_id]}</cyan> | {name}:{function} - <level>{message}</level>"
)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled through the environment."""
    return os.environ.get("URLINDEX_DEBUG", "").lower() == "true"


def _add_correlation_id(record: Any) -> None:
    correlation_id = get_correlation_id()
    if correlation_id:
        record["extra"]["correlation_id"] = correlation_id


def configure_logging(debug: bool = False) -> None:
    """Install the single STDERR sink.

    Args:
        debug: Log at DEBUG level. ``URLINDEX_DEBUG=true`` has the same effect.
    """
    level = "DEBUG" if debug or is_debug_enabled() else "WARNING"
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level, format=LOG_FORMAT)


loguru_logger.configure(extra={"correlation_id": "-"})

# Export the patched logger for direct use
logger = loguru_logger.patch(_add_correlation_id)
