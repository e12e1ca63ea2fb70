"""
urlindex utility modules.

- Logging (loguru, STDERR, correlation IDs)
- Error classification for per-file scan failures
- Serialization of index values for JSON output
"""

from .error_classifier import (
    ErrorCategory,
    ErrorClassification,
    classify_error,
    is_retryable,
)
from .logger import (
    RequestContext,
    configure_logging,
    generate_request_id,
    get_correlation_id,
    get_request_context,
    is_debug_enabled,
    logger,
    with_correlation_id,
)
from .serialization import serialize_to_primitives

__all__ = [
    "ErrorCategory",
    "ErrorClassification",
    "RequestContext",
    "classify_error",
    "configure_logging",
    "generate_request_id",
    "get_correlation_id",
    "get_request_context",
    "is_debug_enabled",
    "is_retryable",
    "logger",
    "serialize_to_primitives",
    "with_correlation_id",
]
