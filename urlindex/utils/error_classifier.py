"""Error classification for per-file scan failures.

A lookup table maps exception types to a category and a retryability flag.
RouteIndex attaches the category to every ScanFailure so that callers (the
watcher, the CLI) can tell a vanished file from a permissions problem.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from urlindex.types.errors import ErrorCode, UrlIndexError


class ErrorCategory(str, Enum):
    """High-level error categories for handling decisions."""

    TRANSIENT = "transient"
    PERMANENT = "permanent"
    ENCODING = "encoding"
    SYSTEM_ERROR = "system_error"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ErrorClassification:
    """Classification result."""

    category: ErrorCategory
    is_retryable: bool


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_TYPE_TABLE: list[tuple[tuple[type[BaseException], ...], ErrorClassification]] = [
    (
        # A file deleted between discovery and read shows up here.
        (FileNotFoundError, NotADirectoryError, IsADirectoryError),
        ErrorClassification(ErrorCategory.PERMANENT, False),
    ),
    (
        (PermissionError, TimeoutError, InterruptedError, BlockingIOError),
        ErrorClassification(ErrorCategory.TRANSIENT, True),
    ),
    (
        (UnicodeDecodeError,),
        ErrorClassification(ErrorCategory.ENCODING, False),
    ),
    (
        (MemoryError,),
        ErrorClassification(ErrorCategory.SYSTEM_ERROR, False),
    ),
    (
        (OSError,),
        ErrorClassification(ErrorCategory.SYSTEM_ERROR, True),
    ),
]

_CODE_TABLE: dict[ErrorCode, ErrorClassification] = {
    ErrorCode.FILE_NOT_FOUND: ErrorClassification(ErrorCategory.PERMANENT, False),
    ErrorCode.FILE_TOO_LARGE: ErrorClassification(ErrorCategory.PERMANENT, False),
    ErrorCode.PERMISSION_DENIED: ErrorClassification(ErrorCategory.TRANSIENT, True),
    ErrorCode.FILE_READ_FAILED: ErrorClassification(ErrorCategory.SYSTEM_ERROR, True),
}

_UNKNOWN = ErrorClassification(ErrorCategory.UNKNOWN, False)


def classify_error(error: BaseException) -> ErrorClassification:
    """Classify an error into category and retryability."""
    if isinstance(error, UrlIndexError):
        if error.original_error is not None:
            return classify_error(error.original_error)
        return _CODE_TABLE.get(error.code, _UNKNOWN)

    for exc_types, cls in _TYPE_TABLE:
        if isinstance(error, exc_types):
            return cls

    return _UNKNOWN


def is_retryable(error: BaseException) -> bool:
    """Check if an error is retryable."""
    return classify_error(error).is_retryable
