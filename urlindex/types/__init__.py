"""Error types for urlindex."""

from urlindex.types.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    FileReadError,
    RecoveryAction,
    ResourceError,
    UrlIndexError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "ErrorContext",
    "ErrorSeverity",
    "FileReadError",
    "RecoveryAction",
    "ResourceError",
    "UrlIndexError",
    "ValidationError",
]
