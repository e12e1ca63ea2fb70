"""
Structured error types for urlindex.

Errors carry a numeric code, a user-facing message, and optional context
and recovery hints. The engine itself raises almost nothing: per-file read
failures are caught inside a rescan and reported, not propagated. These
types are for the edges (configuration, CLI input, file access).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from urlindex.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # File System Errors (2000-2999)
    FILE_NOT_FOUND = 2001
    FILE_READ_FAILED = 2002
    FILE_WRITE_FAILED = 2003
    DIRECTORY_NOT_FOUND = 2004
    PERMISSION_DENIED = 2005
    FILE_TOO_LARGE = 2006

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001

    # User Input Errors (6000-6999)
    INVALID_ARGS = 6001
    ROUTE_NOT_FOUND = 6002
    VALIDATION_FAILED = 6003


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    file_path: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class UrlIndexError(Exception):
    """Base error class for urlindex."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error
        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": str(ErrorSeverity(self.severity).value),
            "context": {
                "operation": self.context.operation,
                "file_path": self.context.file_path,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(UrlIndexError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class ValidationError(UrlIndexError):
    """Error related to input validation failures."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Validation failed.",
            severity=ErrorSeverity.LOW,
            context=context,
            recovery_actions=recovery_actions,
        )


class ResourceError(UrlIndexError):
    """Error related to resource access (directories, config files)."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.DIRECTORY_NOT_FOUND,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Resource access failed.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class FileReadError(ResourceError):
    """A routing module could not be read as text."""

    def __init__(
        self,
        file_path: str,
        reason: str,
        code: ErrorCode = ErrorCode.FILE_READ_FAILED,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            message=f"Cannot read {file_path}: {reason}",
            user_message=f"Skipped unreadable file: {file_path}",
            code=code,
            context=ErrorContext(operation="read", file_path=file_path),
            original_error=original_error,
        )
        self.file_path = file_path
        self.reason = reason
