"""gosuite error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test execution
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Test execution (7xxx)
    TOOLCHAIN_UNAVAILABLE = 7001
    EMPTY_SELECTION = 7002
    MULTI_DEBUG_UNSUPPORTED = 7003
    DEBUG_SESSION_NOT_STARTED = 7004
    DEBUGGER_UNAVAILABLE = 7005


@dataclass(frozen=True, slots=True)
class GoSuiteError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'EMPTY_SELECTION')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GoSuiteError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ExecutionError(GoSuiteError):
    """Errors reported while running or debugging tests.

    None of these are retried automatically. Per-entry errors leave the
    remaining queue untouched; selection errors reject the whole request
    before anything is executed.
    """

    @classmethod
    def toolchain_unavailable(cls, binary: str) -> "ExecutionError":
        return cls(
            code=ErrorCode.TOOLCHAIN_UNAVAILABLE,
            message=f"cannot resolve `{binary}` execution command",
            details={"binary": binary},
        )

    @classmethod
    def empty_selection(cls) -> "ExecutionError":
        return cls(
            code=ErrorCode.EMPTY_SELECTION,
            message="No tests to run",
        )

    @classmethod
    def multi_debug_unsupported(cls, count: int) -> "ExecutionError":
        return cls(
            code=ErrorCode.MULTI_DEBUG_UNSUPPORTED,
            message="Debugging multiple tests is not supported",
            details={"count": count},
        )

    @classmethod
    def debug_session_not_started(cls, test_id: str) -> "ExecutionError":
        return cls(
            code=ErrorCode.DEBUG_SESSION_NOT_STARTED,
            message="debug session did not start",
            details={"test_id": test_id},
        )

    @classmethod
    def debugger_unavailable(cls) -> "ExecutionError":
        return cls(
            code=ErrorCode.DEBUGGER_UNAVAILABLE,
            message="No debug host is attached",
        )

