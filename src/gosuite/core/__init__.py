"""Core module exports."""

from gosuite.core.errors import (
    ConfigError,
    ErrorCode,
    ExecutionError,
    GoSuiteError,
)
from gosuite.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "ExecutionError",
    "GoSuiteError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
