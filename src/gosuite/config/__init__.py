"""Config module exports."""

from gosuite.config.loader import GoSuiteSettings, default_debug_log_dir, load_config
from gosuite.config.models import (
    DebugConfig,
    DiscoveryConfig,
    GoSuiteConfig,
    LoggingConfig,
    ToolchainConfig,
)

__all__ = [
    "load_config",
    "default_debug_log_dir",
    "GoSuiteConfig",
    "GoSuiteSettings",
    "DebugConfig",
    "DiscoveryConfig",
    "LoggingConfig",
    "ToolchainConfig",
]
