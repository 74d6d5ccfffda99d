"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOSUITE__SECTION__KEY)
3. Repo YAML (.gosuite/config.yaml)
4. Global YAML (~/.config/gosuite/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    GOSUITE__<SECTION>__<KEY>=<VALUE>

Examples:
    GOSUITE__LOGGING__LEVEL=DEBUG
    GOSUITE__TOOLCHAIN__GO_BINARY=/usr/local/go/bin/go
    GOSUITE__DEBUG__SHOW_LOG=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOSUITE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Test output is written separately; "
        "this only controls diagnostic events.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ToolchainConfig(BaseModel):
    """Go toolchain resolution.

    Env vars:
        GOSUITE__TOOLCHAIN__GO_BINARY: Name or path of the go executable
    """

    go_binary: str = Field(
        default="go",
        description="Name looked up on PATH, or an absolute path to the go binary.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Environment overrides applied to every toolchain invocation "
        "(e.g. GOFLAGS, GOTOOLCHAIN).",
    )
    test_env_vars: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment for test runs and debug sessions. "
        "Applied after the toolchain environment.",
    )


class DiscoveryConfig(BaseModel):
    """Test discovery configuration.

    Env vars:
        GOSUITE__DISCOVERY__INCLUDE_PATTERN: Glob for candidate test files
    """

    include_pattern: str = Field(
        default="**/*_test.go",
        description="Glob (relative to each workspace root) used for listing and watching.",
    )
    extra_excluded_dirs: list[str] = Field(
        default_factory=list,
        description="Directory names never descended in addition to the built-in set.",
    )
    libraries: list[str] = Field(
        default_factory=lambda: ["gocheck", "qtsuite"],
        description="Enabled test libraries (adapter ids).",
    )

    @field_validator("include_pattern")
    @classmethod
    def validate_include_pattern(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("include_pattern must not be empty")
        return v


class DebugConfig(BaseModel):
    """Debug session configuration.

    Env vars:
        GOSUITE__DEBUG__LOG_DIR: Where debugger logs are written
        GOSUITE__DEBUG__SHOW_LOG: Ask the debug adapter to emit its log
    """

    log_dir: str | None = Field(
        default=None,
        description="Directory for per-session debugger logs. Default: .gosuite/logs in the "
        "first workspace root. Only honoured on Linux and macOS.",
    )
    show_log: bool = Field(
        default=True,
        description="Pass showLog to the debug adapter.",
    )


class GoSuiteConfig(BaseModel):
    """Root configuration for gosuite.

    All settings can be configured via:
    1. Environment variables: GOSUITE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)
