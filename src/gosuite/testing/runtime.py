"""Go toolchain resolution.

The orchestrator never hardcodes where ``go`` lives. It asks a resolver
once per entry; a resolver returning None means the entry is skipped
with a logged error rather than failing the run.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from gosuite.config.models import ToolchainConfig

logger = structlog.get_logger()


@dataclass(frozen=True)
class GoToolchain:
    """A resolved go binary plus the environment overlay it runs with."""

    binary_path: str
    env: dict[str, str] = field(default_factory=dict)

    def build_env(self, test_env: dict[str, str] | None = None) -> dict[str, str]:
        """Process env, then toolchain env, then per-test env. Later wins."""
        env = dict(os.environ)
        env.update(self.env)
        if test_env:
            env.update(test_env)
        return env


class GoToolchainResolver:
    """Resolve the go binary from configuration and PATH."""

    def __init__(self, config: ToolchainConfig) -> None:
        self._config = config

    @property
    def binary_name(self) -> str:
        return self._config.go_binary

    @property
    def test_env_vars(self) -> dict[str, str]:
        return dict(self._config.test_env_vars)

    def resolve(self) -> GoToolchain | None:
        go_exe = shutil.which(self._config.go_binary)
        if not go_exe:
            logger.debug("go_binary_not_found", binary=self._config.go_binary)
            return None
        return GoToolchain(binary_path=go_exe, env=dict(self._config.env))
