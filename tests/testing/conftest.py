"""Shared fixtures for testing-subsystem tests.

The ``go`` binary is replaced by a small shell wrapper around a Python
script (see the root conftest), so run-path tests exercise real
subprocesses.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from gosuite.config.models import ToolchainConfig
from gosuite.testing.catalog import TestCatalog
from gosuite.testing.library import library_registry
from gosuite.testing.runtime import GoToolchainResolver

GOCHECK_SUITE = """package p

import "gopkg.in/check.v1"

func (s *Suite) TestX(c *check.C) {}

func (s *Suite) TestY(c *check.C) {}
"""


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "ws"
    root.mkdir()
    return root


@pytest.fixture
def make_resolver(
    fake_go: Path, record_file: Path
) -> Callable[..., GoToolchainResolver]:
    def make(mode: str = "pass", **env: str) -> GoToolchainResolver:
        return GoToolchainResolver(
            ToolchainConfig(
                go_binary=str(fake_go),
                env={"FAKE_GO_MODE": mode, "FAKE_GO_RECORD": str(record_file), **env},
                test_env_vars={"FAKE_GO_MARKER": "from-test-env"},
            )
        )

    return make


@pytest.fixture
def make_catalog(workspace: Path) -> Callable[..., Any]:
    async def make(files: dict[str, str] | None = None) -> TestCatalog:
        files = files if files is not None else {"pkg/a_test.go": GOCHECK_SUITE}
        catalog = TestCatalog([workspace], library_registry.create())
        for rel, content in files.items():
            path = workspace / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        await catalog.full_rescan()
        return catalog

    return make
