"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides a fake ``go`` binary shared by the testing and CLI suites.
"""

import json
import stat
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local gosuite package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of gosuite modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("gosuite"):
        del sys.modules[module_name]

# Records its invocation, then behaves according to FAKE_GO_MODE.
_FAKE_GO_SCRIPT = """
import json, os, sys, time

record = os.environ.get("FAKE_GO_RECORD")
if record:
    with open(record, "a") as f:
        f.write(json.dumps({
            "args": sys.argv[1:],
            "cwd": os.getcwd(),
            "marker": os.environ.get("FAKE_GO_MARKER"),
        }) + "\\n")

mode = os.environ.get("FAKE_GO_MODE", "pass")
if mode == "pass":
    print("ok  \\tp\\t0.01s")
    sys.exit(0)
if mode == "fail":
    print("--- FAIL: boom")
    print("went wrong", file=sys.stderr)
    sys.exit(1)
if mode == "hang":
    with open(os.environ["FAKE_GO_PIDFILE"], "w") as f:
        f.write(str(os.getpid()))
    time.sleep(60)
"""


def _write_fake_go(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    script = directory / "fake_go.py"
    script.write_text(_FAKE_GO_SCRIPT)
    wrapper = directory / "go"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return wrapper


def _read_records(path: Path) -> list[dict[str, Any]]:
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text().splitlines() if line]


@pytest.fixture
def fake_go(tmp_path: Path) -> Path:
    return _write_fake_go(tmp_path / "bin")


@pytest.fixture
def record_file(tmp_path: Path) -> Path:
    return tmp_path / "record.jsonl"


@pytest.fixture
def records(record_file: Path) -> Callable[[], list[dict[str, Any]]]:
    """Invocations of the fake go binary so far."""
    return lambda: _read_records(record_file)
