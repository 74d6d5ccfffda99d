"""Exclusion rules for Go test discovery.

Two tiers:

Tier 0 (go tool convention): applied to every candidate file, whether it
comes from a workspace listing, a watch event, or an open document.
    - a directory named ``testdata`` anywhere in the path
    - file names beginning with ``.`` or ``_``

Tier 1 (prune set): directories never descended while listing a workspace,
and never accepted from watch events below a workspace root. VCS internals,
our own data directory, dependency trees, and hidden or underscore names.
"""

from __future__ import annotations

import fnmatch
from pathlib import Path

TEST_FILE_SUFFIX = "_test.go"

# `go help test`: "The go tool will ignore a directory named "testdata",
# making it available to hold ancillary data needed by the tests."
ANCILLARY_DATA_DIR = "testdata"

# `go help test`: "Files whose names begin with "_" (including "_test.go")
# or "." are ignored."
IGNORED_NAME_PREFIXES: tuple[str, ...] = (".", "_")

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        ".gosuite",
        "vendor",
        "node_modules",
        ANCILLARY_DATA_DIR,
    )
)


def is_ignored_name(name: str) -> bool:
    return name.startswith(IGNORED_NAME_PREFIXES)


def is_test_file_candidate(
    path: Path,
    root: Path | None = None,
    extra_excluded_dirs: frozenset[str] = frozenset(),
) -> bool:
    """Check whether a file may contain Go test declarations.

    Without ``root`` only the go tool's own convention applies: the file
    name prefix and a ``testdata`` component. With ``root`` every
    directory between it and the file must also survive the listing
    prune rules, so a watched file is accepted exactly when a workspace
    listing would have reached it.
    """
    if not path.name.endswith(TEST_FILE_SUFFIX):
        return False
    if ANCILLARY_DATA_DIR in path.parts or is_ignored_name(path.name):
        return False
    if root is None:
        return True
    try:
        rel = path.relative_to(root)
    except ValueError:
        return True
    return not any(should_prune_dir(part, extra_excluded_dirs) for part in rel.parts[:-1])


def should_prune_dir(dirname: str, extra: frozenset[str] = frozenset()) -> bool:
    """Check if a directory is skipped while listing a workspace."""
    return dirname in HARDCODED_DIRS or dirname in extra or is_ignored_name(dirname)


def matches_include_pattern(rel_path: str, pattern: str) -> bool:
    """Glob match of a workspace-relative POSIX path.

    A leading ``**/`` also matches files at the workspace root.
    """
    if fnmatch.fnmatchcase(rel_path, pattern):
        return True
    return pattern.startswith("**/") and fnmatch.fnmatchcase(rel_path, pattern[3:])


__all__ = [
    "ANCILLARY_DATA_DIR",
    "HARDCODED_DIRS",
    "IGNORED_NAME_PREFIXES",
    "TEST_FILE_SUFFIX",
    "is_ignored_name",
    "is_test_file_candidate",
    "matches_include_pattern",
    "should_prune_dir",
]
