"""Go suite test discovery and execution.

Importing this package registers the built-in library adapters.
"""

from gosuite.testing import libraries as _libraries  # noqa: F401
from gosuite.testing.catalog import TestCatalog, TestNode
from gosuite.testing.debug import (
    DEBUG_CORRELATION_KEY,
    DebugAdapterTracker,
    DebugHost,
    DebugSession,
    DebugSessionCorrelator,
    classify_debug_outcome,
)
from gosuite.testing.library import (
    LibraryAdapterRegistry,
    SelectorStyle,
    TestLibraryAdapter,
    library_registry,
)
from gosuite.testing.models import (
    FunctionData,
    SuiteData,
    TestFunction,
    TestState,
    TestSuite,
)
from gosuite.testing.orchestrator import TestOrchestrator, render_launch_configuration
from gosuite.testing.parser import GoParser, parse_content
from gosuite.testing.run import TestRun, TestRunReport, TestRunRequest
from gosuite.testing.runtime import GoToolchain, GoToolchainResolver
from gosuite.testing.watcher import FileChangeEvent, FileChangeKind, FileWatcher, watch_test_files

__all__ = [
    # Catalog
    "TestCatalog",
    "TestNode",
    # Parsing and adapters
    "GoParser",
    "parse_content",
    "LibraryAdapterRegistry",
    "SelectorStyle",
    "TestLibraryAdapter",
    "library_registry",
    # Models
    "FunctionData",
    "SuiteData",
    "TestFunction",
    "TestState",
    "TestSuite",
    # Execution
    "GoToolchain",
    "GoToolchainResolver",
    "TestOrchestrator",
    "TestRun",
    "TestRunReport",
    "TestRunRequest",
    "render_launch_configuration",
    # Debug
    "DEBUG_CORRELATION_KEY",
    "DebugAdapterTracker",
    "DebugHost",
    "DebugSession",
    "DebugSessionCorrelator",
    "classify_debug_outcome",
    # Watch
    "FileChangeEvent",
    "FileChangeKind",
    "FileWatcher",
    "watch_test_files",
]
