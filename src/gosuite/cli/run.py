"""gosuite run command - run suites or single tests with go test."""

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console

from gosuite.cli.utils import build_catalog, find_nodes, load_workspace
from gosuite.config import GoSuiteConfig, default_debug_log_dir
from gosuite.core.logging import get_log_file_path
from gosuite.testing import (
    GoToolchainResolver,
    TestOrchestrator,
    TestRunReport,
    TestRunRequest,
    TestState,
)

_STATE_STYLES = {
    TestState.PASSED: "[green]passed[/green]",
    TestState.FAILED: "[red]failed[/red]",
    TestState.SKIPPED: "[yellow]skipped[/yellow]",
    TestState.ERRORED: "[red]errored[/red]",
}


async def _run(
    repo_root: Path,
    config: GoSuiteConfig,
    names: tuple[str, ...],
    excluded: tuple[str, ...],
) -> TestRunReport:
    catalog = build_catalog(repo_root, config)
    await catalog.full_rescan()

    request = TestRunRequest(
        include=find_nodes(catalog, names) if names else None,
        exclude=find_nodes(catalog, excluded) if excluded else [],
    )
    orchestrator = TestOrchestrator(
        catalog,
        GoToolchainResolver(config.toolchain),
        debug_log_dir=default_debug_log_dir(config, repo_root),
        show_log=config.debug.show_log,
        output=lambda text: click.echo(text.replace("\r\n", "\n"), nl=False),
    )
    return await orchestrator.start_test_run(request)


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("-t", "--test", "names", multiple=True, help="Suite or Suite.TestX to run")
@click.option("-x", "--exclude", "excluded", multiple=True, help="Suite or Suite.TestX to skip")
def run_command(path: Path, names: tuple[str, ...], excluded: tuple[str, ...]) -> None:
    """Run suite tests.

    PATH is the workspace root (default: current directory). Without
    --test every discovered suite and test runs.
    """
    repo_root, config = load_workspace(path)
    report = asyncio.run(_run(repo_root, config, names, excluded))

    console = Console(stderr=True)
    if report.rejected is not None:
        raise click.ClickException(report.rejected.message)

    for node in report.entries:
        state = report.run.final_state(node)
        style = _STATE_STYLES.get(state, str(state)) if state else "unknown"
        console.print(f"  {style} {node.id}")

    for message in dict.fromkeys(e.message for e in report.run.errors):
        console.print(f"[red]error:[/red] {message}")

    if not report.ok:
        log_file = get_log_file_path()
        if log_file is not None:
            console.print(f"[dim]Details in {log_file}[/dim]", soft_wrap=True)
        sys.exit(1)
