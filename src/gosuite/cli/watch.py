"""gosuite watch command - keep the test catalog live."""

import asyncio
import contextlib
from pathlib import Path

import click
from rich.console import Console

from gosuite.cli.utils import build_catalog, load_workspace, render_tree
from gosuite.config import GoSuiteConfig


async def _watch(repo_root: Path, config: GoSuiteConfig, console: Console) -> None:
    catalog = build_catalog(repo_root, config, watch=True)
    await catalog.full_rescan()
    console.print(render_tree(catalog, repo_root))

    def on_update() -> None:
        console.print(f"[dim]catalog updated:[/dim] {len(catalog.get_tests())} tests")

    catalog.add_update_listener(on_update)
    console.print("[dim]Watching for changes (Ctrl-C to stop)[/dim]")
    try:
        await asyncio.Event().wait()
    finally:
        catalog.dispose()


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
def watch_command(path: Path) -> None:
    """Discover tests, then follow file changes.

    PATH is the workspace root (default: current directory).
    """
    repo_root, config = load_workspace(path)
    console = Console()
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_watch(repo_root, config, console))
