"""gosuite discover command - list suite tests in a workspace."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console

from gosuite.cli.utils import build_catalog, load_workspace, render_tree
from gosuite.testing import FunctionData


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def discover_command(path: Path, as_json: bool) -> None:
    """Discover gocheck and qtsuite tests.

    PATH is the workspace root (default: current directory).
    """
    repo_root, config = load_workspace(path)
    catalog = build_catalog(repo_root, config)
    asyncio.run(catalog.full_rescan())

    if as_json:
        entries = []
        for node in catalog.get_tests():
            data = catalog.get_test_data(node)
            entry = {
                "id": node.id,
                "path": str(node.path),
                "line": node.range.start_line + 1 if node.range else None,
            }
            if isinstance(data, FunctionData):
                entry["kind"] = data.function.kind
                entry["suite"] = data.function.receiver_type
            entries.append(entry)
        click.echo(json.dumps(entries, indent=2))
        return

    console = Console()
    if not catalog.items:
        console.print("[yellow]No suite tests found[/yellow]")
        return
    console.print(render_tree(catalog, repo_root))
