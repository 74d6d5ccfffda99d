"""gosuite launch-config command - print a debug launch configuration."""

import asyncio
from pathlib import Path

import click

from gosuite.cli.utils import build_catalog, find_nodes, load_workspace
from gosuite.config import default_debug_log_dir
from gosuite.testing import GoToolchainResolver, TestOrchestrator, render_launch_configuration


@click.command()
@click.argument("name")
@click.option(
    "--path",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Workspace root",
)
def launch_config_command(name: str, path: Path) -> None:
    """Print the debugger launch configuration for NAME (Suite or Suite.TestX)."""
    repo_root, config = load_workspace(path)
    catalog = build_catalog(repo_root, config)
    asyncio.run(catalog.full_rescan())

    nodes = find_nodes(catalog, (name,))
    if len(nodes) > 1:
        raise click.ClickException(f"'{name}' is ambiguous ({len(nodes)} matches)")

    orchestrator = TestOrchestrator(
        catalog,
        GoToolchainResolver(config.toolchain),
        debug_log_dir=default_debug_log_dir(config, repo_root),
        output=lambda text: click.echo(text.rstrip(), err=True),
    )
    configuration = orchestrator.get_debug_launch_configuration(nodes[0])
    if configuration is None:
        raise click.ClickException(f"Cannot build a launch configuration for '{name}'")
    click.echo(render_launch_configuration(configuration))
