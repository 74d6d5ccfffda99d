"""CLI utilities."""

from functools import partial
from pathlib import Path

import click
from rich.tree import Tree

from gosuite.config import GoSuiteConfig, load_config
from gosuite.core.errors import ConfigError
from gosuite.core.logging import configure_logging
from gosuite.testing import TestCatalog, TestNode, library_registry, watch_test_files


def load_workspace(path: Path) -> tuple[Path, GoSuiteConfig]:
    """Resolve the workspace root, load its configuration and apply its logging section.

    Raises:
        click.ClickException: If the configuration is invalid
    """
    repo_root = path.resolve()
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    ctx = click.get_current_context(silent=True)
    logging_config = config.logging
    if ctx is not None and ctx.obj and ctx.obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return repo_root, config


def build_catalog(repo_root: Path, config: GoSuiteConfig, *, watch: bool = False) -> TestCatalog:
    """Create a catalog for ``repo_root`` with the configured libraries."""
    try:
        adapters = library_registry.create(config.discovery.libraries)
    except KeyError as e:
        raise click.ClickException(str(e.args[0])) from e

    extra = frozenset(config.discovery.extra_excluded_dirs)
    return TestCatalog(
        [repo_root],
        adapters,
        include_pattern=config.discovery.include_pattern,
        extra_excluded_dirs=extra,
        watch_factory=partial(watch_test_files, extra_excluded_dirs=extra) if watch else None,
    )


def find_nodes(catalog: TestCatalog, names: tuple[str, ...]) -> list[TestNode]:
    """Select suite and function nodes by id (``Suite`` or ``Suite.TestX``).

    Every node with a matching id is selected, across packages.

    Raises:
        click.ClickException: If a name matches nothing
    """
    selected: list[TestNode] = []
    for name in names:
        matches = [
            n
            for n in catalog.iter_nodes()
            if n.id == name and catalog.kind_of(n) in ("suite", "function")
        ]
        if not matches:
            raise click.ClickException(f"No suite or test named '{name}'")
        selected.extend(m for m in matches if m not in selected)
    return selected


def render_tree(catalog: TestCatalog, root: Path) -> Tree:
    """Rich tree of packages, files, suites and functions."""
    tree = Tree(f"[bold]{root}[/bold]")

    def add(parent: Tree, node: TestNode) -> None:
        kind = catalog.kind_of(node)
        if kind == "package":
            label = f"[cyan]{node.label}[/cyan]"
        elif kind == "file":
            label = f"[dim]{node.label}[/dim]"
        elif kind == "suite":
            label = f"[bold]{node.label}[/bold]"
        else:
            line = node.range.start_line + 1 if node.range else "?"
            label = f"{node.label} [dim]:{line}[/dim]"
        branch = parent.add(label)
        for child in node.children:
            add(branch, child)

    for item in catalog.items:
        add(tree, item)
    return tree
