"""gosuite CLI - discover and run Go suite tests."""

import click

from gosuite.cli.discover import discover_command
from gosuite.cli.launch import launch_config_command
from gosuite.cli.run import run_command
from gosuite.cli.watch import watch_command
from gosuite.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="gosuite")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """gosuite - gocheck and qtsuite test discovery and execution."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")
cli.add_command(launch_config_command, name="launch-config")
cli.add_command(watch_command, name="watch")


if __name__ == "__main__":
    cli()
