"""Main CLI entry point using rich-click."""

import logging
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

# Global console for Rich output
console = Console()


# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def _configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="executor-resources")
@pass_context
def cli(ctx: Context, config: Optional[Path], verbose: bool) -> None:
    """Executor resource request tool.

    Check executor resource names and inspect the resource requests
    described by a configuration file.
    """
    ctx.config_path = config
    ctx.verbose = verbose
    _configure_logging(verbose)


# Import and register subcommands
from executor_resources.cli.check import check
from executor_resources.cli.config import config_cmd
from executor_resources.cli.show import show

cli.add_command(check)
cli.add_command(show)
cli.add_command(config_cmd, name="config")


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
