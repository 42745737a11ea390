"""Check command - validate executor resource names."""

import sys

import rich_click as click
from rich.console import Console

from executor_resources.cli.main import Context, pass_context
from executor_resources.core.names import RESOURCE_DOT, is_allowed_executor_resource

console = Console()


@click.command()
@click.argument("names", nargs=-1, required=True)
@pass_context
def check(ctx: Context, names: tuple[str, ...]) -> None:
    """Check whether resource names may be requested for an executor.

    NAMES are resource names such as cores, memory or resource.gpu.
    Exits with status 1 if any name is not allowed.
    """
    denied = 0
    for name in names:
        if is_allowed_executor_resource(name):
            console.print(f"[green]allowed[/green]  {name}", highlight=False)
        else:
            denied += 1
            console.print(f"[red]denied[/red]   {name}", highlight=False)

    if denied:
        console.print(
            f"[yellow]Custom resources must start with '{RESOURCE_DOT}'[/yellow]",
            highlight=False,
        )
        sys.exit(1)
