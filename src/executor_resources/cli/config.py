"""Config command - manage configuration."""

from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from executor_resources.cli.main import Context, pass_context
from executor_resources.core.exceptions import ExecutorResourcesError

console = Console()

DEFAULT_CONFIG = '''# executor-resources configuration

[executor]
# Built-in executor resources
cores = 1
memory = "4g"
# memoryOverhead = "512m"
# pyspark.memory = "1g"

# Custom resources live under executor.resource.<name>
# [executor.resource.gpu]
# amount = 1
# discoveryScript = "/opt/spark/getGpusResources.sh"
# vendor = "nvidia.com"

# Profiles override parts of the executor table
# [profiles.gpu]
# cores = 4
# resource.gpu.amount = 2
'''


SEARCH_LOCATIONS = [
    "./executor-resources.toml",
    "./pyproject.toml [tool.executor-resources]",
    "<git root>/executor-resources.toml",
    "~/.config/executor-resources/config.toml",
]


@click.group()
def config_cmd() -> None:
    """Manage configuration."""
    pass


@config_cmd.command("show")
@click.option("--raw", is_flag=True, help="Print the configuration file contents")
@pass_context
def show(ctx: Context, raw: bool) -> None:
    """Summarise the executor table and profiles of the active configuration."""
    from executor_resources.core.config import find_config_file, load_config

    config_path = ctx.config_path or find_config_file()

    if config_path is None:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("\nSearch locations:")
        for i, location in enumerate(SEARCH_LOCATIONS, start=1):
            console.print(f"  {i}. {location}", highlight=False)
        return

    try:
        config = load_config(config_path)
    except ExecutorResourcesError as e:
        raise click.ClickException(str(e)) from e

    console.print(f"[bold]Config file:[/bold] {config_path}", highlight=False, soft_wrap=True)
    console.print()

    if raw:
        syntax = Syntax(config_path.read_text(), "toml", theme="monokai", line_numbers=True)
        console.print(syntax)
        return

    table = Table(title="Executor tables")
    table.add_column("Profile", style="cyan")
    table.add_column("Requests", justify="right")
    table.add_column("Custom", justify="right")
    table.add_column("Status")

    for profile in [None, *sorted(config.profiles)]:
        label = profile or "(base)"
        try:
            requests = config.get_requests(profile)
        except ExecutorResourcesError as e:
            table.add_row(label, "-", "-", f"[red]{escape(str(e))}[/red]")
            continue
        table.add_row(
            label,
            str(len(requests)),
            str(len(requests.custom_resources())),
            "[green]ok[/green]",
        )

    console.print(table)


@config_cmd.command("init")
@click.option("--global", "-g", "global_config", is_flag=True, help="Create global config")
@pass_context
def init(ctx: Context, global_config: bool) -> None:
    """Create a new configuration file."""
    if global_config:
        config_dir = Path.home() / ".config" / "executor-resources"
        config_dir.mkdir(parents=True, exist_ok=True)
        config_path = config_dir / "config.toml"
    else:
        config_path = Path.cwd() / "executor-resources.toml"

    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    config_path.write_text(DEFAULT_CONFIG)
    console.print(f"[green]Created {config_path}[/green]")


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to active configuration file."""
    from executor_resources.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path:
        console.print(str(config_path), highlight=False, soft_wrap=True)
    else:
        console.print("[yellow]No configuration file found[/yellow]")
