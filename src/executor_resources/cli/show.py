"""Show command - display configured executor resource requests."""

import json
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.table import Table

from executor_resources.cli.main import Context, pass_context
from executor_resources.core.exceptions import ExecutorResourcesError

console = Console()


@click.command()
@click.option("--profile", "-p", type=str, help="Profile to apply over the base executor table")
@click.option(
    "--set", "-s", "overrides",
    multiple=True,
    metavar="KEY=VAL",
    help="Override an executor key (e.g. resource.gpu.amount=2)",
)
@click.option("--json", "as_json", is_flag=True, help="Output requests as JSON")
@click.option("--conf", "as_conf", is_flag=True, help="Output requests as spark.executor.* keys")
@pass_context
def show(
    ctx: Context,
    profile: Optional[str],
    overrides: tuple[str, ...],
    as_json: bool,
    as_conf: bool,
) -> None:
    """Show executor resource requests from the configuration."""
    from executor_resources.core.conf import parse_executor_conf
    from executor_resources.core.config import load_config

    if as_json and as_conf:
        raise click.UsageError("Cannot combine --json and --conf")

    try:
        config = load_config(ctx.config_path)
        conf = config.get_executor_conf(profile)
        for entry in overrides:
            if "=" not in entry:
                raise click.BadParameter(
                    f"Expected KEY=VAL format, got: {entry!r}",
                    param_hint="'--set'",
                )
            key, _, val = entry.partition("=")
            conf[key.strip()] = val.strip()
        requests = parse_executor_conf(conf, prefix="")
    except ExecutorResourcesError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in requests], indent=2))
        return

    if as_conf:
        for key, value in sorted(requests.to_conf().items()):
            click.echo(f"{key}={value}")
        return

    if not requests:
        console.print("[yellow]No executor resources configured[/yellow]")
        return

    title = f"Executor resources ({profile})" if profile else "Executor resources"
    table = Table(title=title)
    table.add_column("Resource", style="cyan")
    table.add_column("Amount", justify="right")
    table.add_column("Discovery Script")
    table.add_column("Vendor")

    for request in requests:
        table.add_row(
            request.resource_name,
            str(request.amount),
            request.discovery_script or "[dim]-[/dim]",
            request.vendor or "[dim]-[/dim]",
        )

    console.print(table)
