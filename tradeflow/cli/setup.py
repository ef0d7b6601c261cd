"""Config setup command for TradeFlow CLI."""

import click
from rich.markup import escape
from rich.panel import Panel

from tradeflow.cli.common import console, fail
from tradeflow.cli.config import create_template_config, get_config_path


@click.command()
@click.option(
    "-f", "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing config file.",
)
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Create a template config file.

    The template sets a USD account, a 10,000 balance, 2% risk and
    indicative per-USD rates for the catalog quote currencies to edit before use.

    \b
    Examples:
      tradeflow init
      tradeflow --config ./tradeflow.toml init --force
    """
    config_path = (ctx.obj or {}).get("config_path")
    target = get_config_path(config_path)

    if target.exists() and not force:
        fail(
            f"Config already exists at {target}",
            "Use [cyan]--force[/cyan] to overwrite it.",
        )

    written = create_template_config(config_path)

    console.print(Panel(
        f"[green]Config written to[/green] {escape(str(written))}\n\n"
        "Edit the account balance and the rates table to match your broker.",
        title="[bold green]Config Created[/bold green]",
        border_style="green",
    ))
