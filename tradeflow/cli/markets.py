"""Market listing command for TradeFlow CLI."""

from typing import Optional

import click
from rich.table import Table

from tradeflow.cli.common import console
from tradeflow.models import ASSET_CLASSES


@click.command()
@click.option(
    "-c", "--class",
    "asset_class",
    type=click.Choice(ASSET_CLASSES),
    default=None,
    help="Only list one asset class.",
)
def markets(asset_class: Optional[str]) -> None:
    """List the instruments in the catalog.

    \b
    Examples:
      tradeflow markets               # Everything
      tradeflow markets --class index # Indices only
    """
    from tradeflow.calculators import list_instruments

    instruments = list_instruments(asset_class)

    table = Table(
        title="Markets",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Symbol", style="bold")
    table.add_column("Class")
    table.add_column("Pip", justify="right")
    table.add_column("Contract", justify="right")
    table.add_column("Tick Value", justify="right")
    table.add_column("Quote", justify="center")
    table.add_column("Margin", justify="right", style="dim")

    for instrument in instruments:
        margin = f"{instrument.margin_rate * 100:g}%" if instrument.margin_rate else "-"
        table.add_row(
            instrument.symbol,
            instrument.asset_class,
            f"{instrument.pip_size:g}",
            f"{instrument.contract_size:,g}",
            f"{instrument.tick_value:g}",
            instrument.quote_currency,
            margin,
        )

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(instruments)} instruments")
