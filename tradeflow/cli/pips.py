"""Pip value command for TradeFlow CLI."""

from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradeflow.cli.common import (
    POSITIVE_FLOAT,
    console,
    get_settings,
    require_instrument,
    require_rate,
)


@click.command()
@click.argument("symbol")
@click.argument("position_size", metavar="SIZE", type=POSITIVE_FLOAT, default=1.0)
@click.option(
    "-r", "--rate",
    type=POSITIVE_FLOAT,
    default=None,
    help="Quote currency units per account currency unit (overrides config).",
)
@click.pass_context
def pip(
    ctx: click.Context,
    symbol: str,
    position_size: float,
    rate: Optional[float],
) -> None:
    """Show what one pip is worth for a position.

    SYMBOL is a catalog symbol and SIZE the position size in lots
    (default 1). Also prints a comparison across common lot sizes.

    \b
    Examples:
      tradeflow pip EUR/USD          # 1 standard lot
      tradeflow pip GOLD 0.5         # Half a lot of gold
    """
    from tradeflow.calculators import (
        calculate_pip_value,
        format_currency,
        pip_value_ladder,
        suggested_lot_sizes,
    )
    from tradeflow.models import PipValueRequest

    instrument = require_instrument(symbol)
    settings = get_settings(ctx)
    conversion_rate = require_rate(instrument, settings, rate)
    currency = settings.account_currency

    request = PipValueRequest(
        instrument=instrument,
        position_size=position_size,
        conversion_rate=conversion_rate,
    )
    result = calculate_pip_value(request)
    ladder = pip_value_ladder(request)

    ladder_lines = "\n".join(
        f"  {count:>3} pips: [green]+{format_currency(value, currency)}[/green]"
        for count, value in ladder.items()
    )
    text = (
        f"[bold]{instrument.symbol}[/bold] {position_size:g} lots\n\n"
        f"[bold]Pip value: [green]{format_currency(result.pip_value, currency)}[/green][/bold]\n"
        f"Pip size:      {result.tick_size:g}\n"
        f"Contract size: {result.contract_size:,g}\n\n"
        f"{ladder_lines}"
    )

    console.print(Panel(
        text,
        title="[bold cyan]Pip Value[/bold cyan]",
        border_style="cyan",
    ))

    table = Table(
        title=f"Pip Value Comparison for {instrument.symbol}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Size", style="bold")
    table.add_column("Pip Value", justify="right")
    table.add_column("10 Pips", justify="right", style="green")
    table.add_column("50 Pips", justify="right", style="green")
    table.add_column("100 Pips", justify="right", style="green")

    for lots in suggested_lot_sizes(instrument.asset_class):
        row_request = PipValueRequest(
            instrument=instrument,
            position_size=lots,
            conversion_rate=conversion_rate,
        )
        row_ladder = pip_value_ladder(row_request, pips=(10, 50, 100))
        table.add_row(
            f"{lots:g} lots",
            format_currency(calculate_pip_value(row_request).pip_value, currency),
            format_currency(row_ladder[10], currency),
            format_currency(row_ladder[50], currency),
            format_currency(row_ladder[100], currency),
        )

    console.print(table)
