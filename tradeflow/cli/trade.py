"""Profit/loss command for TradeFlow CLI."""

from typing import Optional

import click
from rich.panel import Panel

from tradeflow.cli.common import (
    POSITIVE_FLOAT,
    console,
    fail,
    get_settings,
    require_instrument,
    require_rate,
    signed_color,
)


@click.command()
@click.argument("symbol")
@click.argument("entry", type=float)
@click.argument("exit_price", metavar="EXIT", type=float)
@click.argument("size", type=float)
@click.option(
    "-s", "--side",
    type=click.Choice(["long", "short"]),
    default="long",
    show_default=True,
    help="Trade direction.",
)
@click.option(
    "-r", "--rate",
    type=POSITIVE_FLOAT,
    default=None,
    help="Quote currency units per account currency unit (overrides config).",
)
@click.pass_context
def pl(
    ctx: click.Context,
    symbol: str,
    entry: float,
    exit_price: float,
    size: float,
    side: str,
    rate: Optional[float],
) -> None:
    """Calculate profit/loss of a closed trade.

    SYMBOL is a catalog symbol (e.g., EUR/USD, GOLD, SPX500, BTC/USD).
    ENTRY and EXIT are prices, SIZE is the position size in lots.

    \b
    Examples:
      tradeflow pl EUR/USD 1.1000 1.1050 1            # Long, +50 pips
      tradeflow pl GOLD 2000 1995 0.5 --side short    # Short gold
      tradeflow pl USD/JPY 150.00 150.50 1 --rate 150 # JPY quoted
    """
    from tradeflow.calculators import (
        calculate_pl,
        format_currency,
        format_percentage,
        format_pips,
        format_pl,
        validate_trade_inputs,
    )
    from tradeflow.models import TradeRequest

    instrument = require_instrument(symbol)

    error = validate_trade_inputs(entry, exit_price, size)
    if error:
        fail(error)

    settings = get_settings(ctx)
    conversion_rate = require_rate(instrument, settings, rate)

    result = calculate_pl(TradeRequest(
        instrument=instrument,
        direction=side,
        entry_price=entry,
        exit_price=exit_price,
        position_size=size,
        conversion_rate=conversion_rate,
    ))

    currency = settings.account_currency
    color = signed_color(result.profit_loss)
    side_color = "green" if side == "long" else "red"

    text = (
        f"[bold]{instrument.symbol}[/bold] [{side_color}]{side.upper()}[/{side_color}] "
        f"{size:g} lots\n\n"
        f"Entry:    {entry:g}\n"
        f"Exit:     {exit_price:g}\n"
        f"Movement: {result.breakdown.price_movement:+g} ({format_pips(result.pip_movement)})\n"
        f"{'─' * 30}\n"
        f"[bold]P&L:      [{color}]{format_pl(result.profit_loss, currency)}[/{color}][/bold]\n"
        f"Return:   [{color}]{format_percentage(result.percentage_return)}[/{color}]\n\n"
        f"[dim]Contract value: {result.breakdown.contract_value:,.2f} | "
        f"Position value: {format_currency(result.breakdown.total_position_value, instrument.quote_currency)}[/dim]"
    )

    if conversion_rate != 1.0:
        text += (
            f"\n[dim]Converted at {conversion_rate:g} "
            f"{instrument.quote_currency} per {currency}[/dim]"
        )

    console.print(Panel(
        text,
        title="[bold cyan]Profit / Loss[/bold cyan]",
        border_style="cyan",
    ))
