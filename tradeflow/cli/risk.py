"""Risk commands for TradeFlow CLI.

Handles position sizing and risk/reward analysis of planned trades.
"""

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
)

RATING_COLORS = {
    "good": "green",
    "acceptable": "yellow",
    "poor": "red",
}


@click.command()
@click.argument("symbol")
@click.argument("entry", type=float)
@click.argument("stop", type=float)
@click.option(
    "-b", "--balance",
    type=float,
    default=None,
    help="Account balance. Defaults to the config value.",
)
@click.option(
    "-p", "--risk",
    "risk_pct",
    type=float,
    default=None,
    help="Percentage of the balance to risk. Defaults to the config value.",
)
@click.option(
    "-l", "--leverage",
    type=POSITIVE_FLOAT,
    default=None,
    help="Broker leverage for the margin estimate.",
)
@click.option(
    "-r", "--rate",
    type=POSITIVE_FLOAT,
    default=None,
    help="Quote currency units per account currency unit (overrides config).",
)
@click.pass_context
def size(
    ctx: click.Context,
    symbol: str,
    entry: float,
    stop: float,
    balance: Optional[float],
    risk_pct: Optional[float],
    leverage: Optional[float],
    rate: Optional[float],
) -> None:
    """Calculate the position size for a fixed account risk.

    SYMBOL is a catalog symbol, ENTRY the planned entry price and
    STOP the stop-loss price.

    \b
    Examples:
      tradeflow size EUR/USD 1.1000 1.0950 -b 10000        # 2% default risk
      tradeflow size GOLD 2000 1990 -b 25000 --risk 1      # Risk 1%
      tradeflow size SPX500 5000 4950 -b 50000 -l 20       # With leverage
    """
    from tradeflow.calculators import (
        calculate_position_size,
        format_currency,
        format_pips,
        is_high_risk,
        validate_position_inputs,
    )
    from tradeflow.models import PositionSizeRequest

    instrument = require_instrument(symbol)
    settings = get_settings(ctx)

    balance = balance if balance is not None else settings.account_balance
    if balance is None:
        fail(
            "Account balance is required",
            "Pass [cyan]--balance[/cyan] or set it in the account table of the config file.",
        )
    risk_pct = risk_pct if risk_pct is not None else settings.risk_percentage
    leverage = leverage if leverage is not None else settings.leverage

    error = validate_position_inputs(balance, risk_pct, entry, stop)
    if error:
        fail(error)

    conversion_rate = require_rate(instrument, settings, rate)

    result = calculate_position_size(PositionSizeRequest(
        instrument=instrument,
        account_balance=balance,
        risk_percentage=risk_pct,
        entry_price=entry,
        stop_loss_price=stop,
        conversion_rate=conversion_rate,
        leverage=leverage,
    ))

    currency = settings.account_currency
    if result.margin_required is not None:
        margin = format_currency(result.margin_required, instrument.quote_currency)
    else:
        margin = "n/a"

    text = (
        f"[bold]{instrument.symbol}[/bold] entry {entry:g}, stop {stop:g}\n\n"
        f"Balance:     {format_currency(balance, currency)}\n"
        f"Risk:        {risk_pct:g}% = [yellow]{format_currency(result.risk_amount, currency)}[/yellow]\n"
        f"Stop:        {format_pips(result.pip_risk)}\n"
        f"{'─' * 30}\n"
        f"[bold]Position:    [green]{result.lot_size:,.2f} lots[/green][/bold]\n"
        f"[dim]Exact size: {result.position_size:,.6f} lots[/dim]\n\n"
        f"Notional:    {format_currency(result.notional_value, instrument.quote_currency)}\n"
        f"Margin:      {margin}"
    )

    if is_high_risk(risk_pct):
        text += "\n\n[bold yellow]Warning: risking more than 5% of the account on one trade.[/bold yellow]"

    console.print(Panel(
        text,
        title="[bold cyan]Position Size[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.argument("symbol")
@click.argument("entry", type=float)
@click.argument("stop", type=float)
@click.argument("target", type=float)
@click.option(
    "-s", "--size",
    "position_size",
    type=float,
    default=1.0,
    show_default=True,
    help="Position size in lots.",
)
@click.option(
    "-r", "--rate",
    type=POSITIVE_FLOAT,
    default=None,
    help="Quote currency units per account currency unit (overrides config).",
)
@click.pass_context
def rr(
    ctx: click.Context,
    symbol: str,
    entry: float,
    stop: float,
    target: float,
    position_size: float,
    rate: Optional[float],
) -> None:
    """Calculate risk, reward and break-even win rate of a planned trade.

    SYMBOL is a catalog symbol, ENTRY the planned entry, STOP the
    stop-loss and TARGET the take-profit price. The direction follows
    from the target: above entry is long, below is short.

    \b
    Examples:
      tradeflow rr EUR/USD 1.1000 1.0950 1.1100         # Long, 1:2
      tradeflow rr GOLD 2000 2010 1970 --size 0.5       # Short gold
    """
    from tradeflow.calculators import (
        calculate_risk_reward,
        format_currency,
        format_pips,
        format_ratio,
        rate_risk_reward,
        validate_risk_reward_inputs,
    )
    from tradeflow.models import RiskRewardRequest

    instrument = require_instrument(symbol)

    error = validate_risk_reward_inputs(entry, stop, target, position_size)
    if error:
        fail(error)

    settings = get_settings(ctx)
    conversion_rate = require_rate(instrument, settings, rate)

    result = calculate_risk_reward(RiskRewardRequest(
        instrument=instrument,
        entry_price=entry,
        stop_loss_price=stop,
        take_profit_price=target,
        position_size=position_size,
        conversion_rate=conversion_rate,
    ))

    currency = settings.account_currency
    rating = rate_risk_reward(result.risk_reward_ratio)
    rating_color = RATING_COLORS[rating]

    text = (
        f"[bold]{instrument.symbol}[/bold] {result.direction.upper()} {position_size:g} lots\n\n"
        f"Risk:   [red]{format_currency(result.risk_amount, currency)}[/red] "
        f"({format_pips(result.risk_pips)})\n"
        f"Reward: [green]{format_currency(result.reward_amount, currency)}[/green] "
        f"({format_pips(result.reward_pips)})\n"
        f"{'─' * 30}\n"
        f"[bold]Ratio:  [{rating_color}]{format_ratio(result.risk_reward_ratio)}[/{rating_color}][/bold] "
        f"[{rating_color}]({rating})[/{rating_color}]\n"
        f"Break-even win rate: {result.break_even_win_rate:.2f}%"
    )

    console.print(Panel(
        text,
        title="[bold cyan]Risk / Reward[/bold cyan]",
        border_style="cyan",
    ))
