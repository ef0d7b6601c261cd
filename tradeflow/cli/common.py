"""Helpers shared by the calculator commands."""

import logging
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tradeflow.calculators import lookup, resolve_conversion_rate
from tradeflow.cli.config import Settings, load_settings
from tradeflow.models import Instrument

logger = logging.getLogger(__name__)

console = Console()

POSITIVE_FLOAT = click.FloatRange(min=0, min_open=True)


def fail(message: str, hint: Optional[str] = None) -> NoReturn:
    """Print an error panel and exit with status 1.

    Args:
        message: Plain text, shown escaped.
        hint: Optional rich markup shown below the message.
    """
    body = f"[red]{escape(message)}[/red]"
    if hint:
        body += f"\n\n{hint}"
    console.print(Panel(
        body,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def get_settings(ctx: click.Context) -> Settings:
    """Load settings for the config path given to the group."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_settings(config_path)
    except ValueError as e:
        fail(str(e), "Run [cyan]tradeflow init --force[/cyan] to recreate the config file.")


def require_instrument(symbol: str) -> Instrument:
    """Resolve a symbol or exit with an unknown-instrument error."""
    instrument = lookup(symbol)
    if instrument is None:
        logger.debug("Symbol %r not in catalog", symbol)
        fail(
            f"Unknown instrument '{symbol}'",
            "Run [cyan]tradeflow markets[/cyan] to list supported symbols.",
        )
    return instrument


def require_rate(
    instrument: Instrument,
    settings: Settings,
    rate_override: Optional[float] = None,
) -> float:
    """Pick the quote-to-account conversion rate or exit if none is known.

    An explicit ``--rate`` wins over the config file.
    """
    if rate_override is not None:
        logger.debug("Using --rate %s for %s", rate_override, instrument.quote_currency)
        return rate_override

    rate = resolve_conversion_rate(
        instrument.quote_currency,
        settings.account_currency,
        settings.rates,
    )
    if rate is None:
        fail(
            f"No exchange rate for {instrument.quote_currency} -> {settings.account_currency}",
            f"Pass [cyan]--rate[/cyan] or add {instrument.quote_currency} to the rates "
            "table of the config file.",
        )

    logger.debug("Conversion rate %s -> %s: %s",
                 instrument.quote_currency, settings.account_currency, rate)
    return rate


def signed_color(value: float) -> str:
    """Green for non-negative values, red otherwise."""
    return "green" if value >= 0 else "red"
