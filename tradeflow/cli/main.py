"""Main CLI entry point for TradeFlow.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import logging
from typing import Optional

import click
from rich.console import Console


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when the command is invoked
    or listed in help output.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        attr = getattr(module, cmd_name, None)
        if not isinstance(attr, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(attr)
        return attr


LAZY_SUBCOMMANDS = {
    "pl": "tradeflow.cli.trade",
    "size": "tradeflow.cli.risk",
    "rr": "tradeflow.cli.risk",
    "pip": "tradeflow.cli.pips",
    "markets": "tradeflow.cli.markets",
    "init": "tradeflow.cli.setup",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tradeflow")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file path (default: ~/.config/tradeflow/config.toml).",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool) -> None:
    """TradeFlow - trade calculators for forex, commodities, indices and crypto.

    Compute profit/loss, position size, risk/reward and pip value from
    your own prices. Nothing is fetched from the market.

    \b
    Quick Start:
      tradeflow init                                # Create a config file
      tradeflow pl EUR/USD 1.1000 1.1050 1          # P&L of a closed trade
      tradeflow size EUR/USD 1.1000 1.0950 -b 10000 # Size for 2% risk
      tradeflow rr EUR/USD 1.1000 1.0950 1.1100     # Risk/reward
      tradeflow pip GOLD 0.5                        # Pip value
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    _configure_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
