"""CLI commands for TradeFlow.

This package provides the command-line interface for the trade
calculators: profit/loss, position size, risk/reward and pip value.
"""

from tradeflow.cli.main import cli, main

__all__ = ["cli", "main"]
