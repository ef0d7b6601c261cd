"""Input validation for the trade calculators.

Every validator returns a human-readable message describing the first
problem found, or None when the inputs are valid. Nothing is clamped or
corrected.
"""

from typing import Optional

from tradeflow.models import Direction


def validate_trade_inputs(
    entry_price: float,
    exit_price: float,
    position_size: float,
) -> Optional[str]:
    """Validate the inputs of a P&L calculation.

    A trade whose exit equals its entry is rejected rather than reported as
    a zero P&L.
    """
    if not entry_price > 0:
        return "Entry price must be greater than 0"
    if not exit_price > 0:
        return "Exit price must be greater than 0"
    if not position_size > 0:
        return "Position size must be greater than 0"
    if entry_price == exit_price:
        return "Entry and exit prices cannot be the same"
    return None


def validate_trade_setup(
    entry_price: float,
    stop_loss_price: float,
    take_profit_price: float,
    direction: Direction,
) -> Optional[str]:
    """Check that stop loss and take profit sit on the correct sides of entry.

    Long trades need ``stop < entry < target``; short trades the mirror.

    Args:
        entry_price: Planned entry price.
        stop_loss_price: Stop-loss price.
        take_profit_price: Take-profit price.
        direction: ``"long"`` or ``"short"``.

    Returns:
        A message naming the misplaced leg, or None.

    Raises:
        ValueError: If direction is not ``"long"`` or ``"short"``.
    """
    if direction == "long":
        if stop_loss_price >= entry_price:
            return "For long trades, stop loss must be below entry price"
        if take_profit_price <= entry_price:
            return "For long trades, take profit must be above entry price"
    elif direction == "short":
        if stop_loss_price <= entry_price:
            return "For short trades, stop loss must be above entry price"
        if take_profit_price >= entry_price:
            return "For short trades, take profit must be below entry price"
    else:
        raise ValueError(f"direction must be 'long' or 'short', got '{direction}'")
    return None


def validate_position_inputs(
    account_balance: float,
    risk_percentage: float,
    entry_price: float,
    stop_loss_price: float,
) -> Optional[str]:
    """Validate the inputs of a position size calculation."""
    if not account_balance > 0:
        return "Account balance must be greater than 0"
    if not 0 < risk_percentage <= 100:
        return "Risk percentage must be between 0 and 100"
    if not entry_price > 0 or not stop_loss_price > 0:
        return "Entry and stop loss prices must be greater than 0"
    if entry_price == stop_loss_price:
        return "Entry and stop loss prices cannot be the same"
    return None


def validate_risk_reward_inputs(
    entry_price: float,
    stop_loss_price: float,
    take_profit_price: float,
    position_size: float,
) -> Optional[str]:
    """Validate a planned trade before computing its risk/reward.

    The direction is taken from the side of entry the take profit is on,
    then :func:`validate_trade_setup` checks the stop against it.
    """
    if not entry_price > 0 or not stop_loss_price > 0 or not take_profit_price > 0:
        return "All prices must be greater than 0"
    if not position_size > 0:
        return "Position size must be greater than 0"
    if entry_price == stop_loss_price or entry_price == take_profit_price:
        return "Entry price cannot equal stop loss or take profit"
    return validate_trade_setup(
        entry_price,
        stop_loss_price,
        take_profit_price,
        infer_direction(entry_price, take_profit_price),
    )


def infer_direction(entry_price: float, take_profit_price: float) -> Direction:
    """Long when the target is above entry, short otherwise."""
    return "long" if take_profit_price > entry_price else "short"
