"""Profit/loss calculation for a single trade.

Direction is applied in one place: the effective movement is the raw price
movement for longs and its negation for shorts. Everything monetary is
derived from the effective movement; the raw movement is only reported.
"""

from tradeflow.calculators.valuation import per_unit_value_factor
from tradeflow.models import Direction, Instrument, PLBreakdown, PLResult, TradeRequest


def profit_loss(
    instrument: Instrument,
    direction: Direction,
    entry_price: float,
    exit_price: float,
    position_size: float,
    conversion_rate: float = 1.0,
) -> float:
    """Unrounded P&L of a trade in account currency.

    Formula::

        effective = (exit - entry)      for long
                  = -(exit - entry)     for short
        pnl       = effective × position_size × per_unit_value_factor

    Raises:
        ValueError: If direction is not ``"long"`` or ``"short"``, or the
            instrument's asset class is unsupported.
    """
    if direction not in ("long", "short"):
        raise ValueError(f"direction must be 'long' or 'short', got '{direction}'")

    price_movement = exit_price - entry_price
    effective_movement = price_movement if direction == "long" else -price_movement
    return effective_movement * position_size * per_unit_value_factor(instrument, conversion_rate)


def calculate_pl(request: TradeRequest) -> PLResult:
    """Calculate P&L, pip movement and percentage return of a trade.

    The request is assumed to have passed
    :func:`~tradeflow.calculators.validation.validate_trade_inputs`.

    Args:
        request: Trade to evaluate.

    Returns:
        PLResult with money, pips and percentage rounded to 2 decimals and
        the raw price movement rounded to 5 decimals.
    """
    instrument = request.instrument
    price_movement = request.exit_price - request.entry_price
    pip_movement = abs(price_movement) / instrument.pip_size
    contract_value = request.position_size * per_unit_value_factor(instrument)

    pnl = profit_loss(
        instrument,
        request.direction,
        request.entry_price,
        request.exit_price,
        request.position_size,
        request.conversion_rate,
    )

    invested = request.entry_price * request.position_size
    percentage_return = pnl / invested * 100 if invested != 0 else 0.0

    return PLResult(
        profit_loss=round(pnl, 2),
        pip_movement=round(pip_movement, 2),
        percentage_return=round(percentage_return, 2),
        breakdown=PLBreakdown(
            price_movement=round(price_movement, 5),
            contract_value=contract_value,
            total_position_value=round(request.entry_price * contract_value, 2),
        ),
    )
