"""Pip value calculation."""

from typing import Sequence

from tradeflow.calculators.valuation import per_unit_value_factor
from tradeflow.models import PipValueRequest, PipValueResult

DEFAULT_LADDER = (10, 25, 50, 100)


def _raw_pip_value(request: PipValueRequest) -> float:
    instrument = request.instrument
    return (
        instrument.pip_size
        * per_unit_value_factor(instrument, request.conversion_rate)
        * request.position_size
    )


def calculate_pip_value(request: PipValueRequest) -> PipValueResult:
    """Calculate what one pip of movement is worth for a position.

    Formula::

        pip_value = pip_size × per_unit_value_factor × position_size

    Args:
        request: Instrument, size and conversion rate.

    Returns:
        PipValueResult with pip_value rounded to 2 decimals.
    """
    instrument = request.instrument
    return PipValueResult(
        pip_value=round(_raw_pip_value(request), 2),
        contract_size=instrument.contract_size,
        tick_size=instrument.pip_size,
    )


def pip_value_ladder(
    request: PipValueRequest,
    pips: Sequence[int] = DEFAULT_LADDER,
) -> dict[int, float]:
    """Value of moves of several pip counts, e.g. ``{10: 100.0, 25: 250.0}``.

    Computed from the unrounded pip value so large counts do not amplify
    rounding.
    """
    value = _raw_pip_value(request)
    return {count: round(value * count, 2) for count in pips}
