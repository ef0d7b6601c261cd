"""Position sizing, pure math, no I/O.

Sizing is the algebraic inverse of the P&L formula for one lot: the size
returned here, closed at the stop loss, loses exactly the risk amount.
"""

from tradeflow.calculators.valuation import margin_requirement, per_unit_value_factor
from tradeflow.models import PositionSizeRequest, PositionSizeResult

HIGH_RISK_THRESHOLD = 5.0


def calculate_position_size(request: PositionSizeRequest) -> PositionSizeResult:
    """Calculate the position size that risks a share of the account.

    Formula::

        risk_amount   = balance × (risk_pct / 100)
        price_risk    = |entry − stop|
        position_size = risk_amount / (price_risk × per_unit_value_factor)

    Args:
        request: Sizing inputs, assumed to have passed
            :func:`~tradeflow.calculators.validation.validate_position_inputs`.

    Returns:
        PositionSizeResult. ``position_size`` keeps full precision;
        ``lot_size`` is rounded to the 0.01 lot step brokers accept.

    Raises:
        ValueError: If entry equals stop, since no finite size exists.
    """
    instrument = request.instrument
    risk_amount = request.account_balance * request.risk_percentage / 100.0
    price_risk = abs(request.entry_price - request.stop_loss_price)
    if price_risk == 0:
        raise ValueError("entry_price and stop_loss_price must differ")

    pip_risk = price_risk / instrument.pip_size
    position_size = risk_amount / (
        price_risk * per_unit_value_factor(instrument, request.conversion_rate)
    )

    notional_value = request.entry_price * position_size * per_unit_value_factor(instrument)
    margin = margin_requirement(notional_value, instrument, request.leverage)

    return PositionSizeResult(
        position_size=position_size,
        lot_size=round(position_size, 2),
        risk_amount=round(risk_amount, 2),
        pip_risk=round(pip_risk, 2),
        notional_value=round(notional_value, 2),
        margin_required=round(margin, 2) if margin is not None else None,
    )


def is_high_risk(risk_percentage: float) -> bool:
    """True when more than 5% of the account is risked on one trade."""
    return risk_percentage > HIGH_RISK_THRESHOLD
