"""Trade-economics calculators."""

from tradeflow.calculators.catalog import (
    CATALOG,
    list_instruments,
    lookup,
    suggested_lot_sizes,
)
from tradeflow.calculators.formatting import (
    format_currency,
    format_percentage,
    format_pips,
    format_pl,
    format_ratio,
)
from tradeflow.calculators.pip_value import calculate_pip_value, pip_value_ladder
from tradeflow.calculators.pnl import calculate_pl, profit_loss
from tradeflow.calculators.position_size import calculate_position_size, is_high_risk
from tradeflow.calculators.risk_reward import calculate_risk_reward, rate_risk_reward
from tradeflow.calculators.validation import (
    infer_direction,
    validate_position_inputs,
    validate_risk_reward_inputs,
    validate_trade_inputs,
    validate_trade_setup,
)
from tradeflow.calculators.valuation import (
    margin_requirement,
    per_unit_value_factor,
    resolve_conversion_rate,
)

__all__ = [
    "CATALOG",
    "calculate_pip_value",
    "calculate_pl",
    "calculate_position_size",
    "calculate_risk_reward",
    "format_currency",
    "format_percentage",
    "format_pips",
    "format_pl",
    "format_ratio",
    "infer_direction",
    "is_high_risk",
    "list_instruments",
    "lookup",
    "margin_requirement",
    "per_unit_value_factor",
    "pip_value_ladder",
    "profit_loss",
    "rate_risk_reward",
    "resolve_conversion_rate",
    "suggested_lot_sizes",
    "validate_position_inputs",
    "validate_risk_reward_inputs",
    "validate_trade_inputs",
    "validate_trade_setup",
]
