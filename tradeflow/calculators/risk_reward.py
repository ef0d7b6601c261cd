"""Risk/reward calculation for a planned trade."""

from tradeflow.calculators.pnl import profit_loss
from tradeflow.calculators.validation import infer_direction
from tradeflow.models import RiskRewardRating, RiskRewardRequest, RiskRewardResult

GOOD_RATIO = 2.0
ACCEPTABLE_RATIO = 1.5


def calculate_risk_reward(request: RiskRewardRequest) -> RiskRewardResult:
    """Calculate risk, reward, their ratio and the break-even win rate.

    Risk and reward are the P&L formula evaluated with the exit at the stop
    loss and at the take profit, taken as magnitudes. The direction is the
    one implied by the take profit.

    Formula::

        ratio              = reward / risk
        break_even_winrate = 100 / (1 + ratio)

    The request is assumed to have passed
    :func:`~tradeflow.calculators.validation.validate_risk_reward_inputs`;
    with stop or target on the wrong side the ratio is meaningless.
    """
    instrument = request.instrument
    direction = infer_direction(request.entry_price, request.take_profit_price)

    risk_amount = abs(profit_loss(
        instrument,
        direction,
        request.entry_price,
        request.stop_loss_price,
        request.position_size,
        request.conversion_rate,
    ))
    reward_amount = abs(profit_loss(
        instrument,
        direction,
        request.entry_price,
        request.take_profit_price,
        request.position_size,
        request.conversion_rate,
    ))

    ratio = reward_amount / risk_amount if risk_amount > 0 else 0.0
    break_even_win_rate = 100.0 / (1.0 + ratio)

    risk_pips = abs(request.entry_price - request.stop_loss_price) / instrument.pip_size
    reward_pips = abs(request.take_profit_price - request.entry_price) / instrument.pip_size

    return RiskRewardResult(
        direction=direction,
        risk_amount=round(risk_amount, 2),
        reward_amount=round(reward_amount, 2),
        risk_reward_ratio=round(ratio, 2),
        break_even_win_rate=round(break_even_win_rate, 2),
        risk_pips=round(risk_pips, 2),
        reward_pips=round(reward_pips, 2),
    )


def rate_risk_reward(ratio: float) -> RiskRewardRating:
    """Classify a ratio: good from 1:2, acceptable from 1:1.5, poor below."""
    if ratio >= GOOD_RATIO:
        return "good"
    if ratio >= ACCEPTABLE_RATIO:
        return "acceptable"
    return "poor"
