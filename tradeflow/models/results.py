"""Calculation result models."""

from typing import Literal, Optional
from pydantic import BaseModel, Field

from tradeflow.models.instrument import Direction


class PLBreakdown(BaseModel):
    """Intermediate P&L values kept for display and testing."""

    price_movement: float = Field(..., description="Exit minus entry (raw, 5 dp)")
    contract_value: float = Field(..., ge=0, description="Position size times unit multiplier")
    total_position_value: float = Field(..., ge=0, description="Entry price times contract value")

    model_config = {"frozen": True}


class PLResult(BaseModel):
    """Profit/loss of a single trade."""

    profit_loss: float = Field(..., description="P&L in account currency")
    pip_movement: float = Field(..., ge=0, description="Absolute movement in pips")
    percentage_return: float = Field(..., description="Return on entry price times size (%)")
    breakdown: PLBreakdown = Field(..., description="Intermediate values")

    model_config = {"frozen": True}


class PositionSizeResult(BaseModel):
    """Position size that risks a fixed share of the account."""

    position_size: float = Field(..., gt=0, description="Exact position size in lots")
    lot_size: float = Field(..., ge=0, description="Position size rounded to 0.01 lots")
    risk_amount: float = Field(..., ge=0, description="Money at risk")
    pip_risk: float = Field(..., ge=0, description="Entry to stop distance in pips")
    notional_value: float = Field(..., ge=0, description="Entry price times contract value")
    margin_required: Optional[float] = Field(
        default=None, ge=0, description="Estimated margin, absent without margin data"
    )

    model_config = {"frozen": True}


class RiskRewardResult(BaseModel):
    """Risk, reward and their ratio for a planned trade."""

    direction: Direction = Field(..., description="Direction implied by the take profit")
    risk_amount: float = Field(..., ge=0, description="Loss if the stop is hit")
    reward_amount: float = Field(..., ge=0, description="Gain if the target is hit")
    risk_reward_ratio: float = Field(..., ge=0, description="Reward divided by risk")
    break_even_win_rate: float = Field(..., ge=0, le=100, description="Win rate for zero expectancy (%)")
    risk_pips: float = Field(..., ge=0, description="Entry to stop distance in pips")
    reward_pips: float = Field(..., ge=0, description="Entry to target distance in pips")

    model_config = {"frozen": True}


RiskRewardRating = Literal["good", "acceptable", "poor"]


class PipValueResult(BaseModel):
    """Monetary value of one pip."""

    pip_value: float = Field(..., ge=0, description="Value of one pip in account currency")
    contract_size: float = Field(..., gt=0, description="Units per lot")
    tick_size: float = Field(..., gt=0, description="Pip size of the instrument")

    model_config = {"frozen": True}
