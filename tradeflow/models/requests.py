"""Calculation request models.

Field constraints reject structurally impossible inputs (negative prices,
zero size). Domain checks that need a human-readable explanation, such as a
stop loss on the wrong side of entry, belong to
``tradeflow.calculators.validation`` and run before a request is built.
"""

from typing import Optional
from pydantic import BaseModel, Field

from tradeflow.models.instrument import Direction, Instrument


class TradeRequest(BaseModel):
    """A closed (or hypothetically closed) trade."""

    instrument: Instrument = Field(..., description="Catalog instrument")
    direction: Direction = Field(..., description="Trade direction")
    entry_price: float = Field(..., gt=0, description="Entry price")
    exit_price: float = Field(..., gt=0, description="Exit price")
    position_size: float = Field(..., gt=0, description="Position size in lots")
    conversion_rate: float = Field(
        default=1.0, gt=0, description="Quote currency units per account currency unit"
    )

    model_config = {"frozen": True}


class PositionSizeRequest(BaseModel):
    """Inputs for sizing a position to a fixed account risk."""

    instrument: Instrument = Field(..., description="Catalog instrument")
    account_balance: float = Field(..., gt=0, description="Account equity")
    risk_percentage: float = Field(..., gt=0, le=100, description="Equity risked (%)")
    entry_price: float = Field(..., gt=0, description="Planned entry price")
    stop_loss_price: float = Field(..., gt=0, description="Stop-loss price")
    conversion_rate: float = Field(
        default=1.0, gt=0, description="Quote currency units per account currency unit"
    )
    leverage: Optional[float] = Field(
        default=None, gt=0, description="Broker leverage, overrides the instrument margin rate"
    )

    model_config = {"frozen": True}


class RiskRewardRequest(BaseModel):
    """A planned trade with both exit legs."""

    instrument: Instrument = Field(..., description="Catalog instrument")
    entry_price: float = Field(..., gt=0, description="Planned entry price")
    stop_loss_price: float = Field(..., gt=0, description="Stop-loss price")
    take_profit_price: float = Field(..., gt=0, description="Take-profit price")
    position_size: float = Field(..., gt=0, description="Position size in lots")
    conversion_rate: float = Field(
        default=1.0, gt=0, description="Quote currency units per account currency unit"
    )

    model_config = {"frozen": True}


class PipValueRequest(BaseModel):
    """Instrument and size whose per-pip value is wanted."""

    instrument: Instrument = Field(..., description="Catalog instrument")
    position_size: float = Field(..., gt=0, description="Position size in lots")
    conversion_rate: float = Field(
        default=1.0, gt=0, description="Quote currency units per account currency unit"
    )

    model_config = {"frozen": True}
