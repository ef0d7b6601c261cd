"""Instrument data model."""

from typing import Literal, Optional
from pydantic import BaseModel, Field

AssetClass = Literal["forex", "commodity", "index", "crypto"]
Direction = Literal["long", "short"]

ASSET_CLASSES: tuple[str, ...] = ("forex", "commodity", "index", "crypto")


class Instrument(BaseModel):
    """Trading metadata for a single catalog symbol."""

    symbol: str = Field(..., min_length=1, description="Catalog symbol")
    asset_class: AssetClass = Field(..., description="Instrument class")
    pip_size: float = Field(..., gt=0, description="Price increment counted as one pip")
    contract_size: float = Field(
        default=1.0, gt=0, description="Units of the underlying per lot"
    )
    tick_value: float = Field(
        default=1.0, gt=0, description="Monetary value of one point per unit (indices)"
    )
    quote_currency: str = Field(default="USD", min_length=3, description="Quote currency")
    margin_rate: Optional[float] = Field(
        default=None, gt=0, le=1, description="Margin as a fraction of notional"
    )

    model_config = {"frozen": True}
