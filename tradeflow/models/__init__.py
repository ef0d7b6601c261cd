"""Data models for TradeFlow."""

from tradeflow.models.instrument import ASSET_CLASSES, AssetClass, Direction, Instrument
from tradeflow.models.requests import (
    PipValueRequest,
    PositionSizeRequest,
    RiskRewardRequest,
    TradeRequest,
)
from tradeflow.models.results import (
    PipValueResult,
    PLBreakdown,
    PLResult,
    PositionSizeResult,
    RiskRewardRating,
    RiskRewardResult,
)

__all__ = [
    "ASSET_CLASSES",
    "AssetClass",
    "Direction",
    "Instrument",
    "TradeRequest",
    "PositionSizeRequest",
    "RiskRewardRequest",
    "PipValueRequest",
    "PLBreakdown",
    "PLResult",
    "PositionSizeResult",
    "RiskRewardResult",
    "RiskRewardRating",
    "PipValueResult",
]
