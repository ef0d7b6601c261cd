"""Tests for calculator input validation.

**Feature: trade-calculators**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradeflow.calculators import (
    infer_direction,
    validate_position_inputs,
    validate_risk_reward_inputs,
    validate_trade_inputs,
    validate_trade_setup,
)


class TestValidateTradeInputs:
    """P&L inputs must be positive and entry must differ from exit."""

    def test_valid_inputs(self):
        assert validate_trade_inputs(1.1000, 1.1050, 1) is None

    @pytest.mark.parametrize(
        "entry,exit_price,size,message",
        [
            (0, 1.1, 1, "Entry price must be greater than 0"),
            (-1.1, 1.1, 1, "Entry price must be greater than 0"),
            (1.1, 0, 1, "Exit price must be greater than 0"),
            (1.1, 1.2, 0, "Position size must be greater than 0"),
            (1.1, 1.2, -0.5, "Position size must be greater than 0"),
            (1.1, 1.1, 1, "Entry and exit prices cannot be the same"),
        ],
    )
    def test_rejections(self, entry: float, exit_price: float, size: float, message: str):
        assert validate_trade_inputs(entry, exit_price, size) == message

    def test_nan_rejected(self):
        assert validate_trade_inputs(float("nan"), 1.1, 1) is not None


class TestValidateTradeSetup:
    """Stop and target must be on the correct sides of entry."""

    def test_long_stop_above_entry_rejected(self):
        error = validate_trade_setup(1.1000, 1.1050, 1.1100, "long")

        assert error == "For long trades, stop loss must be below entry price"

    def test_long_target_below_entry_rejected(self):
        error = validate_trade_setup(1.1000, 1.0950, 1.0900, "long")

        assert error == "For long trades, take profit must be above entry price"

    def test_short_stop_below_entry_rejected(self):
        error = validate_trade_setup(1.1000, 1.0950, 1.0900, "short")

        assert error == "For short trades, stop loss must be above entry price"

    def test_short_target_above_entry_rejected(self):
        error = validate_trade_setup(1.1000, 1.1050, 1.1100, "short")

        assert error == "For short trades, take profit must be below entry price"

    def test_valid_long_and_short(self):
        assert validate_trade_setup(1.1000, 1.0950, 1.1100, "long") is None
        assert validate_trade_setup(1.1000, 1.1050, 1.0900, "short") is None

    def test_stop_at_entry_rejected(self):
        assert validate_trade_setup(100, 100, 110, "long") is not None

    def test_unknown_direction_raises(self):
        with pytest.raises(ValueError):
            validate_trade_setup(1.1, 1.0, 1.2, "buy")

    @given(
        entry=st.floats(min_value=1.0, max_value=10000.0, allow_nan=False, allow_infinity=False),
        stop_offset=st.floats(min_value=0.01, max_value=0.5, allow_nan=False, allow_infinity=False),
        target_offset=st.floats(min_value=0.01, max_value=0.5, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=50)
    def test_mirrored_setups_are_valid(self, entry: float, stop_offset: float, target_offset: float):
        assert validate_trade_setup(entry, entry * (1 - stop_offset), entry * (1 + target_offset), "long") is None
        assert validate_trade_setup(entry, entry * (1 + stop_offset), entry * (1 - target_offset), "short") is None


class TestValidatePositionInputs:
    """Position sizing inputs."""

    def test_valid(self):
        assert validate_position_inputs(10000, 2, 1.1, 1.095) is None

    @pytest.mark.parametrize(
        "balance,risk,entry,stop,message",
        [
            (0, 2, 1.1, 1.09, "Account balance must be greater than 0"),
            (1000, 0, 1.1, 1.09, "Risk percentage must be between 0 and 100"),
            (1000, 101, 1.1, 1.09, "Risk percentage must be between 0 and 100"),
            (1000, 2, 0, 1.09, "Entry and stop loss prices must be greater than 0"),
            (1000, 2, 1.1, -1, "Entry and stop loss prices must be greater than 0"),
            (1000, 2, 1.1, 1.1, "Entry and stop loss prices cannot be the same"),
        ],
    )
    def test_rejections(self, balance: float, risk: float, entry: float, stop: float, message: str):
        assert validate_position_inputs(balance, risk, entry, stop) == message

    def test_full_risk_allowed(self):
        assert validate_position_inputs(1000, 100, 1.1, 1.09) is None


class TestValidateRiskRewardInputs:
    """Risk/reward inputs infer direction from the target."""

    def test_valid_long(self):
        assert validate_risk_reward_inputs(1.1000, 1.0950, 1.1100, 1) is None

    def test_valid_short(self):
        assert validate_risk_reward_inputs(1.1000, 1.1050, 1.0900, 1) is None

    def test_stop_on_target_side_rejected(self):
        error = validate_risk_reward_inputs(1.1000, 1.1050, 1.1100, 1)

        assert error == "For long trades, stop loss must be below entry price"

    def test_non_positive_price(self):
        assert validate_risk_reward_inputs(1.1, 0, 1.2, 1) == "All prices must be greater than 0"

    def test_non_positive_size(self):
        assert validate_risk_reward_inputs(1.1, 1.0, 1.2, 0) == "Position size must be greater than 0"

    def test_entry_equal_to_leg(self):
        assert validate_risk_reward_inputs(1.1, 1.1, 1.2, 1) == "Entry price cannot equal stop loss or take profit"
        assert validate_risk_reward_inputs(1.1, 1.0, 1.1, 1) == "Entry price cannot equal stop loss or take profit"


class TestInferDirection:
    """Direction follows the take profit."""

    def test_target_above_is_long(self):
        assert infer_direction(100, 110) == "long"

    def test_target_below_is_short(self):
        assert infer_direction(100, 90) == "short"
