"""Property-based tests for risk/reward analysis.

**Feature: trade-calculators**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradeflow.calculators import (
    calculate_pl,
    calculate_risk_reward,
    lookup,
    rate_risk_reward,
)
from tradeflow.models import RiskRewardRequest, TradeRequest


SAMPLE_SYMBOLS = ["EUR/USD", "GBP/JPY", "GOLD", "WHEAT", "GER40", "BTC/USD", "SOL/USD"]


class TestKnownSetups:
    """Reference setups with hand-computed results."""

    def test_eurusd_one_to_two(self):
        result = calculate_risk_reward(RiskRewardRequest(
            instrument=lookup("EUR/USD"),
            entry_price=1.1000,
            stop_loss_price=1.0950,
            take_profit_price=1.1100,
            position_size=1,
        ))

        assert result.direction == "long"
        assert result.risk_amount == 500.00
        assert result.reward_amount == 1000.00
        assert result.risk_reward_ratio == pytest.approx(2.0)
        assert result.break_even_win_rate == pytest.approx(33.33)
        assert result.risk_pips == 50.0
        assert result.reward_pips == 100.0

    def test_short_setup_inferred_from_target(self):
        result = calculate_risk_reward(RiskRewardRequest(
            instrument=lookup("GOLD"),
            entry_price=2000,
            stop_loss_price=2010,
            take_profit_price=1970,
            position_size=0.5,
        ))

        assert result.direction == "short"
        assert result.risk_amount == 500.00
        assert result.reward_amount == 1500.00
        assert result.risk_reward_ratio == pytest.approx(3.0)
        assert result.break_even_win_rate == pytest.approx(25.0)

    def test_amounts_match_pnl_at_each_leg(self):
        instrument = lookup("GER40")
        result = calculate_risk_reward(RiskRewardRequest(
            instrument=instrument,
            entry_price=18000,
            stop_loss_price=17950,
            take_profit_price=18120,
            position_size=3,
        ))

        at_stop = calculate_pl(TradeRequest(
            instrument=instrument,
            direction="long",
            entry_price=18000,
            exit_price=17950,
            position_size=3,
        ))
        at_target = calculate_pl(TradeRequest(
            instrument=instrument,
            direction="long",
            entry_price=18000,
            exit_price=18120,
            position_size=3,
        ))

        assert result.risk_amount == pytest.approx(-at_stop.profit_loss)
        assert result.reward_amount == pytest.approx(at_target.profit_loss)

    def test_even_ratio_break_even_is_half(self):
        result = calculate_risk_reward(RiskRewardRequest(
            instrument=lookup("BTC/USD"),
            entry_price=60000,
            stop_loss_price=59000,
            take_profit_price=61000,
            position_size=1,
        ))

        assert result.risk_reward_ratio == pytest.approx(1.0)
        assert result.break_even_win_rate == pytest.approx(50.0)


class TestRating:
    """Ratios are rated good, acceptable or poor."""

    @pytest.mark.parametrize(
        "ratio,expected",
        [
            (3.0, "good"),
            (2.0, "good"),
            (1.99, "acceptable"),
            (1.5, "acceptable"),
            (1.49, "poor"),
            (0.5, "poor"),
        ],
    )
    def test_rate_risk_reward(self, ratio: float, expected: str):
        assert rate_risk_reward(ratio) == expected


class TestBreakEvenIdentity:
    """
    **Feature: trade-calculators, Property 3: Break-even Identity**

    *For any* valid setup, the break-even win rate times the ratio equals
    the losing share (100 minus the break-even win rate).
    """

    @given(
        symbol=st.sampled_from(SAMPLE_SYMBOLS),
        entry=st.floats(min_value=1.0, max_value=20000.0, allow_nan=False, allow_infinity=False),
        risk_frac=st.floats(min_value=0.001, max_value=0.2, allow_nan=False, allow_infinity=False),
        reward_frac=st.floats(min_value=0.001, max_value=0.5, allow_nan=False, allow_infinity=False),
        is_long=st.booleans(),
        size=st.floats(min_value=0.01, max_value=50.0, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=100)
    def test_break_even_times_ratio(
        self,
        symbol: str,
        entry: float,
        risk_frac: float,
        reward_frac: float,
        is_long: bool,
        size: float,
    ):
        if is_long:
            stop, target = entry * (1 - risk_frac), entry * (1 + reward_frac)
        else:
            stop, target = entry * (1 + risk_frac), entry * (1 - reward_frac)

        result = calculate_risk_reward(RiskRewardRequest(
            instrument=lookup(symbol),
            entry_price=entry,
            stop_loss_price=stop,
            take_profit_price=target,
            position_size=size,
        ))

        lhs = result.break_even_win_rate * result.risk_reward_ratio
        rhs = 100 - result.break_even_win_rate
        tolerance = 0.005 * (result.risk_reward_ratio + 1) + 0.005 * result.break_even_win_rate + 0.001
        assert abs(lhs - rhs) <= tolerance
        assert result.direction == ("long" if is_long else "short")
        assert 0 < result.break_even_win_rate < 100
