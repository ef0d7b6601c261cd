"""Property-based tests for pip values and shared valuation.

**Feature: trade-calculators**
"""

import pytest
from hypothesis import given, settings, assume
from hypothesis import strategies as st

from tradeflow.calculators import (
    calculate_pip_value,
    calculate_pl,
    lookup,
    margin_requirement,
    per_unit_value_factor,
    pip_value_ladder,
    resolve_conversion_rate,
)
from tradeflow.models import Instrument, PipValueRequest, TradeRequest


SAMPLE_SYMBOLS = ["EUR/USD", "USD/JPY", "AUD/CAD", "GOLD", "OIL", "COPPER", "SPX500", "US30", "BTC/USD", "LTC/USD"]


class TestKnownPipValues:
    """Reference pip values."""

    def test_eurusd_standard_lot_is_ten_dollars(self):
        result = calculate_pip_value(PipValueRequest(instrument=lookup("EUR/USD"), position_size=1))

        assert result.pip_value == 10.00
        assert result.contract_size == 100000
        assert result.tick_size == 0.0001

    def test_gold_one_lot(self):
        result = calculate_pip_value(PipValueRequest(instrument=lookup("GOLD"), position_size=1))

        assert result.pip_value == 1.00

    def test_usdjpy_converted(self):
        result = calculate_pip_value(PipValueRequest(
            instrument=lookup("USD/JPY"),
            position_size=1,
            conversion_rate=150.0,
        ))

        # 1,000 JPY per pip per lot at 150 JPY per USD
        assert result.pip_value == pytest.approx(6.67, abs=0.01)

    def test_index_uses_tick_value(self):
        result = calculate_pip_value(PipValueRequest(instrument=lookup("US30"), position_size=5))

        assert result.pip_value == 5.00

    def test_ladder_multiplies_unrounded_value(self):
        ladder = pip_value_ladder(PipValueRequest(instrument=lookup("EUR/USD"), position_size=0.01))

        assert ladder == {10: 1.0, 25: 2.5, 50: 5.0, 100: 10.0}

    def test_ladder_custom_counts(self):
        ladder = pip_value_ladder(
            PipValueRequest(instrument=lookup("GOLD"), position_size=2),
            pips=(1, 300),
        )

        assert ladder == {1: 2.0, 300: 600.0}


class TestPerUnitValueFactor:
    """The single valuation multiplier per asset class."""

    @pytest.mark.parametrize(
        "symbol,expected",
        [
            ("EUR/USD", 100000.0),
            ("GOLD", 100.0),
            ("OIL", 1000.0),
            ("SPX500", 0.1),
            ("US30", 1.0),
            ("BTC/USD", 1.0),
        ],
    )
    def test_factor_by_asset_class(self, symbol: str, expected: float):
        assert per_unit_value_factor(lookup(symbol)) == pytest.approx(expected)

    def test_conversion_rate_divides(self):
        assert per_unit_value_factor(lookup("USD/JPY"), 200.0) == pytest.approx(500.0)

    def test_non_positive_conversion_rate_rejected(self):
        with pytest.raises(ValueError):
            per_unit_value_factor(lookup("EUR/USD"), 0.0)

    def test_unknown_asset_class_rejected(self):
        broken = Instrument.model_construct(
            symbol="XYZ", asset_class="bond", pip_size=0.01,
            contract_size=1.0, tick_value=1.0, quote_currency="USD", margin_rate=None,
        )
        with pytest.raises(ValueError, match="Unsupported asset class"):
            per_unit_value_factor(broken)


class TestMarginRequirement:
    """Margin estimate from leverage or margin rate."""

    def test_leverage(self):
        assert margin_requirement(100000, lookup("EUR/USD"), leverage=100) == pytest.approx(1000.0)

    def test_margin_rate(self):
        assert margin_requirement(100000, lookup("BTC/USD")) == pytest.approx(10000.0)

    def test_no_margin_data(self):
        instrument = lookup("GOLD").model_copy(update={"margin_rate": None})
        assert margin_requirement(100000, instrument) is None


class TestResolveConversionRate:
    """Conversion rates come from a caller-supplied table."""

    def test_same_currency_is_one(self):
        assert resolve_conversion_rate("USD", "usd", {}) == 1.0

    def test_tabled_rate(self):
        assert resolve_conversion_rate("JPY", "USD", {"jpy": 150.0}) == 150.0

    def test_missing_rate_is_none(self):
        assert resolve_conversion_rate("CHF", "USD", {"JPY": 150.0}) is None


class TestPipValueConsistency:
    """
    **Feature: trade-calculators, Property 4: Pip Value Consistency**

    *For any* trade, pip value times pip movement equals the magnitude of
    the P&L, within rounding.
    """

    @given(
        symbol=st.sampled_from(SAMPLE_SYMBOLS),
        direction=st.sampled_from(["long", "short"]),
        entry=st.floats(min_value=0.5, max_value=50000.0, allow_nan=False, allow_infinity=False),
        move=st.floats(min_value=-0.2, max_value=0.2, allow_nan=False, allow_infinity=False),
        size=st.floats(min_value=0.01, max_value=20.0, allow_nan=False, allow_infinity=False),
        conversion_rate=st.sampled_from([1.0, 1.35, 150.0]),
    )
    @settings(max_examples=100)
    def test_pip_value_times_pips_matches_pnl(
        self,
        symbol: str,
        direction: str,
        entry: float,
        move: float,
        size: float,
        conversion_rate: float,
    ):
        exit_price = entry * (1 + move)
        assume(exit_price != entry)

        instrument = lookup(symbol)
        pnl = calculate_pl(TradeRequest(
            instrument=instrument,
            direction=direction,
            entry_price=entry,
            exit_price=exit_price,
            position_size=size,
            conversion_rate=conversion_rate,
        ))
        pip = calculate_pip_value(PipValueRequest(
            instrument=instrument,
            position_size=size,
            conversion_rate=conversion_rate,
        ))

        tolerance = (
            0.005 * (pnl.pip_movement + pip.pip_value)
            + 0.01
            + abs(pnl.profit_loss) * 1e-9
        )
        assert abs(pip.pip_value * pnl.pip_movement - abs(pnl.profit_loss)) <= tolerance
