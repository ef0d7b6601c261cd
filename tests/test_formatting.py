"""Tests for result formatting helpers."""

import pytest

from tradeflow.calculators import (
    format_currency,
    format_percentage,
    format_pips,
    format_pl,
    format_ratio,
)


class TestFormatCurrency:
    """Currency amounts use separators and 2 decimals."""

    @pytest.mark.parametrize(
        "amount,currency,expected",
        [
            (1234.5, "USD", "$1,234.50"),
            (-20, "GBP", "-£20.00"),
            (0, "EUR", "€0.00"),
            (1500, "CHF", "1,500.00 CHF"),
            (-0.001, "USD", "$0.00"),
            (99.999, "usd", "$100.00"),
        ],
    )
    def test_format_currency(self, amount: float, currency: str, expected: str):
        assert format_currency(amount, currency) == expected


class TestSignedFormats:
    """P&L and percentages always carry a sign."""

    def test_format_pl(self):
        assert format_pl(500) == "+$500.00"
        assert format_pl(-500) == "-$500.00"
        assert format_pl(0) == "+$0.00"
        assert format_pl(12.5, "JPY") == "+¥12.50"

    def test_format_percentage(self):
        assert format_percentage(12.5) == "+12.50%"
        assert format_percentage(-3.456) == "-3.46%"

    def test_near_zero_percentage_has_no_minus(self):
        assert format_percentage(-0.001) == "+0.00%"
        assert format_percentage(0.004) == "+0.00%"
        assert format_currency(-0.001) == "$0.00"


class TestPipsAndRatio:
    """Pip counts and ratios."""

    def test_format_pips(self):
        assert format_pips(50) == "50.0 pips"
        assert format_pips(1) == "1.0 pip"
        assert format_pips(0.5) == "0.5 pips"

    def test_format_ratio(self):
        assert format_ratio(2) == "1:2.00"
        assert format_ratio(1.456) == "1:1.46"
