"""Per-unit valuation shared by every calculator.

A price move of ``d`` on a position of ``n`` lots is worth
``d * n * per_unit_value_factor(instrument)`` in the quote currency. The
P&L, position size, risk/reward and pip value calculators all use it.
"""

from typing import Mapping, Optional

from tradeflow.models import Instrument


def per_unit_value_factor(instrument: Instrument, conversion_rate: float = 1.0) -> float:
    """Money per one unit of price movement per lot.

    Args:
        instrument: Catalog instrument.
        conversion_rate: Units of quote currency per one unit of account
            currency. 1.0 leaves the value in the quote currency.

    Returns:
        contract_size for forex and commodities, tick_value for indices and
        1 for crypto, divided by conversion_rate.

    Raises:
        ValueError: If the asset class is not one the calculators support.
            This means the catalog and the calculators are out of sync.
    """
    if conversion_rate <= 0:
        raise ValueError(f"conversion_rate must be positive, got {conversion_rate}")

    if instrument.asset_class in ("forex", "commodity"):
        factor = instrument.contract_size
    elif instrument.asset_class == "index":
        factor = instrument.tick_value
    elif instrument.asset_class == "crypto":
        factor = 1.0
    else:
        raise ValueError(
            f"Unsupported asset class '{instrument.asset_class}' for {instrument.symbol}"
        )

    return factor / conversion_rate


def margin_requirement(
    notional_value: float,
    instrument: Instrument,
    leverage: Optional[float] = None,
) -> Optional[float]:
    """Estimate margin for a position.

    An explicit leverage wins over the instrument's margin rate. Without
    either, no estimate is made.
    """
    if leverage is not None:
        if leverage <= 0:
            raise ValueError(f"leverage must be positive, got {leverage}")
        return notional_value / leverage
    if instrument.margin_rate is None:
        return None
    return notional_value * instrument.margin_rate


def resolve_conversion_rate(
    quote_currency: str,
    account_currency: str,
    rates: Mapping[str, float],
) -> Optional[float]:
    """Find the rate that converts quote-currency amounts to the account currency.

    Args:
        quote_currency: Currency the instrument is quoted in.
        account_currency: Currency results should be reported in.
        rates: Caller-supplied table of currency units per one account
            currency unit, e.g. ``{"JPY": 150.0}`` for a USD account.

    Returns:
        1.0 when both currencies match, the tabled rate when present,
        otherwise None.
    """
    quote = quote_currency.upper()
    if quote == account_currency.upper():
        return 1.0
    normalized = {currency.upper(): rate for currency, rate in rates.items()}
    return normalized.get(quote)
