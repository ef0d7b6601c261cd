"""Static instrument catalog.

The table is built once at import time and exposed through a read-only
mapping. Callers resolve symbols with :func:`lookup`; an unknown symbol is
reported as ``None`` and must never be replaced by a default instrument.

Margin rates follow common retail broker defaults per asset class
(forex 1%, commodities 5%, indices 2%, crypto 10%).
"""

from types import MappingProxyType
from typing import Mapping, Optional

from tradeflow.models import Instrument

FOREX_LOT = 100_000.0

_MARGIN_RATES = {
    "forex": 0.01,
    "commodity": 0.05,
    "index": 0.02,
    "crypto": 0.10,
}

_SUGGESTED_LOT_SIZES = {
    "forex": [0.01, 0.1, 0.5, 1, 2, 5, 10],
    "commodity": [0.1, 0.5, 1, 2, 5, 10, 20],
    "index": [1, 5, 10, 20, 50, 100],
    "crypto": [0.001, 0.01, 0.1, 0.5, 1, 2, 5],
}


def _forex(symbol: str, pip: float) -> Instrument:
    return Instrument(
        symbol=symbol,
        asset_class="forex",
        pip_size=pip,
        contract_size=FOREX_LOT,
        quote_currency=symbol.split("/")[1],
        margin_rate=_MARGIN_RATES["forex"],
    )


def _commodity(symbol: str, pip: float, contract_size: float, tick_value: float) -> Instrument:
    return Instrument(
        symbol=symbol,
        asset_class="commodity",
        pip_size=pip,
        contract_size=contract_size,
        tick_value=tick_value,
        quote_currency="USD",
        margin_rate=_MARGIN_RATES["commodity"],
    )


def _index(symbol: str, pip: float, tick_value: float) -> Instrument:
    return Instrument(
        symbol=symbol,
        asset_class="index",
        pip_size=pip,
        tick_value=tick_value,
        margin_rate=_MARGIN_RATES["index"],
    )


def _crypto(symbol: str, pip: float) -> Instrument:
    return Instrument(
        symbol=symbol,
        asset_class="crypto",
        pip_size=pip,
        quote_currency="USD",
        margin_rate=_MARGIN_RATES["crypto"],
    )


_INSTRUMENTS = [
    # Forex majors
    _forex("EUR/USD", 0.0001),
    _forex("GBP/USD", 0.0001),
    _forex("USD/JPY", 0.01),
    _forex("USD/CHF", 0.0001),
    _forex("AUD/USD", 0.0001),
    _forex("USD/CAD", 0.0001),
    _forex("NZD/USD", 0.0001),
    # Forex crosses
    _forex("EUR/GBP", 0.0001),
    _forex("EUR/JPY", 0.01),
    _forex("EUR/CHF", 0.0001),
    _forex("EUR/AUD", 0.0001),
    _forex("EUR/CAD", 0.0001),
    _forex("EUR/NZD", 0.0001),
    _forex("GBP/JPY", 0.01),
    _forex("GBP/CHF", 0.0001),
    _forex("GBP/AUD", 0.0001),
    _forex("GBP/CAD", 0.0001),
    _forex("GBP/NZD", 0.0001),
    _forex("AUD/JPY", 0.01),
    _forex("AUD/CHF", 0.0001),
    _forex("AUD/CAD", 0.0001),
    _forex("AUD/NZD", 0.0001),
    _forex("CAD/JPY", 0.01),
    _forex("CAD/CHF", 0.0001),
    _forex("CHF/JPY", 0.01),
    _forex("NZD/JPY", 0.01),
    _forex("NZD/CHF", 0.0001),
    _forex("NZD/CAD", 0.0001),
    # Inverted crosses
    _forex("GBP/EUR", 0.0001),
    _forex("JPY/AUD", 0.00001),
    _forex("JPY/CAD", 0.00001),
    _forex("JPY/CHF", 0.000001),
    _forex("JPY/EUR", 0.000001),
    _forex("JPY/GBP", 0.000001),
    _forex("JPY/NZD", 0.00001),
    _forex("AUD/EUR", 0.0001),
    _forex("AUD/GBP", 0.0001),
    _forex("CAD/AUD", 0.0001),
    _forex("CAD/EUR", 0.0001),
    _forex("CAD/GBP", 0.0001),
    _forex("CAD/NZD", 0.0001),
    _forex("CHF/AUD", 0.0001),
    _forex("CHF/CAD", 0.0001),
    _forex("CHF/EUR", 0.0001),
    _forex("CHF/GBP", 0.0001),
    _forex("CHF/NZD", 0.0001),
    _forex("NZD/AUD", 0.0001),
    _forex("NZD/EUR", 0.0001),
    _forex("NZD/GBP", 0.0001),
    # Exotics
    _forex("USD/TRY", 0.0001),
    _forex("USD/ZAR", 0.0001),
    _forex("USD/MXN", 0.0001),
    _forex("USD/SEK", 0.0001),
    _forex("USD/NOK", 0.0001),
    _forex("USD/DKK", 0.0001),
    _forex("USD/SGD", 0.0001),
    _forex("USD/HKD", 0.0001),
    _forex("USD/THB", 0.01),
    _forex("USD/PLN", 0.0001),
    _forex("USD/CZK", 0.0001),
    _forex("USD/HUF", 0.01),
    _forex("USD/RUB", 0.0001),
    _forex("USD/CNH", 0.0001),
    _forex("USD/INR", 0.0001),
    _forex("USD/KRW", 0.01),
    _forex("EUR/TRY", 0.0001),
    _forex("EUR/ZAR", 0.0001),
    _forex("EUR/SEK", 0.0001),
    _forex("EUR/NOK", 0.0001),
    _forex("EUR/DKK", 0.0001),
    _forex("EUR/PLN", 0.0001),
    _forex("EUR/CZK", 0.0001),
    _forex("EUR/HUF", 0.01),
    _forex("GBP/TRY", 0.0001),
    _forex("GBP/ZAR", 0.0001),
    _forex("GBP/SEK", 0.0001),
    _forex("GBP/NOK", 0.0001),
    _forex("GBP/DKK", 0.0001),
    _forex("GBP/PLN", 0.0001),
    _forex("GBP/SGD", 0.0001),
    # Precious metals (100 oz lots for gold)
    _commodity("GOLD", 0.01, 100, 1),
    _commodity("XAU/USD", 0.01, 100, 1),
    _commodity("SILVER", 0.001, 1, 1),
    _commodity("XAG/USD", 0.001, 1, 1),
    _commodity("PLATINUM", 0.01, 1, 1),
    _commodity("PALLADIUM", 0.01, 1, 1),
    # Energy
    _commodity("OIL", 0.01, 1000, 10),
    _commodity("BRENT", 0.01, 1000, 10),
    _commodity("NATGAS", 0.001, 10000, 10),
    _commodity("HEATING", 0.0001, 42000, 4.2),
    _commodity("GASOLINE", 0.0001, 42000, 4.2),
    # Agriculture
    _commodity("WHEAT", 0.25, 5000, 12.5),
    _commodity("CORN", 0.25, 5000, 12.5),
    _commodity("SOYBEANS", 0.25, 5000, 12.5),
    _commodity("SUGAR", 0.01, 112000, 11.2),
    _commodity("COFFEE", 0.05, 37500, 18.75),
    _commodity("COCOA", 1, 10, 10),
    _commodity("COTTON", 0.01, 50000, 5),
    _commodity("RICE", 0.01, 2000, 20),
    _commodity("OATS", 0.25, 5000, 12.5),
    _commodity("LUMBER", 0.1, 110, 11),
    _commodity("ORANGE_JUICE", 0.05, 15000, 7.5),
    # Base metals
    _commodity("COPPER", 0.0001, 25000, 2.5),
    _commodity("ALUMINUM", 0.5, 25, 12.5),
    _commodity("ZINC", 0.5, 25, 12.5),
    _commodity("NICKEL", 1, 6, 6),
    _commodity("LEAD", 0.5, 25, 12.5),
    _commodity("TIN", 1, 5, 5),
    _commodity("STEEL", 0.1, 100, 10),
    # US indices
    _index("SPX500", 0.1, 0.1),
    _index("NAS100", 0.1, 0.1),
    _index("US30", 1, 1),
    _index("RUSSELL2000", 0.1, 0.1),
    _index("VIX", 0.01, 0.01),
    # European indices
    _index("GER40", 0.1, 0.1),
    _index("UK100", 0.1, 0.1),
    _index("FRA40", 0.1, 0.1),
    _index("ESP35", 0.1, 0.1),
    _index("ITA40", 1, 1),
    _index("NED25", 0.01, 0.01),
    _index("SWI20", 0.1, 0.1),
    _index("EUSTX50", 0.1, 0.1),
    # Asian indices
    _index("JPN225", 1, 1),
    _index("HK50", 1, 1),
    _index("AUS200", 0.1, 0.1),
    _index("SING30", 0.1, 0.1),
    _index("CHINA50", 0.1, 0.1),
    _index("INDIA50", 0.05, 0.05),
    _index("KOREA200", 0.01, 0.01),
    _index("TAIWAN", 0.01, 0.01),
    _index("INDONESIA", 0.1, 0.1),
    _index("MALAYSIA", 0.01, 0.01),
    _index("THAILAND", 0.01, 0.01),
    # Other regional indices
    _index("BRAZIL60", 1, 1),
    _index("MEXICO35", 0.1, 0.1),
    _index("SOUTH_AFRICA40", 0.1, 0.1),
    _index("RUSSIA50", 0.1, 0.1),
    _index("TURKEY30", 1, 1),
    _index("ISRAEL25", 0.01, 0.01),
    # Crypto majors
    _crypto("BTC/USD", 1),
    _crypto("ETH/USD", 0.01),
    _crypto("BNB/USD", 0.01),
    _crypto("SOL/USD", 0.001),
    _crypto("XRP/USD", 0.0001),
    _crypto("ADA/USD", 0.0001),
    _crypto("AVAX/USD", 0.001),
    _crypto("DOT/USD", 0.001),
    _crypto("MATIC/USD", 0.0001),
    _crypto("LINK/USD", 0.001),
    _crypto("UNI/USD", 0.001),
    _crypto("LTC/USD", 0.01),
    _crypto("BCH/USD", 0.01),
    _crypto("ATOM/USD", 0.001),
    _crypto("FIL/USD", 0.001),
    _crypto("XLM/USD", 0.00001),
    _crypto("VET/USD", 0.00001),
    _crypto("TRX/USD", 0.00001),
    _crypto("ALGO/USD", 0.0001),
    _crypto("XTZ/USD", 0.001),
    _crypto("EOS/USD", 0.001),
    _crypto("THETA/USD", 0.001),
    # DeFi
    _crypto("AAVE/USD", 0.01),
    _crypto("MKR/USD", 0.1),
    _crypto("COMP/USD", 0.01),
    _crypto("SUSHI/USD", 0.001),
    _crypto("YFI/USD", 1),
    _crypto("SNX/USD", 0.001),
    _crypto("CRV/USD", 0.001),
    _crypto("BAL/USD", 0.001),
    _crypto("1INCH/USD", 0.0001),
    # Layer 1 / layer 2
    _crypto("APT/USD", 0.001),
    _crypto("ARB/USD", 0.0001),
    _crypto("OP/USD", 0.0001),
    _crypto("NEAR/USD", 0.001),
    _crypto("FTM/USD", 0.0001),
    _crypto("HBAR/USD", 0.00001),
    _crypto("ICP/USD", 0.001),
    _crypto("FLOW/USD", 0.001),
    _crypto("EGLD/USD", 0.001),
    # Meme coins
    _crypto("DOGE/USD", 0.00001),
    _crypto("SHIB/USD", 0.00000001),
    _crypto("PEPE/USD", 0.00000001),
    _crypto("FLOKI/USD", 0.00000001),
    # Other
    _crypto("LDO/USD", 0.001),
    _crypto("SAND/USD", 0.0001),
    _crypto("MANA/USD", 0.0001),
    _crypto("AXS/USD", 0.001),
    _crypto("CHZ/USD", 0.00001),
    _crypto("ENJ/USD", 0.0001),
    _crypto("GALA/USD", 0.00001),
    _crypto("IMX/USD", 0.0001),
]

CATALOG: Mapping[str, Instrument] = MappingProxyType(
    {instrument.symbol: instrument for instrument in _INSTRUMENTS}
)


def lookup(symbol: str) -> Optional[Instrument]:
    """Look up an instrument by symbol.

    Matching ignores case and surrounding whitespace.

    Args:
        symbol: Catalog symbol, e.g. ``"EUR/USD"`` or ``"gold"``.

    Returns:
        The instrument, or None if the symbol is not in the catalog.
    """
    return CATALOG.get(symbol.strip().upper())


def list_instruments(asset_class: Optional[str] = None) -> list[Instrument]:
    """List catalog instruments in table order, optionally for one asset class."""
    return [
        instrument for instrument in CATALOG.values()
        if asset_class is None or instrument.asset_class == asset_class
    ]


def suggested_lot_sizes(asset_class: str) -> list[float]:
    """Common position sizes offered for an asset class."""
    return list(_SUGGESTED_LOT_SIZES.get(asset_class, [1, 5, 10, 50, 100]))
