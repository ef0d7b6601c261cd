"""String formatting for calculator results."""

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format an amount with thousands separators and 2 decimals.

    Examples: ``$1,234.50``, ``-£20.00``, ``1,500.00 CHF``.
    """
    currency = currency.upper()
    sign = "-" if amount < 0 and round(abs(amount), 2) != 0 else ""
    body = f"{abs(amount):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{sign}{symbol}{body}"
    return f"{sign}{body} {currency}"


def format_pl(amount: float, currency: str = "USD") -> str:
    """Format a P&L amount with an explicit sign, e.g. ``+$500.00``."""
    formatted = format_currency(amount, currency)
    return formatted if formatted.startswith("-") else f"+{formatted}"


def format_percentage(percentage: float) -> str:
    """Format a percentage with an explicit sign, e.g. ``+12.50%``.

    Values that round to zero are shown as ``+0.00%``.
    """
    value = round(percentage, 2)
    if value == 0:
        value = 0.0
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def format_pips(pips: float) -> str:
    """Format a pip count, e.g. ``50.0 pips`` or ``1.0 pip``."""
    suffix = "" if abs(pips) == 1 else "s"
    return f"{pips:.1f} pip{suffix}"


def format_ratio(ratio: float) -> str:
    """Format a reward-per-risk ratio as ``1:2.00``."""
    return f"1:{ratio:.2f}"
