"""Configuration for the TradeFlow CLI.

Settings live in a TOML file, by default ``~/.config/tradeflow/config.toml``.
The ``TRADEFLOW_CONFIG`` environment variable or the ``--config`` option
point elsewhere. A missing file means defaults.
"""

import logging
import os
from pathlib import Path
from typing import Annotated, Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TRADEFLOW_CONFIG"

# Indicative units per one USD for the template written by ``tradeflow init``.
# Users replace these with current quotes; the calculators never read them.
TEMPLATE_RATES = {
    "EUR": 0.9259,
    "GBP": 0.7874,
    "JPY": 150.0,
    "CHF": 0.9091,
    "CAD": 1.351,
    "AUD": 1.515,
    "NZD": 1.639,
    "SEK": 10.42,
    "NOK": 10.64,
    "DKK": 6.897,
    "PLN": 4.0,
    "HUF": 370.4,
    "CZK": 22.73,
    "TRY": 32.26,
    "ZAR": 18.18,
    "MXN": 16.95,
    "SGD": 1.351,
    "HKD": 7.813,
}


class Settings(BaseModel):
    """User defaults for the calculators."""

    account_currency: str = Field(default="USD", min_length=3, description="Reporting currency")
    account_balance: Optional[float] = Field(default=None, gt=0, description="Default balance")
    risk_percentage: float = Field(default=2.0, gt=0, le=100, description="Default risk (%)")
    leverage: Optional[float] = Field(default=None, gt=0, description="Broker leverage")
    rates: dict[str, Annotated[float, Field(gt=0)]] = Field(
        default_factory=dict,
        description="Currency units per one account currency unit",
    )

    model_config = {"frozen": True}


def get_config_path(path: Optional[str] = None) -> Path:
    """Resolve the config file location.

    Precedence: explicit path, then ``TRADEFLOW_CONFIG``, then the default
    under ``~/.config/tradeflow``.
    """
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "tradeflow" / "config.toml"


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from the config file.

    Args:
        path: Optional explicit config path.

    Returns:
        Parsed settings, or defaults if the file does not exist.

    Raises:
        ValueError: If the file is not valid TOML or holds invalid values.
    """
    import toml

    config_path = get_config_path(path)

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return Settings()

    logger.debug("Loading config from %s", config_path)
    try:
        raw = toml.load(config_path)
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot read config {config_path}: {e}") from e

    account = raw.get("account", {})
    risk = raw.get("risk", {})
    for name, section in (("account", account), ("risk", risk)):
        if not isinstance(section, dict):
            raise ValueError(f"'{name}' in {config_path} must be a table")

    values = {
        "account_currency": account.get("currency", "USD"),
        "account_balance": account.get("balance"),
        "risk_percentage": risk.get("percentage", 2.0),
        "leverage": risk.get("leverage"),
        "rates": raw.get("rates", {}),
    }

    try:
        settings = Settings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid settings in {config_path}: {e}") from e

    return settings.model_copy(
        update={
            "account_currency": settings.account_currency.upper(),
            "rates": {k.upper(): v for k, v in settings.rates.items()},
        }
    )


def create_template_config(path: Optional[str] = None) -> Path:
    """Write a template config file and return its path.

    The rates table gets an indicative entry for each quote currency in
    ``TEMPLATE_RATES``. Catalog quote currencies without one are listed as
    commented-out keys to fill in.
    """
    import toml

    from tradeflow.calculators import list_instruments

    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "account": {
            "currency": "USD",
            "balance": 10000.0,
        },
        "risk": {
            "percentage": 2.0,
        },
        "rates": dict(TEMPLATE_RATES),
    }

    quote_currencies = {instrument.quote_currency for instrument in list_instruments()}
    unquoted = sorted(quote_currencies - set(TEMPLATE_RATES) - {"USD"})

    with open(config_path, "w") as f:
        f.write("# Rates are units of each currency per one USD. Replace them with current quotes.\n\n")
        toml.dump(template, f)
        if unquoted:
            f.write("# No indicative rate, add one before trading these:\n")
            for currency in unquoted:
                f.write(f"# {currency} = \n")

    logger.debug("Wrote template config to %s", config_path)
    return config_path
