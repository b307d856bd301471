"""Fixed-rate currency normalization between the input currency and USD."""

from ..config.schema import EngineConstants
from .models import Currency


def to_usd(amount: float, currency: Currency, constants: EngineConstants) -> float:
    """Normalize an amount to USD (identity for USD)."""
    if currency == Currency.USD:
        return amount
    return amount * constants.jpy_to_usd


def conversion_rate_from_usd(currency: Currency, constants: EngineConstants) -> float:
    """Multiplier that converts a USD amount back to `currency`."""
    if currency == Currency.USD:
        return 1.0
    return constants.usd_to_jpy


def from_usd(amount: float, currency: Currency, constants: EngineConstants) -> float:
    """Convert a USD amount back to `currency`."""
    return amount * conversion_rate_from_usd(currency, constants)
