"""Display formatting for monetary and percentage values."""

import math
from decimal import ROUND_HALF_UP, Decimal

from ..engine.models import Currency

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.JPY: "¥",
}

CURRENCY_DECIMALS = {
    Currency.USD: 2,
    Currency.JPY: 0,
}

# (threshold, suffix), largest first
ABBREVIATIONS = [
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def to_fixed(value: float, decimals: int) -> str:
    """
    Fixed-point string rounding half away from zero on the exact binary value.

    Matches JavaScript's Number.prototype.toFixed, so 1.5 -> "2" and 2.5 -> "3",
    and non-finite values print as "Infinity", "-Infinity" or "NaN".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-decimals)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), 'f')


def format_currency(value: float, currency: Currency) -> str:
    """
    Format a monetary value with symbol and B/M/K abbreviation.

    USD uses 2 decimals, JPY 0. Values below 1,000 (including all negatives)
    are not abbreviated.
    """
    currency = Currency(currency)
    symbol = CURRENCY_SYMBOLS[currency]
    decimals = CURRENCY_DECIMALS[currency]

    for threshold, suffix in ABBREVIATIONS:
        if value >= threshold:
            return f"{symbol}{to_fixed(value / threshold, decimals)}{suffix}"
    return f"{symbol}{to_fixed(value, decimals)}"


def format_percentage(value: float) -> str:
    """Format a percentage value with 2 decimals, e.g. 8.5 -> "8.50%"."""
    return f"{to_fixed(value, 2)}%"
