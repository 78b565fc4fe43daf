"""Display formatting for currency and percentage figures (de-DE style)."""

from __future__ import annotations

from healthscore.engine.rounding import round_half_up, round_int
from healthscore.models.enums import Currency

NBSP = "\u00a0"

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.CHF: "CHF",
}


def _group_thousands(whole: int) -> str:
    return f"{whole:,}".replace(",", ".")


def format_currency(value: float, currency: Currency | str = Currency.USD) -> str:
    """Whole currency units, e.g. ``format_currency(1234567, "EUR") == "1.234.567 €"``."""
    symbol = CURRENCY_SYMBOLS[Currency(currency)]
    amount = round_int(abs(value))
    sign = "-" if value < 0 and amount else ""
    return f"{sign}{_group_thousands(amount)}{NBSP}{symbol}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """``value`` is already in percent, e.g. ``format_percentage(45.6) == "45,6 %"``."""
    rounded = round_half_up(abs(value), decimals)
    sign = "-" if value < 0 and rounded else ""
    whole, _, fraction = f"{rounded:.{decimals}f}".partition(".")
    text = _group_thousands(int(whole))
    if decimals > 0:
        text = f"{text},{fraction}"
    return f"{sign}{text}{NBSP}%"
