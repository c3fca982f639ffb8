"""Display rounding. Engine values keep full precision; only rendering rounds."""

from decimal import Decimal, ROUND_HALF_UP

from emi_calculator.config import settings

TWO_PLACES = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def format_money(value: Decimal, symbol: str | None = None) -> str:
    """Format as currency with thousands separators, e.g. ₹8,884.88."""
    if symbol is None:
        symbol = settings.currency_symbol
    return f"{symbol}{round_money(value):,.2f}"


def format_rate(value: Decimal) -> str:
    """Format a periodic rate fraction as a percentage, e.g. 0.01 -> 1.0000%."""
    return f"{value * 100:.4f}%"
