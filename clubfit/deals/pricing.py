from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def convert_price(base_price: int, rate: Decimal) -> int:
    """Convert a minor-unit price at *rate*, rounding halves up."""
    return round_half_up(Decimal(base_price) * rate)


def to_minor_units(amount: Decimal | str) -> int:
    """Pounds to pence, e.g. ``"4.99"`` -> ``499``."""
    return round_half_up(Decimal(amount) * 100)


def format_price(pence: int) -> str:
    """Format pence as GBP, e.g. ``22999`` -> ``"£229.99"``."""
    pounds = Decimal(pence) / 100
    sign = "-" if pounds < 0 else ""
    return f"{sign}£{abs(pounds):,.2f}"
