"""Formatting helpers for estimate output.

Vietnamese conventions: ``.`` groups thousands, ``,`` marks decimals,
currency is whole đồng with a trailing ``₫`` (e.g. '1.508.000.000 ₫').
Halves always round up (away from zero), as the result card displays them.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Wide enough to hold any finite float at two decimals.
_CONTEXT = Context(prec=400)


def _group_vi(text: str) -> str:
    """Swap en-US separators ('1,234.5') for Vietnamese ones ('1.234,5')."""
    return text.replace(",", "\0").replace(".", ",").replace("\0", ".")


def _quantize(amount: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(amount)).quantize(
        exponent, rounding=ROUND_HALF_UP, context=_CONTEXT,
    )


def _non_finite(amount: float) -> str:
    if math.isnan(amount):
        return "NaN"
    return "-∞" if amount < 0 else "∞"


def round_half_up(amount: float) -> int | None:
    """Round to a whole number with halves away from zero.

    Returns None for infinite or NaN amounts, which have no whole value.
    """
    if not math.isfinite(amount):
        return None
    return int(_quantize(amount))


def format_currency(amount: float) -> str:
    """Format an amount as whole đồng, e.g. '1.234.567 ₫'."""
    if not math.isfinite(amount):
        return f"{_non_finite(amount)} ₫"
    return f"{_group_vi(f'{_quantize(amount):,.0f}')} ₫"


def format_unit_price(price: float) -> str:
    """Format a price per square meter, e.g. '6.500.000 ₫/m²'."""
    return f"{format_currency(price)}/m²"


def format_area(area: float) -> str:
    """Format an area with at most two decimals, e.g. '112,5 m²'."""
    if not math.isfinite(area):
        return f"{_non_finite(area)} m²"
    text = f"{_quantize(area, 2):,.2f}".rstrip("0").rstrip(".")
    return f"{_group_vi(text)} m²"
