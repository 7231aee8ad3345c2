from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round1(value: float) -> float:
    """Round half up to one decimal (``round`` would round half to even)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def percentage(part: float, whole: float) -> float:
    return round1(part / whole * 100) if whole > 0 else 0
