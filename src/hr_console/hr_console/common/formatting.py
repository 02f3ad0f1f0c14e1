from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_fixed(value: float, places: int) -> str:
    """Fixed-point rendering with half-up rounding (2.25 -> "2.3")."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
