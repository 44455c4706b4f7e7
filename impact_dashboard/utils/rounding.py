"""Decimal rounding that sends exact ties away from zero."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up_to(value: float, places: int) -> float:
    """
    Round ``value`` to ``places`` decimals, ties up.

    Works on the exact binary value of the float, so 2.125 becomes 2.13 while
    201 / 200 (stored just below 1.005) becomes 1.0.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


__all__ = ["round_half_up_to"]
