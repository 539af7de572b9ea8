"""Numeric coercion shared by the engine.

The engine never raises on malformed numbers: anything that cannot be read
as a finite number counts as 0.
"""

import math
from decimal import Decimal
from typing import Any


def to_number(value: Any) -> float:
    """Coerce a stored value to a float, falling back to 0."""
    if value is None:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError, ArithmeticError):
        return 0.0
    if not math.isfinite(result):
        return 0.0
    return result


def to_decimal(value: Any) -> Decimal:
    """Coerce to ``Decimal`` without rounding (rates, raw inputs)."""
    return Decimal(str(to_number(value)))


def to_money(value: Any) -> Decimal:
    """Coerce to a ``Decimal`` rounded to cents for storage on a record."""
    return Decimal(str(round(to_number(value), 2)))
