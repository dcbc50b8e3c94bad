"""Monetary rounding applied once at the output boundary.

Values are rounded half away from zero on their shortest decimal
representation, so ``10.005`` becomes ``10.01`` even though its binary
float is slightly below the midpoint.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

import pandas as pd

CENT = Decimal("0.01")


def round_money(value: float | int | None) -> float:
    """Round a monetary figure to 2 decimals; missing or non-finite becomes 0.0."""
    if value is None or pd.isna(value):
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    # ROUND_HALF_UP in decimal rounds away from zero
    rounded = float(Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP))
    return rounded + 0.0  # normalize -0.0