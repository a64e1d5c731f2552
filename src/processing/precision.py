"""Rounding and tolerance helpers for layout values."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from config.layout_constants import DISPLAY_QUANTUM, LIMITS, TOLERANCES

_QUANTUM = Decimal(DISPLAY_QUANTUM)


def round_display(value: float) -> float:
    """Round to display precision (0.01), halves away from zero.

    Works on the shortest repr of the float so 2.675 rounds to 2.68 rather
    than following its binary expansion down to 2.67.
    """
    if not math.isfinite(value):
        return value
    # float() first: numpy scalars repr as "np.float64(...)"
    rounded = Decimal(repr(float(value))).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    result = float(rounded)
    return 0.0 if result == 0 else result


def is_quarter_increment(value: float, tolerance: float = TOLERANCES.alignment) -> bool:
    """True when value sits within tolerance of a multiple of a quarter inch."""
    if not math.isfinite(value):
        return False
    scaled = value / LIMITS.quarter_inch
    return abs(scaled - round(scaled)) * LIMITS.quarter_inch < tolerance


def all_finite(*values: float) -> bool:
    return all(
        isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
        for v in values
    )


def all_positive(*values: float) -> bool:
    """Finite and strictly greater than zero."""
    return all_finite(*values) and all(v > 0 for v in values)


def nearly_equal(a: float, b: float, tolerance: float = TOLERANCES.search) -> bool:
    return abs(a - b) < tolerance
