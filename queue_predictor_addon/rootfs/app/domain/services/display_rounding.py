"""Display rounding helpers.

Fixed-decimal rounding operates on the exact binary value of a float and
breaks ties away from zero; integer rounding breaks ties toward positive
infinity. Results therefore match the dashboard's displayed figures, which
built-in round() (ties to even) does not guarantee.

Infinities and NaN are returned unchanged, and finite values of any
magnitude are rounded without a decimal context overflow.
"""

import math
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext

_HALF = Decimal("0.5")
_MIN_PRECISION = 28


def _precision(exact: Decimal, digits: int) -> int:
    """Significant digits needed to hold exact rounded to digits decimals."""
    return max(_MIN_PRECISION, exact.adjusted() + digits + 2)


def round_fixed(value: float, digits: int) -> float:
    """Round to a fixed number of decimals, ties away from zero."""
    if not math.isfinite(value):
        return value
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision(exact, digits)
        return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity.

    Returns an int for finite input and the value itself otherwise.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision(exact, 1)
        return int((exact + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def clamp(low: float, high: float, value: float) -> float:
    """Constrain value to the closed interval [low, high]."""
    return max(low, min(high, value))
