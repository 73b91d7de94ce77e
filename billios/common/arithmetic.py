"""Division and rounding helpers shared by the calculators.

Python raises ZeroDivisionError on float division by zero. The formulae here
instead follow IEEE-754 and return inf or NaN, unless the strict policy is
requested by the caller.
"""

import numpy as np

from billios.errors import DegenerateDenominatorError


def divide(
    numerator: float,
    denominator: float,
    *,
    strict: bool = False,
    quantity: str = "value",
) -> float:
    """Divide two floats with IEEE-754 semantics.

    Args:
        numerator: Dividend
        denominator: Divisor
        strict: Raise instead of returning inf/NaN when the divisor is zero
        quantity: Name of the quantity being calculated, used in the error message

    Returns:
        The quotient; +/-inf for a non-zero numerator over zero, NaN for 0/0.

    Raises:
        DegenerateDenominatorError: If strict is set and the denominator is zero
    """
    if strict and denominator == 0:
        raise DegenerateDenominatorError(quantity, numerator)

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(numerator, denominator))


def round_half_away_from_zero(value: float, decimals: int) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    np.round rounds ties to even; worksheet values round ties away from zero.
    The fractional part of the scaled magnitude is taken exactly as
    ``scaled - floor(scaled)``, so no intermediate addition can round up.
    Non-finite values are returned unchanged.
    """
    if not np.isfinite(value):
        return float(value)

    factor = 10.0**decimals
    scaled = abs(value) * factor
    if not np.isfinite(scaled):
        return float(value)

    rounded = np.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1.0

    return float(np.copysign(rounded, value) / factor)
