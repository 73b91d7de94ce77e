"""Error definitions for field-test calculations."""


class FieldTestError(Exception):
    """Base class for errors raised by field-test calculations."""


class DegenerateDenominatorError(FieldTestError, ZeroDivisionError):
    """Raised under the strict division policy when a formula divides by zero.

    Attributes:
        quantity: Name of the quantity being calculated (e.g. "moisture content")
        numerator: Numerator of the rejected division
    """

    def __init__(self, quantity: str, numerator: float):
        self.quantity = quantity
        self.numerator = numerator
        super().__init__(f"Cannot calculate {quantity}: denominator is zero (numerator={numerator})")
