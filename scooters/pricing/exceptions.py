from datetime import datetime
from decimal import Decimal


class PricingError(Exception):
    """Base class for every error raised while pricing a rental."""


class IncorrectDateRangeError(PricingError):
    """Raised when the end of a rental is ordered before its start."""

    def __init__(self, start: datetime, end: datetime, unit: str):
        super().__init__(
            f"Rental end {end} is before its start {start} (compared by {unit}). "
            f"Please verify the record dates are correct."
        )
        self.start = start
        self.end = end
        self.unit = unit


class NegativePriceError(PricingError):
    """Raised when the calculator arrives at a negative amount."""

    def __init__(self, amount: Decimal):
        super().__init__(f"Calculator error: found negative price {amount}")
        self.amount = amount
