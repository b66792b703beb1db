"""
Income
------

Sums up the income of a fleet from its rental records.
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from scooters.models import RentalRecord
from scooters.pricing.calculator import RentalPriceCalculator


class IncomeAggregator:
    """
    Aggregates the prices of a collection of rental records.

    Completed rentals contribute the price they were charged, while
    open rentals are priced as though they ended at the given moment.
    """

    def __init__(self, calculator: RentalPriceCalculator):
        self._calculator = calculator

    def calculate_income(
        self,
        records: Iterable[RentalRecord],
        year: Optional[int] = None,
        include_open: bool = False,
        now: Optional[datetime] = None,
    ) -> Decimal:
        """
        Gets the income over the given records.

        :param year: Only count rentals that were completed in this year.
        :param include_open: Whether to include the price so far of rentals that are still running.
            These are always included, whether or not they fall in the given year.
        :param now: The moment open rentals are priced against, the current time if omitted.
        """
        records = list(records)

        completed = (record for record in records if record.is_complete)
        if year is not None:
            completed = (record for record in completed if record.end_time.year == year)

        income = sum((record.total_price for record in completed), Decimal(0))

        if include_open:
            if now is None:
                now = datetime.now()
            income += sum(
                (
                    self._calculator.calculate_incomplete_rental_price(record.start_time, now)
                    for record in records if not record.is_complete
                ),
                Decimal(0)
            )

        return income
