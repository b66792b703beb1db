"""
Rental Record
-------------

Contains the record kept for every rental that is started.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from attr import dataclass


class RentalAlreadyFinishedError(Exception):
    """Raised when finishing a rental record that already has an end time."""


@dataclass
class RentalRecord:
    """
    A single rental of a scooter.

    The record is created when the rental starts and gets its
    end time and price exactly once, when the rental ends.
    """

    record_number: int
    scooter_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    total_price: Optional[Decimal] = None

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None

    def finish(self, end_time: datetime, total_price: Decimal):
        """
        Closes the rental.

        :raises RentalAlreadyFinishedError: If the rental has already ended.
        """
        if self.is_complete:
            raise RentalAlreadyFinishedError(f"Rental record {self.record_number} has already ended.")

        self.end_time = end_time
        self.total_price = total_price
