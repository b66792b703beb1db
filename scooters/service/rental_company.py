"""
Rental Company
--------------

This module is what handles all the rentals in the system.

Responsibilities
================

- starting a rental
- ending a rental and charging for it
- numbering the rental records
- reporting the company's income
"""

from datetime import datetime
from decimal import Decimal
from itertools import count
from typing import Callable, List, Optional

from scooters import logger
from scooters.events import EventHub, EventList
from scooters.models import RentalRecord, Scooter
from scooters.pricing import IncomeAggregator, RentalPriceCalculator
from scooters.service.scooters import ScooterNotFoundError, ScooterService


class ScooterAlreadyRentedError(Exception):
    """Raised when starting a rental on a scooter that is in use."""


class ScooterNotRentedError(Exception):
    """Raised when ending a rental on a scooter that is not in use."""


class RentalRecordNotFoundError(Exception):
    """Raised when a rented scooter has no open rental record."""


class RentalEvent(EventList):

    @staticmethod
    def rental_started(scooter: Scooter, record: RentalRecord):
        """A new rental was started."""

    @staticmethod
    def rental_ended(scooter: Scooter, record: RentalRecord, price: Decimal):
        """A rental was ended and charged."""


class RentalCompany:
    """
    Handles the lifecycle of the rentals of a company's scooters.

    Also publishes events on its hub, so that other modules can stay up to date with the rentals.
    """

    def __init__(
        self,
        name: str,
        scooter_service: ScooterService,
        records: List[RentalRecord],
        calculator: Optional[RentalPriceCalculator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.name = name
        self._scooter_service = scooter_service
        self._records = records
        self._calculator = calculator if calculator is not None else RentalPriceCalculator()
        self._income = IncomeAggregator(self._calculator)
        self._clock = clock

        self._record_numbers = count(max((r.record_number for r in records), default=0) + 1)
        """Hands out the number of the next rental record."""

        self.hub = EventHub(RentalEvent)

    def start_rent(self, scooter_id: str) -> RentalRecord:
        """
        Starts renting out a scooter.

        :raises InvalidIdError: If the id is empty.
        :raises ScooterNotFoundError: If there is no such scooter.
        :raises ScooterAlreadyRentedError: If the scooter is already in use.
        """
        scooter = self._get_scooter(scooter_id)

        if scooter.is_rented:
            raise ScooterAlreadyRentedError(f"Scooter {scooter_id} is already rented.")

        record = RentalRecord(next(self._record_numbers), scooter.id, self._clock())
        self._records.append(record)
        scooter.is_rented = True

        logger.info("Started rental %s of scooter %s", record.record_number, scooter.id)
        self.hub.emit(RentalEvent.rental_started, scooter, record)

        return record

    def end_rent(self, scooter_id: str) -> Decimal:
        """
        Ends the rental of a scooter, returning its price.

        :raises InvalidIdError: If the id is empty.
        :raises ScooterNotFoundError: If there is no such scooter.
        :raises ScooterNotRentedError: If the scooter is not in use.
        :raises RentalRecordNotFoundError: If there is no open record for the scooter.
        :raises IncorrectDateRangeError: If the rental would end before it started.
        """
        scooter = self._get_scooter(scooter_id)

        if not scooter.is_rented:
            raise ScooterNotRentedError(f"Scooter {scooter_id} is not currently rented.")

        record = self.open_record(scooter.id)
        if record is None:
            raise RentalRecordNotFoundError(f"No open rental record for scooter {scooter_id}.")

        end_time = self._clock()
        price = self._calculator.calculate_rental_price(record.start_time, end_time)

        record.finish(end_time, price)
        scooter.is_rented = False

        logger.info("Ended rental %s of scooter %s for %s", record.record_number, scooter.id, price)
        self.hub.emit(RentalEvent.rental_ended, scooter, record, price)

        return price

    def calculate_income(self, year: Optional[int] = None, include_open: bool = False) -> Decimal:
        """
        Gets the income of the company.

        :param year: Only count rentals completed in this year.
        :param include_open: Whether to add the price so far of the rentals still running.
        """
        return self._income.calculate_income(self._records, year, include_open, now=self._clock())

    def open_record(self, scooter_id: str) -> Optional[RentalRecord]:
        """Gets the record of the running rental of a scooter, if there is one."""
        return next((r for r in self._records if r.scooter_id == scooter_id and not r.is_complete), None)

    def _get_scooter(self, scooter_id: str) -> Scooter:
        scooter = self._scooter_service.get_scooter_by_id(scooter_id)
        if scooter is None:
            raise ScooterNotFoundError(f"Scooter {scooter_id} does not exist.")
        return scooter
