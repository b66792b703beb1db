"""
Scooter Service
---------------

Keeps the list of scooters that the company can rent out.
"""

from decimal import Decimal
from typing import List, Optional

from scooters import logger
from scooters.models import Scooter


class InvalidIdError(ValueError):
    """Raised when a scooter id is missing or empty."""


class InvalidPriceError(ValueError):
    """Raised when a scooter is given a price per minute that is not positive."""


class DuplicateScooterError(Exception):
    """Raised when adding a scooter with an id that is already in use."""


class ScooterNotFoundError(Exception):
    """Raised when there is no scooter with the requested id."""


def validate_scooter_id(scooter_id: Optional[str]):
    if not scooter_id:
        raise InvalidIdError("A scooter id must be a non-empty string.")


class ScooterService:
    """
    Handles adding, removing, and looking up scooters.

    The storage is supplied by the caller so that it can be shared or inspected.
    """

    def __init__(self, storage: List[Scooter]):
        self._scooters = storage

    def add_scooter(self, scooter_id: str, price_per_minute: Decimal) -> Scooter:
        """
        Adds a new scooter to the fleet.

        :raises InvalidIdError: If the id is empty.
        :raises InvalidPriceError: If the price is zero or negative.
        :raises DuplicateScooterError: If a scooter with the id exists.
        """
        validate_scooter_id(scooter_id)

        if price_per_minute <= 0:
            raise InvalidPriceError(f"Price per minute must be positive, not {price_per_minute}.")

        if any(s.id == scooter_id for s in self._scooters):
            raise DuplicateScooterError(f"Scooter {scooter_id} already exists.")

        scooter = Scooter(scooter_id, price_per_minute)
        self._scooters.append(scooter)
        logger.debug("Added scooter %s", scooter_id)
        return scooter

    def remove_scooter(self, scooter_id: str):
        """
        Removes a scooter from the fleet.

        :raises InvalidIdError: If the id is empty.
        :raises ScooterNotFoundError: If there is no such scooter.
        """
        scooter = self.get_scooter_by_id(scooter_id)
        if scooter is None:
            raise ScooterNotFoundError(f"Scooter {scooter_id} does not exist.")

        self._scooters.remove(scooter)
        logger.debug("Removed scooter %s", scooter_id)

    def get_scooters(self) -> List[Scooter]:
        return list(self._scooters)

    def get_scooter_by_id(self, scooter_id: str) -> Optional[Scooter]:
        """Gets the scooter with the given id, or None if there is none."""
        validate_scooter_id(scooter_id)
        return next((s for s in self._scooters if s.id == scooter_id), None)
