"""
.. autoclasstree:: scooters.service

The service layer for the system. Acts as the internal API.
Any interface (such as the command line) should use the
service layer to implement its logic.
"""

from .rental_company import (
    RentalCompany, RentalEvent, ScooterAlreadyRentedError, ScooterNotRentedError, RentalRecordNotFoundError
)
from .scooters import (
    ScooterService, InvalidIdError, InvalidPriceError, DuplicateScooterError, ScooterNotFoundError
)
