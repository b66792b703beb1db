"""
.. autoclasstree:: scooters.models

The models for the things the rental company keeps track of.
"""

from .rental import RentalRecord, RentalAlreadyFinishedError
from .scooter import Scooter
