"""
.. autoclasstree:: scooters.pricing

The pricing module determines the price of a scooter rental between two points in time,
charging a per-minute rate that is capped for every calendar day of the rental,
and sums those prices up over a fleet's rental records.
"""

from .calculator import PriceRateConfig, RentalPriceCalculator
from .exceptions import PricingError, IncorrectDateRangeError, NegativePriceError
from .income import IncomeAggregator
