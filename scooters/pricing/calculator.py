"""
Rental Price Calculator
-----------------------

Prices a rental by splitting its time range into calendar tiers.

A range that crosses a year boundary is split into the partial first year,
the whole years between and the partial last year. The partial years are then
split by month in the same way, and the partial months by day. Whole units are
charged at the daily cap for every day they contain, and only a single
calendar day is charged by the minute, capped at the daily price.
"""

import calendar
from datetime import datetime
from decimal import Decimal
from typing import Callable, NamedTuple, Optional, Union

import attr

from scooters import config
from scooters.pricing.exceptions import IncorrectDateRangeError, NegativePriceError

MINUTES_IN_HOUR = 60


def _to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Converts a number to a decimal, going through str so floats keep their written value."""
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _positive(instance, attribute, value):
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, not {value}")


@attr.dataclass(frozen=True)
class PriceRateConfig:
    """The rates a calculator charges with."""

    per_minute_rate: Decimal = attr.ib(default=config.price_per_minute, converter=_to_decimal, validator=_positive)
    daily_cap: Decimal = attr.ib(default=config.max_daily_price, converter=_to_decimal, validator=_positive)


def end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=0)


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_month(moment: datetime) -> datetime:
    last_day = calendar.monthrange(moment.year, moment.month)[1]
    return end_of_day(moment.replace(day=last_day))


def start_of_month(moment: datetime) -> datetime:
    return start_of_day(moment.replace(day=1))


def end_of_year(moment: datetime) -> datetime:
    return end_of_day(moment.replace(month=12, day=31))


def start_of_year(moment: datetime) -> datetime:
    return start_of_day(moment.replace(month=1, day=1))


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


class Tier(NamedTuple):
    """
    A calendar unit that a range can be decomposed by.

    The ``days_between`` function returns the number of days in
    the whole units strictly between the start and end of a range.
    """

    name: str
    unit: Callable[[datetime], int]
    end_of_unit: Callable[[datetime], datetime]
    start_of_unit: Callable[[datetime], datetime]
    days_between: Callable[[datetime, datetime], int]


TIERS = (
    Tier(
        "year",
        lambda moment: moment.year,
        end_of_year,
        start_of_year,
        lambda start, end: sum(days_in_year(year) for year in range(start.year + 1, end.year)),
    ),
    Tier(
        "month",
        lambda moment: moment.month,
        end_of_month,
        start_of_month,
        lambda start, end: sum(
            calendar.monthrange(start.year, month)[1] for month in range(start.month + 1, end.month)
        ),
    ),
    Tier(
        "day",
        lambda moment: moment.day,
        end_of_day,
        start_of_day,
        lambda start, end: end.day - start.day - 1,
    ),
)
"""The tiers a range is decomposed by, from the largest unit to the smallest."""


class RentalPriceCalculator:
    """
    Calculates the price of a rental from its start and end time.

    The calculator holds no state besides its rates, so
    the same range always yields the same price.
    """

    def __init__(self, rates: Optional[PriceRateConfig] = None):
        self.rates = rates if rates is not None else PriceRateConfig()

    @property
    def per_minute_rate(self) -> Decimal:
        return self.rates.per_minute_rate

    @property
    def daily_cap(self) -> Decimal:
        return self.rates.daily_cap

    def calculate_rental_price(self, start: datetime, end: datetime) -> Decimal:
        """
        Gets the price of a rental from start to end.

        :raises IncorrectDateRangeError: If the end is before the start.
        :raises NegativePriceError: If the calculation arrives at a negative amount.
        """
        return self._price_range(start, end, 0)

    def calculate_incomplete_rental_price(self, start: datetime, now: Optional[datetime] = None) -> Decimal:
        """Gets the price of a rental that has not finished yet, as though it ended now."""
        if now is None:
            now = datetime.now()
        return self.calculate_rental_price(start, now)

    def _price_range(self, start: datetime, end: datetime, depth: int) -> Decimal:
        """Prices the range using the tier at the given depth, recursing into smaller tiers."""
        if depth == len(TIERS):
            return self._price_single_day(start, end)

        tier = TIERS[depth]
        difference = tier.unit(end) - tier.unit(start)

        if difference < 0:
            raise IncorrectDateRangeError(start, end, tier.name)
        if difference == 0:
            return self._price_range(start, end, depth + 1)

        whole_units_price = self._checked(tier.days_between(start, end) * self.daily_cap)
        head_price = self._price_range(start, tier.end_of_unit(start), depth + 1)
        tail_price = self._price_range(tier.start_of_unit(end), end, depth + 1)

        return self._checked(head_price + whole_units_price + tail_price)

    def _price_single_day(self, start: datetime, end: datetime) -> Decimal:
        minutes = (end.hour * MINUTES_IN_HOUR + end.minute) - (start.hour * MINUTES_IN_HOUR + start.minute)

        if minutes < 0:
            raise IncorrectDateRangeError(start, end, "minute")

        # the last second of the day closes the day, so it pays for the final minute
        if (end.hour, end.minute, end.second) == (23, 59, 59):
            minutes += 1

        return self._checked(min(minutes * self.per_minute_rate, self.daily_cap))

    @staticmethod
    def _checked(amount: Decimal) -> Decimal:
        if amount < 0:
            raise NegativePriceError(amount)
        return amount
