from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from faker import Faker
from faker.providers import misc

from scooters.models import RentalRecord, Scooter
from scooters.pricing import PriceRateConfig, RentalPriceCalculator
from scooters.service import RentalCompany, ScooterService
from tests.util import FakeClock

fake = Faker()
fake.add_provider(misc)

DEFAULT_PRICE_PER_MINUTE = Decimal("0.2")
DEFAULT_MAX_PRICE_PER_DAY = Decimal("20")


@pytest.fixture
def rates() -> PriceRateConfig:
    return PriceRateConfig(DEFAULT_PRICE_PER_MINUTE, DEFAULT_MAX_PRICE_PER_DAY)


@pytest.fixture
def calculator(rates) -> RentalPriceCalculator:
    return RentalPriceCalculator(rates)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 1, 12, 0, 0))


@pytest.fixture
def scooter_storage():
    return []


@pytest.fixture
def rental_records():
    return []


@pytest.fixture
def scooter_service(scooter_storage) -> ScooterService:
    return ScooterService(scooter_storage)


@pytest.fixture
def rental_company(scooter_service, rental_records, calculator, clock) -> RentalCompany:
    return RentalCompany("default", scooter_service, rental_records, calculator, clock)


@pytest.fixture
def random_scooter_factory(scooter_service):
    def create_scooter(price_per_minute=DEFAULT_PRICE_PER_MINUTE) -> Scooter:
        return scooter_service.add_scooter(fake.uuid4(), price_per_minute)

    return create_scooter


@pytest.fixture
def random_scooter(random_scooter_factory) -> Scooter:
    """Creates a random scooter in the fleet."""
    return random_scooter_factory()


@pytest.fixture
def history(rental_records, clock):
    """
    Fills the records with eight completed rentals between 2020 and 2023,
    worth 178 in total, and three rentals that have been running
    for 20, 10 and 60 minutes, worth 18 so far.
    """
    completed = [
        ("1", datetime(2020, 1, 1, 15, 0), datetime(2020, 1, 1, 16, 0), "12"),
        ("1", datetime(2021, 2, 2, 13, 0), datetime(2021, 2, 2, 15, 0), "20"),
        ("1", datetime(2021, 3, 3, 13, 0), datetime(2021, 3, 3, 15, 0), "20"),
        ("1", datetime(2021, 4, 4, 15, 0), datetime(2021, 4, 4, 17, 0), "20"),
        ("1", datetime(2022, 5, 5, 16, 20), datetime(2022, 5, 5, 16, 30), "2"),
        ("2", datetime(2022, 6, 6, 17, 0), datetime(2022, 6, 7, 17, 0), "40"),
        ("1", datetime(2023, 8, 8, 15, 50), datetime(2023, 8, 8, 16, 10), "4"),
        ("2", datetime(2023, 9, 9, 17, 0), datetime(2023, 9, 11, 11, 0), "60"),
    ]
    for number, (scooter_id, start, end, price) in enumerate(completed, 1):
        record = RentalRecord(number, scooter_id, start)
        record.finish(end, Decimal(price))
        rental_records.append(record)

    for number, (scooter_id, minutes) in enumerate((("1", 20), ("2", 10), ("3", 60)), len(completed) + 1):
        rental_records.append(RentalRecord(number, scooter_id, clock() - timedelta(minutes=minutes)))

    return rental_records
