from datetime import datetime
from decimal import Decimal

import pytest

from scooters.models import RentalRecord
from scooters.pricing import IncomeAggregator


@pytest.fixture
def aggregator(calculator) -> IncomeAggregator:
    return IncomeAggregator(calculator)


def test_no_records(aggregator):
    assert aggregator.calculate_income([], include_open=True) == 0


@pytest.mark.parametrize("year,expected", [(2020, "12"), (2021, "60"), (2022, "42"), (2023, "64"), (2024, "0")])
def test_income_for_year(aggregator, history, year, expected):
    """Assert that only rentals completed in the given year are counted."""
    assert aggregator.calculate_income(history, year=year) == Decimal(expected)


def test_all_time_income(aggregator, history):
    """Assert that every completed rental is counted when no year is given."""
    assert aggregator.calculate_income(history) == Decimal("178")


def test_all_time_income_with_open_rentals(aggregator, history, clock):
    """Assert that open rentals are priced up until now."""
    assert aggregator.calculate_income(history, include_open=True, now=clock()) == Decimal("196")


def test_open_rentals_ignore_year(aggregator, history, clock):
    """Assert that open rentals are counted whatever year is asked for."""
    assert aggregator.calculate_income(history, year=2023, include_open=True, now=clock()) == Decimal("82")
    assert aggregator.calculate_income(history, year=1999, include_open=True, now=clock()) == Decimal("18")


def test_counts_rentals_by_end_year(aggregator):
    """Assert that a rental over new years counts towards the year it ended in."""
    record = RentalRecord(1, "1", datetime(2022, 12, 31, 23, 0))
    record.finish(datetime(2023, 1, 1, 1, 0), Decimal("24"))

    assert aggregator.calculate_income([record], year=2022) == 0
    assert aggregator.calculate_income([record], year=2023) == Decimal("24")


def test_does_not_modify_records(aggregator, history, clock):
    """Assert that aggregating leaves open rentals open."""
    aggregator.calculate_income(history, include_open=True, now=clock())
    assert sum(1 for record in history if not record.is_complete) == 3
    assert all(record.total_price is None for record in history if not record.is_complete)


def test_accepts_any_iterable(aggregator, history, clock):
    records = (record for record in history)
    assert aggregator.calculate_income(records, include_open=True, now=clock()) == Decimal("196")
