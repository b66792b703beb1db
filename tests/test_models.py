from datetime import datetime
from decimal import Decimal

import pytest

from scooters.models import RentalRecord, RentalAlreadyFinishedError


def test_new_record_is_open():
    record = RentalRecord(1, "1", datetime(2023, 1, 1, 10, 0))
    assert not record.is_complete
    assert record.end_time is None
    assert record.total_price is None


def test_finish_record():
    record = RentalRecord(1, "1", datetime(2023, 1, 1, 10, 0))
    record.finish(datetime(2023, 1, 1, 10, 10), Decimal("2"))

    assert record.is_complete
    assert record.end_time == datetime(2023, 1, 1, 10, 10)
    assert record.total_price == Decimal("2")


def test_finish_record_twice():
    """Assert that a record can only be finished once."""
    record = RentalRecord(1, "1", datetime(2023, 1, 1, 10, 0))
    record.finish(datetime(2023, 1, 1, 10, 10), Decimal("2"))

    with pytest.raises(RentalAlreadyFinishedError):
        record.finish(datetime(2023, 1, 1, 11, 10), Decimal("14"))

    assert record.total_price == Decimal("2")
