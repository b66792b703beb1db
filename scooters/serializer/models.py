"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema, validates_schema, ValidationError, post_load
from marshmallow.fields import Integer, Boolean, String, DateTime, Decimal
from marshmallow.validate import Range

from scooters.models import RentalRecord, Scooter
from scooters.pricing import PriceRateConfig


class ScooterSchema(Schema):
    """The schema corresponding to the :class:`~scooters.models.scooter.Scooter` model."""

    id = String(required=True)
    price_per_minute = Decimal(required=True, as_string=True, validate=Range(min=0, min_inclusive=False))
    is_rented = Boolean()

    @post_load
    def make_scooter(self, data, **kwargs) -> Scooter:
        return Scooter(**data)


class RentalRecordSchema(Schema):
    """The schema corresponding to the :class:`~scooters.models.rental.RentalRecord` model."""

    record_number = Integer(required=True, validate=Range(min=1))
    scooter_id = String(required=True)
    start_time = DateTime(required=True)
    end_time = DateTime(allow_none=True)
    total_price = Decimal(allow_none=True, as_string=True, validate=Range(min=0))

    @validates_schema
    def assert_end_time_with_price(self, data, **kwargs):
        """
        Asserts that when a rental is complete both the price and end time are included.
        """
        has_end_time = data.get("end_time") is not None
        has_price = data.get("total_price") is not None
        if has_price and not has_end_time:
            raise ValidationError("If the price is included, you must also include the end time.")
        elif has_end_time and not has_price:
            raise ValidationError("If the end time is included, you must also include the price.")
        if not has_end_time:
            return
        if (data["start_time"].tzinfo is None) != (data["end_time"].tzinfo is None):
            raise ValidationError("The start and end time must both have a timezone, or neither.")
        if data["end_time"] < data["start_time"]:
            raise ValidationError("The end time must not be before the start time.")

    @post_load
    def make_record(self, data, **kwargs) -> RentalRecord:
        return RentalRecord(**data)


class IncomeReportSchema(Schema):
    company = String(required=True)
    year = Integer(allow_none=True)
    include_open = Boolean(required=True)
    income = Decimal(required=True, as_string=True)


class PriceRateSchema(Schema):
    """The schema corresponding to :class:`~scooters.pricing.calculator.PriceRateConfig`."""

    per_minute_rate = Decimal(required=True, as_string=True, validate=Range(min=0, min_inclusive=False))
    daily_cap = Decimal(required=True, as_string=True, validate=Range(min=0, min_inclusive=False))

    @post_load
    def make_rates(self, data, **kwargs) -> PriceRateConfig:
        return PriceRateConfig(**data)
