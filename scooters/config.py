import os
from decimal import Decimal

scooters_mode = os.getenv("SCOOTERS_MODE", "development")
"""The operational mode of the service."""

price_per_minute = Decimal(os.getenv("SCOOTERS_PRICE_PER_MINUTE", "0.2"))
"""The default price charged for every started minute of a rental."""

max_daily_price = Decimal(os.getenv("SCOOTERS_MAX_DAILY_PRICE", "20"))
"""The most that a single calendar day of rental can cost."""

company_name = os.getenv("SCOOTERS_COMPANY_NAME", "default")
"""The name reported on income reports."""
