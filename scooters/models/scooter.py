from decimal import Decimal

from attr import dataclass


@dataclass
class Scooter:

    id: str
    price_per_minute: Decimal
    is_rented: bool = False
