"""Domain models representing parking state.

Unlike value objects these are mutable: a spot's availability flips on entry
and exit, and a ticket gains an out time and a price when the vehicle leaves.
Django ORM models are in parking/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime

from parking.domain.value_objects import Money, ParkingType


@dataclass(unsafe_hash=True)
class ParkingSpot:
    """Domain representation of a physical spot. Identity is the number."""

    id: int
    parking_type: ParkingType | None = field(compare=False)
    available: bool = field(default=True, compare=False)


@dataclass
class Ticket:
    """Domain representation of one parking session."""

    parking_spot: ParkingSpot
    vehicle_reg_number: str
    in_time: datetime
    out_time: datetime | None = None
    price: Money = field(default_factory=Money.zero)
    is_regular_customer: bool = False
    id: int | None = None

    @property
    def is_open(self) -> bool:
        return self.out_time is None
