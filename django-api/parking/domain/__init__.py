from parking.domain.models import ParkingSpot, Ticket
from parking.domain.value_objects import Money, ParkingType, VehicleRegistration

__all__ = [
    "ParkingSpot",
    "Ticket",
    "ParkingType",
    "VehicleRegistration",
    "Money",
]
