"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Write operations report
success with a boolean instead of raising; the service decides what a failed
write means.
"""

from abc import ABC, abstractmethod

from parking.domain import ParkingSpot, ParkingType, Ticket


class ParkingSpotStore(ABC):
    """Interface for spot inventory operations."""

    @abstractmethod
    def get_next_available_spot(self, parking_type: ParkingType) -> int:
        """Return the lowest free spot number of the given type, or 0 if none."""
        ...

    @abstractmethod
    def update_spot(self, parking_spot: ParkingSpot) -> bool:
        """Persist the spot's availability. Return False if nothing was written."""
        ...

    @abstractmethod
    def list_spots(self) -> list[ParkingSpot]:
        """Return the whole inventory ordered by spot number."""
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def save_ticket(self, ticket: Ticket) -> bool:
        """Insert a new ticket and assign its id.

        Return False when opening a ticket for a vehicle that already has one open.
        """
        ...

    @abstractmethod
    def count_tickets(self, vehicle_reg_number: str) -> int:
        """Return how many tickets exist for a vehicle."""
        ...

    @abstractmethod
    def get_most_recent_ticket(self, vehicle_reg_number: str) -> Ticket | None:
        """Return the vehicle's ticket with the latest in_time, or None."""
        ...

    @abstractmethod
    def update_ticket(self, ticket: Ticket) -> bool:
        """Persist price and out_time of an existing ticket."""
        ...
