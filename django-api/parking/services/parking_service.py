"""Parking service - entry and exit workflows.

Services:
- Depend only on interfaces (stores, input reader)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Each workflow comes in two forms. The raising core (enter_vehicle,
park_vehicle, exit_vehicle) lets domain errors propagate so the HTTP handlers
can map them. The console operations (process_incoming_vehicle,
process_exiting_vehicle) read from the input reader, catch everything, log it
and return None.

Spot state is re-read from the store on every call. Reading the next free
spot and marking it unavailable are two separate store calls; running this
service from several threads at once would need a lock around that pair.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from parking.domain import ParkingSpot, ParkingType, Ticket
from parking.domain.errors import (
    InvalidVehicleTypeError,
    NoAvailableSpotError,
    PersistenceError,
    TicketAlreadyClosedError,
    TicketNotFoundError,
    TicketUpdateError,
    VehicleAlreadyParkedError,
)
from parking.services.fare_calculator import DISCOUNT_RATE, FareCalculatorService
from parking.services.input_reader import InputReader
from parking.stores.interfaces import ParkingSpotStore, TicketStore

REGULAR_CUSTOMER_MESSAGE = (
    "Welcome back! As a regular user of our parking, "
    f"you will get a {DISCOUNT_RATE:.0%} discount"
)


class ParkingService:
    """Service for vehicle entry and exit."""

    def __init__(
        self,
        input_reader: InputReader | None,
        spot_store: ParkingSpotStore,
        ticket_store: TicketStore,
        fare_calculator: FareCalculatorService,
        clock: Callable[[], datetime] = timezone.now,
        logger: logging.Logger | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self._input_reader = input_reader
        self._spot_store = spot_store
        self._ticket_store = ticket_store
        self._fare_calculator = fare_calculator
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)
        self._output = output

    # Console operations

    def process_incoming_vehicle(self) -> Ticket | None:
        """Allocate a spot and open a ticket for the vehicle at the gate."""
        try:
            parking_spot = self.get_next_parking_number_if_available()
            if parking_spot is None:
                return None
            vehicle_reg_number = self._read_vehicle_reg_number()
            return self.park_vehicle(parking_spot, vehicle_reg_number)
        except Exception:
            self._logger.exception("Unable to process incoming vehicle")
            return None

    def process_exiting_vehicle(self) -> Ticket | None:
        """Close the vehicle's ticket, charge it and release its spot."""
        vehicle_reg_number = None
        try:
            vehicle_reg_number = self._read_vehicle_reg_number()
            return self.exit_vehicle(vehicle_reg_number)
        except TicketUpdateError:
            self._output("Unable to update ticket information. Error occurred")
            self._logger.error(
                "Unable to update ticket for vehicle %s, spot kept reserved",
                vehicle_reg_number,
            )
            return None
        except Exception:
            self._logger.exception(
                "Unable to process exiting vehicle %s", vehicle_reg_number
            )
            return None

    def get_next_parking_number_if_available(self) -> ParkingSpot | None:
        """Ask for the vehicle type and return a free spot of that type, or None."""
        try:
            parking_type = self._read_vehicle_type()
            return self._find_spot(parking_type)
        except InvalidVehicleTypeError:
            self._logger.exception("Error parsing user input for type of vehicle")
        except NoAvailableSpotError:
            self._logger.exception("Error fetching next available parking slot")
        return None

    # Raising core

    def enter_vehicle(self, parking_type: ParkingType, vehicle_reg_number: str) -> Ticket:
        """Allocate a spot of the given type to the vehicle.

        Raises:
            NoAvailableSpotError: If every spot of that type is taken.
            VehicleAlreadyParkedError: If the vehicle still has an open ticket.
            PersistenceError: If the spot or the ticket could not be saved.
        """
        return self.park_vehicle(self._find_spot(parking_type), vehicle_reg_number)

    def park_vehicle(self, parking_spot: ParkingSpot, vehicle_reg_number: str) -> Ticket:
        """Reserve the spot and open a ticket for the vehicle.

        Raises:
            VehicleAlreadyParkedError: If the vehicle still has an open ticket.
            PersistenceError: If the spot or the ticket could not be saved.
        """
        current = self._ticket_store.get_most_recent_ticket(vehicle_reg_number)
        if current is not None and current.is_open:
            raise VehicleAlreadyParkedError(vehicle_reg_number, current.parking_spot.id)

        is_regular_customer = self._ticket_store.count_tickets(vehicle_reg_number) > 0

        parking_spot.available = False
        if not self._spot_store.update_spot(parking_spot):
            raise PersistenceError(f"Unable to reserve parking spot {parking_spot.id}")

        ticket = Ticket(
            parking_spot=parking_spot,
            vehicle_reg_number=vehicle_reg_number,
            in_time=self._clock(),
            is_regular_customer=is_regular_customer,
        )
        if not self._ticket_store.save_ticket(ticket):
            raise PersistenceError(f"Unable to save ticket for spot {parking_spot.id}")

        self._logger.info(
            "Vehicle %s parked at spot %s", vehicle_reg_number, parking_spot.id
        )
        self._output("Generated Ticket and saved in DB")
        self._output(f"Please park your vehicle in spot number: {parking_spot.id}")
        self._output(
            f"Recorded in-time for vehicle number: {vehicle_reg_number} "
            f"is: {ticket.in_time}"
        )
        if is_regular_customer:
            self._output(REGULAR_CUSTOMER_MESSAGE)
        return ticket

    def exit_vehicle(self, vehicle_reg_number: str) -> Ticket:
        """Close the vehicle's most recent ticket and free its spot.

        Raises:
            TicketNotFoundError: If the vehicle has no ticket.
            TicketAlreadyClosedError: If its most recent ticket is already closed.
            InvalidArgumentError: If the fare cannot be computed.
            TicketUpdateError: If the closed ticket could not be saved. The spot
                stays reserved in that case.
        """
        ticket = self._ticket_store.get_most_recent_ticket(vehicle_reg_number)
        if ticket is None:
            raise TicketNotFoundError(vehicle_reg_number)
        if not ticket.is_open:
            raise TicketAlreadyClosedError(vehicle_reg_number)

        ticket.out_time = self._clock()
        self._fare_calculator.calculate_fare(ticket, ticket.is_regular_customer)

        if not self._ticket_store.update_ticket(ticket):
            raise TicketUpdateError(vehicle_reg_number)

        parking_spot = ticket.parking_spot
        parking_spot.available = True
        if not self._spot_store.update_spot(parking_spot):
            # The ticket is already closed; only the inventory is stale.
            self._logger.error("Unable to release parking spot %s", parking_spot.id)

        self._logger.info(
            "Vehicle %s left spot %s, fare %s",
            vehicle_reg_number,
            parking_spot.id,
            ticket.price,
        )
        self._output(f"Please pay the parking fare: {ticket.price}")
        self._output(
            f"Recorded out-time for vehicle number: {vehicle_reg_number} "
            f"is: {ticket.out_time}"
        )
        return ticket

    # Helpers

    def _find_spot(self, parking_type: ParkingType) -> ParkingSpot:
        number = self._spot_store.get_next_available_spot(parking_type)
        if number <= 0:
            raise NoAvailableSpotError(parking_type)
        return ParkingSpot(id=number, parking_type=parking_type, available=True)

    def _read_vehicle_type(self) -> ParkingType:
        self._output("Please select vehicle type from menu")
        self._output("1 CAR")
        self._output("2 BIKE")
        try:
            return ParkingType.from_selection(self._require_input_reader().read_selection())
        except InvalidVehicleTypeError:
            self._output("Incorrect input provided")
            raise

    def _read_vehicle_reg_number(self) -> str:
        self._output("Please type the vehicle registration number and press enter key")
        return self._require_input_reader().read_vehicle_registration_number()

    def _require_input_reader(self) -> InputReader:
        if self._input_reader is None:
            raise RuntimeError("ParkingService was built without an input reader")
        return self._input_reader
