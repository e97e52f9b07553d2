"""Integration tests for entry and exit against the database.

Run with: pytest tests/test_parking_flow.py -v
"""

import logging
from decimal import Decimal
from unittest.mock import Mock, create_autospec

import pytest

from parking import models
from parking.domain import ParkingType
from parking.services import FareCalculatorService, InputReader, ParkingService
from parking.stores.django_store import DjangoParkingSpotStore, DjangoTicketStore

CAR, BIKE = 1, 2


@pytest.fixture
def input_reader():
    return create_autospec(InputReader, instance=True)


@pytest.fixture
def clock():
    return Mock()


@pytest.fixture
def ticket_store() -> DjangoTicketStore:
    return DjangoTicketStore()


@pytest.fixture
def service(input_reader, clock, ticket_store):
    return ParkingService(
        input_reader=input_reader,
        spot_store=DjangoParkingSpotStore(),
        ticket_store=ticket_store,
        fare_calculator=FareCalculatorService(),
        clock=clock,
        output=lambda line: None,
    )


@pytest.fixture
def arrive(input_reader, clock, at):
    """Configure the next inputs: vehicle type, registration and clock readings."""

    def _arrive(vehicle_type: int, reg: str, *millis: int) -> None:
        input_reader.read_selection.return_value = vehicle_type
        input_reader.read_vehicle_registration_number.return_value = reg
        clock.side_effect = [at(value) for value in millis]

    return _arrive


@pytest.mark.django_db
class TestParkingEntry:
    """Entry saves a ticket and reserves the spot."""

    @pytest.mark.parametrize(
        ("vehicle_type", "parking_type", "spot"), [(CAR, ParkingType.CAR, 1), (BIKE, ParkingType.BIKE, 4)]
    )
    def test_parking_a_vehicle(self, service, ticket_store, arrive, at, vehicle_type, parking_type, spot):
        arrive(vehicle_type, "ABCDEFGH", 1000)

        service.process_incoming_vehicle()

        ticket = ticket_store.get_most_recent_ticket("ABCDEFGH")
        assert ticket is not None
        assert ticket.out_time is None
        assert ticket.in_time == at(1000)
        assert ticket.price.amount == 0
        assert not ticket.is_regular_customer
        assert ticket.parking_spot.id == spot
        assert ticket.parking_spot.parking_type is parking_type
        assert not ticket.parking_spot.available
        assert not models.ParkingSpot.objects.get(number=spot).available

    def test_full_lot_creates_nothing(self, service, arrive, caplog):
        models.ParkingSpot.objects.filter(parking_type="CAR").update(available=False)
        arrive(CAR, "ABCDEFGH", 1000)

        with caplog.at_level(logging.ERROR):
            assert service.process_incoming_vehicle() is None

        assert not models.Ticket.objects.exists()
        assert models.ParkingSpot.objects.filter(available=False).count() == 3

    def test_spots_fill_in_order(self, service, arrive):
        for reg in ("CAR1", "CAR2", "CAR3"):
            arrive(CAR, reg, 1000)
            service.process_incoming_vehicle()

        arrive(CAR, "CAR4", 1000)
        assert service.process_incoming_vehicle() is None
        assert list(
            models.Ticket.objects.order_by("parking_spot_id").values_list("parking_spot_id", flat=True)
        ) == [1, 2, 3]


    def test_second_entry_while_parked_is_rejected(self, service, ticket_store, arrive, at, caplog):
        """A parked vehicle keeps one spot and one open ticket."""
        arrive(CAR, "ABC", 1000, 2000, 360_010_000)
        service.process_incoming_vehicle()

        with caplog.at_level(logging.ERROR):
            assert service.process_incoming_vehicle() is None

        assert models.Ticket.objects.filter(vehicle_reg_number="ABC").count() == 1
        assert list(
            models.ParkingSpot.objects.filter(available=False).values_list("number", flat=True)
        ) == [1]
        assert "VEHICLE_ALREADY_PARKED" in caplog.text

        ticket = service.process_exiting_vehicle()

        assert ticket.in_time == at(1000)
        assert not models.Ticket.objects.filter(out_time__isnull=True).exists()
        assert not models.ParkingSpot.objects.filter(available=False).exists()


@pytest.mark.django_db
class TestParkingExit:
    """Exit charges the ticket and frees the spot."""

    @pytest.mark.parametrize(("vehicle_type", "price"), [(CAR, "150.00"), (BIKE, "100.00")])
    def test_exit_generates_fare(self, service, ticket_store, arrive, at, vehicle_type, price):
        arrive(vehicle_type, "ABCDEFGH", 1000, 360_010_000)

        service.process_incoming_vehicle()
        ticket = service.process_exiting_vehicle()

        assert ticket.in_time == at(1000)
        assert ticket.out_time == at(360_010_000)
        assert ticket.price.amount == Decimal(price)
        assert ticket.parking_spot.available

        stored = ticket_store.get_most_recent_ticket("ABCDEFGH")
        assert stored.out_time == at(360_010_000)
        assert stored.price.amount == Decimal(price)
        assert stored.parking_spot.available

    @pytest.mark.parametrize(("vehicle_type", "price"), [(CAR, "142.50"), (BIKE, "95.00")])
    def test_recurring_user_gets_discount(self, service, ticket_store, arrive, at, vehicle_type, price):
        arrive(
            vehicle_type,
            "ABCDEFGH",
            720_020_000,
            1_080_030_000,
            1_440_040_000,
            1_800_050_000,
        )

        service.process_incoming_vehicle()
        service.process_exiting_vehicle()
        service.process_incoming_vehicle()
        service.process_exiting_vehicle()

        ticket = ticket_store.get_most_recent_ticket("ABCDEFGH")
        assert ticket.is_regular_customer
        assert ticket.in_time == at(1_440_040_000)
        assert ticket.out_time == at(1_800_050_000)
        assert ticket.price.amount == Decimal(price)
        assert ticket_store.count_tickets("ABCDEFGH") == 2

    @pytest.mark.parametrize("vehicle_type", [CAR, BIKE])
    def test_short_stay_is_free(self, service, ticket_store, arrive, vehicle_type):
        arrive(vehicle_type, "ABCDEFGH", 1_739_534_400_000, 1_739_535_900_000)

        service.process_incoming_vehicle()
        service.process_exiting_vehicle()

        assert ticket_store.get_most_recent_ticket("ABCDEFGH").price.amount == 0

    def test_double_exit_is_rejected(self, service, ticket_store, arrive, at, caplog):
        """A second exit leaves the closed ticket and the spot untouched."""
        arrive(CAR, "ABCDEFGH", 1000, 360_010_000, 720_020_000)
        service.process_incoming_vehicle()
        service.process_exiting_vehicle()
        models.ParkingSpot.objects.filter(number=1).update(available=False)

        with caplog.at_level(logging.ERROR):
            assert service.process_exiting_vehicle() is None

        ticket = ticket_store.get_most_recent_ticket("ABCDEFGH")
        assert ticket.out_time == at(360_010_000)
        assert ticket.price.amount == Decimal("150.00")
        assert not models.ParkingSpot.objects.get(number=1).available
        assert "TICKET_ALREADY_CLOSED" in caplog.text
