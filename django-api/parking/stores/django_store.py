"""Django ORM implementation of the parking stores."""

from decimal import Decimal

from parking import models
from parking.domain import Money, ParkingSpot, ParkingType, Ticket
from parking.stores.interfaces import ParkingSpotStore, TicketStore


def _to_parking_type(value: str) -> ParkingType | None:
    try:
        return ParkingType(value)
    except ValueError:
        return None


def _to_domain_spot(row: models.ParkingSpot) -> ParkingSpot:
    return ParkingSpot(
        id=row.number,
        parking_type=_to_parking_type(row.parking_type),
        available=row.available,
    )


def _to_domain_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=row.pk,
        parking_spot=_to_domain_spot(row.parking_spot),
        vehicle_reg_number=row.vehicle_reg_number,
        price=Money(amount=Decimal(row.price)),
        in_time=row.in_time,
        out_time=row.out_time,
        is_regular_customer=row.is_regular_customer,
    )


class DjangoParkingSpotStore(ParkingSpotStore):
    """Spot inventory backed by the parking_parkingspot table."""

    def get_next_available_spot(self, parking_type: ParkingType) -> int:
        number = (
            models.ParkingSpot.objects.filter(
                parking_type=parking_type.value, available=True
            )
            .order_by("number")
            .values_list("number", flat=True)
            .first()
        )
        return number or 0

    def update_spot(self, parking_spot: ParkingSpot) -> bool:
        updated = models.ParkingSpot.objects.filter(number=parking_spot.id).update(
            available=parking_spot.available
        )
        return updated == 1

    def list_spots(self) -> list[ParkingSpot]:
        return [_to_domain_spot(row) for row in models.ParkingSpot.objects.all()]


class DjangoTicketStore(TicketStore):
    """Ticket history backed by the parking_ticket table."""

    def save_ticket(self, ticket: Ticket) -> bool:
        if not models.ParkingSpot.objects.filter(number=ticket.parking_spot.id).exists():
            return False
        if ticket.is_open and models.Ticket.objects.filter(
            vehicle_reg_number=ticket.vehicle_reg_number, out_time__isnull=True
        ).exists():
            return False
        row = models.Ticket.objects.create(
            parking_spot_id=ticket.parking_spot.id,
            vehicle_reg_number=ticket.vehicle_reg_number,
            price=ticket.price.amount,
            in_time=ticket.in_time,
            out_time=ticket.out_time,
            is_regular_customer=ticket.is_regular_customer,
        )
        ticket.id = row.pk
        return True

    def count_tickets(self, vehicle_reg_number: str) -> int:
        return models.Ticket.objects.filter(vehicle_reg_number=vehicle_reg_number).count()

    def get_most_recent_ticket(self, vehicle_reg_number: str) -> Ticket | None:
        row = (
            models.Ticket.objects.select_related("parking_spot")
            .filter(vehicle_reg_number=vehicle_reg_number)
            .order_by("-in_time", "-pk")
            .first()
        )
        return _to_domain_ticket(row) if row is not None else None

    def update_ticket(self, ticket: Ticket) -> bool:
        if ticket.id is None:
            return False
        updated = models.Ticket.objects.filter(pk=ticket.id).update(
            price=ticket.price.amount,
            out_time=ticket.out_time,
        )
        return updated == 1
