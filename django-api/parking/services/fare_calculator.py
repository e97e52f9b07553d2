"""Fare calculation service.

Prices are computed from the stay duration in fractional minutes. Stays under
half an hour are free; longer stays are charged per hour at the rate of the
spot's parking type, minus 5% for regular customers. Rounding to cents happens
once, at the end.
"""

from collections.abc import Mapping

from django.conf import settings

from parking.domain import Money, ParkingType, Ticket
from parking.domain.errors import InvalidTicketTimeError, UnknownParkingTypeError

FREE_PARKING_MINUTES = 30.0
DISCOUNT_RATE = 0.05

DEFAULT_RATES_PER_HOUR = {
    ParkingType.CAR: 1.5,
    ParkingType.BIKE: 1.0,
}


def configured_rates() -> dict[ParkingType, float]:
    """Read hourly rates from settings.PARKING["RATES_PER_HOUR"]."""
    configured = getattr(settings, "PARKING", {}).get("RATES_PER_HOUR", {})
    rates = dict(DEFAULT_RATES_PER_HOUR)
    for name, rate in configured.items():
        rates[ParkingType.from_string(name)] = float(rate)
    return rates


class FareCalculatorService:
    """Computes and stores the price of a closed ticket."""

    def __init__(self, rates_per_hour: Mapping[ParkingType, float] | None = None) -> None:
        self._rates = dict(rates_per_hour) if rates_per_hour is not None else configured_rates()

    def calculate_fare(self, ticket: Ticket, discount: bool = False) -> None:
        """Set ticket.price from its in and out times.

        Raises:
            InvalidTicketTimeError: If out_time is missing or before in_time.
            UnknownParkingTypeError: If the spot's type has no rate. Not raised
                for free stays, which never look up a rate.
        """
        self._validate_out_time(ticket)
        duration_minutes = (ticket.out_time - ticket.in_time).total_seconds() / 60.0

        if self.is_free_parking(duration_minutes):
            ticket.price = Money.zero()
            return

        duration_hours = duration_minutes / 60.0
        price = duration_hours * self._rate_per_hour(ticket)

        if discount:
            price *= 1 - DISCOUNT_RATE

        ticket.price = Money.from_float(price)

    @staticmethod
    def is_free_parking(duration_minutes: float) -> bool:
        return duration_minutes < FREE_PARKING_MINUTES

    @staticmethod
    def _validate_out_time(ticket: Ticket) -> None:
        if ticket.out_time is None:
            raise InvalidTicketTimeError("Out time provided is null")
        if ticket.out_time < ticket.in_time:
            raise InvalidTicketTimeError(
                f"Out time provided is incorrect: {ticket.out_time.isoformat()} "
                f"compared to in time: {ticket.in_time.isoformat()}"
            )

    def _rate_per_hour(self, ticket: Ticket) -> float:
        parking_type = ticket.parking_spot.parking_type
        try:
            return self._rates[parking_type]
        except KeyError:
            raise UnknownParkingTypeError(parking_type) from None
