"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from parking.domain.errors import (
    DomainError,
    InvalidArgumentError,
    NoAvailableSpotError,
    PersistenceError,
    TicketAlreadyClosedError,
    TicketNotFoundError,
    VehicleAlreadyParkedError,
)
from parking.handlers.serializers import (
    EntryRequestSerializer,
    ExitRequestSerializer,
    ParkingSpotSerializer,
    TicketSerializer,
)
from parking.services import FareCalculatorService, ParkingService
from parking.stores.django_store import DjangoParkingSpotStore, DjangoTicketStore

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases.
_ERROR_STATUS = (
    (TicketAlreadyClosedError, status.HTTP_409_CONFLICT),
    (NoAvailableSpotError, status.HTTP_409_CONFLICT),
    (VehicleAlreadyParkedError, status.HTTP_409_CONFLICT),
    (TicketNotFoundError, status.HTTP_404_NOT_FOUND),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
)


def build_parking_service() -> ParkingService:
    return ParkingService(
        input_reader=None,
        spot_store=DjangoParkingSpotStore(),
        ticket_store=DjangoTicketStore(),
        fare_calculator=FareCalculatorService(),
        logger=logging.getLogger("parking.services.parking_service"),
        output=logger.debug,
    )


def error_response(error: DomainError) -> Response:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(error, error_type):
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(
        {"code": error.code.value, "message": error.message}, status=status_code
    )


class EntryView(APIView):
    """Handler for POST /api/entries"""

    def post(self, request: Request) -> Response:
        serializer = EntryRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            ticket = build_parking_service().enter_vehicle(
                serializer.validated_data["vehicle_type"],
                serializer.validated_data["vehicle_reg_number"],
            )
        except DomainError as exc:
            logger.warning("Entry rejected: %s", exc)
            return error_response(exc)
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class ExitView(APIView):
    """Handler for POST /api/exits"""

    def post(self, request: Request) -> Response:
        serializer = ExitRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            ticket = build_parking_service().exit_vehicle(
                serializer.validated_data["vehicle_reg_number"]
            )
        except DomainError as exc:
            logger.warning("Exit rejected: %s", exc)
            return error_response(exc)
        return Response(TicketSerializer(ticket).data)


class SpotListView(APIView):
    """Handler for GET /api/spots"""

    def get(self, request: Request) -> Response:
        spots = DjangoParkingSpotStore().list_spots()
        return Response(ParkingSpotSerializer(spots, many=True).data)
