"""Serializers for request validation and domain model responses."""

from rest_framework import serializers

from parking.domain import ParkingType, VehicleRegistration
from parking.domain.errors import InvalidRegistrationError
from parking.domain.value_objects import MAX_REGISTRATION_LENGTH

VEHICLE_TYPE_CHOICES = [parking_type.value for parking_type in ParkingType]


class _VehicleRegNumberField(serializers.CharField):
    def to_internal_value(self, data) -> str:
        value = super().to_internal_value(data)
        try:
            return VehicleRegistration.from_string(value).value
        except InvalidRegistrationError as exc:
            raise serializers.ValidationError(exc.message) from exc


class EntryRequestSerializer(serializers.Serializer):
    """Input for POST /api/entries."""

    vehicle_type = serializers.ChoiceField(choices=VEHICLE_TYPE_CHOICES)
    vehicle_reg_number = _VehicleRegNumberField(max_length=MAX_REGISTRATION_LENGTH)

    def validate_vehicle_type(self, value: str) -> ParkingType:
        return ParkingType(value)


class ExitRequestSerializer(serializers.Serializer):
    """Input for POST /api/exits."""

    vehicle_reg_number = _VehicleRegNumberField(max_length=MAX_REGISTRATION_LENGTH)


class ParkingSpotSerializer(serializers.Serializer):
    """Serializer for ParkingSpot domain model."""

    id = serializers.IntegerField()
    parking_type = serializers.SerializerMethodField()
    available = serializers.BooleanField()

    def get_parking_type(self, spot) -> str | None:
        return spot.parking_type.value if spot.parking_type else None


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.IntegerField()
    parking_spot = ParkingSpotSerializer()
    vehicle_reg_number = serializers.CharField()
    in_time = serializers.DateTimeField()
    out_time = serializers.DateTimeField(allow_null=True)
    price = serializers.SerializerMethodField()
    is_regular_customer = serializers.BooleanField()

    def get_price(self, ticket) -> str:
        return str(ticket.price)
