"""Domain error codes for the parking module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_VEHICLE_TYPE = "INVALID_VEHICLE_TYPE"
    INVALID_REGISTRATION = "INVALID_REGISTRATION"
    INVALID_TICKET_TIME = "INVALID_TICKET_TIME"
    UNKNOWN_PARKING_TYPE = "UNKNOWN_PARKING_TYPE"
    TICKET_ALREADY_CLOSED = "TICKET_ALREADY_CLOSED"
    NO_AVAILABLE_SPOT = "NO_AVAILABLE_SPOT"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    TICKET_UPDATE_FAILED = "TICKET_UPDATE_FAILED"
    VEHICLE_ALREADY_PARKED = "VEHICLE_ALREADY_PARKED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidArgumentError(DomainError):
    """Base for errors caused by bad input or an inconsistent ticket."""


class InvalidVehicleTypeError(InvalidArgumentError):
    """Raised when the vehicle type selection is not CAR or BIKE."""

    def __init__(self, selection: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VEHICLE_TYPE,
            message="Entered input is invalid",
        )
        self.selection = selection


class InvalidRegistrationError(InvalidArgumentError):
    """Raised when a vehicle registration number is blank or too long."""

    def __init__(self, message: str = "Invalid input provided") -> None:
        super().__init__(code=ErrorCode.INVALID_REGISTRATION, message=message)


class InvalidTicketTimeError(InvalidArgumentError):
    """Raised when a ticket's out time is missing or before its in time."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_TIME, message=message)


class UnknownParkingTypeError(InvalidArgumentError):
    """Raised when a spot's parking type has no hourly rate."""

    def __init__(self, parking_type: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PARKING_TYPE,
            message="Unknown Parking Type",
        )
        self.parking_type = parking_type


class TicketAlreadyClosedError(InvalidArgumentError):
    """Raised on exit when the most recent ticket already has an out time."""

    def __init__(self, vehicle_reg_number: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ALREADY_CLOSED,
            message="the ticket has already an outTime",
        )
        self.vehicle_reg_number = vehicle_reg_number


class VehicleAlreadyParkedError(DomainError):
    """Raised on entry when the vehicle still has an open ticket."""

    def __init__(self, vehicle_reg_number: str, spot_number: int) -> None:
        super().__init__(
            code=ErrorCode.VEHICLE_ALREADY_PARKED,
            message=f"Vehicle is already parked at spot {spot_number}",
        )
        self.vehicle_reg_number = vehicle_reg_number


class NoAvailableSpotError(DomainError):
    """Raised when no spot of the requested type is free."""

    def __init__(self, parking_type: object) -> None:
        super().__init__(
            code=ErrorCode.NO_AVAILABLE_SPOT,
            message="Parking slots might be full",
        )
        self.parking_type = parking_type


class TicketNotFoundError(DomainError):
    """Raised when a vehicle has no ticket on record."""

    def __init__(self, vehicle_reg_number: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.vehicle_reg_number = vehicle_reg_number


class PersistenceError(DomainError):
    """Raised when a store reports that a write did not happen."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PERSISTENCE_FAILURE) -> None:
        super().__init__(code=code, message=message)


class TicketUpdateError(PersistenceError):
    """Raised when closing a ticket could not be persisted."""

    def __init__(self, vehicle_reg_number: str) -> None:
        super().__init__(
            message="Unable to update ticket information",
            code=ErrorCode.TICKET_UPDATE_FAILED,
        )
        self.vehicle_reg_number = vehicle_reg_number
