"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

from parking.domain.errors import InvalidRegistrationError, InvalidVehicleTypeError

CENT = Decimal("0.01")
MAX_REGISTRATION_LENGTH = 10


class ParkingType(Enum):
    """Vehicle categories a spot can hold."""

    CAR = "CAR"
    BIKE = "BIKE"

    @classmethod
    def from_selection(cls, selection: int) -> Self:
        """Map a console menu selection (1 or 2) to a parking type."""
        match selection:
            case 1:
                return cls.CAR
            case 2:
                return cls.BIKE
            case _:
                raise InvalidVehicleTypeError(selection)

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidVehicleTypeError(value) from None


@dataclass(frozen=True)
class VehicleRegistration:
    """Normalized vehicle registration number."""

    value: str

    @classmethod
    def from_string(cls, value: str | None) -> Self:
        cleaned = (value or "").strip()
        if not cleaned:
            raise InvalidRegistrationError()
        if len(cleaned) > MAX_REGISTRATION_LENGTH:
            raise InvalidRegistrationError(
                f"Registration number is longer than {MAX_REGISTRATION_LENGTH} characters"
            )
        return cls(value=cleaned)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0.00"))

    @classmethod
    def from_float(cls, value: float) -> Self:
        """Round a float half-up to cents, starting from its shortest repr."""
        return cls(amount=Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
