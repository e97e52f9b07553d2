"""Input interface the parking service reads vehicle details from."""

from abc import ABC, abstractmethod


class InputReader(ABC):
    """Source of operator input for the console-driven workflows."""

    @abstractmethod
    def read_selection(self) -> int:
        """Return the selected menu number, or -1 if the input was not a number."""
        ...

    @abstractmethod
    def read_vehicle_registration_number(self) -> str:
        """Return a non-blank registration number.

        Raises:
            InvalidRegistrationError: If the operator entered nothing.
        """
        ...
