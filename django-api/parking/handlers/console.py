"""Console input reader used by the interactive shell."""

import logging
from collections.abc import Callable

from parking.domain import VehicleRegistration
from parking.domain.errors import InvalidRegistrationError
from parking.services.input_reader import InputReader

logger = logging.getLogger(__name__)


class ConsoleInputReader(InputReader):
    """Reads operator input line by line from a prompt function."""

    def __init__(self, read_line: Callable[[], str] | None = None) -> None:
        self._read_line = read_line or input

    def read_selection(self) -> int:
        line = self._read_line()
        try:
            return int(line.strip())
        except ValueError:
            logger.error("Unable to parse selection %r", line)
            return -1

    def read_vehicle_registration_number(self) -> str:
        line = self._read_line()
        try:
            return VehicleRegistration.from_string(line).value
        except InvalidRegistrationError:
            logger.error("Error while reading user input from shell")
            raise
