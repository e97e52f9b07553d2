"""Interactive parking shell: python manage.py parking"""

import logging

from django.core.management.base import BaseCommand

from parking.handlers.console import ConsoleInputReader
from parking.services import FareCalculatorService, ParkingService
from parking.stores.django_store import DjangoParkingSpotStore, DjangoTicketStore

logger = logging.getLogger("parking.shell")

MENU = (
    "Please select an option. Simply enter the number to choose an action",
    "1 New Vehicle Entering - Allocate Parking Space",
    "2 Vehicle Exiting - Generate Ticket Price",
    "3 Shutdown System",
)


class Command(BaseCommand):
    help = "Run the interactive parking console."

    def handle(self, *args, **options):
        input_reader = ConsoleInputReader()
        service = ParkingService(
            input_reader=input_reader,
            spot_store=DjangoParkingSpotStore(),
            ticket_store=DjangoTicketStore(),
            fare_calculator=FareCalculatorService(),
            logger=logging.getLogger("parking.services.parking_service"),
            output=self.stdout.write,
        )

        logger.info("App initialized")
        self.stdout.write("Welcome to Parking System!")
        while True:
            for line in MENU:
                self.stdout.write(line)
            try:
                selection = input_reader.read_selection()
            except EOFError:
                selection = 3
            match selection:
                case 1:
                    service.process_incoming_vehicle()
                case 2:
                    service.process_exiting_vehicle()
                case 3:
                    self.stdout.write("Exiting from the system!")
                    return
                case _:
                    self.stdout.write("Unsupported option. Please enter a number corresponding to the provided menu")
