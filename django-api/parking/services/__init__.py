from parking.services.fare_calculator import FareCalculatorService
from parking.services.input_reader import InputReader
from parking.services.parking_service import ParkingService

__all__ = ["FareCalculatorService", "InputReader", "ParkingService"]
