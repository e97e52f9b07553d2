from parking.stores.interfaces import ParkingSpotStore, TicketStore

__all__ = ["ParkingSpotStore", "TicketStore"]
