from .entity import Seat, Trip
from .event import ReservationCancelled, SeatReserved
from .factory import TripDetails, TripFactory
from .repository import TripRepository
from .value_object import Reservation, ReservationId, ReservationIdGenerator

__all__ = [
    "Seat",
    "Trip",
    "SeatReserved",
    "ReservationCancelled",
    "TripFactory",
    "TripDetails",
    "TripRepository",
    "Reservation",
    "ReservationId",
    "ReservationIdGenerator",
]
