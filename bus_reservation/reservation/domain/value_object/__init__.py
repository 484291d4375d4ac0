from .reservation import Reservation
from .reservation_id import ReservationId, ReservationIdGenerator

__all__ = ["Reservation", "ReservationId", "ReservationIdGenerator"]
