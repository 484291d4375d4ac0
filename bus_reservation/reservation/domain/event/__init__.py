from .events import ReservationCancelled, SeatReserved

__all__ = ["SeatReserved", "ReservationCancelled"]
