from .seat import Seat
from .trip import Trip

__all__ = ["Seat", "Trip"]
