from .reservation_registry import ReservationRegistry
from .seed_sample_data import seed_sample_data

__all__ = ["ReservationRegistry", "seed_sample_data"]
