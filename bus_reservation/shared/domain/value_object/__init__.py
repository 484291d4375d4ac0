from .trip_id import TripId

__all__ = ["TripId"]
