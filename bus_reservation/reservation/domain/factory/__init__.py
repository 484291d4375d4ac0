from .trip_factory import TripDetails, TripFactory

__all__ = ["TripFactory", "TripDetails"]
