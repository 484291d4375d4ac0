from .in_memory_trip_repository import InMemoryTripRepository

__all__ = ["InMemoryTripRepository"]
