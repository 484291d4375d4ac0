from bus_reservation.reservation.domain.entity import Trip
from bus_reservation.reservation.domain.repository import TripRepository
from bus_reservation.shared.domain import TripId
from bus_reservation.shared.domain.exception.exceptions import (
    DuplicateResourceException,
)


class InMemoryTripRepository(TripRepository):
    """プロセス内の dict を使用した TripRepository の具象実装

    dict の挿入順がそのまま一覧の順序になる。
    """

    def __init__(self) -> None:
        self._trips: dict[TripId, Trip] = {}

    def save(self, trip: Trip) -> None:
        """便を保管する"""
        if trip.id in self._trips:
            raise DuplicateResourceException(f"Trip already exists: {trip.id}")
        self._trips[trip.id] = trip

    def find_by_id(self, trip_id: TripId) -> Trip | None:
        return self._trips.get(trip_id)

    def find_all(self) -> list[Trip]:
        return list(self._trips.values())

    def exists(self, trip_id: TripId) -> bool:
        return trip_id in self._trips
