import pytest

from bus_reservation.reservation.infrastructure import InMemoryTripRepository
from bus_reservation.shared.domain import TripId
from bus_reservation.shared.domain.exception import DuplicateResourceException


class TestInMemoryTripRepository:
    """InMemoryTripRepository のテスト"""

    def test_save_and_find_by_id(self, create_trip):
        """保存した便をIDで取得できる"""

        # Arrange
        repository = InMemoryTripRepository()
        trip = create_trip(trip_id="T1")

        # Act
        repository.save(trip)

        # Assert
        assert repository.find_by_id(TripId(value="T1")) is trip
        assert repository.exists(TripId(value="T1")) is True

    def test_find_unknown_id_returns_none(self):
        """存在しない便IDは None"""
        repository = InMemoryTripRepository()
        assert repository.find_by_id(TripId(value="missing")) is None
        assert repository.exists(TripId(value="missing")) is False

    def test_find_all_keeps_insertion_order(self, create_trip):
        """一覧は登録順"""

        # Arrange
        repository = InMemoryTripRepository()
        for trip_id in ["T3", "T1", "T2"]:
            repository.save(create_trip(trip_id=trip_id))

        # Act
        trips = repository.find_all()

        # Assert
        assert [str(trip.trip_id) for trip in trips] == ["T3", "T1", "T2"]

    def test_save_duplicate_raises_error(self, create_trip):
        """同じ便IDの保存は例外が発生し、既存の便は置き換わらない"""

        # Arrange
        repository = InMemoryTripRepository()
        first = create_trip(trip_id="T1")
        repository.save(first)

        # Act & Assert
        with pytest.raises(DuplicateResourceException, match="Trip already exists"):
            repository.save(create_trip(trip_id="T1", ticket_price=999))
        assert repository.find_by_id(TripId(value="T1")) is first
