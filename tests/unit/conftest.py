from datetime import datetime
from itertools import count
from unittest.mock import MagicMock

import pytest

from bus_reservation.reservation.applications import ReservationRegistry
from bus_reservation.reservation.domain.entity import Trip
from bus_reservation.reservation.domain.factory import TripFactory
from bus_reservation.reservation.domain.value_object import ReservationId
from bus_reservation.reservation.infrastructure import InMemoryTripRepository
from bus_reservation.shared.domain import TripId


@pytest.fixture
def fixed_now():
    """全テスト共通の固定時刻"""
    return datetime(2025, 11, 1, 12, 0)


@pytest.fixture
def clock(fixed_now):
    """固定時刻を返す時刻源"""
    return lambda: fixed_now


@pytest.fixture
def id_generator():
    """連番の予約IDを返す生成器"""
    counter = count(1)

    def _generate() -> ReservationId:
        return ReservationId(value=f"{next(counter):08d}-0000-4000-8000-000000000000")

    return _generate


@pytest.fixture
def trip_factory(id_generator, clock):
    """決定的な時刻源と予約ID生成器を注入した TripFactory"""
    return TripFactory(id_generator=id_generator, clock=clock)


@pytest.fixture
def registry(trip_factory):
    """空のインメモリリポジトリを持つ ReservationRegistry"""
    return ReservationRegistry(repository=InMemoryTripRepository(), factory=trip_factory)


@pytest.fixture
def create_trip(id_generator, clock):
    """Trip を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        trip_id: str = "T1",
        origin: str = "İstanbul",
        destination: str = "Ankara",
        departure_time: datetime = datetime(2025, 11, 3, 9, 0),
        capacity: int = 10,
        ticket_price: int = 100,
    ) -> Trip:
        return Trip(
            id=TripId(value=trip_id),
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            capacity=capacity,
            ticket_price=ticket_price,
            id_generator=id_generator,
            clock=clock,
        )

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
