import copy
from datetime import datetime

from bus_reservation.reservation.domain.entity import Seat, Trip
from bus_reservation.reservation.domain.factory import TripDetails, TripFactory
from bus_reservation.reservation.domain.repository import TripRepository
from bus_reservation.shared.domain import TripId
from bus_reservation.shared.domain.exception import (
    DuplicateResourceException,
    EmptyIdentifierException,
)


class ReservationRegistry:
    """便と予約を管理するユースケース

    - 全ての便を登録順に保持する
    - 予約IDによる便横断の検索と、売上・予約数の集計を提供する

    エントリポイントで 1 つ生成し、参照で受け渡して使う。
    単一スレッドからの利用を前提とする。
    """

    def __init__(self, repository: TripRepository, factory: TripFactory) -> None:
        self._repository = repository
        self._factory = factory

    def create_trip(
        self,
        trip_id: str,
        origin: str,
        destination: str,
        departure_time: datetime,
        capacity: int,
        ticket_price: int,
    ) -> Trip:
        """便を作成して登録する"""
        if not trip_id or not trip_id.strip():
            raise EmptyIdentifierException("Trip id cannot be empty")

        id = TripId(value=trip_id)
        if self._repository.exists(id):
            raise DuplicateResourceException(f"Trip already exists: {trip_id}")

        trip_details: TripDetails = {
            "origin": origin,
            "destination": destination,
            "departure_time": departure_time,
            "capacity": capacity,
            "ticket_price": ticket_price,
        }
        trip = self._factory.create(id, trip_details)
        self._repository.save(trip)
        return trip

    def get_trip(self, trip_id: str) -> Trip | None:
        if not trip_id or not trip_id.strip():
            return None
        return self._repository.find_by_id(TripId(value=trip_id))

    def list_trips(self) -> list[Trip]:
        return self._repository.find_all()

    def trip_count(self) -> int:
        return len(self._repository.find_all())

    def cancel_reservation(self, reservation_id: str) -> tuple[Trip, Seat] | None:
        """予約IDで予約を取り消す

        登録順に便を走査し、最初に見つかった座席を取り消す。
        戻り値の座席は取り消し前のスナップショット。
        """
        for trip in self._repository.find_all():
            seat = trip.find_seat_by_reservation_id(reservation_id)
            if seat is None:
                continue
            snapshot = copy.copy(seat)
            trip.release_seat(seat)
            return trip, snapshot
        return None

    def list_reservations(self) -> list[tuple[Trip, Seat]]:
        """全便の予約済み座席を (便, 座席) の組で返す"""
        return [
            (trip, seat)
            for trip in self._repository.find_all()
            for seat in trip.get_reserved_seats()
        ]

    def total_revenue(self) -> int:
        return sum(trip.get_revenue() for trip in self._repository.find_all())

    def total_reserved_seats(self) -> int:
        return sum(trip.reserved_count() for trip in self._repository.find_all())
