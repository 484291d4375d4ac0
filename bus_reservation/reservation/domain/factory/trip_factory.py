from datetime import datetime
from typing import TypedDict

from bus_reservation.reservation.domain.entity.trip import Trip
from bus_reservation.reservation.domain.value_object.reservation_id import (
    ReservationId,
    ReservationIdGenerator,
)
from bus_reservation.shared.domain.value_object.trip_id import TripId
from bus_reservation.shared.utils import Clock, system_clock


class TripDetails(TypedDict):
    """便の入力データ"""

    origin: str
    destination: str
    departure_time: datetime
    capacity: int
    ticket_price: int


class TripFactory:
    """便を生成する Factory

    - プリミティブ型から Value Object への変換
    - 予約IDの生成器と時刻源を各便に注入する
    """

    def __init__(
        self,
        id_generator: ReservationIdGenerator = ReservationId.generate,
        clock: Clock = system_clock,
    ) -> None:
        self._id_generator = id_generator
        self._clock = clock

    def create(self, trip_id: TripId, trip_details: TripDetails) -> Trip:
        """新規の便エンティティを作成する"""
        return Trip(
            id=trip_id,
            origin=trip_details["origin"],
            destination=trip_details["destination"],
            departure_time=trip_details["departure_time"],
            capacity=trip_details["capacity"],
            ticket_price=trip_details["ticket_price"],
            id_generator=self._id_generator,
            clock=self._clock,
        )
