from datetime import datetime

from bus_reservation.reservation.domain.entity.seat import Seat
from bus_reservation.reservation.domain.event import ReservationCancelled, SeatReserved
from bus_reservation.reservation.domain.value_object import (
    ReservationId,
    ReservationIdGenerator,
)
from bus_reservation.shared.domain import AggregateRoot, TripId
from bus_reservation.shared.domain.exception import BusinessRuleViolationException
from bus_reservation.shared.utils import Clock, system_clock


class Trip(AggregateRoot[TripId]):
    """便（運行）の集約ルート

    定員と運賃は生成時に固定され、座席 1..capacity を保持する。
    """

    def __init__(
        self,
        id: TripId,
        origin: str,
        destination: str,
        departure_time: datetime,
        capacity: int,
        ticket_price: int,
        id_generator: ReservationIdGenerator = ReservationId.generate,
        clock: Clock = system_clock,
    ) -> None:
        if capacity <= 0:
            raise BusinessRuleViolationException(
                f"Capacity must be positive: {capacity}"
            )
        if ticket_price <= 0:
            raise BusinessRuleViolationException(
                f"Ticket price must be positive: {ticket_price}"
            )
        super().__init__(id)

        self._origin = origin
        self._destination = destination
        self._departure_time = departure_time
        self._capacity = capacity
        self._ticket_price = ticket_price
        self._id_generator = id_generator
        self._clock = clock
        self._seats: dict[int, Seat] = {
            number: Seat(number) for number in range(1, capacity + 1)
        }

    @property
    def trip_id(self) -> TripId:
        return self._id

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def departure_time(self) -> datetime:
        return self._departure_time

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ticket_price(self) -> int:
        return self._ticket_price

    def get_seat(self, seat_number: int) -> Seat | None:
        """座席番号で座席を取得する（範囲外は None）"""
        return self._seats.get(seat_number)

    def get_all_seats(self) -> list[Seat]:
        return list(self._seats.values())

    def get_reserved_seats(self) -> list[Seat]:
        return [seat for seat in self._seats.values() if seat.reserved]

    def get_available_seats(self) -> list[Seat]:
        return [seat for seat in self._seats.values() if not seat.reserved]

    def reserved_count(self) -> int:
        return sum(1 for seat in self._seats.values() if seat.reserved)

    def get_occupancy_rate(self) -> float:
        """乗車率（%）"""
        return self.reserved_count() / self._capacity * 100

    def get_revenue(self) -> int:
        """予約済み座席数 × 運賃"""
        return self.reserved_count() * self._ticket_price

    def find_seat_by_reservation_id(
        self, reservation_id: ReservationId | str | None
    ) -> Seat | None:
        """予約IDで予約済み座席を検索する"""
        if not reservation_id:
            return None
        target = str(reservation_id)
        for seat in self._seats.values():
            if seat.reserved and str(seat.reservation_id) == target:
                return seat
        return None

    def reserve_seat_direct(
        self, seat_number: int, passenger_name: str, passenger_phone: str
    ) -> Seat | None:
        """空席を予約する

        座席番号が範囲外、または予約済みの場合は None を返す。
        """
        seat = self.get_seat(seat_number)
        if seat is None or seat.reserved:
            return None

        seat.reserve(
            passenger_name,
            passenger_phone,
            id_generator=self._id_generator,
            clock=self._clock,
        )
        self.add_domain_event(
            SeatReserved(
                trip_id=str(self._id),
                seat_number=seat.seat_number,
                reservation_id=str(seat.reservation_id),
                reserved_at=seat.reservation_time,
            )
        )
        return seat

    def release_seat(self, seat: Seat) -> None:
        """この便の座席の予約を取り消す"""
        if self._seats.get(seat.seat_number) is not seat:
            raise BusinessRuleViolationException(
                f"Seat {seat.seat_number} does not belong to trip {self._id}"
            )
        if not seat.reserved:
            return

        reservation_id = str(seat.reservation_id)
        seat.cancel()
        self.add_domain_event(
            ReservationCancelled(
                trip_id=str(self._id),
                seat_number=seat.seat_number,
                reservation_id=reservation_id,
            )
        )

    def __repr__(self) -> str:
        return (
            f"Trip({self._id}, {self._origin} -> {self._destination}, "
            f"{self.reserved_count()}/{self._capacity})"
        )
