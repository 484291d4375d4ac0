from __future__ import annotations

from datetime import datetime

from bus_reservation.reservation.domain.value_object import (
    Reservation,
    ReservationId,
    ReservationIdGenerator,
)
from bus_reservation.shared.domain import Entity
from bus_reservation.shared.utils import Clock, system_clock


class Seat(Entity[int]):
    """座席エンティティ（Trip 集約の内部エンティティ）

    空席 ⇄ 予約済 の 2 状態のみを持つ。
    """

    def __init__(self, seat_number: int) -> None:
        super().__init__(seat_number)
        self._reservation: Reservation | None = None

    @property
    def seat_number(self) -> int:
        return self._id

    @property
    def reserved(self) -> bool:
        return self._reservation is not None

    @property
    def reservation(self) -> Reservation | None:
        return self._reservation

    @property
    def passenger_name(self) -> str | None:
        return self._reservation.passenger_name if self._reservation else None

    @property
    def passenger_phone(self) -> str | None:
        return self._reservation.passenger_phone if self._reservation else None

    @property
    def reservation_time(self) -> datetime | None:
        return self._reservation.reserved_at if self._reservation else None

    @property
    def reservation_id(self) -> ReservationId | None:
        return self._reservation.reservation_id if self._reservation else None

    def reserve(
        self,
        passenger_name: str,
        passenger_phone: str,
        id_generator: ReservationIdGenerator = ReservationId.generate,
        clock: Clock = system_clock,
    ) -> None:
        """座席を予約する

        既に予約済みの場合は何もしない（既存の予約は変更しない）。
        """
        if self._reservation is not None:
            return
        self._reservation = Reservation(
            reservation_id=id_generator(),
            passenger_name=passenger_name,
            passenger_phone=passenger_phone,
            reserved_at=clock(),
        )

    def cancel(self) -> None:
        """予約を取り消す（空席に対しても何もせず成功する）"""
        self._reservation = None

    def __repr__(self) -> str:
        state = f"reserved id={self.reservation_id}" if self.reserved else "empty"
        return f"Seat({self.seat_number}, {state})"
