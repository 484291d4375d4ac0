from datetime import datetime, timedelta

from bus_reservation.reservation.applications.reservation_registry import (
    ReservationRegistry,
)
from bus_reservation.reservation.domain.entity import Seat, Trip
from bus_reservation.shared.utils import system_clock

DEFAULT_CAPACITY = 10

# (便ID, 出発地, 到着地, 何日後, 時, 分, 運賃)
SAMPLE_TRIPS = [
    ("SFR1001", "İstanbul", "Ankara", 2, 9, 0, 550),
    ("SFR1002", "İzmir", "Bursa", 1, 14, 0, 450),
    ("SFR1003", "Antalya", "Konya", 3, 10, 30, 380),
    ("SFR1004", "Kırklareli", "İstanbul", 1, 8, 15, 290),
    ("SFR1005", "Trabzon", "Samsun", 2, 7, 45, 420),
]

# (便ID, 座席番号, 乗客名, 電話番号)
SAMPLE_RESERVATIONS = [
    ("SFR1001", 1, "Ali Yılmaz", "05330001111"),
    ("SFR1001", 2, "Zeynep Demir", "05330002222"),
    ("SFR1001", 3, "Ahmet Kaya", "05330003333"),
    ("SFR1002", 5, "Ece Yalçın", "05330004444"),
    ("SFR1002", 6, "Mehmet Aksoy", "05330005555"),
    ("SFR1003", 1, "Furkan Çelik", "05330006666"),
    ("SFR1003", 2, "Selin Öztürk", "05330007777"),
    ("SFR1004", 3, "Caner Yücel", "05330008888"),
    ("SFR1004", 4, "Deniz Şahin", "05330009999"),
    ("SFR1005", 10, "Gizem Kılıç", "05330000000"),
]


def seed_sample_data(
    registry: ReservationRegistry,
    now: datetime | None = None,
    capacity: int = DEFAULT_CAPACITY,
) -> list[tuple[Trip, Seat]]:
    """サンプルの便と予約を登録する

    成立した予約を (便, 座席) の組で返す。定員が小さく座席番号が範囲外の予約は登録されない。
    """
    base = now or system_clock()

    trips: dict[str, Trip] = {}
    for trip_id, origin, destination, days, hour, minute, price in SAMPLE_TRIPS:
        departure_time = (base + timedelta(days=days)).replace(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        trips[trip_id] = registry.create_trip(
            trip_id, origin, destination, departure_time, capacity, price
        )

    reserved: list[tuple[Trip, Seat]] = []
    for trip_id, seat_number, name, phone in SAMPLE_RESERVATIONS:
        trip = trips[trip_id]
        seat = trip.reserve_seat_direct(seat_number, name, phone)
        if seat is not None:
            reserved.append((trip, seat))
    return reserved
