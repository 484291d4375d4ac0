from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from bus_reservation.reservation.applications import ReservationRegistry
from bus_reservation.reservation.domain.entity import Seat, Trip

DISPLAY_TIME_FORMAT = "%d/%m/%Y %H:%M"


def _display_time(value: datetime | None) -> str | None:
    return value.strftime(DISPLAY_TIME_FORMAT) if value else None


class TripData(BaseModel):
    """便の表示データ"""

    trip_id: str
    origin: str
    destination: str
    departure_time: str
    capacity: int
    reserved_count: int
    occupancy_rate: float
    ticket_price: int
    revenue: int


class SeatData(BaseModel):
    """座席の表示データ"""

    seat_number: int
    reserved: bool
    reservation_id_short: str | None = None
    passenger_name: str | None = None


class TripDetailData(BaseModel):
    trip: TripData
    seats: list[SeatData]


class OccupancyData(BaseModel):
    trip: TripData
    available_seats: list[int]
    reserved_seats: list[int]


class TicketData(BaseModel):
    """予約票の表示データ"""

    reservation_id: str
    passenger_name: str
    passenger_phone: str | None
    trip_id: str
    origin: str
    destination: str
    departure_time: str
    seat_number: int
    ticket_price: int
    reserved_at: str | None


class ReservationData(BaseModel):
    trip_id: str
    seat_number: int
    ticket_price: int
    reservation_id: str
    passenger_name: str
    passenger_phone: str | None
    reserved_at: str | None


class CancellationData(BaseModel):
    trip_id: str
    seat_number: int
    passenger_name: str
    reservation_id: str


class ReportData(BaseModel):
    """集計レポートの表示データ"""

    trip_count: int
    total_reserved_seats: int
    total_revenue: int
    trips: list[TripData]


def to_trip_data(trip: Trip) -> TripData:
    """Trip エンティティを表示データに変換する"""
    return TripData(
        trip_id=str(trip.trip_id),
        origin=trip.origin,
        destination=trip.destination,
        departure_time=_display_time(trip.departure_time),
        capacity=trip.capacity,
        reserved_count=trip.reserved_count(),
        occupancy_rate=trip.get_occupancy_rate(),
        ticket_price=trip.ticket_price,
        revenue=trip.get_revenue(),
    )


def to_seat_data(seat: Seat) -> SeatData:
    return SeatData(
        seat_number=seat.seat_number,
        reserved=seat.reserved,
        reservation_id_short=seat.reservation_id.short() if seat.reserved else None,
        passenger_name=seat.passenger_name,
    )


def to_trip_detail_data(trip: Trip) -> TripDetailData:
    return TripDetailData(
        trip=to_trip_data(trip),
        seats=[to_seat_data(seat) for seat in trip.get_all_seats()],
    )


def to_occupancy_data(trip: Trip) -> OccupancyData:
    return OccupancyData(
        trip=to_trip_data(trip),
        available_seats=[seat.seat_number for seat in trip.get_available_seats()],
        reserved_seats=[seat.seat_number for seat in trip.get_reserved_seats()],
    )


def to_ticket_data(trip: Trip, seat: Seat) -> TicketData:
    """予約済み座席を予約票データに変換する"""
    return TicketData(
        reservation_id=str(seat.reservation_id),
        passenger_name=seat.passenger_name,
        passenger_phone=seat.passenger_phone or None,
        trip_id=str(trip.trip_id),
        origin=trip.origin,
        destination=trip.destination,
        departure_time=_display_time(trip.departure_time),
        seat_number=seat.seat_number,
        ticket_price=trip.ticket_price,
        reserved_at=_display_time(seat.reservation_time),
    )


def to_reservation_data(trip: Trip, seat: Seat) -> ReservationData:
    return ReservationData(
        trip_id=str(trip.trip_id),
        seat_number=seat.seat_number,
        ticket_price=trip.ticket_price,
        reservation_id=str(seat.reservation_id),
        passenger_name=seat.passenger_name,
        passenger_phone=seat.passenger_phone or None,
        reserved_at=_display_time(seat.reservation_time),
    )


def to_cancellation_data(trip: Trip, seat: Seat) -> CancellationData:
    """取り消し前の座席スナップショットを表示データに変換する"""
    return CancellationData(
        trip_id=str(trip.trip_id),
        seat_number=seat.seat_number,
        passenger_name=seat.passenger_name,
        reservation_id=str(seat.reservation_id),
    )


def to_report_data(registry: ReservationRegistry) -> ReportData:
    return ReportData(
        trip_count=registry.trip_count(),
        total_reserved_seats=registry.total_reserved_seats(),
        total_revenue=registry.total_revenue(),
        trips=[to_trip_data(trip) for trip in registry.list_trips()],
    )
