from typing import Callable

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from bus_reservation.reservation.applications import (
    ReservationRegistry,
    seed_sample_data,
)
from bus_reservation.reservation.domain.factory import TripFactory
from bus_reservation.reservation.handlers.formatters import (
    format_cancellation,
    format_occupancy,
    format_report,
    format_reservation_line,
    format_revenue_line,
    format_ticket,
    format_trip_detail,
    format_trip_line,
)
from bus_reservation.reservation.handlers.request_models import (
    CancelReservationRequest,
    CreateTripRequest,
    ReserveSeatRequest,
    describe_validation_error,
)
from bus_reservation.reservation.handlers.response_models import (
    to_cancellation_data,
    to_occupancy_data,
    to_report_data,
    to_reservation_data,
    to_ticket_data,
    to_trip_data,
    to_trip_detail_data,
)
from bus_reservation.reservation.infrastructure import InMemoryTripRepository
from bus_reservation.shared.config import Settings
from bus_reservation.shared.domain.exception import DomainException
from bus_reservation.shared.utils import get_logger

MENU = "\n".join(
    [
        "=== Bus Reservation Simulator ===",
        "1) Create a new trip",
        "2) List trips",
        "3) Show trip details",
        "4) Reserve a seat",
        "5) Cancel a reservation (by reservation ID)",
        "6) Show occupancy and revenue",
        "7) List all reservations",
        "8) Report: total trips and revenue",
        "0) Exit",
    ]
)


class ReservationCli:
    """対話型メニュー

    入力文字列はリクエストモデルで検証してからコアを呼び出す。
    """

    def __init__(
        self,
        registry: ReservationRegistry,
        settings: Settings,
        logger: Logger,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._registry = registry
        self._settings = settings
        self._logger = logger
        self._read = read
        self._write = write
        self._commands: dict[str, Callable[[], None]] = {
            "1": self.create_trip,
            "2": self.list_trips,
            "3": self.show_trip_details,
            "4": self.reserve_seat,
            "5": self.cancel_reservation,
            "6": self.show_occupancy,
            "7": self.list_reservations,
            "8": self.show_summary,
        }

    def run(self) -> None:
        """メニューループ（0 または入力終端で終了）"""
        while True:
            self._write(MENU)
            try:
                choice = self._ask("Your choice: ")
                if choice == "0":
                    break
                self.dispatch(choice)
            except EOFError:
                break
            self._write("")
        self._write("Exiting. Have a nice day!")

    def dispatch(self, choice: str) -> None:
        command = self._commands.get(choice)
        if command is None:
            self._write("Invalid choice. Please try again.")
            return

        try:
            command()
        except ValidationError as e:
            self._logger.warning(
                "Invalid input", extra={"command": choice, "errors": e.error_count()}
            )
            self._write(f"Invalid input: {describe_validation_error(e)}")
        except DomainException as e:
            self._logger.warning(
                "Command rejected", extra={"command": choice, "reason": str(e)}
            )
            self._write(f"Operation failed: {e}")
        finally:
            self._publish_domain_events()

    def seed(self) -> None:
        """サンプルデータを登録し、予約票と初期レポートを表示する"""
        reserved = seed_sample_data(
            self._registry, capacity=self._settings.bus_capacity
        )
        for trip, seat in reserved:
            self._write(format_ticket(to_ticket_data(trip, seat)))
        self._publish_domain_events()

        self._write(
            format_report(
                to_report_data(self._registry),
                title="----------------- Seed Report -----------------",
            )
        )
        self._write("-" * 47)
        self._logger.info(
            "Sample data seeded",
            extra={
                "trips": self._registry.trip_count(),
                "reservations": len(reserved),
            },
        )

    def create_trip(self) -> None:
        self._write("--- Create Trip ---")
        trip_id = self._ask("Trip ID (e.g. SFR1001): ")
        if not trip_id or self._registry.get_trip(trip_id) is not None:
            self._write("Invalid or existing trip ID.")
            return
        origin = self._ask("Origin: ")
        destination = self._ask("Destination: ")
        departure_time = self._ask("Departure (YYYY-MM-DD HH:MM): ")
        capacity = self._settings.bus_capacity
        self._write(f"Capacity: {capacity} (bus capacity is fixed)")
        ticket_price = self._ask("Ticket price (TL): ")

        request = CreateTripRequest.model_validate(
            {
                "trip_id": trip_id,
                "origin": origin,
                "destination": destination,
                "departure_time": departure_time,
                "ticket_price": ticket_price,
            }
        )
        trip = self._registry.create_trip(
            request.trip_id,
            request.origin,
            request.destination,
            request.departure_time,
            capacity,
            request.ticket_price,
        )
        self._logger.info("Trip created", extra={"trip_id": str(trip.trip_id)})
        self._write(f"Trip created: {trip.trip_id}")

    def list_trips(self) -> None:
        trips = self._registry.list_trips()
        if not trips:
            self._write("No trips yet.")
            return
        self._write("--- Trips ---")
        for trip in trips:
            self._write(format_trip_line(to_trip_data(trip)))

    def show_trip_details(self) -> None:
        trip = self._registry.get_trip(self._ask("Trip ID: "))
        if trip is None:
            self._write("Trip not found.")
            return
        self._write(format_trip_detail(to_trip_detail_data(trip)))

    def reserve_seat(self) -> None:
        trip_id = self._ask("Trip ID: ")
        trip = self._registry.get_trip(trip_id)
        if trip is None:
            self._write("Trip not found.")
            return
        self._write(
            f"Trip: {trip.trip_id} ({trip.origin} -> {trip.destination}) | "
            f"Ticket price: {trip.ticket_price} TL"
        )
        seat_number = self._ask(f"Seat number (1..{trip.capacity}): ")
        passenger_name = self._ask("Passenger name: ")
        passenger_phone = self._ask("Phone: ")

        request = ReserveSeatRequest.model_validate(
            {
                "trip_id": trip_id,
                "seat_number": seat_number,
                "passenger_name": passenger_name,
                "passenger_phone": passenger_phone,
            }
        )
        seat = trip.reserve_seat_direct(
            request.seat_number, request.passenger_name, request.passenger_phone
        )
        if seat is None:
            self._write("Reservation failed (seat taken or invalid seat number).")
            return
        self._write(f"Reservation completed! Reservation ID: {seat.reservation_id}")
        self._write(format_ticket(to_ticket_data(trip, seat)))

    def cancel_reservation(self) -> None:
        request = CancelReservationRequest.model_validate(
            {"reservation_id": self._ask("Reservation ID: ")}
        )
        result = self._registry.cancel_reservation(request.reservation_id)
        if result is None:
            self._write("Reservation ID not found.")
            return
        trip, seat = result
        self._write(format_cancellation(to_cancellation_data(trip, seat)))
        self._write("Reservation cancelled.")

    def show_occupancy(self) -> None:
        trip_id = self._ask("Trip ID (leave empty for all trips): ")
        self._write("--- Occupancy and Revenue ---")
        if not trip_id:
            for trip in self._registry.list_trips():
                self._write(format_revenue_line(to_trip_data(trip)))
            return
        trip = self._registry.get_trip(trip_id)
        if trip is None:
            self._write("Trip not found.")
            return
        self._write(format_occupancy(to_occupancy_data(trip)))

    def list_reservations(self) -> None:
        self._write("--- All Reservations ---")
        reservations = self._registry.list_reservations()
        if not reservations:
            self._write("No reservations yet.")
            return
        for trip, seat in reservations:
            self._write(format_reservation_line(to_reservation_data(trip, seat)))

    def show_summary(self) -> None:
        self._write(format_report(to_report_data(self._registry)))

    def _ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def _publish_domain_events(self) -> None:
        for trip in self._registry.list_trips():
            for event in trip.flush_domain_events():
                self._logger.info("Domain event", extra=event.to_dict())


def main() -> None:
    """エントリポイント"""
    settings = Settings.from_env()
    logger = get_logger(settings.service_name, settings.log_level)

    registry = ReservationRegistry(
        repository=InMemoryTripRepository(), factory=TripFactory()
    )
    cli = ReservationCli(registry=registry, settings=settings, logger=logger)
    if settings.seed_sample_data:
        cli.seed()
    cli.run()
