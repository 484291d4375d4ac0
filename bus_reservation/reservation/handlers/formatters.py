from bus_reservation.reservation.handlers.response_models import (
    CancellationData,
    OccupancyData,
    ReportData,
    ReservationData,
    TicketData,
    TripData,
    TripDetailData,
)

CURRENCY = "TL"
NOT_AVAILABLE = "(n/a)"


def format_seat_numbers(seat_numbers: list[int]) -> str:
    if not seat_numbers:
        return "(none)"
    return ", ".join(str(number) for number in seat_numbers)


def format_trip_line(trip: TripData) -> str:
    """便一覧の 1 行"""
    return (
        f"{trip.trip_id} | {trip.origin} -> {trip.destination} | "
        f"Departure: {trip.departure_time} | Cap: {trip.capacity} | "
        f"Reserved: {trip.reserved_count} | Occupancy: {trip.occupancy_rate:4.1f}% | "
        f"Price: {trip.ticket_price} {CURRENCY}"
    )


def format_revenue_line(trip: TripData) -> str:
    """運賃・乗車率・売上の 1 行（レポート用）"""
    return (
        f"{trip.trip_id} | {trip.origin} -> {trip.destination} | "
        f"Price: {trip.ticket_price} {CURRENCY} | "
        f"Reserved: {trip.reserved_count}/{trip.capacity} "
        f"({trip.occupancy_rate:.2f}%) | Revenue: {trip.revenue} {CURRENCY}"
    )


def format_trip_detail(detail: TripDetailData) -> str:
    trip = detail.trip
    lines = [
        f"Trip {trip.trip_id} ({trip.origin} -> {trip.destination}) - "
        f"Ticket: {trip.ticket_price} {CURRENCY}",
        f"Departure: {trip.departure_time} | Capacity: {trip.capacity} | "
        f"Reserved: {trip.reserved_count} ({trip.occupancy_rate:.2f}%)",
        "Seats (No : Status [short reservation id] - Passenger):",
    ]
    for seat in detail.seats:
        if seat.reserved:
            status = f"TAKEN [{seat.reservation_id_short}] - {seat.passenger_name}"
        else:
            status = "FREE"
        lines.append(f"{seat.seat_number:02d} : {status}")
    return "\n".join(lines)


def format_occupancy(occupancy: OccupancyData) -> str:
    return "\n".join(
        [
            format_revenue_line(occupancy.trip),
            f"Available seats: {format_seat_numbers(occupancy.available_seats)}",
            f"Reserved seats: {format_seat_numbers(occupancy.reserved_seats)}",
        ]
    )


def format_ticket(ticket: TicketData) -> str:
    """予約票"""
    rule = "=" * 37
    return "\n".join(
        [
            "",
            rule,
            "               TICKET",
            rule,
            f"Reservation ID : {ticket.reservation_id}",
            f"Passenger      : {ticket.passenger_name}",
            f"Phone          : {ticket.passenger_phone or NOT_AVAILABLE}",
            f"Trip ID        : {ticket.trip_id}",
            f"Route          : {ticket.origin} -> {ticket.destination}",
            f"Departure      : {ticket.departure_time}",
            f"Seat No        : {ticket.seat_number:02d}",
            f"Ticket Price   : {ticket.ticket_price} {CURRENCY}",
            f"Reserved At    : {ticket.reserved_at or NOT_AVAILABLE}",
            "-" * 37,
            "NOTE: Keep your reservation ID. It is required to cancel.",
            rule,
            "",
        ]
    )


def format_reservation_line(reservation: ReservationData) -> str:
    return (
        f"Trip {reservation.trip_id} | Seat {reservation.seat_number:02d} | "
        f"Price: {reservation.ticket_price} {CURRENCY} | "
        f"Reservation ID: {reservation.reservation_id} | "
        f"Passenger: {reservation.passenger_name} | "
        f"Phone: {reservation.passenger_phone or NOT_AVAILABLE} | "
        f"Time: {reservation.reserved_at or NOT_AVAILABLE}"
    )


def format_cancellation(cancellation: CancellationData) -> str:
    return (
        f"Cancelling: Trip {cancellation.trip_id} | Seat {cancellation.seat_number} | "
        f"Passenger {cancellation.passenger_name}"
    )


def format_report(report: ReportData, title: str = "=== REPORT ===") -> str:
    lines = [
        title,
        f"Total trips: {report.trip_count}",
        f"Total reserved seats: {report.total_reserved_seats}",
        f"Total revenue: {report.total_revenue} {CURRENCY}",
        "Per-trip details:",
    ]
    lines.extend(format_revenue_line(trip) for trip in report.trips)
    return "\n".join(lines)
