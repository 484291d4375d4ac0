from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass(frozen=True)
class SeatReserved:
    """座席が予約された"""

    trip_id: str
    seat_number: int
    reservation_id: str
    reserved_at: datetime

    def to_dict(self) -> dict:
        return {"event": type(self).__name__, **asdict(self)}


@dataclass(frozen=True)
class ReservationCancelled:
    """予約がキャンセルされた"""

    trip_id: str
    seat_number: int
    reservation_id: str

    def to_dict(self) -> dict:
        return {"event": type(self).__name__, **asdict(self)}
