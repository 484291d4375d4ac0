from dataclasses import dataclass
from datetime import datetime

from .reservation_id import ReservationId


@dataclass(frozen=True)
class Reservation:
    """座席の予約内容

    予約に依存する 4 項目をまとめて保持し、揃って存在するか揃って存在しないかを保証する。
    """

    reservation_id: ReservationId
    passenger_name: str
    passenger_phone: str
    reserved_at: datetime
