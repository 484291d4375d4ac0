from datetime import datetime

from pydantic import BaseModel, Field, ValidationError, field_validator

DEPARTURE_TIME_FORMAT = "%Y-%m-%d %H:%M"


class CreateTripRequest(BaseModel):
    """便作成の入力スキーマ"""

    model_config = {"str_strip_whitespace": True}

    trip_id: str = Field(
        ...,
        min_length=1,
        description="便ID",
        examples=["SFR1001"],
    )

    origin: str = Field(..., min_length=1, description="出発地", examples=["İstanbul"])

    destination: str = Field(
        ..., min_length=1, description="到着地", examples=["Ankara"]
    )

    departure_time: datetime = Field(
        ...,
        description="出発日時（YYYY-MM-DD HH:MM）",
        examples=["2025-11-01 13:30"],
    )

    ticket_price: int = Field(..., gt=0, description="運賃（TL）", examples=[550])

    @field_validator("departure_time", mode="before")
    @classmethod
    def parse_departure_time(cls, v):
        """YYYY-MM-DD HH:MM 形式の文字列を datetime に変換する"""
        if isinstance(v, datetime):
            return v
        try:
            return datetime.strptime(str(v).strip(), DEPARTURE_TIME_FORMAT)
        except ValueError as e:
            raise ValueError(
                f"Invalid departure time: {v!r}. Example: 2025-11-01 13:30"
            ) from e


class ReserveSeatRequest(BaseModel):
    """座席予約の入力スキーマ"""

    model_config = {"str_strip_whitespace": True}

    trip_id: str = Field(..., min_length=1, description="便ID")

    seat_number: int = Field(..., description="座席番号", examples=[3])

    passenger_name: str = Field(
        ..., min_length=1, description="乗客名", examples=["Ali Yılmaz"]
    )

    passenger_phone: str = Field(
        default="", description="電話番号", examples=["05330001111"]
    )


class CancelReservationRequest(BaseModel):
    """予約キャンセルの入力スキーマ"""

    model_config = {"str_strip_whitespace": True}

    reservation_id: str = Field(..., min_length=1, description="予約ID")


def describe_validation_error(error: ValidationError) -> str:
    """ValidationError を利用者向けの 1 行メッセージに変換する"""
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{field}: {detail['msg']}" if field else detail["msg"])
    return "; ".join(messages)
