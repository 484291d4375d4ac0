from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Callable, ClassVar


@dataclass(frozen=True)
class ReservationId:
    """予約ID

    中身は不透明なトークンとして扱う。表示用に先頭 8 文字の短縮形を持つ。
    """

    SHORT_LENGTH: ClassVar[int] = 8

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReservationId cannot be empty")

    def __str__(self) -> str:
        return self.value

    def short(self) -> str:
        """表示用の短縮形"""
        return self.value[: self.SHORT_LENGTH]

    @classmethod
    def generate(cls) -> ReservationId:
        """ランダムな UUID4 から新しい予約IDを生成する"""
        return cls(value=str(uuid.uuid4()))


ReservationIdGenerator = Callable[[], ReservationId]
