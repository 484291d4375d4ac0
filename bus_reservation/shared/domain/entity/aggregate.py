from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """集約ルートの基底クラス

    便（Trip）が座席を束ねる集約ルートとなる。座席の予約・取り消しは
    集約ルート経由でのみ行い、その結果を SeatReserved / ReservationCancelled
    などのドメインイベントとして溜めておく。溜まったイベントは CLI が
    コマンドごとに取り出してログへ出力する。
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._pending_events: list = []

    def add_domain_event(self, event: object) -> None:
        """座席の状態変化をイベントとして記録する"""
        self._pending_events.append(event)

    def flush_domain_events(self) -> list:
        """記録済みのイベントを発生順に返し、バッファを空にする"""
        events, self._pending_events = self._pending_events, []
        return events
