from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """集約の保管先を表すポート

    永続化は対象外のため、実装はプロセス内のメモリに集約を保持する。
    便IDの一意性は保管先が最終的に保証する。
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新しい集約を登録する（同一IDは重複エラー）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[T]:
        """IDで集約を取得する（未登録なら None）"""
        raise NotImplementedError
