from abc import abstractmethod

from bus_reservation.reservation.domain.entity.trip import Trip
from bus_reservation.shared.domain import Repository, TripId


class TripRepository(Repository[Trip, TripId]):
    """便レポジトリのインターフェース"""

    @abstractmethod
    def save(self, trip: Trip) -> None:
        """便を保管する（同一IDが存在する場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, trip_id: TripId) -> Trip | None:
        """便IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Trip]:
        """登録順に全ての便を返す"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, trip_id: TripId) -> bool:
        """便IDが登録済みかどうか"""
        raise NotImplementedError
