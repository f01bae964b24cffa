from abc import abstractmethod

from services.reservation.domain.entity import Hotel, RoomType
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import Repository


class InventoryRepository(Repository[Hotel, HotelId]):
    """在庫（ホテル・客室タイプ・総室数）レポジトリのインターフェース

    save は管理系のプロビジョニング処理からのみ呼ばれる。
    """

    @abstractmethod
    def save(self, hotel: Hotel) -> None:
        """ホテルと配下の客室タイプを保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索する（客室タイプを含む）"""
        raise NotImplementedError

    @abstractmethod
    def find_room_type(
        self, hotel_id: HotelId, room_type_id: RoomTypeId
    ) -> RoomType | None:
        """ホテル配下の客室タイプを検索する"""
        raise NotImplementedError
