import threading

from services.reservation.domain.entity import Hotel, RoomType
from services.reservation.domain.repository import InventoryRepository
from services.reservation.domain.value_object import HotelId, RoomTypeId


class InMemoryInventoryRepository(InventoryRepository):
    """プロセス内で在庫を保持する InventoryRepository の具象実装

    ローカル実行とテストで使用する。
    """

    def __init__(self, hotels: list[Hotel] | None = None) -> None:
        self._lock = threading.Lock()
        self._hotels: dict[HotelId, Hotel] = {}
        for hotel in hotels or []:
            self.save(hotel)

    def save(self, hotel: Hotel) -> None:
        with self._lock:
            self._hotels[hotel.id] = hotel

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        return self._hotels.get(hotel_id)

    def find_room_type(
        self, hotel_id: HotelId, room_type_id: RoomTypeId
    ) -> RoomType | None:
        hotel = self._hotels.get(hotel_id)
        if hotel is None:
            return None
        return hotel.room_type(room_type_id)
