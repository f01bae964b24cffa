from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import Entity, Money


class RoomType(Entity[RoomTypeId]):
    """客室タイプ

    total_rooms は物理的な在庫数。料金は1室1泊あたり。
    """

    def __init__(
        self,
        id: RoomTypeId,
        hotel_id: HotelId,
        name: str,
        nightly_rate: Money,
        max_occupancy: int,
        total_rooms: int,
    ) -> None:
        super().__init__(id)
        if not name or not name.strip():
            raise ValueError("Room type name cannot be empty")
        if nightly_rate.amount <= 0:
            raise ValueError("Nightly rate must be positive")
        if max_occupancy < 1:
            raise ValueError("Max occupancy must be at least 1")
        if total_rooms < 1:
            raise ValueError("Total rooms must be at least 1")
        self._hotel_id = hotel_id
        self._name = name
        self._nightly_rate = nightly_rate
        self._max_occupancy = max_occupancy
        self._total_rooms = total_rooms

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def nightly_rate(self) -> Money:
        return self._nightly_rate

    @property
    def max_occupancy(self) -> int:
        return self._max_occupancy

    @property
    def total_rooms(self) -> int:
        return self._total_rooms

    def accommodates(self, guest_count: int, room_count: int) -> bool:
        """room_count 室で guest_count 人が泊まれるか"""
        return guest_count <= room_count * self._max_occupancy
