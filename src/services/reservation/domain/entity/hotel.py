from services.reservation.domain.entity.room_type import RoomType
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import AggregateRoot, DuplicateResourceException


class Hotel(AggregateRoot[HotelId]):
    """ホテル（客室タイプを束ねる集約）

    ホテル情報の登録・更新は管理系サービスが行う。予約エンジンからは参照のみ。
    """

    def __init__(
        self,
        id: HotelId,
        name: str,
        city: str,
        address: str = "",
        room_types: list[RoomType] | None = None,
    ) -> None:
        super().__init__(id)
        if not name or not name.strip():
            raise ValueError("Hotel name cannot be empty")
        self._name = name
        self._city = city
        self._address = address
        self._room_types: dict[RoomTypeId, RoomType] = {}
        for room_type in room_types or []:
            self.add_room_type(room_type)

    @property
    def name(self) -> str:
        return self._name

    @property
    def city(self) -> str:
        return self._city

    @property
    def address(self) -> str:
        return self._address

    @property
    def room_types(self) -> tuple[RoomType, ...]:
        return tuple(self._room_types.values())

    def add_room_type(self, room_type: RoomType) -> None:
        """客室タイプを追加する"""
        if room_type.hotel_id != self.id:
            raise ValueError(
                f"Room type {room_type.id} belongs to another hotel: {room_type.hotel_id}"
            )
        if room_type.id in self._room_types:
            raise DuplicateResourceException(f"Room type already exists: {room_type.id}")
        self._room_types[room_type.id] = room_type

    def room_type(self, room_type_id: RoomTypeId) -> RoomType | None:
        return self._room_types.get(room_type_id)
