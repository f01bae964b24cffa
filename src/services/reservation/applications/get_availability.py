from services.reservation.applications.validation import parse_stay_period
from services.reservation.domain.entity import RoomType
from services.reservation.domain.repository import (
    InventoryRepository,
    ReservationLedger,
)
from services.reservation.domain.service import AvailabilityCalculator
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import ResourceNotFoundException


class GetAvailabilityService:
    """空室照会のユースケース（読み取り専用）"""

    def __init__(
        self,
        inventory: InventoryRepository,
        ledger: ReservationLedger,
        calculator: AvailabilityCalculator | None = None,
    ) -> None:
        self._inventory = inventory
        self._ledger = ledger
        self._calculator = calculator or AvailabilityCalculator()

    def get(
        self,
        hotel_id: HotelId,
        check_in: str,
        check_out: str,
        room_type_id: RoomTypeId | None = None,
    ) -> dict[RoomTypeId, int]:
        """客室タイプごとの空室数を返す

        room_type_id を省略した場合はホテルの全客室タイプが対象。
        過去の期間も照会できる。
        """
        stay_period = parse_stay_period(check_in, check_out)

        hotel = self._inventory.find_by_id(hotel_id)
        if hotel is None:
            raise ResourceNotFoundException(f"Hotel not found: {hotel_id}")

        room_types: tuple[RoomType, ...]
        if room_type_id is None:
            room_types = hotel.room_types
        else:
            room_type = hotel.room_type(room_type_id)
            if room_type is None:
                raise ResourceNotFoundException(
                    f"Room type not found: {hotel_id}/{room_type_id}"
                )
            room_types = (room_type,)

        availability: dict[RoomTypeId, int] = {}
        for room_type in room_types:
            reservations = self._ledger.find_confirmed_overlapping(
                hotel_id, room_type.id, stay_period
            )
            availability[room_type.id] = self._calculator.available_rooms(
                room_type, reservations, stay_period
            )
        return availability
