from dataclasses import dataclass

from services.reservation.domain.value_object import (
    HotelId,
    ReservationId,
    RoomTypeId,
)


@dataclass(frozen=True)
class ReservationConfirmed:
    """予約が台帳に確定された"""

    reservation_id: ReservationId
    hotel_id: HotelId
    room_type_id: RoomTypeId
    room_count: int


@dataclass(frozen=True)
class ReservationCancelled:
    """予約がキャンセルされ、在庫が解放された"""

    reservation_id: ReservationId
    hotel_id: HotelId
    room_type_id: RoomTypeId
    room_count: int
