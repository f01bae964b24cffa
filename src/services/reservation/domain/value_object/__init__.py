from .actor import Actor
from .cancellation_policy import CancellationPolicy
from .hotel_id import HotelId
from .reservation_id import ReservationId
from .room_type_id import RoomTypeId
from .stay_period import StayPeriod

__all__ = [
    "Actor",
    "CancellationPolicy",
    "HotelId",
    "ReservationId",
    "RoomTypeId",
    "StayPeriod",
]
