from .hotel import Hotel
from .reservation import Reservation
from .room_type import RoomType

__all__ = ["Hotel", "Reservation", "RoomType"]
