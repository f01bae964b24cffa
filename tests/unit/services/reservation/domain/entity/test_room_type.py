from decimal import Decimal

import pytest

from services.reservation.domain.value_object import RoomTypeId
from services.shared.domain import DuplicateResourceException


class TestRoomType:
    def test_accommodates_within_occupancy(self, create_room_type):
        room_type = create_room_type(max_occupancy=2)
        assert room_type.accommodates(guest_count=2, room_count=1)
        assert room_type.accommodates(guest_count=4, room_count=2)

    def test_does_not_accommodate_over_occupancy(self, create_room_type):
        room_type = create_room_type(max_occupancy=2)
        assert not room_type.accommodates(guest_count=3, room_count=1)

    def test_zero_total_rooms_raises_error(self, create_room_type):
        with pytest.raises(ValueError, match="Total rooms must be at least 1"):
            create_room_type(total_rooms=0)

    def test_zero_rate_raises_error(self, create_room_type):
        with pytest.raises(ValueError, match="Nightly rate must be positive"):
            create_room_type(nightly_rate=Decimal("0"))

    def test_zero_occupancy_raises_error(self, create_room_type):
        with pytest.raises(ValueError, match="Max occupancy must be at least 1"):
            create_room_type(max_occupancy=0)


class TestHotel:
    def test_room_type_lookup(self, create_hotel, create_room_type):
        deluxe = create_room_type(room_type_id="deluxe")
        hotel = create_hotel(room_types=[create_room_type(), deluxe])

        assert hotel.room_type(RoomTypeId(value="deluxe")) is deluxe
        assert hotel.room_type(RoomTypeId(value="suite")) is None
        assert len(hotel.room_types) == 2

    def test_duplicate_room_type_raises_error(self, create_hotel, create_room_type):
        hotel = create_hotel()

        with pytest.raises(DuplicateResourceException):
            hotel.add_room_type(create_room_type())

    def test_room_type_of_another_hotel_raises_error(
        self, create_hotel, create_room_type
    ):
        hotel = create_hotel()

        with pytest.raises(ValueError, match="belongs to another hotel"):
            hotel.add_room_type(
                create_room_type(room_type_id="deluxe", hotel_id="hotel-999")
            )
