import pytest

from services.reservation.applications.create_reservation import (
    CreateReservationService,
    ReservationRequest,
)
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import UserId


@pytest.fixture
def create_service(inventory, ledger, today):
    return CreateReservationService(inventory=inventory, ledger=ledger, today=today)


@pytest.fixture
def make_request():
    """ReservationRequest を生成する Factory fixture"""

    def _factory(
        check_in: str = "2025-03-10",
        check_out: str = "2025-03-12",
        room_type_id: str = "standard",
        room_count: int = 1,
        guest_count: int = 1,
        user_id: str = "user-123",
        hotel_id: str = "hotel-001",
    ) -> ReservationRequest:
        return ReservationRequest(
            hotel_id=HotelId(value=hotel_id),
            room_type_id=RoomTypeId(value=room_type_id),
            check_in=check_in,
            check_out=check_out,
            room_count=room_count,
            guest_count=guest_count,
            user_id=UserId(value=user_id),
        )

    return _factory
