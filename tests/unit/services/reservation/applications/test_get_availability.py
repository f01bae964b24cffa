import pytest

from services.reservation.applications.get_availability import GetAvailabilityService
from services.reservation.domain.exception import InvalidDateRangeException
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import ResourceNotFoundException

HOTEL_ID = HotelId(value="hotel-001")
STANDARD = RoomTypeId(value="standard")
DELUXE = RoomTypeId(value="deluxe")


@pytest.fixture
def availability_service(inventory, ledger):
    return GetAvailabilityService(inventory=inventory, ledger=ledger)


class TestGetAvailabilityService:
    def test_empty_ledger_returns_total_rooms(self, availability_service):
        result = availability_service.get(HOTEL_ID, "2025-03-10", "2025-03-12")

        assert result == {STANDARD: 1, DELUXE: 3}

    def test_single_room_type(self, availability_service):
        result = availability_service.get(
            HOTEL_ID, "2025-03-10", "2025-03-12", room_type_id=DELUXE
        )

        assert result == {DELUXE: 3}

    def test_reservations_reduce_availability(
        self, availability_service, create_service, make_request
    ):
        create_service.create(make_request(room_type_id="deluxe", room_count=2))

        result = availability_service.get(HOTEL_ID, "2025-03-11", "2025-03-13")

        assert result == {STANDARD: 1, DELUXE: 1}

    def test_back_to_back_query_is_not_reduced(
        self, availability_service, create_service, make_request
    ):
        create_service.create(make_request())

        result = availability_service.get(
            HOTEL_ID, "2025-03-12", "2025-03-14", room_type_id=STANDARD
        )

        assert result == {STANDARD: 1}

    def test_past_period_can_be_queried(self, availability_service):
        result = availability_service.get(HOTEL_ID, "2024-01-01", "2024-01-02")
        assert result[STANDARD] == 1

    def test_invalid_range_raises_error(self, availability_service):
        with pytest.raises(InvalidDateRangeException):
            availability_service.get(HOTEL_ID, "2025-03-12", "2025-03-10")

    def test_unknown_hotel_is_not_found(self, availability_service):
        with pytest.raises(ResourceNotFoundException):
            availability_service.get(
                HotelId(value="hotel-999"), "2025-03-10", "2025-03-12"
            )

    def test_unknown_room_type_is_not_found(self, availability_service):
        with pytest.raises(ResourceNotFoundException):
            availability_service.get(
                HOTEL_ID,
                "2025-03-10",
                "2025-03-12",
                room_type_id=RoomTypeId(value="suite"),
            )
