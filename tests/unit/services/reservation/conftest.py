from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from services.reservation.domain.entity import Hotel, Reservation, RoomType
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import (
    HotelId,
    ReservationId,
    RoomTypeId,
    StayPeriod,
)
from services.reservation.infrastructure.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)
from services.reservation.infrastructure.in_memory_reservation_ledger import (
    InMemoryReservationLedger,
)
from services.shared.domain import Money, UserId

TODAY = date(2025, 3, 1)


@pytest.fixture
def today():
    """テストで使う「本日」（UTC）"""
    return lambda: TODAY


@pytest.fixture
def create_room_type():
    """RoomType を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_type_id: str = "standard",
        hotel_id: str = "hotel-001",
        name: str = "Standard",
        nightly_rate: Decimal = Decimal("10000"),
        max_occupancy: int = 2,
        total_rooms: int = 1,
    ) -> RoomType:
        return RoomType(
            id=RoomTypeId(value=room_type_id),
            hotel_id=HotelId(value=hotel_id),
            name=name,
            nightly_rate=Money.jpy(nightly_rate),
            max_occupancy=max_occupancy,
            total_rooms=total_rooms,
        )

    return _factory


@pytest.fixture
def create_hotel(create_room_type):
    def _factory(
        hotel_id: str = "hotel-001",
        room_types: list[RoomType] | None = None,
    ) -> Hotel:
        if room_types is None:
            room_types = [create_room_type(hotel_id=hotel_id)]
        return Hotel(
            id=HotelId(value=hotel_id),
            name="Grand Hotel",
            city="Tokyo",
            address="1-1 Marunouchi",
            room_types=room_types,
        )

    return _factory


@pytest.fixture
def create_reservation():
    """Reservation を生成する Factory fixture"""

    def _factory(
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        reservation_id: str = "resv-001",
        hotel_id: str = "hotel-001",
        room_type_id: str = "standard",
        check_in: str = "2025-03-10",
        check_out: str = "2025-03-12",
        room_count: int = 1,
        guest_count: int = 1,
        user_id: str = "user-123",
        created_at: datetime = datetime(2025, 2, 1, 9, 0, tzinfo=timezone.utc),
    ) -> Reservation:
        stay_period = StayPeriod.from_strings(check_in, check_out)
        unit_price = Money.jpy(Decimal("10000"))
        return Reservation(
            id=ReservationId(value=reservation_id),
            hotel_id=HotelId(value=hotel_id),
            room_type_id=RoomTypeId(value=room_type_id),
            stay_period=stay_period,
            room_count=room_count,
            guest_count=guest_count,
            unit_price=unit_price,
            total_price=unit_price.multiply(stay_period.nights() * room_count),
            user_id=UserId(value=user_id),
            created_at=created_at,
            status=status,
        )

    return _factory


@pytest.fixture
def inventory(create_hotel, create_room_type):
    """客室タイプ standard(1室) と deluxe(3室) を持つホテルの在庫"""
    hotel = create_hotel(
        room_types=[
            create_room_type(room_type_id="standard", total_rooms=1),
            create_room_type(
                room_type_id="deluxe",
                name="Deluxe",
                nightly_rate=Decimal("25000"),
                max_occupancy=3,
                total_rooms=3,
            ),
        ]
    )
    return InMemoryInventoryRepository([hotel])


@pytest.fixture
def ledger():
    return InMemoryReservationLedger()
