from datetime import datetime
from typing import Callable, TypedDict

from services.reservation.domain.entity import Reservation, RoomType
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import ReservationId, StayPeriod
from services.shared.domain import Money, UserId
from services.shared.utils.clock import utc_now


class ReservationDetails(TypedDict):
    """予約内容の入力データ"""

    stay_period: StayPeriod
    room_count: int
    guest_count: int
    user_id: UserId


class ReservationFactory:
    """受付開始時点の予約（PENDING）を生成するFactory"""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def create(
        self, room_type: RoomType, details: ReservationDetails, total_price: Money
    ) -> Reservation:
        """新規予約のエンティティを作成する"""
        return Reservation(
            id=ReservationId.generate(),
            hotel_id=room_type.hotel_id,
            room_type_id=room_type.id,
            stay_period=details["stay_period"],
            room_count=details["room_count"],
            guest_count=details["guest_count"],
            unit_price=room_type.nightly_rate,
            total_price=total_price,
            user_id=details["user_id"],
            created_at=self._clock(),
            status=ReservationStatus.PENDING,
        )
