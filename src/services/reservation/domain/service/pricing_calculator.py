from datetime import date

from services.reservation.domain.entity import RoomType
from services.reservation.domain.exception import (
    InvalidDateRangeException,
    InvalidPartySizeException,
)
from services.shared.domain import Money


class PricingCalculator:
    """宿泊料金を計算するドメインサービス

    合計 = 1泊料金 × 泊数 × 室数。税・手数料は扱わない。
    """

    def price(
        self, room_type: RoomType, check_in: date, check_out: date, room_count: int
    ) -> Money:
        nights = (check_out - check_in).days
        if nights < 1:
            raise InvalidDateRangeException(
                f"Stay must be at least one night: {check_in} -> {check_out}"
            )
        if room_count < 1:
            raise InvalidPartySizeException("Room count must be at least 1")
        return room_type.nightly_rate.multiply(nights).multiply(room_count)
