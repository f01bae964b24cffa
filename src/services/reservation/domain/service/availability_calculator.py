from typing import Iterable, Iterator

from services.reservation.domain.entity import Reservation, RoomType
from services.reservation.domain.value_object import StayPeriod


def _consuming(
    room_type: RoomType, reservations: Iterable[Reservation], stay_period: StayPeriod
) -> Iterator[Reservation]:
    return (
        r
        for r in reservations
        if r.consumes_inventory
        and r.hotel_id == room_type.hotel_id
        and r.room_type_id == room_type.id
        and r.stay_period.overlaps(stay_period)
    )


class AvailabilityCalculator:
    """空室数を計算するドメインサービス

    台帳のスナップショットに対する純粋関数。副作用を持たない。
    """

    def reserved_rooms(
        self,
        room_type: RoomType,
        reservations: Iterable[Reservation],
        stay_period: StayPeriod,
    ) -> int:
        """期間に1泊でも重なる CONFIRMED 予約の室数合計"""
        return sum(
            r.room_count for r in _consuming(room_type, reservations, stay_period)
        )

    def available_rooms(
        self,
        room_type: RoomType,
        reservations: Iterable[Reservation],
        stay_period: StayPeriod,
    ) -> int:
        """期間中に確保できる空室数

        期間に重なる予約はどの夜に重なっていても全て数えるため、
        夜ごとの最小空室数以下の値になる。
        """
        reserved = self.reserved_rooms(room_type, reservations, stay_period)
        return max(0, room_type.total_rooms - reserved)

    def peak_occupancy(
        self,
        room_type: RoomType,
        reservations: Iterable[Reservation],
        stay_period: StayPeriod,
    ) -> int:
        """期間中で最も埋まっている夜の使用室数"""
        active = list(_consuming(room_type, reservations, stay_period))
        return max(
            (
                sum(r.room_count for r in active if r.stay_period.covers(night))
                for night in stay_period.each_night()
            ),
            default=0,
        )
