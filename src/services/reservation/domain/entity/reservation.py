from datetime import datetime

from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.event import ReservationCancelled, ReservationConfirmed
from services.reservation.domain.value_object import (
    HotelId,
    ReservationId,
    RoomTypeId,
    StayPeriod,
)
from services.shared.domain import AggregateRoot, Money, UserId
from services.shared.domain.exception import BusinessRuleViolationException


class Reservation(AggregateRoot[ReservationId]):
    """予約エンティティ

    1つの客室タイプを、ある滞在期間に room_count 室押さえる。
    unit_price は予約時点の1泊料金のスナップショットで、後から再計算しない。
    """

    def __init__(
        self,
        id: ReservationId,
        hotel_id: HotelId,
        room_type_id: RoomTypeId,
        stay_period: StayPeriod,
        room_count: int,
        guest_count: int,
        unit_price: Money,
        total_price: Money,
        user_id: UserId,
        created_at: datetime,
        status: ReservationStatus = ReservationStatus.PENDING,
    ) -> None:
        super().__init__(id)
        if room_count < 1:
            raise ValueError("Room count must be at least 1")
        if guest_count < 1:
            raise ValueError("Guest count must be at least 1")
        self._hotel_id = hotel_id
        self._room_type_id = room_type_id
        self._stay_period = stay_period
        self._room_count = room_count
        self._guest_count = guest_count
        self._unit_price = unit_price
        self._total_price = total_price
        self._user_id = user_id
        self._created_at = created_at
        self._status = status

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def room_type_id(self) -> RoomTypeId:
        return self._room_type_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def room_count(self) -> int:
        return self._room_count

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def unit_price(self) -> Money:
        return self._unit_price

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def status(self) -> ReservationStatus:
        return self._status

    @property
    def consumes_inventory(self) -> bool:
        """在庫を消費しているか（CONFIRMED のみ）"""
        return self._status == ReservationStatus.CONFIRMED

    def confirm(self) -> None:
        """予約を確定する（台帳への追記が完了した時点で呼ぶ）"""
        if self._status == ReservationStatus.CANCELLED:
            raise BusinessRuleViolationException("Cannot confirm a cancelled reservation")
        if self._status == ReservationStatus.CONFIRMED:
            return
        self._status = ReservationStatus.CONFIRMED
        self.add_domain_event(
            ReservationConfirmed(
                reservation_id=self.id,
                hotel_id=self._hotel_id,
                room_type_id=self._room_type_id,
                room_count=self._room_count,
            )
        )

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == ReservationStatus.CANCELLED:
            return
        if self._status == ReservationStatus.PENDING:
            raise BusinessRuleViolationException(
                "Cannot cancel a reservation that has not been confirmed"
            )
        self._status = ReservationStatus.CANCELLED
        self.add_domain_event(
            ReservationCancelled(
                reservation_id=self.id,
                hotel_id=self._hotel_id,
                room_type_id=self._room_type_id,
                room_count=self._room_count,
            )
        )
