from abc import abstractmethod
from typing import Callable, Sequence

from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import (
    HotelId,
    ReservationId,
    RoomTypeId,
    StayPeriod,
)
from services.shared.domain import Repository, UserId

AdmissionCheck = Callable[[Sequence[Reservation]], None]
"""受付判定

台帳の一貫したスナップショット（対象期間に重なる CONFIRMED 予約）を受け取り、
受付できない場合は例外を送出する。
"""


class ReservationLedger(Repository[Reservation, ReservationId]):
    """予約台帳のインターフェース

    - 予約は追記のみ。変更はステータス遷移だけ
    - 同じ (ホテル, 客室タイプ) への受付判定と追記は不可分に行う
    - 異なる客室タイプ同士は互いにブロックしない
    """

    @abstractmethod
    def append(self, reservation: Reservation, admission_check: AdmissionCheck) -> None:
        """受付判定と追記を1つの不可分な操作として実行する

        admission_check が例外を送出した場合は何も書き込まずにその例外を伝播する。
        成功した場合、予約は CONFIRMED として保存され reservation.confirm() が呼ばれる。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Reservation]:
        """利用者の予約を作成日時の昇順で返す"""
        raise NotImplementedError

    @abstractmethod
    def find_confirmed_overlapping(
        self, hotel_id: HotelId, room_type_id: RoomTypeId, stay_period: StayPeriod
    ) -> list[Reservation]:
        """滞在期間に重なる CONFIRMED 予約を1つのスナップショットとして返す"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, reservation: Reservation, expected_status: ReservationStatus
    ) -> None:
        """予約のステータスを更新する

        保存済みのステータスが expected_status と異なる場合は
        OptimisticLockException を送出する。
        """
        raise NotImplementedError
