from services.reservation.domain.entity import Reservation
from services.reservation.domain.repository import ReservationLedger
from services.reservation.domain.value_object import Actor
from services.shared.domain import UnauthorizedException, UserId


class ListUserReservationsService:
    """利用者の予約一覧のユースケース"""

    def __init__(self, ledger: ReservationLedger) -> None:
        self._ledger = ledger

    def list_for_user(self, user_id: UserId, actor: Actor) -> list[Reservation]:
        """予約を作成日時の昇順で返す（本人または管理者のみ）"""
        if not actor.can_act_for(user_id):
            raise UnauthorizedException(
                f"User {actor.user_id} cannot list reservations of {user_id}"
            )
        return self._ledger.find_by_user_id(user_id)
