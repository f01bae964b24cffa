from datetime import date
from typing import Callable

from aws_lambda_powertools import Logger

from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.exception import CancellationWindowClosedException
from services.reservation.domain.repository import ReservationLedger
from services.reservation.domain.value_object import (
    Actor,
    CancellationPolicy,
    ReservationId,
)
from services.shared.domain import (
    OptimisticLockException,
    ResourceNotFoundException,
    UnauthorizedException,
)
from services.shared.utils.clock import utc_today

logger = Logger(service=SERVICE_NAME, child=True)


class CancelReservationService:
    """予約キャンセルのユースケース

    ステータスを CANCELLED に変えるだけで在庫は即座に解放される。
    """

    def __init__(
        self,
        ledger: ReservationLedger,
        policy: CancellationPolicy | None = None,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._ledger = ledger
        self._policy = policy or CancellationPolicy()
        self._today = today

    def cancel(self, reservation_id: ReservationId, actor: Actor) -> Reservation:
        reservation = self._ledger.find_by_id(reservation_id)
        if reservation is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")

        if not actor.can_act_for(reservation.user_id):
            raise UnauthorizedException(
                f"User {actor.user_id} cannot cancel reservation {reservation_id}"
            )

        if reservation.status == ReservationStatus.CANCELLED:
            return reservation

        check_in = reservation.stay_period.check_in
        if not actor.is_admin and not self._policy.allows(check_in, self._today()):
            raise CancellationWindowClosedException(
                f"Free cancellation ended on {self._policy.deadline(check_in)}"
            )

        expected_status = reservation.status
        reservation.cancel()
        try:
            self._ledger.update(reservation, expected_status=expected_status)
        except OptimisticLockException:
            # 同時に受け付けた別のキャンセルが先に反映された
            current = self._ledger.find_by_id(reservation_id)
            if current is None or current.status != ReservationStatus.CANCELLED:
                raise
            logger.info(
                "Reservation already cancelled",
                extra={
                    "reservation_id": str(reservation_id),
                    "actor_id": str(actor.user_id),
                },
            )
            return current

        logger.info(
            "Reservation cancelled",
            extra={
                "reservation_id": str(reservation.id),
                "hotel_id": str(reservation.hotel_id),
                "room_type_id": str(reservation.room_type_id),
                "actor_id": str(actor.user_id),
                "events": [type(e).__name__ for e in reservation.flush_domain_events()],
            },
        )
        return reservation
