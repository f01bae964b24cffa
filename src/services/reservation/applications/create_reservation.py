from dataclasses import dataclass
from datetime import date
from typing import Callable, Sequence

from aws_lambda_powertools import Logger

from services.reservation.applications.validation import parse_stay_period
from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.entity import Reservation, RoomType
from services.reservation.domain.enum import AdmissionState
from services.reservation.domain.exception import (
    InsufficientAvailabilityException,
    InvalidPartySizeException,
)
from services.reservation.domain.factory import ReservationFactory
from services.reservation.domain.repository import (
    InventoryRepository,
    ReservationLedger,
)
from services.reservation.domain.service import (
    AvailabilityCalculator,
    PricingCalculator,
)
from services.reservation.domain.value_object import HotelId, RoomTypeId, StayPeriod
from services.shared.domain import (
    DomainException,
    ResourceNotFoundException,
    StorageUnavailableException,
    UserId,
)
from services.shared.utils.clock import utc_today

logger = Logger(service=SERVICE_NAME, child=True)


@dataclass(frozen=True)
class ReservationRequest:
    """予約リクエスト（日付は YYYY-MM-DD 形式の文字列のまま受け取る）"""

    hotel_id: HotelId
    room_type_id: RoomTypeId
    check_in: str
    check_out: str
    room_count: int
    guest_count: int
    user_id: UserId


class CreateReservationService:
    """予約受付のユースケース

    REQUESTED -> VALIDATING -> ADMITTED | REJECTED と遷移する。
    拒否された場合の再試行は呼び出し側の責務で、ここでは行わない。
    """

    def __init__(
        self,
        inventory: InventoryRepository,
        ledger: ReservationLedger,
        factory: ReservationFactory | None = None,
        availability: AvailabilityCalculator | None = None,
        pricing: PricingCalculator | None = None,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._inventory = inventory
        self._ledger = ledger
        self._factory = factory or ReservationFactory()
        self._availability = availability or AvailabilityCalculator()
        self._pricing = pricing or PricingCalculator()
        self._today = today

    def create(self, request: ReservationRequest) -> Reservation:
        """予約を受け付ける

        成功時は CONFIRMED の予約を返し、拒否時はドメイン例外を送出する。
        """
        log_keys = {
            "hotel_id": str(request.hotel_id),
            "room_type_id": str(request.room_type_id),
            "user_id": str(request.user_id),
        }
        logger.info(
            "Admission requested",
            extra={**log_keys, "admission_state": AdmissionState.REQUESTED.value},
        )

        try:
            reservation = self._admit(request, log_keys)
        except StorageUnavailableException:
            raise
        except DomainException as e:
            logger.warning(
                "Admission rejected",
                extra={
                    **log_keys,
                    "admission_state": AdmissionState.REJECTED.value,
                    "error_code": e.error_code,
                    "reason": str(e),
                },
            )
            raise

        events = [type(e).__name__ for e in reservation.flush_domain_events()]
        logger.info(
            "Admission completed",
            extra={
                **log_keys,
                "admission_state": AdmissionState.ADMITTED.value,
                "reservation_id": str(reservation.id),
                "events": events,
            },
        )
        return reservation

    def _admit(self, request: ReservationRequest, log_keys: dict) -> Reservation:
        logger.debug(
            "Validating request",
            extra={**log_keys, "admission_state": AdmissionState.VALIDATING.value},
        )

        stay_period = parse_stay_period(
            request.check_in, request.check_out, not_before=self._today()
        )
        if request.room_count < 1:
            raise InvalidPartySizeException("Room count must be at least 1")
        if request.guest_count < 1:
            raise InvalidPartySizeException("Guest count must be at least 1")

        room_type = self._inventory.find_room_type(
            request.hotel_id, request.room_type_id
        )
        if room_type is None:
            raise ResourceNotFoundException(
                f"Room type not found: {request.hotel_id}/{request.room_type_id}"
            )
        if not room_type.accommodates(request.guest_count, request.room_count):
            raise InvalidPartySizeException(
                f"{request.guest_count} guest(s) exceed the occupancy of "
                f"{request.room_count} x {room_type.name} "
                f"(max {room_type.max_occupancy} per room)"
            )

        total_price = self._pricing.price(
            room_type, stay_period.check_in, stay_period.check_out, request.room_count
        )
        reservation = self._factory.create(
            room_type,
            {
                "stay_period": stay_period,
                "room_count": request.room_count,
                "guest_count": request.guest_count,
                "user_id": request.user_id,
            },
            total_price,
        )

        self._ledger.append(
            reservation,
            self._admission_check(room_type, stay_period, request.room_count),
        )
        return reservation

    def _admission_check(
        self, room_type: RoomType, stay_period: StayPeriod, room_count: int
    ) -> Callable[[Sequence[Reservation]], None]:
        """台帳の排他区間内で実行される空室の再確認"""

        def check(reservations: Sequence[Reservation]) -> None:
            available = self._availability.available_rooms(
                room_type, reservations, stay_period
            )
            logger.debug(
                "Availability checked",
                extra={
                    "room_type_id": str(room_type.id),
                    "available_rooms": available,
                    "peak_occupancy": self._availability.peak_occupancy(
                        room_type, reservations, stay_period
                    ),
                },
            )
            if available < room_count:
                raise InsufficientAvailabilityException(
                    f"Requested {room_count} room(s) of {room_type.id} but only "
                    f"{available} available for {stay_period.check_in} -> "
                    f"{stay_period.check_out}"
                )

        return check
