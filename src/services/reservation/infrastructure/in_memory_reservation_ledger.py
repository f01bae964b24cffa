import itertools
import threading

from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.repository import AdmissionCheck, ReservationLedger
from services.reservation.domain.value_object import (
    HotelId,
    ReservationId,
    RoomTypeId,
    StayPeriod,
)
from services.shared.domain import UserId
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)

LedgerKey = tuple[HotelId, RoomTypeId]


def _clone(reservation: Reservation) -> Reservation:
    """台帳に保持する不変のコピーを作る（ドメインイベントは引き継がない）"""
    return Reservation(
        id=reservation.id,
        hotel_id=reservation.hotel_id,
        room_type_id=reservation.room_type_id,
        stay_period=reservation.stay_period,
        room_count=reservation.room_count,
        guest_count=reservation.guest_count,
        unit_price=reservation.unit_price,
        total_price=reservation.total_price,
        user_id=reservation.user_id,
        created_at=reservation.created_at,
        status=reservation.status,
    )


class InMemoryReservationLedger(ReservationLedger):
    """プロセス内の予約台帳

    (ホテル, 客室タイプ) ごとに専用のロックを持ち、受付判定と追記を直列化する。
    別の客室タイプとはロックを共有しない。
    各キーの予約はタプルで保持し、書き込みのたびに新しいタプルへ差し替える。
    読み取り側はロックを取らずにその時点のタプルをスナップショットとして使う。
    """

    def __init__(self) -> None:
        self._locks_guard = threading.Lock()
        self._locks: dict[LedgerKey, threading.Lock] = {}
        self._entries: dict[LedgerKey, tuple[Reservation, ...]] = {}
        self._keys: dict[ReservationId, LedgerKey] = {}
        self._sequence: dict[ReservationId, int] = {}
        self._counter = itertools.count()

    def _lock_for(self, key: LedgerKey) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def append(self, reservation: Reservation, admission_check: AdmissionCheck) -> None:
        key = (reservation.hotel_id, reservation.room_type_id)
        with self._lock_for(key):
            if reservation.id in self._keys:
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                )
            current = self._entries.get(key, ())
            admission_check(
                [
                    _clone(r)
                    for r in current
                    if r.consumes_inventory
                    and r.stay_period.overlaps(reservation.stay_period)
                ]
            )
            reservation.confirm()
            self._entries[key] = current + (_clone(reservation),)
            self._sequence[reservation.id] = next(self._counter)
            self._keys[reservation.id] = key

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        key = self._keys.get(reservation_id)
        if key is None:
            return None
        for stored in self._entries.get(key, ()):
            if stored.id == reservation_id:
                return _clone(stored)
        return None

    def find_by_user_id(self, user_id: UserId) -> list[Reservation]:
        snapshots = list(self._entries.values())
        owned = [r for entries in snapshots for r in entries if r.user_id == user_id]
        owned.sort(key=lambda r: (r.created_at, self._sequence.get(r.id, 0)))
        return [_clone(r) for r in owned]

    def find_confirmed_overlapping(
        self, hotel_id: HotelId, room_type_id: RoomTypeId, stay_period: StayPeriod
    ) -> list[Reservation]:
        snapshot = self._entries.get((hotel_id, room_type_id), ())
        return [
            _clone(r)
            for r in snapshot
            if r.consumes_inventory and r.stay_period.overlaps(stay_period)
        ]

    def update(
        self, reservation: Reservation, expected_status: ReservationStatus
    ) -> None:
        key = self._keys.get(reservation.id)
        if key is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation.id}")

        with self._lock_for(key):
            current = self._entries.get(key, ())
            updated = []
            for stored in current:
                if stored.id == reservation.id:
                    if stored.status != expected_status:
                        raise OptimisticLockException(
                            f"Reservation status conflict: "
                            f"expected {expected_status.value}, "
                            f"actual {stored.status.value}, "
                            f"reservation_id={reservation.id}"
                        )
                    stored = _clone(reservation)
                updated.append(stored)
            self._entries[key] = tuple(updated)
