from datetime import datetime, timezone

import pytest

from services.reservation.applications.list_user_reservations import (
    ListUserReservationsService,
)
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import Actor
from services.shared.domain import UnauthorizedException, UserId


def _noop_check(reservations):
    return None


class TestListUserReservationsService:
    def test_returns_reservations_in_creation_order(
        self, ledger, create_reservation, user_id
    ):
        later = create_reservation(
            reservation_id="resv-late",
            status=ReservationStatus.PENDING,
            check_in="2025-04-01",
            check_out="2025-04-02",
            created_at=datetime(2025, 2, 2, tzinfo=timezone.utc),
        )
        earlier = create_reservation(
            reservation_id="resv-early",
            status=ReservationStatus.PENDING,
            room_type_id="deluxe",
            created_at=datetime(2025, 2, 1, tzinfo=timezone.utc),
        )
        ledger.append(later, _noop_check)
        ledger.append(earlier, _noop_check)

        result = ListUserReservationsService(ledger).list_for_user(
            user_id, Actor(user_id=user_id)
        )

        assert [str(r.id) for r in result] == ["resv-early", "resv-late"]

    def test_includes_cancelled_reservations(
        self, ledger, create_reservation, user_id
    ):
        reservation = create_reservation(status=ReservationStatus.PENDING)
        ledger.append(reservation, _noop_check)
        reservation.cancel()
        ledger.update(reservation, expected_status=ReservationStatus.CONFIRMED)

        result = ListUserReservationsService(ledger).list_for_user(
            user_id, Actor(user_id=user_id)
        )

        assert [r.status for r in result] == [ReservationStatus.CANCELLED]

    def test_excludes_other_users(self, ledger, create_reservation, user_id):
        ledger.append(
            create_reservation(status=ReservationStatus.PENDING, user_id="user-456"),
            _noop_check,
        )

        result = ListUserReservationsService(ledger).list_for_user(
            user_id, Actor(user_id=user_id)
        )

        assert result == []

    def test_admin_can_list_any_user(self, mock_repository, user_id):
        mock_repository.find_by_user_id.return_value = []
        admin = Actor(user_id=UserId(value="admin-1"), is_admin=True)

        ListUserReservationsService(mock_repository).list_for_user(user_id, admin)

        mock_repository.find_by_user_id.assert_called_once_with(user_id)

    def test_other_user_is_unauthorized(self, mock_repository, user_id):
        stranger = Actor(user_id=UserId(value="user-456"))

        with pytest.raises(UnauthorizedException):
            ListUserReservationsService(mock_repository).list_for_user(
                user_id, stranger
            )

        mock_repository.find_by_user_id.assert_not_called()
