import pytest

from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.event import ReservationCancelled, ReservationConfirmed
from services.shared.domain.exception import BusinessRuleViolationException


class TestReservation:
    def test_confirm_pending_reservation(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.PENDING)

        reservation.confirm()

        assert reservation.status == ReservationStatus.CONFIRMED
        assert reservation.consumes_inventory
        events = reservation.flush_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], ReservationConfirmed)
        assert events[0].reservation_id == reservation.id
        assert reservation.flush_domain_events() == []

    def test_confirm_is_idempotent(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.CONFIRMED)

        reservation.confirm()

        assert reservation.status == ReservationStatus.CONFIRMED
        assert reservation.flush_domain_events() == []

    def test_confirm_cancelled_reservation_raises_error(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.CANCELLED)

        with pytest.raises(BusinessRuleViolationException):
            reservation.confirm()

    def test_cancel_confirmed_reservation(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.CONFIRMED)

        reservation.cancel()

        assert reservation.status == ReservationStatus.CANCELLED
        assert not reservation.consumes_inventory
        events = reservation.flush_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], ReservationCancelled)
        assert events[0].room_count == reservation.room_count

    def test_cancel_is_idempotent(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.CANCELLED)

        reservation.cancel()

        assert reservation.status == ReservationStatus.CANCELLED
        assert reservation.flush_domain_events() == []

    def test_cancel_pending_reservation_raises_error(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.PENDING)

        with pytest.raises(BusinessRuleViolationException):
            reservation.cancel()

    def test_pending_reservation_does_not_consume_inventory(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.PENDING)
        assert not reservation.consumes_inventory

    def test_zero_room_count_raises_error(self, create_reservation):
        with pytest.raises(ValueError, match="Room count must be at least 1"):
            create_reservation(room_count=0)

    def test_reservations_with_same_id_are_equal(self, create_reservation):
        first = create_reservation(reservation_id="resv-001")
        second = create_reservation(
            reservation_id="resv-001", status=ReservationStatus.CANCELLED
        )
        assert first == second
