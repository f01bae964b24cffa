from .reservation_events import ReservationCancelled, ReservationConfirmed

__all__ = ["ReservationCancelled", "ReservationConfirmed"]
