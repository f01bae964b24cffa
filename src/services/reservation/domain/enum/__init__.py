from .admission_state import AdmissionState
from .reservation_status import ReservationStatus

__all__ = ["AdmissionState", "ReservationStatus"]
