from enum import Enum


class AdmissionState(str, Enum):
    """予約受付の状態遷移

    REQUESTED -> VALIDATING -> ADMITTED | REJECTED
    """

    REQUESTED = "REQUESTED"
    VALIDATING = "VALIDATING"
    ADMITTED = "ADMITTED"
    REJECTED = "REJECTED"
