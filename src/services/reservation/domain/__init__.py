from .entity import Hotel, Reservation, RoomType
from .enum import AdmissionState, ReservationStatus
from .event import ReservationCancelled, ReservationConfirmed
from .factory import ReservationDetails, ReservationFactory
from .repository import AdmissionCheck, InventoryRepository, ReservationLedger
from .service import AvailabilityCalculator, PricingCalculator
from .value_object import (
    Actor,
    CancellationPolicy,
    HotelId,
    ReservationId,
    RoomTypeId,
    StayPeriod,
)

__all__ = [
    "Actor",
    "AdmissionCheck",
    "AdmissionState",
    "AvailabilityCalculator",
    "CancellationPolicy",
    "Hotel",
    "HotelId",
    "InventoryRepository",
    "PricingCalculator",
    "Reservation",
    "ReservationCancelled",
    "ReservationConfirmed",
    "ReservationDetails",
    "ReservationFactory",
    "ReservationId",
    "ReservationLedger",
    "ReservationStatus",
    "RoomType",
    "RoomTypeId",
    "StayPeriod",
]
