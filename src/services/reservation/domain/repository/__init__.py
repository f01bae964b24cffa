from .inventory_repository import InventoryRepository
from .reservation_ledger import AdmissionCheck, ReservationLedger

__all__ = ["AdmissionCheck", "InventoryRepository", "ReservationLedger"]
