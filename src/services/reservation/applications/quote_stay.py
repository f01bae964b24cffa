from services.reservation.applications.validation import parse_stay_period
from services.reservation.domain.repository import InventoryRepository
from services.reservation.domain.service import PricingCalculator
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import Money, ResourceNotFoundException


class QuoteStayService:
    """料金見積もりのユースケース

    台帳の状態には依存しない。同じ入力には常に同じ金額を返す。
    """

    def __init__(
        self,
        inventory: InventoryRepository,
        pricing: PricingCalculator | None = None,
    ) -> None:
        self._inventory = inventory
        self._pricing = pricing or PricingCalculator()

    def quote(
        self,
        hotel_id: HotelId,
        room_type_id: RoomTypeId,
        check_in: str,
        check_out: str,
        room_count: int,
    ) -> Money:
        stay_period = parse_stay_period(check_in, check_out)

        room_type = self._inventory.find_room_type(hotel_id, room_type_id)
        if room_type is None:
            raise ResourceNotFoundException(
                f"Room type not found: {hotel_id}/{room_type_id}"
            )

        return self._pricing.price(
            room_type, stay_period.check_in, stay_period.check_out, room_count
        )
