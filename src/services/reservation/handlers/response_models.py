from __future__ import annotations

from pydantic import BaseModel

from services.reservation.domain.entity import Reservation


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_id: str
    hotel_id: str
    room_type_id: str
    check_in_date: str
    check_out_date: str
    nights: int
    room_count: int
    guest_count: int
    unit_price_amount: str
    total_price_amount: str
    price_currency: str
    status: str
    user_id: str
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ReservationListResponse(BaseModel):
    """予約一覧のレスポンスモデル"""

    status: str = "success"
    data: list[ReservationData]
    count: int


class RoomAvailabilityData(BaseModel):
    room_type_id: str
    available_rooms: int


class AvailabilityResponse(BaseModel):
    """空室照会のレスポンスモデル"""

    status: str = "success"
    hotel_id: str
    check_in_date: str
    check_out_date: str
    data: list[RoomAvailabilityData]


class QuoteData(BaseModel):
    hotel_id: str
    room_type_id: str
    check_in_date: str
    check_out_date: str
    room_count: int
    total_price_amount: str
    price_currency: str


class QuoteResponse(BaseModel):
    """料金見積もりのレスポンスモデル"""

    status: str = "success"
    data: QuoteData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_reservation_data(reservation: Reservation) -> ReservationData:
    """Reservation エンティティをレスポンスデータに変換する"""
    return ReservationData(
        reservation_id=str(reservation.id),
        hotel_id=str(reservation.hotel_id),
        room_type_id=str(reservation.room_type_id),
        check_in_date=reservation.stay_period.check_in.isoformat(),
        check_out_date=reservation.stay_period.check_out.isoformat(),
        nights=reservation.stay_period.nights(),
        room_count=reservation.room_count,
        guest_count=reservation.guest_count,
        unit_price_amount=str(reservation.unit_price.amount),
        total_price_amount=str(reservation.total_price.amount),
        price_currency=str(reservation.total_price.currency),
        status=reservation.status.value,
        user_id=str(reservation.user_id),
        created_at=reservation.created_at.isoformat(),
    )


def to_response(reservation: Reservation) -> SuccessResponse:
    """Reservation エンティティをレスポンスモデルに変換する"""
    return SuccessResponse(data=to_reservation_data(reservation))
