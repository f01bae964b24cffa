from pydantic import BaseModel, Field

# 日付の書式・室数・人数の妥当性はドメイン側で判定し、
# INVALID_DATE_RANGE / INVALID_PARTY_SIZE として返すため、ここでは型だけを検証する。


class AvailabilityQuery(BaseModel):
    """空室照会のクエリパラメータ"""

    check_in_date: str = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2025-03-10"],
    )
    check_out_date: str = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2025-03-12"],
    )
    room_type_id: str | None = Field(
        default=None,
        min_length=1,
        description="客室タイプID（省略時は全客室タイプ）",
    )


class QuoteRequest(BaseModel):
    """料金見積もりリクエストモデル"""

    hotel_id: str = Field(..., min_length=1)
    room_type_id: str = Field(..., min_length=1)
    check_in_date: str = Field(..., examples=["2025-03-10"])
    check_out_date: str = Field(..., examples=["2025-03-12"])
    room_count: int = Field(default=1, description="室数")


class CreateReservationRequest(BaseModel):
    """予約リクエストモデル"""

    hotel_id: str = Field(..., min_length=1)
    room_type_id: str = Field(..., min_length=1)
    check_in_date: str = Field(..., examples=["2025-03-10"])
    check_out_date: str = Field(..., examples=["2025-03-12"])
    room_count: int = Field(default=1, description="室数")
    guest_count: int = Field(..., description="宿泊人数")
    user_id: str = Field(..., min_length=1, description="予約する利用者ID")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "hotel_id": "hotel-001",
                    "room_type_id": "deluxe",
                    "check_in_date": "2025-03-10",
                    "check_out_date": "2025-03-12",
                    "room_count": 1,
                    "guest_count": 2,
                    "user_id": "user-123",
                }
            ]
        }
    }


class ActorRequest(BaseModel):
    """操作者の情報（認証は呼び出し側のレイヤーが担う）"""

    actor_id: str = Field(..., min_length=1, description="操作する利用者ID")
    is_admin: bool = Field(default=False, description="管理者かどうか")
