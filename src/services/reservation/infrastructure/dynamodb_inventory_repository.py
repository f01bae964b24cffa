import os

import boto3
from boto3.dynamodb.conditions import Key

from services.reservation.domain.entity import Hotel, RoomType
from services.reservation.domain.repository import InventoryRepository
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.shared.domain import Money
from services.shared.infrastructure import query_all, storage_errors


class DynamoDBInventoryRepository(InventoryRepository):
    """DynamoDBを使用したInventoryRepository の具象実装

    PK=HOTEL#{hotel_id} の下に METADATA と ROOMTYPE#{room_type_id} を置く。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, hotel: Hotel) -> None:
        """ホテルと客室タイプを保存する（プロビジョニング用）"""
        with storage_errors("save hotel"):
            with self.table.batch_writer() as batch:
                batch.put_item(
                    Item={
                        "PK": f"HOTEL#{hotel.id}",
                        "SK": "METADATA",
                        "entity_type": "HOTEL",
                        "hotel_id": str(hotel.id),
                        "name": hotel.name,
                        "city": hotel.city,
                        "address": hotel.address,
                    }
                )
                for room_type in hotel.room_types:
                    batch.put_item(Item=self._room_type_item(room_type))

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索（客室タイプを含む）"""
        with storage_errors("query hotel"):
            items = query_all(
                self.table,
                KeyConditionExpression=Key("PK").eq(f"HOTEL#{hotel_id}"),
                ConsistentRead=True,
            )

        metadata = next((i for i in items if i["SK"] == "METADATA"), None)
        if metadata is None:
            return None
        return Hotel(
            id=HotelId(value=metadata["hotel_id"]),
            name=metadata["name"],
            city=metadata.get("city", ""),
            address=metadata.get("address", ""),
            room_types=[
                self._to_room_type(i) for i in items if i["SK"].startswith("ROOMTYPE#")
            ],
        )

    def find_room_type(
        self, hotel_id: HotelId, room_type_id: RoomTypeId
    ) -> RoomType | None:
        """客室タイプを1件取得する"""
        with storage_errors("get room type"):
            response = self.table.get_item(
                Key={
                    "PK": f"HOTEL#{hotel_id}",
                    "SK": f"ROOMTYPE#{room_type_id}",
                },
                ConsistentRead=True,
            )
        item = response.get("Item")
        if not item:
            return None
        return self._to_room_type(item)

    def _room_type_item(self, room_type: RoomType) -> dict:
        return {
            "PK": f"HOTEL#{room_type.hotel_id}",
            "SK": f"ROOMTYPE#{room_type.id}",
            "entity_type": "ROOM_TYPE",
            "hotel_id": str(room_type.hotel_id),
            "room_type_id": str(room_type.id),
            "name": room_type.name,
            "nightly_rate_amount": str(room_type.nightly_rate.amount),
            "nightly_rate_currency": str(room_type.nightly_rate.currency),
            "max_occupancy": room_type.max_occupancy,
            "total_rooms": room_type.total_rooms,
        }

    def _to_room_type(self, item: dict) -> RoomType:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return RoomType(
            id=RoomTypeId(value=item["room_type_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            name=item["name"],
            nightly_rate=Money.of(
                item["nightly_rate_amount"], item["nightly_rate_currency"]
            ),
            max_occupancy=int(item["max_occupancy"]),
            total_rooms=int(item["total_rooms"]),
        )
