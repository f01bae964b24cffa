from decimal import Decimal
from unittest.mock import patch

import pytest

from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.reservation.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import Money, StorageUnavailableException


@pytest.fixture
def repository(mock_boto3):
    with patch(
        "services.reservation.infrastructure.dynamodb_inventory_repository.boto3",
        mock_boto3,
    ):
        yield DynamoDBInventoryRepository(table_name="reservations")


ROOM_TYPE_ITEM = {
    "PK": "HOTEL#hotel-001",
    "SK": "ROOMTYPE#deluxe",
    "entity_type": "ROOM_TYPE",
    "hotel_id": "hotel-001",
    "room_type_id": "deluxe",
    "name": "Deluxe",
    "nightly_rate_amount": "25000",
    "nightly_rate_currency": "JPY",
    "max_occupancy": Decimal("3"),
    "total_rooms": Decimal("3"),
}


class TestDynamoDBInventoryRepository:
    def test_save_writes_hotel_and_room_types(
        self, repository, mock_table, create_hotel
    ):
        repository.save(create_hotel())

        batch = mock_table.batch_writer.return_value.__enter__.return_value
        items = [c.kwargs["Item"] for c in batch.put_item.call_args_list]
        assert [i["SK"] for i in items] == ["METADATA", "ROOMTYPE#standard"]
        assert items[1]["nightly_rate_amount"] == "10000"
        assert items[1]["total_rooms"] == 1

    def test_find_by_id_builds_hotel(self, repository, mock_table):
        mock_table.query.return_value = {
            "Items": [
                {
                    "PK": "HOTEL#hotel-001",
                    "SK": "METADATA",
                    "hotel_id": "hotel-001",
                    "name": "Grand Hotel",
                    "city": "Tokyo",
                },
                ROOM_TYPE_ITEM,
            ]
        }

        hotel = repository.find_by_id(HotelId(value="hotel-001"))

        assert hotel.name == "Grand Hotel"
        room_type = hotel.room_type(RoomTypeId(value="deluxe"))
        assert room_type.nightly_rate == Money.jpy(Decimal("25000"))
        assert room_type.total_rooms == 3

    def test_find_by_id_without_metadata_returns_none(self, repository, mock_table):
        mock_table.query.return_value = {"Items": []}

        assert repository.find_by_id(HotelId(value="hotel-999")) is None

    def test_find_room_type(self, repository, mock_table):
        mock_table.get_item.return_value = {"Item": ROOM_TYPE_ITEM}

        room_type = repository.find_room_type(
            HotelId(value="hotel-001"), RoomTypeId(value="deluxe")
        )

        assert room_type.max_occupancy == 3
        mock_table.get_item.assert_called_once_with(
            Key={"PK": "HOTEL#hotel-001", "SK": "ROOMTYPE#deluxe"},
            ConsistentRead=True,
        )

    def test_find_room_type_missing_returns_none(self, repository, mock_table):
        mock_table.get_item.return_value = {}

        assert (
            repository.find_room_type(
                HotelId(value="hotel-001"), RoomTypeId(value="suite")
            )
            is None
        )

    def test_storage_error_is_wrapped(self, repository, mock_table, client_error):
        mock_table.get_item.side_effect = client_error("ResourceNotFoundException")

        with pytest.raises(StorageUnavailableException):
            repository.find_room_type(
                HotelId(value="hotel-001"), RoomTypeId(value="deluxe")
            )
