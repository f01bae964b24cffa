import os
from datetime import date, datetime

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.exception import InsufficientAvailabilityException
from services.reservation.domain.repository import AdmissionCheck, ReservationLedger
from services.reservation.domain.value_object import (
    HotelId,
    ReservationId,
    RoomTypeId,
    StayPeriod,
)
from services.shared.domain import Money, UserId
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    StorageUnavailableException,
)
from services.shared.infrastructure import (
    error_code,
    is_conditional_check_failed,
    query_all,
    storage_errors,
)

logger = Logger(service=SERVICE_NAME, child=True)

VERSION_SK = "VERSION"
RESERVATION_SK_PREFIX = "RESERVATION#"
POINTER_SK = "POINTER"

_CONFLICT_CODES = frozenset({"ConditionalCheckFailed", "TransactionConflict"})


class _VersionConflict(Exception):
    """判定後に別の受付が同じ客室タイプへ書き込んだ"""


def _ledger_pk(hotel_id: HotelId, room_type_id: RoomTypeId) -> str:
    return f"LEDGER#{hotel_id}#{room_type_id}"


def _reservation_sk(check_in: date, reservation_id: ReservationId) -> str:
    return f"{RESERVATION_SK_PREFIX}{check_in.isoformat()}#{reservation_id}"


class DynamoDBReservationLedger(ReservationLedger):
    """DynamoDBを使用したReservationLedger の具象実装

    (ホテル, 客室タイプ) ごとに1パーティション (PK=LEDGER#{hotel}#{room_type}) を持つ。
    同じパーティションのバージョン項目 (SK=VERSION) を楽観ロックに使い、
    予約の追記とバージョンの更新を1つのトランザクションで書き込む。
    バージョン競合時は判定を1回だけやり直し、再度競合したら空室不足として拒否する。
    """

    def __init__(
        self,
        table_name: str | None = None,
        max_attempts: int = 2,
        snapshot_attempts: int = 5,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.dynamodb.meta.client
        self.max_attempts = max_attempts
        self.snapshot_attempts = snapshot_attempts

    def append(self, reservation: Reservation, admission_check: AdmissionCheck) -> None:
        """受付判定と追記を不可分に行う"""
        pk = _ledger_pk(reservation.hotel_id, reservation.room_type_id)

        for attempt in range(1, self.max_attempts + 1):
            version = self._read_version(pk)
            overlapping = self._query_overlapping(pk, reservation.stay_period)
            admission_check(overlapping)
            try:
                self._commit(reservation, pk, version)
            except _VersionConflict:
                logger.info(
                    "Ledger version conflict",
                    extra={
                        "reservation_id": str(reservation.id),
                        "ledger": pk,
                        "attempt": attempt,
                    },
                )
                continue
            reservation.confirm()
            return

        raise InsufficientAvailabilityException(
            f"Rooms of {reservation.room_type_id} were taken by concurrent "
            f"reservations for {reservation.stay_period.check_in} -> "
            f"{reservation.stay_period.check_out}"
        )

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索（ポインタ項目から台帳上の位置を引く）"""
        with storage_errors("get reservation pointer"):
            response = self.table.get_item(
                Key={"PK": f"RESERVATION#{reservation_id}", "SK": POINTER_SK},
                ConsistentRead=True,
            )
        pointer = response.get("Item")
        if not pointer:
            return None

        with storage_errors("get reservation"):
            response = self.table.get_item(
                Key={"PK": pointer["ledger_pk"], "SK": pointer["ledger_sk"]},
                ConsistentRead=True,
            )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: UserId) -> list[Reservation]:
        """GSI1 (USER#{user_id}) から作成日時の昇順で取得する"""
        with storage_errors("query user reservations"):
            items = query_all(
                self.table,
                IndexName="GSI1",
                KeyConditionExpression=Key("GSI1PK").eq(f"USER#{user_id}"),
                ScanIndexForward=True,
            )
        return [self._to_entity(item) for item in items]

    def find_confirmed_overlapping(
        self, hotel_id: HotelId, room_type_id: RoomTypeId, stay_period: StayPeriod
    ) -> list[Reservation]:
        """前後のバージョンが一致した読み取りをスナップショットとして返す

        追記が続いて一致する読み取りが得られない場合は StorageUnavailableException
        """
        pk = _ledger_pk(hotel_id, room_type_id)
        for _ in range(self.snapshot_attempts):
            before = self._read_version(pk)
            reservations = self._query_overlapping(pk, stay_period)
            if self._read_version(pk) == before:
                return reservations

        logger.warning(
            "Ledger snapshot not stable",
            extra={"ledger": pk, "attempts": self.snapshot_attempts},
        )
        raise StorageUnavailableException(
            f"Could not read a consistent snapshot of {pk}"
        )

    def update(
        self, reservation: Reservation, expected_status: ReservationStatus
    ) -> None:
        """予約のステータスを更新する"""
        pk = _ledger_pk(reservation.hotel_id, reservation.room_type_id)
        sk = _reservation_sk(reservation.stay_period.check_in, reservation.id)

        with storage_errors("update reservation"):
            try:
                self.table.update_item(
                    Key={"PK": pk, "SK": sk},
                    UpdateExpression="SET #status = :status",
                    ConditionExpression=Attr("PK").exists()
                    & Attr("status").eq(expected_status.value),
                    ExpressionAttributeNames={"#status": "status"},
                    ExpressionAttributeValues={":status": reservation.status.value},
                )
            except ClientError as e:
                if is_conditional_check_failed(e):
                    raise OptimisticLockException(
                        f"Reservation status conflict: "
                        f"expected {expected_status.value}, "
                        f"reservation_id={reservation.id}"
                    ) from e
                raise

    def _read_version(self, pk: str) -> int:
        with storage_errors("get ledger version"):
            response = self.table.get_item(
                Key={"PK": pk, "SK": VERSION_SK},
                ConsistentRead=True,
            )
        item = response.get("Item")
        return int(item["version"]) if item else 0

    def _query_overlapping(self, pk: str, stay_period: StayPeriod) -> list[Reservation]:
        """チェックインがクエリのチェックアウトより前、かつ
        チェックアウトがクエリのチェックインより後の CONFIRMED 予約"""
        with storage_errors("query ledger"):
            items = query_all(
                self.table,
                KeyConditionExpression=Key("PK").eq(pk)
                & Key("SK").between(
                    RESERVATION_SK_PREFIX,
                    f"{RESERVATION_SK_PREFIX}{stay_period.check_out.isoformat()}",
                ),
                FilterExpression=Attr("check_out_date").gt(
                    stay_period.check_in.isoformat()
                )
                & Attr("status").eq(ReservationStatus.CONFIRMED.value),
                ConsistentRead=True,
            )
        return [self._to_entity(item) for item in items]

    def _commit(self, reservation: Reservation, pk: str, version: int) -> None:
        sk = _reservation_sk(reservation.stay_period.check_in, reservation.id)
        item = self._to_item(reservation, pk, sk)
        transact_items = [
            {
                "Update": {
                    "TableName": self.table_name,
                    "Key": {"PK": pk, "SK": VERSION_SK},
                    "UpdateExpression": "SET #version = :next",
                    "ConditionExpression": (
                        "attribute_not_exists(#version) OR #version = :expected"
                    ),
                    "ExpressionAttributeNames": {"#version": "version"},
                    "ExpressionAttributeValues": {
                        ":expected": version,
                        ":next": version + 1,
                    },
                }
            },
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": item,
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            },
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": {
                        "PK": f"RESERVATION#{reservation.id}",
                        "SK": POINTER_SK,
                        "entity_type": "RESERVATION_POINTER",
                        "ledger_pk": pk,
                        "ledger_sk": sk,
                    },
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            },
        ]

        with storage_errors("commit reservation"):
            try:
                self.client.transact_write_items(TransactItems=transact_items)
            except ClientError as e:
                if error_code(e) != "TransactionCanceledException":
                    raise
                codes = [
                    reason.get("Code", "None")
                    for reason in e.response.get("CancellationReasons", [])
                ]
                if codes and codes[0] in _CONFLICT_CODES:
                    raise _VersionConflict() from e
                if "ConditionalCheckFailed" in codes[1:]:
                    raise DuplicateResourceException(
                        f"Reservation already exists: {reservation.id}"
                    ) from e
                raise

    def _to_item(self, reservation: Reservation, pk: str, sk: str) -> dict:
        """予約エンティティを DynamoDB アイテムに変換する（CONFIRMED で書き込む）"""
        created_at = reservation.created_at.isoformat()
        return {
            "PK": pk,
            "SK": sk,
            "entity_type": "RESERVATION",
            "reservation_id": str(reservation.id),
            "hotel_id": str(reservation.hotel_id),
            "room_type_id": str(reservation.room_type_id),
            "check_in_date": reservation.stay_period.check_in.isoformat(),
            "check_out_date": reservation.stay_period.check_out.isoformat(),
            "room_count": reservation.room_count,
            "guest_count": reservation.guest_count,
            "unit_price_amount": str(reservation.unit_price.amount),
            "total_price_amount": str(reservation.total_price.amount),
            "price_currency": str(reservation.total_price.currency),
            "status": ReservationStatus.CONFIRMED.value,
            "user_id": str(reservation.user_id),
            "created_at": created_at,
            "GSI1PK": f"USER#{reservation.user_id}",
            "GSI1SK": f"{created_at}#{reservation.id}",
        }

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            room_type_id=RoomTypeId(value=item["room_type_id"]),
            stay_period=StayPeriod.from_strings(
                item["check_in_date"], item["check_out_date"]
            ),
            room_count=int(item["room_count"]),
            guest_count=int(item["guest_count"]),
            unit_price=Money.of(item["unit_price_amount"], item["price_currency"]),
            total_price=Money.of(item["total_price_amount"], item["price_currency"]),
            user_id=UserId(value=item["user_id"]),
            created_at=datetime.fromisoformat(item["created_at"]),
            status=ReservationStatus(item["status"]),
        )
