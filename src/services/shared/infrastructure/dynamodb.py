from contextlib import contextmanager
from typing import Iterator

from botocore.exceptions import BotoCoreError, ClientError

from services.shared.domain.exception import StorageUnavailableException


def error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def is_conditional_check_failed(error: ClientError) -> bool:
    return error_code(error) == "ConditionalCheckFailedException"


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """boto3 の通信・サービスエラーを StorageUnavailableException に変換する

    条件付き書き込みの失敗など、ドメインの意味を持つエラーは
    ブロック内で先に処理しておくこと。
    """
    try:
        yield
    except ClientError as e:
        raise StorageUnavailableException(
            f"DynamoDB {operation} failed: {error_code(e) or e}"
        ) from e
    except BotoCoreError as e:
        raise StorageUnavailableException(f"DynamoDB {operation} failed: {e}") from e


def query_all(table, **kwargs) -> list[dict]:
    """ページングを辿って Query の全件を取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key
