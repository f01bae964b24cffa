from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def mock_table():
    return MagicMock()


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def mock_boto3(mock_table, mock_client):
    """boto3.resource("dynamodb") の戻り値を組み立てたモック"""
    boto3 = MagicMock()
    resource = boto3.resource.return_value
    resource.Table.return_value = mock_table
    resource.meta.client = mock_client
    return boto3


@pytest.fixture
def client_error():
    """ClientError を生成する Factory fixture"""

    def _factory(code: str, reasons: list[str] | None = None) -> ClientError:
        response = {"Error": {"Code": code, "Message": code}}
        if reasons is not None:
            response["CancellationReasons"] = [{"Code": r} for r in reasons]
        return ClientError(response, "Operation")

    return _factory
