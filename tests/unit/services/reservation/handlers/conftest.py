import json
import os
from dataclasses import dataclass

import pytest

# ハンドラモジュールは import 時に DynamoDB リソースを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "reservations-test")


@dataclass
class FakeLambdaContext:
    function_name: str = "reservation-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:reservation-test"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (Lambda Proxy Integration) のイベントを生成する Factory fixture"""

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
        http_method: str = "POST",
    ) -> dict:
        return {
            "httpMethod": http_method,
            "path": "/",
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body) if body is not None else None,
            "pathParameters": path_parameters,
            "queryStringParameters": query_string_parameters,
            "requestContext": {"requestId": "req-001"},
            "isBase64Encoded": False,
        }

    return _factory
