import json

from pydantic import BaseModel


def api_response(status_code: int, body: BaseModel | dict) -> dict:
    """API Gateway (Lambda Proxy Integration) のレスポンス形式を生成する

    pydantic モデルは None のフィールドを除いて JSON に変換する。
    """
    if isinstance(body, BaseModel):
        payload = body.model_dump_json(exclude_none=True)
    else:
        payload = json.dumps(body, default=str)
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": payload,
    }
