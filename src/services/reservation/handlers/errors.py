from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.reservation.domain.exception import (
    CancellationWindowClosedException,
    InsufficientAvailabilityException,
    InvalidDateRangeException,
    InvalidPartySizeException,
)
from services.reservation.handlers.response_models import ErrorResponse
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    StorageUnavailableException,
    UnauthorizedException,
)
from services.shared.utils import api_response

# 上から順に isinstance で判定する（サブクラスを先に並べる）
_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (InvalidDateRangeException, 400),
    (InvalidPartySizeException, 400),
    (InsufficientAvailabilityException, 409),
    (CancellationWindowClosedException, 409),
    (ResourceNotFoundException, 404),
    (UnauthorizedException, 403),
    (OptimisticLockException, 409),
    (DuplicateResourceException, 409),
    (StorageUnavailableException, 503),
    (BusinessRuleViolationException, 422),
]


def status_code_for(error: DomainException) -> int:
    for exception_type, status_code in _STATUS_CODES:
        if isinstance(error, exception_type):
            return status_code
    return 400


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return api_response(
        status_code,
        ErrorResponse(
            error_code=error_code,
            message=message,
            details=details,
        ),
    )


def domain_error_response(error: DomainException, logger: Logger) -> dict:
    """ドメイン例外を型付きのエラーレスポンスに変換する"""
    if isinstance(error, StorageUnavailableException):
        logger.exception("Storage unavailable")
    else:
        logger.info(
            "Request rejected",
            extra={"error_code": error.error_code, "reason": str(error)},
        )
    return error_response(status_code_for(error), error.error_code, str(error))


def invalid_request_response(error: ValueError) -> dict:
    """入力の形式エラー（pydantic の検証エラーや識別子の不正）"""
    details = None
    if isinstance(error, ValidationError):
        details = [
            {"loc": list(e["loc"]), "msg": e["msg"]}
            for e in error.errors(include_url=False)
        ]
    message = "Invalid request" if details is not None else str(error)
    return error_response(400, "INVALID_REQUEST", message, details)


def internal_error_response() -> dict:
    return error_response(500, "INTERNAL_ERROR", "Internal server error")
