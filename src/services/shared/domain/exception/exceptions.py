class DomainException(Exception):
    """ドメイン層で発生する基底例外

    呼び出し側が error_code でエラー種別を判別できるようにする。
    """

    error_code: str = "DOMAIN_ERROR"


class ResourceNotFoundException(DomainException):
    """ホテル・客室タイプ・予約が見つからない場合"""

    error_code = "NOT_FOUND"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    error_code = "DUPLICATE_RESOURCE"


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    error_code = "CONFLICT"


class UnauthorizedException(DomainException):
    """操作者に権限がない場合"""

    error_code = "UNAUTHORIZED"


class StorageUnavailableException(DomainException):
    """永続化層（DynamoDB 等）に到達できない場合

    リクエスト単位で致命的なエラー。再試行するかは呼び出し側が判断する。
    """

    error_code = "STORAGE_UNAVAILABLE"
