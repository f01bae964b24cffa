from services.shared.domain.exception import BusinessRuleViolationException


class InvalidDateRangeException(BusinessRuleViolationException):
    """日付の形式不正、過去日のチェックイン、チェックアウト <= チェックイン"""

    error_code = "INVALID_DATE_RANGE"


class InvalidPartySizeException(BusinessRuleViolationException):
    """室数・人数が不正、または定員を超過している"""

    error_code = "INVALID_PARTY_SIZE"


class InsufficientAvailabilityException(BusinessRuleViolationException):
    """受付時点の空室数が要求室数に満たない"""

    error_code = "INSUFFICIENT_AVAILABILITY"


class CancellationWindowClosedException(BusinessRuleViolationException):
    """無料キャンセルの受付期限を過ぎている"""

    error_code = "CANCELLATION_WINDOW_CLOSED"
