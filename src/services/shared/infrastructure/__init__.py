from .dynamodb import (
    error_code,
    is_conditional_check_failed,
    query_all,
    storage_errors,
)

__all__ = ["error_code", "is_conditional_check_failed", "query_all", "storage_errors"]
