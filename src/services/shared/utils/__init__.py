from .clock import utc_now, utc_today
from .http_response import api_response
from .logger import get_logger

__all__ = ["api_response", "get_logger", "utc_now", "utc_today"]
