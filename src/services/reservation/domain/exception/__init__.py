from .exceptions import (
    CancellationWindowClosedException,
    InsufficientAvailabilityException,
    InvalidDateRangeException,
    InvalidPartySizeException,
)

__all__ = [
    "CancellationWindowClosedException",
    "InsufficientAvailabilityException",
    "InvalidDateRangeException",
    "InvalidPartySizeException",
]
