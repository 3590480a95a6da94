"""resultt - Kotlin-style Result and runCatching for Python"""

__version__ = "0.1.0"

from .exceptions import (
    ErrorType,
    InvalidFailurePayloadError,
    InvalidInstanceError,
    NoPayloadError,
    ResultError,
    ValueIsNullError,
    ValueNotFoundError,
)
from .result import NOTHING, Failure, Result, Success, is_error, run_catching
from .matching import ChainedMatch, when

__all__ = [
    # Result type
    "Result",
    "Success",
    "Failure",
    "NOTHING",
    "run_catching",
    "is_error",
    # Chained matcher
    "ChainedMatch",
    "when",
    # Exceptions
    "ResultError",
    "ErrorType",
    "InvalidFailurePayloadError",
    "InvalidInstanceError",
    "ValueNotFoundError",
    "ValueIsNullError",
    "NoPayloadError",
]
