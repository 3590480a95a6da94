"""Custom exceptions for resultt.

Every error raised or synthesized by the library derives from ResultError,
which carries a human-readable message, an ErrorType and optional details.
"""

from enum import Enum
from typing import Any, Optional


class ErrorType(Enum):
    """Kinds of errors produced by the library."""

    # Construction errors
    INVALID_FAILURE_PAYLOAD = "invalid_failure_payload"

    # Combinator errors
    INVALID_INSTANCE = "invalid_instance"
    NO_PAYLOAD = "no_payload"

    # Errors held by failures produced from filtering
    VALUE_NOT_FOUND = "value_not_found"
    VALUE_IS_NULL = "value_is_null"

    UNKNOWN_ERROR = "unknown_error"


class ResultError(Exception):
    """Base exception for all resultt errors.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum
        details: Optional dict with additional error context
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "name": self.name,
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidFailurePayloadError(ResultError):
    """Raised when a Failure is built around something that is not an exception."""

    def __init__(self, payload: Any):
        super().__init__(
            "Failure must hold an exception instance",
            ErrorType.INVALID_FAILURE_PAYLOAD,
            {"payload_type": type(payload).__name__},
        )


class InvalidInstanceError(ResultError):
    """Raised when a combinator meets a result it cannot classify."""

    def __init__(self, operation: str, instance: Any = None):
        details = {"operation": operation}
        if instance is not None:
            details["instance_type"] = type(instance).__name__
        super().__init__(
            f"'{operation}' cannot apply for the value of this instance",
            ErrorType.INVALID_INSTANCE,
            details,
        )


class ValueNotFoundError(ResultError):
    """Held by the failure that filter() returns when nothing passes."""

    def __init__(self, message: str = "The value is not found."):
        super().__init__(message, ErrorType.VALUE_NOT_FOUND)


class ValueIsNullError(ResultError):
    """Held by the failure that filter_not_null() returns."""

    def __init__(self, message: str = "The value is null"):
        super().__init__(message, ErrorType.VALUE_IS_NULL)


class NoPayloadError(ResultError):
    """Raised by get_or_throw() on a success that carries no payload."""

    def __init__(self, message: str = "Result holds no payload to extract"):
        super().__init__(message, ErrorType.NO_PAYLOAD)
