"""Tests for custom exceptions."""

import pytest
from resultt.exceptions import (
    ErrorType,
    InvalidFailurePayloadError,
    InvalidInstanceError,
    NoPayloadError,
    ResultError,
    ValueIsNullError,
    ValueNotFoundError,
)


def test_base_exception():
    """Test base ResultError."""
    error = ResultError(
        "Test error",
        error_type=ErrorType.INVALID_INSTANCE,
        details={"operation": "map"},
    )

    assert error.message == "Test error"
    assert error.name == "ResultError"
    assert error.error_type == ErrorType.INVALID_INSTANCE
    assert error.details["operation"] == "map"
    assert "invalid_instance" in str(error)
    assert "Test error" in str(error)


def test_exception_to_dict():
    """Test exception serialization."""
    error = InvalidInstanceError("recover", instance=object())
    error_dict = error.to_dict()

    assert error_dict["name"] == "InvalidInstanceError"
    assert error_dict["error_type"] == "invalid_instance"
    assert "recover" in error_dict["message"]
    assert error_dict["details"]["operation"] == "recover"
    assert error_dict["details"]["instance_type"] == "object"


def test_invalid_failure_payload_error():
    """Test InvalidFailurePayloadError records the payload type."""
    error = InvalidFailurePayloadError(42)

    assert error.error_type == ErrorType.INVALID_FAILURE_PAYLOAD
    assert error.details["payload_type"] == "int"
    assert "payload_type=int" in str(error)


def test_invalid_instance_error_without_instance():
    """Test InvalidInstanceError without an instance."""
    error = InvalidInstanceError("fold")

    assert error.details == {"operation": "fold"}


def test_filter_errors_default_messages():
    """Test default messages of the filter errors."""
    assert ValueNotFoundError().message == "The value is not found."
    assert ValueNotFoundError().error_type == ErrorType.VALUE_NOT_FOUND
    assert ValueIsNullError().message == "The value is null"
    assert ValueIsNullError().error_type == ErrorType.VALUE_IS_NULL
    assert NoPayloadError().error_type == ErrorType.NO_PAYLOAD


def test_exception_string_without_details():
    """Test string formatting when there are no details."""
    assert str(ValueIsNullError()) == "[value_is_null] The value is null"


def test_error_hierarchy():
    """Test exception hierarchy."""
    for cls in (
        InvalidFailurePayloadError,
        InvalidInstanceError,
        ValueNotFoundError,
        ValueIsNullError,
        NoPayloadError,
    ):
        assert issubclass(cls, ResultError)


def test_exception_can_be_raised():
    """Test that exceptions can be raised and caught."""
    with pytest.raises(ResultError) as exc_info:
        raise ValueNotFoundError("nothing here")

    assert exc_info.value.error_type == ErrorType.VALUE_NOT_FOUND
    assert exc_info.value.message == "nothing here"
