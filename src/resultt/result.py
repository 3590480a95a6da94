"""Result type for composing fallible computations.

A Result is either a Success, optionally carrying a payload, or a Failure
carrying the exception that ended the computation. Combinators such as
map, recover and filter build new results without try/except at each
call site; only run_catching, map_catching and recover_catching absorb
exceptions raised by the callbacks they run.

Example:
    port = (
        run_catching(lambda: os.environ["PORT"])
        .map_catching(int)
        .filter(lambda p: 0 < p < 65536)
        .get_or_default(8080)
    )
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .exceptions import (
    InvalidFailurePayloadError,
    InvalidInstanceError,
    NoPayloadError,
    ValueIsNullError,
    ValueNotFoundError,
)
from .matching import when

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class _Nothing:
    """Marker for a success that carries no payload."""

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self):
        # Copies and unpickled results must still see the module-level marker.
        return "NOTHING"


NOTHING: Any = _Nothing()


def is_error(obj: Any) -> bool:
    """Return True if ``obj`` may be held by a Failure.

    Only exception instances qualify. Objects that merely expose ``name``
    and ``message`` attributes are rejected, since they cannot be raised.
    """
    return isinstance(obj, BaseException)


class Result(Generic[T]):
    """Base class for Success and Failure.

    Calling ``Result()`` or ``Result(value)`` builds a Success. Methods that
    depend on the variant are defined by the two subclasses; the versions
    here raise InvalidInstanceError for anything that is neither.
    """

    def __new__(cls, *args, **kwargs):
        if cls is Result:
            cls = Success
        return super().__new__(cls)

    @staticmethod
    def run_catching(supplier: Callable[[], T]) -> "Result[T]":
        return run_catching(supplier)

    @classmethod
    def failure(cls, error: BaseException) -> "Failure[Any]":
        return Failure(error)

    def _unsupported(self, operation: str):
        raise InvalidInstanceError(operation, self)

    def is_failure(self) -> bool:
        return self._unsupported("is_failure")

    def is_success(self) -> bool:
        return not self.is_failure()

    @property
    def has_value(self) -> bool:
        """True for a success that carries a payload."""
        return self._unsupported("has_value")

    def on_failure(
        self, consumer: Optional[Callable[[BaseException], None]] = None
    ) -> "Result[T]":
        return self._unsupported("on_failure")

    def on_success(self, consumer: Callable[[T], None]) -> "Result[T]":
        return self._unsupported("on_success")

    def fold(
        self,
        on_success: Callable[..., R],
        on_failure: Callable[[BaseException], R],
    ) -> R:
        """Collapse this result into a single value.

        ``on_success`` gets the payload, or no argument at all when the
        success carries none. ``on_failure`` gets the held exception.
        """
        return self._unsupported("fold")

    def map(self, transform: Callable[..., R]) -> "Result[R]":
        return self._unsupported("map")

    def map_catching(self, transform: Callable[..., R]) -> "Result[R]":
        return self._unsupported("map_catching")

    def recover(self, transform: Callable[[BaseException], R]) -> "Result[R]":
        return self._unsupported("recover")

    def recover_catching(
        self, transform: Callable[[BaseException], R]
    ) -> "Result[R]":
        return self._unsupported("recover_catching")

    def filter(self, predicate: Callable[[T], bool]) -> "Result[T]":
        return self._unsupported("filter")

    def filter_not_null(self) -> "Result[T]":
        return self._unsupported("filter_not_null")

    def get_or_throw(self, error: Optional[BaseException] = None) -> T:
        return self._unsupported("get_or_throw")

    def get_or_default(self, else_value: T) -> T:
        return self._unsupported("get_or_default")

    def and_lastly(self, consumer: Callable[[], None]) -> "Result[T]":
        """Run ``consumer`` for its side effect and return this result as is."""
        consumer()
        return self

    def get_or_else(self, on_failure: Callable[["Result[T]"], R]) -> Any:
        """Return the payload, or ``on_failure(self)`` for a failure.

        Note that ``on_failure`` receives this whole result rather than the
        held exception; use fold() to get at the exception directly.
        """
        return self.fold(
            lambda value=None: value,
            lambda _error: on_failure(self),
        )

    def get_or_null(self) -> Optional[T]:
        return (
            when(self)
            .on(lambda r: r.is_success(), lambda: self.get_or_default(None))
            .otherwise(lambda: None)
        )


@dataclass(frozen=True)
class Success(Result[T]):
    """Represents a successful result, with or without a payload."""

    value: Any = NOTHING

    def is_failure(self) -> bool:
        return False

    @property
    def has_value(self) -> bool:
        return self.value is not NOTHING

    def on_failure(self, consumer=None) -> "Success[T]":
        return self

    def on_success(self, consumer: Callable[[T], None]) -> "Success[T]":
        if self.has_value:
            consumer(self.value)
        return self

    def fold(self, on_success, on_failure):
        if self.has_value:
            return on_success(self.value)
        return on_success()

    def map(self, transform: Callable[..., R]) -> "Success[R]":
        if self.has_value:
            return Success(transform(self.value))
        return Success(transform())

    def map_catching(self, transform: Callable[..., R]) -> "Result[R]":
        value = self.value if self.has_value else None
        return run_catching(lambda: transform(value))

    def recover(self, transform) -> "Success[T]":
        if not self.has_value:
            raise InvalidInstanceError("recover", self)
        return Success(self.value)

    def recover_catching(self, transform) -> "Success[T]":
        if not self.has_value:
            raise InvalidInstanceError("recover_catching", self)
        return Success(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> "Result[T]":
        if not self.has_value:
            return _value_not_found()
        return (
            when(self.value)
            .on(predicate, lambda: Success(self.value))
            .otherwise(_value_not_found)
        )

    def filter_not_null(self) -> "Result[T]":
        if self.has_value and self.value is not None:
            return Success(self.value)
        return _value_is_null()

    def get_or_throw(self, error: Optional[BaseException] = None) -> T:
        if self.has_value:
            return self.value
        if error is not None:
            raise error
        raise NoPayloadError()

    def get_or_default(self, else_value: T) -> T:
        if self.has_value:
            return self.value
        return else_value

    def __str__(self) -> str:
        if self.has_value:
            return f"Success({self.value!r})"
        return "Success()"


@dataclass(frozen=True)
class Failure(Result[T]):
    """Represents a failed result holding the exception that caused it."""

    error: BaseException

    def __post_init__(self):
        if not is_error(self.error):
            raise InvalidFailurePayloadError(self.error)

    @property
    def value(self) -> BaseException:
        return self.error

    def _checked_error(self, operation: str) -> BaseException:
        if not is_error(self.error):
            raise InvalidInstanceError(operation, self)
        return self.error

    def is_failure(self) -> bool:
        return True

    @property
    def has_value(self) -> bool:
        return False

    def on_failure(
        self, consumer: Optional[Callable[[BaseException], None]] = None
    ) -> "Failure[T]":
        error = self._checked_error("on_failure")
        if consumer is not None:
            consumer(error)
        return self

    def on_success(self, consumer) -> "Failure[T]":
        return self

    def fold(self, on_success, on_failure):
        return on_failure(self.error)

    def map(self, transform) -> "Failure[Any]":
        return Failure(self._checked_error("map"))

    def map_catching(self, transform) -> "Failure[Any]":
        return Failure(self._checked_error("map_catching"))

    def recover(self, transform: Callable[[BaseException], R]) -> "Success[R]":
        return Success(transform(self._checked_error("recover")))

    def recover_catching(
        self, transform: Callable[[BaseException], R]
    ) -> "Result[R]":
        error = self._checked_error("recover_catching")
        return run_catching(lambda: transform(error))

    def filter(self, predicate) -> "Failure[T]":
        # Nothing to test the predicate against.
        return self

    def filter_not_null(self) -> "Failure[T]":
        # Replaces the held error: a failure never has a non-null value.
        return _value_is_null()

    def get_or_throw(self, error: Optional[BaseException] = None):
        """Raise ``error`` if given, otherwise the held exception itself.

        The held exception object is re-raised as is, so every call adds
        frames to its ``__traceback__`` and may set its ``__context__``.
        """
        if error is not None:
            raise error
        raise self.error

    def get_or_default(self, else_value: T) -> T:
        return else_value

    def __str__(self) -> str:
        return f"Failure({self.error!r})"


def run_catching(supplier: Callable[[], T]) -> Result[T]:
    """Call ``supplier`` and wrap its return value or the exception it raised."""
    try:
        return Success(supplier())
    except Exception as e:
        logger.debug(f"Captured {type(e).__name__} in run_catching: {e}")
        return Failure(e)


def _value_not_found() -> Failure[Any]:
    logger.debug("filter predicate rejected the value")
    return Failure(ValueNotFoundError())


def _value_is_null() -> Failure[Any]:
    logger.debug("filter_not_null found no value")
    return Failure(ValueIsNullError())
