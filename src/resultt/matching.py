"""Chained predicate matcher.

Expresses "first matching predicate wins, else default" as an expression:

    label = (
        when(n)
        .on(lambda v: v < 0, lambda: "negative")
        .on(lambda v: v == 0, lambda: "zero")
        .otherwise(lambda: "positive")
    )
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")


@dataclass(frozen=True)
class ChainedMatch(Generic[T]):
    """State of a matcher chain.

    An unmatched chain still evaluates predicates against ``subject``.
    A matched chain carries the value of the first producer whose
    predicate held and ignores every later ``on`` call.
    """

    subject: T
    matched: bool = False
    value: Any = None

    def on(
        self, predicate: Callable[[T], bool], producer: Callable[[], A]
    ) -> "ChainedMatch[T]":
        if self.matched:
            return self
        if predicate(self.subject):
            return ChainedMatch(self.subject, matched=True, value=producer())
        return self

    def otherwise(self, default: Callable[[], A]) -> Any:
        """Finish the chain, calling ``default`` only if nothing matched."""
        if self.matched:
            return self.value
        return default()


def when(subject: T) -> ChainedMatch[T]:
    """Start an unmatched chain over ``subject``."""
    return ChainedMatch(subject)
