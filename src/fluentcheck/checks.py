"""Fluent entry points: ``check_that(value).is_equal_to(expected)``."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Callable, Generic, TypeVar

from fluentcheck import logic
from fluentcheck.config import FluentSettings
from fluentcheck.reporting import CollectingReporter, ErrorReporter
from fluentcheck.sut import FluentSut

T = TypeVar("T")


class CheckLink(Generic[T]):
    """Returned by every check so further checks can be chained with ``and_``."""

    def __init__(self, sut: FluentSut[T]):
        self.sut = sut

    @property
    def and_(self) -> FluentCheck[T]:
        return FluentCheck(self.sut.fork())


class FluentCheck(Generic[T]):
    def __init__(self, sut: FluentSut[T]):
        self.sut = sut

    @property
    def not_(self) -> FluentCheck[T]:
        self.sut.negate()
        return self

    @property
    def value(self) -> T:
        return self.sut.value

    def named(self, name: str) -> FluentCheck[T]:
        self.sut.sut_name = name
        return self

    def is_equal_to(self, expected: Any) -> CheckLink[T]:
        logic.is_equal_to(self.sut, expected)
        return CheckLink(self.sut)

    def is_not_equal_to(self, expected: Any) -> CheckLink[T]:
        logic.is_not_equal_to(self.sut, expected)
        return CheckLink(self.sut)

    def matches(
        self,
        predicate: Callable[[T], Any],
        message: str = "The {0} does not match the condition.",
        negated_message: str = "The {0} matches the condition whereas it must not.",
    ) -> CheckLink[T]:
        """Custom check: *predicate* must hold for the subject."""
        logic.execute(self.sut, predicate, message, negated_message)
        return CheckLink(self.sut)


def check_that(
    value: T,
    *,
    name: str | None = None,
    reporter: ErrorReporter | None = None,
    settings: FluentSettings | None = None,
) -> FluentCheck[T]:
    """Start a fluent chain on *value*."""
    return FluentCheck(
        FluentSut(value, reporter, sut_name=name, settings=settings)
    )


class CheckBatch:
    """Builds checks that report to a shared :class:`CollectingReporter`."""

    def __init__(self, settings: FluentSettings | None = None):
        self.reporter = CollectingReporter()
        self.settings = settings

    def that(self, value: T, *, name: str | None = None) -> FluentCheck[T]:
        return check_that(value, name=name, reporter=self.reporter, settings=self.settings)


@contextmanager
def check_all(settings: FluentSettings | None = None) -> Iterator[CheckBatch]:
    """Run every check in the block, then fail once with all messages.

    An exception raised inside the block propagates unchanged and the
    collected failures are dropped.
    """
    batch = CheckBatch(settings)
    yield batch
    batch.reporter.raise_if_failed()
