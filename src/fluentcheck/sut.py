"""Subject under test: the state threaded through a fluent chain."""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

from fluentcheck.config import FluentSettings, get_settings
from fluentcheck.messages import FluentMessage
from fluentcheck.reporting import DEFAULT_REPORTER, ErrorReporter

T = TypeVar("T")


class Checker(Protocol):
    """What check logic needs from a context.

    Any object exposing these members can be checked; it does not have to be
    a :class:`FluentSut`.
    """

    @property
    def value(self) -> Any: ...

    @property
    def negated(self) -> bool: ...

    @property
    def reporter(self) -> ErrorReporter: ...

    def build_short_message(self, template: str) -> FluentMessage: ...


class FluentSut(Generic[T]):
    """Holds the value being checked, the negation flag and the reporter.

    A context belongs to a single assertion expression and is not meant to be
    shared between threads.
    """

    def __init__(
        self,
        value: T,
        reporter: ErrorReporter | None = None,
        negated: bool = False,
        sut_name: str | None = None,
        value_type: type | None = None,
        settings: FluentSettings | None = None,
    ):
        self._value = value
        self._reporter = reporter if reporter is not None else DEFAULT_REPORTER
        self._negated = bool(negated)
        self.sut_name = sut_name
        self.value_type = value_type if value_type is not None else type(value)
        self.settings = settings if settings is not None else get_settings()

    @property
    def value(self) -> T:
        return self._value

    @property
    def reporter(self) -> ErrorReporter:
        return self._reporter

    @property
    def negated(self) -> bool:
        return self._negated

    @negated.setter
    def negated(self, flag: bool) -> None:
        self._negated = bool(flag)

    def negate(self) -> FluentSut[T]:
        self._negated = not self._negated
        return self

    def fork(self) -> FluentSut[T]:
        """New non-negated context on the same subject, name and reporter."""
        return FluentSut(
            self._value,
            self._reporter,
            negated=False,
            sut_name=self.sut_name,
            value_type=self.value_type,
            settings=self.settings,
        )

    def build_short_message(self, template: str) -> FluentMessage:
        """Start a failure message from a template with ``{0}``/``{1}`` slots.

        ``{0}`` is the subject label (the sut name when set), ``{1}`` the
        expected-value label.
        """
        subject_label = self.sut_name or self.settings.checked_label
        header = template.format(subject_label, self.settings.expected_label)
        return FluentMessage(header, subject_label=subject_label, settings=self.settings)

    def __repr__(self) -> str:
        return (
            f"FluentSut(value={self._value!r}, negated={self._negated}, "
            f"sut_name={self.sut_name!r})"
        )
