"""Error reporters: how a failed check is signalled."""

from __future__ import annotations

import logging
from typing import NoReturn, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class FluentCheckError(AssertionError):
    """Raised when a fluent check fails. Carries the rendered message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@runtime_checkable
class ErrorReporter(Protocol):
    def report_error(self, message: str) -> None: ...


class ExceptionReporter:
    """Default reporter: every failure raises :class:`FluentCheckError`."""

    def report_error(self, message: str) -> NoReturn:
        raise FluentCheckError(message)


class CollectingReporter:
    """Records failures instead of raising, so several checks can run."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report_error(self, message: str) -> None:
        logger.info(f"Collected check failure #{len(self.messages) + 1}")
        self.messages.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.messages)

    def raise_if_failed(self) -> None:
        """Raise one FluentCheckError listing every collected failure."""
        if not self.messages:
            return
        count = len(self.messages)
        header = f"{count} check(s) failed:"
        body = "\n\n".join(
            f"[{i}] {message}" for i, message in enumerate(self.messages, start=1)
        )
        raise FluentCheckError(f"{header}\n\n{body}")


DEFAULT_REPORTER: ErrorReporter = ExceptionReporter()
