"""Fluent assertions with precise failure messages."""

from fluentcheck.checks import CheckBatch, CheckLink, FluentCheck, check_all, check_that
from fluentcheck.config import FluentSettings
from fluentcheck.equality import Equatable, fluent_equals, fluent_equals_as
from fluentcheck.messages import FluentMessage
from fluentcheck.reporting import (
    CollectingReporter,
    ErrorReporter,
    ExceptionReporter,
    FluentCheckError,
)
from fluentcheck.sut import Checker, FluentSut
from fluentcheck.verbose import disable_check_logging, enable_check_logging

__all__ = [
    "CheckBatch",
    "CheckLink",
    "Checker",
    "CollectingReporter",
    "Equatable",
    "ErrorReporter",
    "ExceptionReporter",
    "FluentCheck",
    "FluentCheckError",
    "FluentMessage",
    "FluentSettings",
    "FluentSut",
    "check_all",
    "check_that",
    "disable_check_logging",
    "enable_check_logging",
    "fluent_equals",
    "fluent_equals_as",
]
