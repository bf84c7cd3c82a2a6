"""Tests for error reporters and the subject-under-test context."""

import typing

import pytest

from fluentcheck.reporting import (
    DEFAULT_REPORTER,
    CollectingReporter,
    ErrorReporter,
    ExceptionReporter,
    FluentCheckError,
)
from fluentcheck.sut import FluentSut


def test_exception_reporter_raises_with_verbatim_message():
    with pytest.raises(FluentCheckError) as exc_info:
        ExceptionReporter().report_error("line one\nline two")
    assert exc_info.value.message == "line one\nline two"
    assert str(exc_info.value) == "line one\nline two"


def test_reporters_satisfy_protocol():
    assert isinstance(ExceptionReporter(), ErrorReporter)
    assert isinstance(CollectingReporter(), ErrorReporter)


def test_collecting_reporter_records_in_order():
    reporter = CollectingReporter()
    reporter.report_error("first")
    reporter.report_error("second")
    assert reporter.messages == ["first", "second"]
    assert reporter.failed is True


def test_collecting_reporter_without_failures_does_not_raise():
    reporter = CollectingReporter()
    reporter.raise_if_failed()
    assert reporter.failed is False


def test_collecting_reporter_raises_combined_message():
    reporter = CollectingReporter()
    reporter.report_error("first")
    reporter.report_error("second")
    with pytest.raises(FluentCheckError) as exc_info:
        reporter.raise_if_failed()
    assert exc_info.value.message == "2 check(s) failed:\n\n[1] first\n\n[2] second"


def test_collecting_reporter_logs(caplog):
    caplog.set_level("INFO", logger="fluentcheck")
    CollectingReporter().report_error("oops")
    assert "Collected check failure #1" in caplog.text


# --- FluentSut ---


def test_sut_defaults():
    sut = FluentSut(5)
    assert sut.value == 5
    assert sut.negated is False
    assert sut.sut_name is None
    assert sut.reporter is DEFAULT_REPORTER
    assert sut.value_type is int


def test_sut_value_is_read_only():
    sut = FluentSut([1])
    with pytest.raises(AttributeError):
        sut.value = [2]


def test_sut_negated_is_settable():
    sut = FluentSut(5, negated=True)
    assert sut.negated is True
    sut.negated = False
    assert sut.negated is False
    sut.negate()
    assert sut.negated is True


def test_sut_keeps_its_own_reporter():
    reporter = CollectingReporter()
    assert FluentSut(1, reporter).reporter is reporter


def test_fork_resets_negation_and_keeps_the_rest():
    reporter = CollectingReporter()
    sut = FluentSut("v", reporter, negated=True, sut_name="name", value_type=object)
    forked = sut.fork()
    assert forked is not sut
    assert forked.value == "v"
    assert forked.negated is False
    assert forked.sut_name == "name"
    assert forked.reporter is reporter
    assert forked.value_type is object
    assert forked.settings is sut.settings


def test_build_short_message_fills_placeholders():
    msg = FluentSut(1).build_short_message("The {0} vs the {1}.")
    assert msg.header == "The checked value vs the expected value."
    assert msg.subject_label == "checked value"


def test_exception_reporter_is_typed_as_never_returning():
    hints = typing.get_type_hints(ExceptionReporter.report_error)
    assert hints["return"] is typing.NoReturn
