"""Check evaluation: predicate, negation, then message and report on failure."""

from __future__ import annotations

import logging
from typing import Any, Callable

from fluentcheck.equality import fluent_equals_as
from fluentcheck.messages import FluentMessage, fill_equality_error_message
from fluentcheck.sut import Checker

logger = logging.getLogger(__name__)

DIFFERENT_TEMPLATE = "The {0} is different from the {1}."
EQUAL_TEMPLATE = "The {0} is equal to the {1} whereas it must not."

MessageFiller = Callable[[FluentMessage, bool], Any]


def execute(
    sut: Checker,
    predicate: Callable[[Any], Any],
    positive_template: str,
    negated_template: str,
    fill: MessageFiller | None = None,
) -> None:
    """Run *predicate* against the subject and report if the check fails.

    The check passes when the predicate result differs from ``sut.negated``.
    On failure the template matching the negation state heads the message and
    *fill* (called with the message and the negation flag) adds the value
    blocks; by default the checked value alone is shown.
    """
    matches = bool(predicate(sut.value))
    if matches != sut.negated:
        return

    template = negated_template if sut.negated else positive_template
    msg = sut.build_short_message(template)
    if fill is not None:
        fill(msg, sut.negated)
    else:
        msg.on(sut.value)

    message = msg.render()
    logger.debug(f"Check failed (negated={sut.negated}): {msg.header}")
    sut.reporter.report_error(message)


def _equals(sut: Checker, expected: Any) -> Callable[[Any], bool]:
    value_type = getattr(sut, "value_type", type(sut.value))
    return lambda value: fluent_equals_as(value, expected, value_type)


def is_equal_to(sut: Checker, expected: Any) -> None:
    """Fail unless the subject is fluently equal to *expected*."""
    execute(
        sut,
        _equals(sut, expected),
        DIFFERENT_TEMPLATE,
        EQUAL_TEMPLATE,
        fill=lambda msg, negated: fill_equality_error_message(
            msg, sut.value, expected, negated
        ),
    )


def is_not_equal_to(sut: Checker, expected: Any) -> None:
    """Fail if the subject is fluently equal to *expected*."""
    equals = _equals(sut, expected)
    execute(
        sut,
        lambda value: not equals(value),
        EQUAL_TEMPLATE,
        DIFFERENT_TEMPLATE,
        fill=lambda msg, negated: fill_equality_error_message(
            msg, sut.value, expected, not negated
        ),
    )
