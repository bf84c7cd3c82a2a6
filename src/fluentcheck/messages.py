"""Failure message building.

A :class:`FluentMessage` starts from a one-line header and accumulates
blocks describing the checked and expected values::

    The checked value is different from the expected value.
    The checked value:
        ["abc"] of type: [str]
    The expected value:
        [123] of type: [int]
"""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from typing import Any, Literal

from fluentcheck.config import FluentSettings, get_settings

BlockRole = Literal["checked", "expected", "text"]


@dataclass
class MessageBlock:
    """One section of a failure message.

    Attributes:
        role: "checked" for the subject, "expected" for the reference value,
            "text" for a free-form line.
        label: Heading for value blocks, the line itself for text blocks.
        value: Value to render (value blocks only).
        comparison: Optional qualifier appended to the heading,
            e.g. "different from".
        include_type: Render the value's type name.
        include_hash: Render a hash token for the value.
    """

    role: BlockRole
    label: str
    value: Any = None
    comparison: str | None = None
    include_type: bool = False
    include_hash: bool = False


def value_text(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def type_name(value: Any) -> str:
    cls = type(value)
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def hash_token(value: Any, fmt: str = "hex") -> str:
    """Short token telling apart values that render the same."""
    try:
        token = hash(value)
    except TypeError:
        # Unhashable: fall back to identity
        token = id(value)
    token &= 0xFFFFFFFF
    if fmt == "decimal":
        return str(token)
    return format(token, "08x")


def display_text(value: Any, settings: FluentSettings) -> str:
    """Text shown for a non-None value, cut to ``max_value_length``."""
    text = value_text(value)
    limit = settings.max_value_length
    if limit is None or len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def render_value(
    value: Any,
    settings: FluentSettings | None = None,
    *,
    with_type: bool = False,
    with_hash: bool = False,
) -> str:
    """Render *value* as ``[text] of type: [name] with hash: [token]``."""
    settings = settings if settings is not None else get_settings()
    if value is None:
        return f"[{settings.null_token}]"

    rendered = f"[{display_text(value, settings)}]"
    if with_type:
        rendered += f" of type: [{type_name(value)}]"
    if with_hash:
        rendered += f" with hash: [{hash_token(value, settings.hash_format)}]"
    return rendered


class FluentMessage:
    """Single-use builder for one failure message.

    Blocks are rendered in the order they were added. Once :meth:`render`
    has been called the message is frozen.
    """

    def __init__(
        self,
        header: str,
        subject_label: str | None = None,
        settings: FluentSettings | None = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.header = header
        self.subject_label = subject_label or self.settings.checked_label
        self.blocks: list[MessageBlock] = []
        self._rendered: str | None = None

    def _ensure_open(self) -> None:
        if self._rendered is not None:
            raise RuntimeError("Message has already been rendered")

    def _current(self) -> MessageBlock:
        self._ensure_open()
        if not self.blocks or self.blocks[-1].role == "text":
            raise RuntimeError("No value block to qualify; call on() or expected() first")
        return self.blocks[-1]

    def _append(self, block: MessageBlock) -> FluentMessage:
        self._ensure_open()
        self.blocks.append(block)
        return self

    def on(self, value: Any) -> FluentMessage:
        return self._append(MessageBlock("checked", self.subject_label, value))

    def expected(self, value: Any) -> FluentMessage:
        return self._append(
            MessageBlock("expected", self.settings.expected_label, value)
        )

    def text(self, line: str) -> FluentMessage:
        return self._append(MessageBlock("text", line))

    def comparison(self, label: str) -> FluentMessage:
        self._current().comparison = label
        return self

    def with_type(self, flag: bool = True) -> FluentMessage:
        self._current().include_type = flag
        return self

    def with_hash_code(self, flag: bool = True) -> FluentMessage:
        self._current().include_hash = flag
        return self

    @property
    def and_(self) -> FluentMessage:
        return self

    def render(self) -> str:
        if self._rendered is not None:
            return self._rendered

        lines = [self.header]
        for block in self.blocks:
            if block.role == "text":
                lines.append(block.label)
                continue
            heading = f"The {block.label}:"
            if block.comparison:
                heading = f"{heading} {block.comparison}"
            lines.append(heading)
            lines.append(
                "\t"
                + render_value(
                    block.value,
                    self.settings,
                    with_type=block.include_type,
                    with_hash=block.include_hash,
                )
            )

        self._rendered = "\n".join(lines)
        return self._rendered

    def __str__(self) -> str:
        return self.render()


def fill_equality_error_message(
    msg: FluentMessage, instance: Any, expected: Any, negated: bool
) -> FluentMessage:
    """Add the value blocks explaining a failed equality check.

    *negated* means the values were equal whereas they must not be: only the
    expected value is shown. Otherwise types are shown when they differ (or
    one side is None) and hash tokens when both sides display the same text
    (after truncation).
    """
    if negated:
        return msg.expected(expected).comparison("different from").with_type()

    with_type = (
        instance is None or expected is None or type(instance) is not type(expected)
    )
    with_hash = (
        instance is not None
        and expected is not None
        and type(instance) is type(expected)
        and display_text(instance, msg.settings) == display_text(expected, msg.settings)
    )

    return (
        msg.on(instance)
        .with_type(with_type)
        .with_hash_code(with_hash)
        .and_.expected(expected)
        .with_type(with_type)
        .with_hash_code(with_hash)
    )
