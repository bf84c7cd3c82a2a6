"""Value types shared by the tests."""

from __future__ import annotations

from fluentcheck.equality import Equatable


class Id(Equatable):
    """Value equality by wrapped integer, no ``__eq__`` override."""

    def __init__(self, value: int):
        self.value = value

    def equals(self, other) -> bool:
        return other is not None and self.value == other.value

    def __str__(self) -> str:
        return f"Id({self.value})"


class SubId(Id):
    pass


class Tag(Equatable):
    """Always prints as X; equal only when keys match."""

    def __init__(self, key: str):
        self.key = key

    def equals(self, other) -> bool:
        return self.key == other.key

    def __str__(self) -> str:
        return "X"


class Stubborn(Equatable):
    """``__eq__`` says yes, the contract says no."""

    def equals(self, other) -> bool:
        return False

    def __eq__(self, other) -> bool:
        return True

    __hash__ = object.__hash__


class Feet:
    def __init__(self, value: float):
        self.value = value


class Meters(Equatable, equatable_with=(Feet,)):
    def __init__(self, value: float):
        self.value = value

    def equals(self, other) -> bool:
        if isinstance(other, Feet):
            return self.value == other.value * 0.3048
        return isinstance(other, Meters) and self.value == other.value


class Plain:
    """No custom equality, renders as X."""

    def __str__(self) -> str:
        return "X"
