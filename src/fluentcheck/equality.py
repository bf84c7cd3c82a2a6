"""Equality resolution for fluent checks.

A value is compared with its expected counterpart through its own typed
equality contract when it has one (see :class:`Equatable`), and through
Python's default equality otherwise.
"""

from __future__ import annotations

import cmath
import math
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

import numpy as np


class Equatable(ABC):
    """Strongly typed equality contract.

    A subclass that defines ``equals`` in its own body is equatable with
    itself (and, through inheritance, with its subclasses). Other accepted
    types can be declared with the ``equatable_with`` class keyword::

        class Meters(Equatable, equatable_with=(Feet,)):
            def equals(self, other): ...

    The contract takes precedence over ``__eq__`` when values are compared
    through :func:`fluent_equals`.
    """

    __equatable_types__: frozenset[type] = frozenset()

    def __init_subclass__(cls, equatable_with: tuple[type, ...] = (), **kwargs: Any):
        super().__init_subclass__(**kwargs)
        accepted: set[type] = set()
        for base in cls.__bases__:
            accepted |= getattr(base, "__equatable_types__", frozenset())
        if "equals" in cls.__dict__:
            accepted.add(cls)
        accepted.update(equatable_with)
        cls.__equatable_types__ = frozenset(accepted)

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Return True if *other* is semantically equal to this value."""


def equatable_types(cls: type) -> frozenset[type]:
    """Return the types whose instances *cls* knows how to compare with."""
    return getattr(cls, "__equatable_types__", frozenset())


@lru_cache(maxsize=1024)
def _has_contract(instance_type: type, expected_type: type) -> bool:
    return any(
        issubclass(expected_type, accepted)
        for accepted in equatable_types(instance_type)
    )


def default_equals(instance: Any, expected: Any) -> bool:
    """Python's default equality, with None, NaN and numpy arrays handled.

    Equality is reflexive: a value always equals itself, and NaN equals NaN.
    """
    if instance is expected:
        return True
    if instance is None or expected is None:
        return False
    if isinstance(instance, np.ndarray) or isinstance(expected, np.ndarray):
        if not (isinstance(instance, np.ndarray) and isinstance(expected, np.ndarray)):
            return False
        # equal_nan is only defined for inexact dtypes
        equal_nan = instance.dtype.kind in "fc" and expected.dtype.kind in "fc"
        return bool(np.array_equal(instance, expected, equal_nan=equal_nan))
    if _is_nan(instance) and _is_nan(expected):
        return True
    return bool(instance == expected)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    return False


def fluent_equals(instance: Any, expected: Any) -> bool:
    """Determine whether *instance* equals *expected*, honoring typed contracts.

    The contract is looked up on ``type(instance)`` for ``type(expected)``:
    the lookup is keyed on the expected value and is deliberately not
    symmetric.
    """
    if instance is not None and expected is not None:
        if _has_contract(type(instance), type(expected)):
            return bool(instance.equals(expected))
    return default_equals(instance, expected)


def fluent_equals_as(instance: Any, expected: Any, value_type: type) -> bool:
    """Same result as :func:`fluent_equals`, specialised for *value_type*.

    When both operands are exactly *value_type* the contract lookup is
    resolved once per type; anything else goes through :func:`fluent_equals`.
    """
    if type(instance) is value_type and type(expected) is value_type:
        if _has_contract(value_type, value_type):
            return bool(instance.equals(expected))
        return default_equals(instance, expected)
    return fluent_equals(instance, expected)
