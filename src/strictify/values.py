# Copyright (c) 2025 R.K. Oliver. All rights reserved.
#
# This work is licensed under the terms of the MIT license.
# For a copy, see <https://opensource.org/licenses/MIT>.

from __future__ import annotations

import math
from typing import (
    Any,
    Final,
    Protocol,
    TypeAlias,
    TypeGuard,
    TypeVar,
    final,
    runtime_checkable,
)

T = TypeVar("T")

Primitive: TypeAlias = int | float | str | bool
Number: TypeAlias = int | float

VALUE_ACCESSOR: Final[str] = "value_of"
DISPLAY_ACCESSOR: Final[str] = "display"

OBJECT_PLACEHOLDER: Final[str] = "[object Object]"
"""The generic text an object with no meaningful display renders as."""


@final
class UnconvertibleType:
    """Sentinel type for "no defined conversion", distinct from ``None``."""

    _instance: UnconvertibleType | None = None

    def __new__(cls) -> UnconvertibleType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Unconvertible"

    def __reduce__(self) -> str:
        return "Unconvertible"


Unconvertible: Final[UnconvertibleType] = UnconvertibleType()
"""Returned by every conversion when the input has no defined conversion."""


def is_convertible(result: T | UnconvertibleType) -> TypeGuard[T]:
    """
    ``TypeGuard`` to insist that `result` is not ``Unconvertible``.
    :param result: A conversion result.
    """
    return result is not Unconvertible


@runtime_checkable
class ValueAccessor(Protocol):
    """
    An object that exposes its natural scalar value. ``value_of()`` should return a number, a string or a boolean.
    """

    def value_of(self) -> Primitive: ...


@runtime_checkable
class DisplayAccessor(Protocol):
    """An object that exposes a human-readable rendering of itself."""

    def display(self) -> str: ...


def is_absent(value: Any) -> bool:
    return value is None


def is_boolean(value: Any) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_number(value: Any) -> TypeGuard[Number]:
    # bool is an int subclass but is a primitive of its own
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite(value: Number) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float are still finite
        return True


def is_primitive(value: Any) -> bool:
    return isinstance(value, (str, bool)) or is_number(value)


def resolve(value: Any) -> Any:
    """
    Invokes `value` once, with no arguments, if it is callable. The result is never resolved a second time.

    :param value: The value to resolve.
    :returns: The result of calling `value`, or `value` itself.
    """
    if callable(value):
        return value()
    return value


def _accessor(obj: Any, name: str) -> Any:
    accessor: Any = getattr(obj, name, None)
    return accessor if callable(accessor) else None


def has_value_accessor(obj: Any) -> TypeGuard[ValueAccessor]:
    return _accessor(obj, VALUE_ACCESSOR) is not None


def has_display_accessor(obj: Any) -> TypeGuard[DisplayAccessor]:
    return _accessor(obj, DISPLAY_ACCESSOR) is not None


def probe_value(obj: Any) -> Any:
    """
    Calls the value accessor of `obj`, if it has one.

    :param obj: The object to probe.
    :returns: Whatever the accessor returned, or ``None`` if `obj` has no value accessor.
    """
    if has_value_accessor(obj):
        return obj.value_of()
    return None


def probe_display(obj: Any) -> Any:
    """
    Calls the display accessor of `obj`, if it has one.

    :param obj: The object to probe.
    :returns: Whatever the accessor returned, or ``None`` if `obj` has no display accessor.
    """
    if has_display_accessor(obj):
        return obj.display()
    return None


def is_placeholder(obj: Any, display: Any) -> bool:
    """
    Whether `display` is a generic rendering of `obj` rather than a meaningful one.

    :param obj: The object that produced `display`.
    :param display: The result of the display accessor of `obj`.
    """
    return display == OBJECT_PLACEHOLDER or display == object.__repr__(obj)
