# Copyright (c) 2025 R.K. Oliver. All rights reserved.
#
# This work is licensed under the terms of the MIT license.
# For a copy, see <https://opensource.org/licenses/MIT>.

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Callable, Final, TypeVar, overload

from strictify.values import (
    Number,
    Unconvertible,
    UnconvertibleType,
    is_absent,
    is_boolean,
    is_finite,
    is_number,
    is_placeholder,
    is_primitive,
    probe_display,
    probe_value,
    resolve,
)

T = TypeVar("T")

_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


class ConversionError(ValueError):
    """Raised by the ``as_*`` functions when a value has no defined conversion."""

    def __init__(self, value: Any, kind: str) -> None:
        super().__init__(f"Cannot interpret {value!r} as a {kind}")
        self.value: Any = value
        self.kind: str = kind


def _to_finite(value: Any) -> Number | UnconvertibleType:
    if is_boolean(value):
        return 1 if value else 0
    if is_number(value):
        return value if is_finite(value) else Unconvertible
    if isinstance(value, str):
        return _parse_number(value)
    return Unconvertible


def _parse_number(text: str) -> Number | UnconvertibleType:
    # The whole string must be a numeric literal; "2a" is not 2.
    text = text.strip()
    if not text or "_" in text or not text.isascii():
        return Unconvertible
    if _INTEGER.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # longer than the interpreter allows for int/str conversion
            return Unconvertible
    try:
        number: float = float(text)
    except ValueError:
        return Unconvertible
    return number if is_finite(number) else Unconvertible


def _to_boolean(value: Any) -> bool | UnconvertibleType:
    if is_boolean(value):
        return value
    if is_number(value):
        if value == 1:
            return True
        if value == 0:
            return False
        return Unconvertible
    if value == "1":
        return True
    if value == "0":
        return False
    return Unconvertible


def _to_string(value: Any) -> str | UnconvertibleType:
    if is_boolean(value):
        return "1" if value else "0"
    if is_number(value):
        if not is_finite(value):
            return Unconvertible
        if value == 0:
            return "0"
        if isinstance(value, int):
            try:
                return int.__repr__(value)
            except ValueError:
                return Unconvertible
        return _format_float(value)
    if isinstance(value, str):
        return value
    return Unconvertible


def _format_float(value: float) -> str:
    """
    Renders a finite, non-zero float with its shortest round-tripping digits. Plain decimal notation is used for
    magnitudes from ``1e-6`` up to, but excluding, ``1e21``; exponent notation outside that range.
    """
    sign: str = "-" if value < 0 else ""
    exact: Decimal = Decimal(float.__repr__(abs(value))).normalize()
    digits: str = "".join(str(d) for d in exact.as_tuple().digits)
    count: int = len(digits)
    # position of the decimal point relative to the first digit
    point: int = int(exact.as_tuple().exponent) + count

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    exponent: int = point - 1
    mantissa: str = digits[0] + ("." + digits[1:] if count > 1 else "")
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _first_of(obj: Any, finalize: Callable[[Any], T | UnconvertibleType]) -> T | UnconvertibleType:
    result: T | UnconvertibleType = finalize(probe_value(obj))
    if result is Unconvertible:
        result = finalize(probe_display(obj))
    return result


def _convert(value: Any, finalize: Callable[[Any], T | UnconvertibleType]) -> T | UnconvertibleType:
    value = resolve(value)
    if is_absent(value) or callable(value):
        return Unconvertible
    if is_primitive(value):
        return finalize(value)
    return _first_of(value, finalize)


@overload
def numberify(value: bool) -> int: ...


@overload
def numberify(value: Any) -> Number | UnconvertibleType: ...


def numberify(value: Any) -> Number | UnconvertibleType:
    """
    Strictly converts a value to a finite number.

    - A callable is called once, with no arguments, and its result is converted.
    - A number is returned unchanged unless it is NaN or infinite.
    - A string must be a whole numeric literal, surrounding whitespace aside. ``"2 "`` is ``2``, ``"2a"`` is
      ``Unconvertible``.
    - ``True`` is ``1`` and ``False`` is ``0``.
    - Any other object is converted through its ``value_of()`` result, falling back to its ``display()`` result.

    :param value: The value to convert.
    :returns: An ``int`` or finite ``float``, or ``Unconvertible``.
    """
    return _convert(value, _to_finite)


@overload
def booleanify(value: bool) -> bool: ...


@overload
def booleanify(value: Any) -> bool | UnconvertibleType: ...


def booleanify(value: Any) -> bool | UnconvertibleType:
    """
    Strictly converts a value to a ``bool``. Only ``True``, ``1`` and ``"1"`` are true; only ``False``, ``0`` and
    ``"0"`` are false. Callables and objects are unwrapped the same way as ``numberify()``.

    :param value: The value to convert.
    :returns: ``True``, ``False`` or ``Unconvertible``.
    """
    return _convert(value, _to_boolean)


def _from_object(obj: Any) -> str | UnconvertibleType:
    value: Any = probe_value(obj)
    display: Any = probe_display(obj)
    if is_placeholder(obj, display):
        display = None

    # value_of() takes precedence unless display() is a string
    if isinstance(display, str):
        return display
    if not is_absent(value):
        return _to_string(value)
    return _to_string(display)


@overload
def stringify(value: str) -> str: ...


@overload
def stringify(value: Any) -> str | UnconvertibleType: ...


def stringify(value: Any) -> str | UnconvertibleType:
    """
    Strictly converts a value to a ``str``.

    Finite numbers render as decimal text with the shortest digits that round-trip (``2.0`` is ``"2"``, ``1e-6`` is
    ``"0.000001"``). Magnitudes below ``1e-6`` or from ``1e21`` up use exponent notation (``"1e-7"``, ``"1e+21"``).
    Integers too long for the interpreter to render are ``Unconvertible``. Booleans render as ``"1"``/``"0"``, and
    strings are returned unchanged. For other objects a meaningful ``display()`` string wins over ``value_of()``; a
    placeholder display such as ``"[object Object]"`` is ignored.

    :param value: The value to convert.
    :returns: A ``str`` or ``Unconvertible``.
    """
    value = resolve(value)
    if is_absent(value) or callable(value):
        return Unconvertible
    if is_primitive(value):
        return _to_string(value)
    return _from_object(value)


def _or_raise(converter: Callable[[Any], T | UnconvertibleType], value: Any, kind: str, default: Any) -> Any:
    result: T | UnconvertibleType = converter(value)
    if result is not Unconvertible:
        return result
    if default is not Unconvertible:
        return default
    raise ConversionError(value, kind)


def as_number(value: Any, default: Any = Unconvertible) -> Any:
    """
    Converts a value with ``numberify()``.
    Unconvertible values raise a ``ConversionError`` unless `default` is given.

    :param value: The value to convert.
    :param default: Returned instead of raising.
    :returns: The `value` as a number.
    """
    return _or_raise(numberify, value, "number", default)


def as_boolean(value: Any, default: Any = Unconvertible) -> Any:
    """
    Converts a value with ``booleanify()``.
    Unconvertible values raise a ``ConversionError`` unless `default` is given.

    :param value: The value to convert.
    :param default: Returned instead of raising.
    :returns: The `value` as a ``bool``.
    """
    return _or_raise(booleanify, value, "boolean", default)


def as_string(value: Any, default: Any = Unconvertible) -> Any:
    """
    Converts a value with ``stringify()``.
    Unconvertible values raise a ``ConversionError`` unless `default` is given.

    :param value: The value to convert.
    :param default: Returned instead of raising.
    :returns: The `value` as a ``str``.
    """
    return _or_raise(stringify, value, "string", default)
