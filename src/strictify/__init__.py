# Copyright (c) 2025 R.K. Oliver. All rights reserved.
#
# This work is licensed under the terms of the MIT license.
# For a copy, see <https://opensource.org/licenses/MIT>.

"""Strict conversion of loosely-typed values to a finite number, a ``bool`` or a ``str``."""

from strictify.coerce import (
    ConversionError,
    as_boolean,
    as_number,
    as_string,
    booleanify,
    numberify,
    stringify,
)
from strictify.values import (
    OBJECT_PLACEHOLDER,
    DisplayAccessor,
    Primitive,
    Unconvertible,
    UnconvertibleType,
    ValueAccessor,
    is_convertible,
)

convert_to_number = numberify
convert_to_boolean = booleanify
convert_to_string = stringify

__all__ = [
    "OBJECT_PLACEHOLDER",
    "ConversionError",
    "DisplayAccessor",
    "Primitive",
    "Unconvertible",
    "UnconvertibleType",
    "ValueAccessor",
    "as_boolean",
    "as_number",
    "as_string",
    "booleanify",
    "convert_to_boolean",
    "convert_to_number",
    "convert_to_string",
    "is_convertible",
    "numberify",
    "stringify",
]
