# Copyright (c) 2025 R.K. Oliver. All rights reserved.
#
# This work is licensed under the terms of the MIT license.
# For a copy, see <https://opensource.org/licenses/MIT>.

from unittest import TestCase

import strictify
from strictify import (
    Unconvertible,
    booleanify,
    convert_to_boolean,
    convert_to_number,
    convert_to_string,
    numberify,
    stringify,
)


class TestPublicApi(TestCase):
    def test_all(self) -> None:
        for name in strictify.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(strictify, name))

    def test_aliases(self) -> None:
        self.assertIs(numberify, convert_to_number)
        self.assertIs(booleanify, convert_to_boolean)
        self.assertIs(stringify, convert_to_string)


class TestObjectConversions(TestCase):
    """One object run through all three conversions."""

    class Five:
        def value_of(self) -> int:
            return 5

    class Named:
        def value_of(self) -> int:
            return 5

        def display(self) -> str:
            return "five"

    def test_value_accessor_only(self) -> None:
        obj = self.Five()
        self.assertEqual(5, convert_to_number(obj))
        self.assertIs(Unconvertible, convert_to_boolean(obj))
        self.assertEqual("5", convert_to_string(obj))

    def test_both_accessors(self) -> None:
        obj = self.Named()
        self.assertEqual(5, convert_to_number(obj))
        self.assertIs(Unconvertible, convert_to_boolean(obj))
        self.assertEqual("five", convert_to_string(obj))

    def test_absent(self) -> None:
        for convert in (convert_to_number, convert_to_boolean, convert_to_string):
            with self.subTest(convert=convert.__name__):
                self.assertIs(Unconvertible, convert(None))
