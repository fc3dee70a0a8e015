# Copyright 2016-present MongoDB, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Test the mongo_options common module."""

import enum
import sys

sys.path[0:0] = [""]

from test import unittest

from bson.int64 import Int64
from bson.son import SON

from mongo_options.common import (
    validate_boolean,
    validate_boolean_or_none,
    validate_enum,
    validate_integer,
    validate_is_mapping_or_none,
)
from mongo_options.errors import InvalidEnumValue, OptionsError


class Color(enum.Enum):
    RED = "RED"
    GREEN = "GREEN"


class TestCommon(unittest.TestCase):
    def test_validate_boolean(self):
        self.assertIs(True, validate_boolean("upsert", True))
        self.assertIs(False, validate_boolean("upsert", False))
        self.assertRaises(TypeError, validate_boolean, "upsert", 1)
        self.assertRaises(TypeError, validate_boolean, "upsert", "false")
        self.assertRaises(TypeError, validate_boolean, "upsert", None)

    def test_validate_boolean_or_none(self):
        self.assertIsNone(validate_boolean_or_none("bypassDocumentValidation", None))
        self.assertIs(True, validate_boolean_or_none("bypassDocumentValidation", True))
        self.assertRaises(TypeError, validate_boolean_or_none, "bypassDocumentValidation", "")

    def test_validate_integer(self):
        self.assertEqual(0, validate_integer("maxTimeMS", 0))
        self.assertEqual(-5, validate_integer("maxTimeMS", -5))
        self.assertEqual(2**62, validate_integer("maxTimeMS", Int64(2**62)))
        self.assertRaises(TypeError, validate_integer, "maxTimeMS", False)
        self.assertEqual(5000, validate_integer("maxTimeMS", 5000.0))
        self.assertIs(int, type(validate_integer("maxTimeMS", 5000.0)))
        self.assertEqual(1, validate_integer("maxTimeMS", 1.9))
        self.assertEqual(-1, validate_integer("maxTimeMS", -1.9))
        self.assertRaises(TypeError, validate_integer, "maxTimeMS", None)
        with self.assertRaisesRegex(TypeError, "Wrong type for maxTimeMS"):
            validate_integer("maxTimeMS", "5")

    def test_validate_is_mapping_or_none(self):
        document = SON([("a", 1)])
        self.assertIs(document, validate_is_mapping_or_none("sort", document))
        self.assertEqual({}, validate_is_mapping_or_none("sort", {}))
        self.assertIsNone(validate_is_mapping_or_none("sort", [("a", 1)]))
        self.assertIsNone(validate_is_mapping_or_none("sort", None))

    def test_validate_enum(self):
        self.assertIs(Color.RED, validate_enum("color", "RED", Color))
        self.assertIs(Color.GREEN, validate_enum("color", Color.GREEN, Color))
        for value in ("red", "BLUE", "", None, 0):
            with self.assertRaises(InvalidEnumValue) as ctx:
                validate_enum("color", value, Color)
            self.assertEqual("color", ctx.exception.option)
            self.assertIs(value, ctx.exception.value)

    def test_invalid_enum_value_message(self):
        exc = InvalidEnumValue("color", "BLUE", ["RED", "GREEN"])
        self.assertEqual("'BLUE' is not a valid value for color, must be one of RED, GREEN", str(exc))
        self.assertIsInstance(exc, OptionsError)
        self.assertIsInstance(exc, ValueError)
        self.assertEqual("'BLUE' is not a valid value for color", str(InvalidEnumValue("color", "BLUE")))


if __name__ == "__main__":
    unittest.main()
