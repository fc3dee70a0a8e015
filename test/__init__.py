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

"""Test suite for mongo_options."""

import random
import string
import unittest  # noqa: F401


def random_document():
    """A small document with a string, an int and a boolean value."""
    return {
        "string": "".join(random.choice(string.ascii_letters) for _ in range(10)),
        "int": random.randint(-(2**31), 2**31 - 1),
        "boolean": random.choice([True, False]),
    }


def random_long():
    return random.randint(-(2**63), 2**63 - 1)


def random_boolean():
    return random.choice([True, False])
