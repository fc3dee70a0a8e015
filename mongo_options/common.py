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

"""Functions and classes common to multiple mongo_options modules."""
from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, Optional, Type, TypeVar

from mongo_options.errors import InvalidEnumValue

_E = TypeVar("_E", bound=enum.Enum)

# Default value of the maxTimeMS option, meaning no time limit.
DEFAULT_MAX_TIME_MS = 0


def validate_boolean(option: str, value: Any) -> bool:
    """Validates that 'value' is True or False."""
    if isinstance(value, bool):
        return value
    raise TypeError(
        "Wrong type for %s, value must be a boolean, not %s" % (option, type(value))
    )


def validate_boolean_or_none(option: str, value: Any) -> Optional[bool]:
    """Validate that 'value' is True, False, or None."""
    if value is None:
        return value
    return validate_boolean(option, value)


def validate_integer(option: str, value: Any) -> int:
    """Validates that 'value' is a number and returns it as an integer.

    Floats are truncated toward zero. :class:`bool` is rejected even though
    it subclasses :class:`int`.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value)
    raise TypeError(
        "Wrong type for %s, value must be an integer, not %s" % (option, type(value))
    )


def validate_is_mapping_or_none(option: str, value: Any) -> Optional[Mapping[str, Any]]:
    """Return 'value' if it is a document, otherwise None."""
    if isinstance(value, Mapping):
        return value
    return None


def validate_enum(option: str, value: Any, enum_cls: Type[_E]) -> _E:
    """Parse 'value' as the name of a member of 'enum_cls'.

    The lookup is an exact, case-sensitive match on the member name.
    Members of 'enum_cls' are returned as is.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value]
        except KeyError:
            pass
    raise InvalidEnumValue(option, value, [member.name for member in enum_cls])
