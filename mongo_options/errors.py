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

"""Exceptions raised by mongo_options."""
from typing import Any


class OptionsError(Exception):
    """Base class for all mongo_options exceptions."""

    def __init__(self, message: str = "") -> None:
        super(OptionsError, self).__init__(message)
        self._message = message


class InvalidEnumValue(OptionsError, ValueError):
    """Raised when a serialized option names an unknown enum member.

    Subclass of :exc:`ValueError`.

    .. versionadded:: 1.0
    """

    def __init__(self, option: str, value: Any, choices: Any = ()) -> None:
        message = "%r is not a valid value for %s" % (value, option)
        if choices:
            message += ", must be one of %s" % (", ".join(choices),)
        super(InvalidEnumValue, self).__init__(message)
        self.__option = option
        self.__value = value

    @property
    def option(self) -> str:
        """The name of the option that failed to decode."""
        return self.__option

    @property
    def value(self) -> Any:
        """The value that did not match any enum member."""
        return self.__value
