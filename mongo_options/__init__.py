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
"""Options for MongoDB find-one-and-update operations."""
from __future__ import annotations

from mongo_options._version import __version__, get_version_string, version_tuple
from mongo_options.errors import InvalidEnumValue, OptionsError
from mongo_options.find_one_and_update import (
    DEFAULT_RETURN_DOCUMENT,
    FindOneAndUpdateOptions,
    ReturnDocument,
)

__all__ = [
    "DEFAULT_RETURN_DOCUMENT",
    "FindOneAndUpdateOptions",
    "InvalidEnumValue",
    "OptionsError",
    "ReturnDocument",
    "__version__",
    "get_version_string",
    "version_tuple",
]
