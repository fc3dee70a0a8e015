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
"""Current version of mongo_options."""
from __future__ import annotations

from typing import Tuple, Union

__version__ = "1.0.0.dev0"

version_tuple: Tuple[Union[int, str], ...] = tuple(
    int(part) if part.isdigit() else part for part in __version__.split(".")
)


def get_version_string() -> str:
    return __version__
