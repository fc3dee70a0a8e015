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
from __future__ import annotations

import enum
import logging
import os
from typing import Any

from bson import json_util
from bson.json_util import RELAXED_JSON_OPTIONS


class _CodecStatusMessage(str, enum.Enum):
    ENCODED = "Options encoded"
    DECODED = "Options decoded"
    FAILED = "Options decode failed"


_DEFAULT_DOCUMENT_LENGTH = 1000
_DOCUMENT_LENGTH_ENV = "MONGO_OPTIONS_LOG_MAX_DOCUMENT_LENGTH"
_DOCUMENT_NAMES = ["document"]
_JSON_OPTIONS = RELAXED_JSON_OPTIONS
_CODEC_LOGGER = logging.getLogger("mongo_options.codec")


def _debug_log(logger: logging.Logger, **fields: Any) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(LogMessage(**fields))


def _max_document_length() -> int:
    document_length = int(os.getenv(_DOCUMENT_LENGTH_ENV, _DEFAULT_DOCUMENT_LENGTH))
    if document_length < 0:
        return _DEFAULT_DOCUMENT_LENGTH
    return document_length


class LogMessage:
    __slots__ = ["_kwargs"]

    def __init__(self, **kwargs: Any):
        self._kwargs = kwargs

    def __str__(self) -> str:
        self._truncate()
        return "%s" % (
            json_util.dumps(
                self._kwargs, json_options=_JSON_OPTIONS, default=lambda o: o.__repr__()
            )
        )

    def _truncate(self) -> None:
        document_length = _max_document_length()
        for doc_name in _DOCUMENT_NAMES:
            doc = self._kwargs.get(doc_name)
            if doc is None or isinstance(doc, str):
                continue
            doc = json_util.dumps(
                doc, json_options=_JSON_OPTIONS, default=lambda o: o.__repr__()
            )
            if len(doc) > document_length:
                doc = doc[:document_length] + "..."
            self._kwargs[doc_name] = doc
