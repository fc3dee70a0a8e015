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

"""Options used to configure find-one-and-update operations.

The :class:`FindOneAndUpdateOptions` object collects the optional parameters
of a findOneAndUpdate request. It is a plain value: it can be built with
keyword arguments or with chained setters, compared for equality, copied, and
converted to and from a JSON document::

    >>> from mongo_options import FindOneAndUpdateOptions, ReturnDocument
    >>> options = (FindOneAndUpdateOptions()
    ...            .set_projection({"seq": True, "_id": False})
    ...            .set_upsert(True)
    ...            .set_return_document(ReturnDocument.AFTER))
    >>> options.to_json()
    SON([('projection', {'seq': True, '_id': False}), ('upsert', True), ('returnDocument', 'AFTER'), ('maxTimeMS', 0)])
"""
from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, Dict, Optional

import pymongo
from bson import json_util
from bson.json_util import RELAXED_JSON_OPTIONS, JSONOptions
from bson.son import SON

from mongo_options import common
from mongo_options.errors import InvalidEnumValue
from mongo_options.logger import _CODEC_LOGGER, _CodecStatusMessage, _debug_log


class ReturnDocument(enum.Enum):
    """An enum used with :meth:`FindOneAndUpdateOptions.set_return_document`.

    Serialized by member name.
    """

    BEFORE = "BEFORE"
    """Return the original document before it was updated, or ``None``
    if no document matches the query.
    """
    AFTER = "AFTER"
    """Return the updated or inserted document."""


DEFAULT_RETURN_DOCUMENT = ReturnDocument.BEFORE
"""The default value of returnDocument, the document is returned before the update."""


class FindOneAndUpdateOptions(object):
    """Options to configure a findOneAndUpdate operation."""

    __slots__ = (
        "__projection",
        "__sort",
        "__upsert",
        "__return_document",
        "__max_time_ms",
        "__bypass_document_validation",
    )

    def __init__(
        self,
        projection: Optional[Mapping[str, Any]] = None,
        sort: Optional[Mapping[str, Any]] = None,
        upsert: bool = False,
        return_document: ReturnDocument = DEFAULT_RETURN_DOCUMENT,
        max_time_ms: int = common.DEFAULT_MAX_TIME_MS,
        bypass_document_validation: Optional[bool] = None,
    ) -> None:
        """Options for :meth:`~pymongo.collection.Collection.find_one_and_update`.

        :Parameters:
          - `projection` (optional): a mapping describing the fields to
            return for the matching document. Defaults to ``None``, all
            fields.
          - `sort` (optional): a mapping of field name to direction
            applied to the query before the first match is selected.
          - `upsert` (optional): When ``True``, inserts a new document if
            no document matches the query. Defaults to ``False``.
          - `return_document` (optional): :attr:`ReturnDocument.BEFORE`
            (the default) or :attr:`ReturnDocument.AFTER`.
          - `max_time_ms` (optional): time limit for the operation in
            milliseconds. ``0`` (the default) means no limit.
          - `bypass_document_validation` (optional): If ``True``, allows
            the write to opt-out of document level validation. Defaults to
            ``None`` which means "use the server's default".
        """
        self.__projection = projection
        self.__sort = sort
        self.__upsert = upsert
        self.__return_document = return_document
        self.__max_time_ms = max_time_ms
        self.__bypass_document_validation = bypass_document_validation

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> "FindOneAndUpdateOptions":
        """Create options from a JSON document as returned by :meth:`to_json`.

        Missing keys, and keys set to ``None``, take their default value.

        Raises :exc:`~mongo_options.errors.InvalidEnumValue` if
        ``returnDocument`` does not name a :class:`ReturnDocument` member.
        """
        try:
            options = cls(
                projection=common.validate_is_mapping_or_none(
                    "projection", document.get("projection")
                ),
                sort=common.validate_is_mapping_or_none("sort", document.get("sort")),
                upsert=common.validate_boolean("upsert", _get(document, "upsert", False)),
                return_document=common.validate_enum(
                    "returnDocument",
                    _get(document, "returnDocument", DEFAULT_RETURN_DOCUMENT.name),
                    ReturnDocument,
                ),
                max_time_ms=common.validate_integer(
                    "maxTimeMS", _get(document, "maxTimeMS", common.DEFAULT_MAX_TIME_MS)
                ),
                bypass_document_validation=common.validate_boolean_or_none(
                    "bypassDocumentValidation", document.get("bypassDocumentValidation")
                ),
            )
        except InvalidEnumValue as exc:
            _debug_log(
                _CODEC_LOGGER,
                message=_CodecStatusMessage.FAILED,
                document=document,
                failure=str(exc),
            )
            raise
        _debug_log(_CODEC_LOGGER, message=_CodecStatusMessage.DECODED, document=document)
        return options

    @classmethod
    def from_json_string(
        cls, json_string: str, json_options: JSONOptions = RELAXED_JSON_OPTIONS
    ) -> "FindOneAndUpdateOptions":
        """Create options from MongoDB Extended JSON text."""
        return cls.from_json(json_util.loads(json_string, json_options=json_options))

    def to_json(self) -> SON:
        """Convert these options to a JSON document.

        Unset optional fields are omitted. ``upsert``, ``returnDocument``
        and ``maxTimeMS`` are always present.
        """
        document: SON = SON()
        if self.__projection is not None:
            document["projection"] = self.__projection
        if self.__sort is not None:
            document["sort"] = self.__sort
        document["upsert"] = self.__upsert
        document["returnDocument"] = self.__return_document.name
        document["maxTimeMS"] = self.__max_time_ms
        if self.__bypass_document_validation is not None:
            document["bypassDocumentValidation"] = self.__bypass_document_validation
        _debug_log(_CODEC_LOGGER, message=_CodecStatusMessage.ENCODED, document=document)
        return document

    def to_json_string(self, json_options: JSONOptions = RELAXED_JSON_OPTIONS) -> str:
        """Convert these options to MongoDB Extended JSON text."""
        return json_util.dumps(self.to_json(), json_options=json_options)

    def to_find_one_and_update_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :meth:`pymongo.collection.Collection.find_one_and_update`.

        ``maxTimeMS`` and ``bypassDocumentValidation`` are only included
        when set, and are passed through to the findAndModify command.
        """
        kwargs: Dict[str, Any] = {
            "projection": self.__projection,
            "sort": list(self.__sort.items()) if self.__sort is not None else None,
            "upsert": self.__upsert,
            "return_document": pymongo.ReturnDocument.AFTER
            if self.__return_document is ReturnDocument.AFTER
            else pymongo.ReturnDocument.BEFORE,
        }
        if self.__max_time_ms:
            kwargs["maxTimeMS"] = self.__max_time_ms
        if self.__bypass_document_validation is not None:
            kwargs["bypassDocumentValidation"] = self.__bypass_document_validation
        return kwargs

    def copy(self) -> "FindOneAndUpdateOptions":
        """Return a shallow copy of these options.

        The projection and sort documents are shared with the copy.
        """
        return FindOneAndUpdateOptions(
            projection=self.__projection,
            sort=self.__sort,
            upsert=self.__upsert,
            return_document=self.__return_document,
            max_time_ms=self.__max_time_ms,
            bypass_document_validation=self.__bypass_document_validation,
        )

    __copy__ = copy

    @property
    def projection(self) -> Optional[Mapping[str, Any]]:
        """The fields to return for the matching document."""
        return self.__projection

    def set_projection(self, projection: Optional[Mapping[str, Any]]) -> "FindOneAndUpdateOptions":
        """Set the projection. Returns this object for chaining."""
        self.__projection = projection
        return self

    @property
    def sort(self) -> Optional[Mapping[str, Any]]:
        """The sort criteria applied to the query."""
        return self.__sort

    def set_sort(self, sort: Optional[Mapping[str, Any]]) -> "FindOneAndUpdateOptions":
        """Set the sort. Returns this object for chaining."""
        self.__sort = sort
        return self

    @property
    def upsert(self) -> bool:
        """Whether a new document is inserted if no document matches."""
        return self.__upsert

    def set_upsert(self, upsert: bool) -> "FindOneAndUpdateOptions":
        """Set upsert. Returns this object for chaining."""
        self.__upsert = upsert
        return self

    @property
    def return_document(self) -> ReturnDocument:
        """Whether the document is returned before or after the update."""
        return self.__return_document

    def set_return_document(self, return_document: ReturnDocument) -> "FindOneAndUpdateOptions":
        """Set the return document. Returns this object for chaining."""
        self.__return_document = return_document
        return self

    @property
    def max_time_ms(self) -> int:
        """The time limit in milliseconds, ``0`` when unset."""
        return self.__max_time_ms

    def set_max_time_ms(self, max_time_ms: int) -> "FindOneAndUpdateOptions":
        """Set maxTimeMS. Returns this object for chaining."""
        self.__max_time_ms = max_time_ms
        return self

    @property
    def bypass_document_validation(self) -> Optional[bool]:
        """Whether document level validation is bypassed, ``None`` when unset."""
        return self.__bypass_document_validation

    def set_bypass_document_validation(
        self, bypass_document_validation: Optional[bool]
    ) -> "FindOneAndUpdateOptions":
        """Set bypassDocumentValidation. Returns this object for chaining."""
        self.__bypass_document_validation = bypass_document_validation
        return self

    def __fields(self) -> tuple:
        return (
            self.__projection,
            self.__sort,
            self.__upsert,
            self.__return_document,
            self.__max_time_ms,
            self.__bypass_document_validation,
        )

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FindOneAndUpdateOptions):
            return self.__fields() == other.__fields()
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        if isinstance(other, FindOneAndUpdateOptions):
            return self.__fields() != other.__fields()
        return NotImplemented

    def __hash__(self) -> int:
        # Documents are unhashable and compare values loosely (1 == 1.0 == True),
        # so only their keys take part in the hash.
        return hash(
            (
                _document_key(self.__projection),
                _document_key(self.__sort),
                self.__upsert,
                self.__return_document,
                self.__max_time_ms,
                self.__bypass_document_validation,
            )
        )

    def __repr__(self) -> str:
        return (
            "FindOneAndUpdateOptions(projection=%r, sort=%r, upsert=%r, "
            "return_document=%s, max_time_ms=%r, bypass_document_validation=%r)"
            % (
                self.__projection,
                self.__sort,
                self.__upsert,
                self.__return_document,
                self.__max_time_ms,
                self.__bypass_document_validation,
            )
        )


def _get(document: Mapping[str, Any], key: str, default: Any) -> Any:
    """Return document[key], or 'default' when missing or null."""
    value = document.get(key)
    if value is None:
        return default
    return value


def _document_key(document: Optional[Mapping[str, Any]]) -> Optional[frozenset]:
    if document is None:
        return None
    return frozenset(document.keys())
