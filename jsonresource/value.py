"""
Tagged JSON value wrapping a dictionary or an array of dictionaries.

Deutsch:
    JSON-Wert als Dictionary oder als Liste von Dictionaries.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .errors import ParsingError
from .loader import DynamicValue, from_file
from .scope import ResourceScope

JSONObject = Dict[str, Any]


class JSONKind(Enum):
    NONE = "none"
    DICTIONARY = "dictionary"
    ARRAY = "array"


@dataclass(frozen=True, init=False, eq=False, repr=False)
class JSON:
    """
    Immutable value holding either nothing, one JSON object or a list of JSON objects.

    ``JSON(mapping)`` builds a dictionary value, ``JSON([mapping, ...])`` an
    array value and ``JSON()`` the empty value. Asking for the other variant
    returns an empty container instead of failing.

    Two values are equal when the ``repr`` of their ``array`` and of their
    ``dictionary`` accessors match. Insertion order therefore matters, and the
    empty variants all compare equal.

    Deutsch:
        Unveränderlicher Wert: leer, ein JSON-Objekt oder eine Liste von JSON-Objekten.
    """

    kind: JSONKind = JSONKind.NONE
    _payload: Any = field(default=None)

    def __init__(self, value: Union[Mapping[str, Any], Sequence[Mapping[str, Any]], None] = None) -> None:
        if value is None:
            kind, payload = JSONKind.NONE, None
        elif isinstance(value, Mapping):
            kind, payload = JSONKind.DICTIONARY, copy.deepcopy(dict(value))
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            items = list(value)
            for idx, item in enumerate(items):
                if not isinstance(item, Mapping):
                    raise TypeError(f"array element {idx} is {type(item).__name__}, expected a mapping")
            kind, payload = JSONKind.ARRAY, [copy.deepcopy(dict(item)) for item in items]
        else:
            raise TypeError(f"cannot build JSON from {type(value).__name__}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "_payload", payload)

    @classmethod
    def none(cls) -> "JSON":
        return cls()

    @classmethod
    def from_dictionary(cls, dictionary: Mapping[str, Any]) -> "JSON":
        if not isinstance(dictionary, Mapping):
            raise TypeError(f"expected a mapping, got {type(dictionary).__name__}")
        return cls(dictionary)

    @classmethod
    def from_array(cls, array: Sequence[Mapping[str, Any]]) -> "JSON":
        if isinstance(array, Mapping):
            raise TypeError("expected a sequence of mappings, got a mapping")
        return cls(array)

    @classmethod
    def wrap(cls, value: DynamicValue) -> "JSON":
        """Pick the variant from the shape of an already parsed value."""

        if value is None or isinstance(value, Mapping):
            return cls(value)
        if isinstance(value, list):
            return cls.from_array(value)
        raise TypeError(f"cannot wrap top-level {type(value).__name__} as JSON")

    @staticmethod
    def from_file(file_name: str, scope: Optional[ResourceScope] = None) -> DynamicValue:
        """
        Return the unwrapped JSON value stored in ``file_name``.

        Deutsch:
            Liefert den JSON-Inhalt einer Datei, ohne ihn einzupacken.
        """

        return from_file(file_name, scope)

    @classmethod
    def load(cls, file_name: str, scope: Optional[ResourceScope] = None) -> "JSON":
        value = from_file(file_name, scope)
        try:
            return cls.wrap(value)
        except TypeError:
            raise ParsingError.failed(file_name) from None

    @property
    def dictionary(self) -> JSONObject:
        if self.kind is JSONKind.DICTIONARY:
            return copy.deepcopy(self._payload)
        return {}

    @property
    def array(self) -> List[JSONObject]:
        if self.kind is JSONKind.ARRAY:
            return copy.deepcopy(self._payload)
        return []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSON):
            return NotImplemented
        return self._renderings() == other._renderings()

    def __hash__(self) -> int:
        return hash(self._renderings())

    def __repr__(self) -> str:
        if self.kind is JSONKind.DICTIONARY:
            return f"JSON.dictionary({self._payload!r})"
        if self.kind is JSONKind.ARRAY:
            return f"JSON.array({self._payload!r})"
        return "JSON.none"

    def _renderings(self) -> tuple[str, str]:
        array = repr(self._payload) if self.kind is JSONKind.ARRAY else repr([])
        dictionary = repr(self._payload) if self.kind is JSONKind.DICTIONARY else repr({})
        return array, dictionary
