"""
Resolve, read and deserialize JSON resources.

Deutsch:
    Auflösen, Lesen und Deserialisieren von JSON-Ressourcen.
"""

from __future__ import annotations

import json
import logging
from pathlib import PurePosixPath
from typing import Dict, List, Optional, Tuple, Union

from .errors import ParsingError
from .scope import ResourceScope, default_scope

log = logging.getLogger(__name__)

DynamicValue = Union[None, bool, int, float, str, List["DynamicValue"], Dict[str, "DynamicValue"]]


def split_name(file_name: str) -> Tuple[str, str]:
    """Split ``folder/data.json`` into ``("folder/data", "json")``."""

    suffix = PurePosixPath(file_name).suffix
    if not suffix:
        return file_name, ""
    return file_name[: -len(suffix)], suffix[1:]


def load(file_name: str, scope: Optional[ResourceScope] = None) -> bytes:
    """
    Return the raw bytes of ``file_name`` as resolved by ``scope``.

    Raises ``ParsingError`` of kind ``NOT_FOUND`` when the scope has no such
    resource and of kind ``FAILED`` when it cannot be read.

    Deutsch:
        Liefert die Rohdaten einer Ressource aus dem angegebenen Bereich.
    """

    scope = scope if scope is not None else default_scope()
    base_name, extension = split_name(file_name)
    if not base_name:
        raise ParsingError.not_found(file_name)
    resource = scope.resolve_path(base_name, extension)
    if resource is None:
        log.debug("%s not resolvable in %r", file_name, scope)
        raise ParsingError.not_found(file_name)
    try:
        return resource.read_bytes()
    except OSError as exc:
        log.debug("reading %s failed: %s", resource, exc)
        raise ParsingError.failed(file_name) from None


def parse_generic(data: bytes) -> DynamicValue:
    """
    Deserialize ``data`` as RFC 8259 JSON of any shape.

    Deutsch:
        Deserialisiert Bytes als JSON-Wert beliebiger Form.
    """

    try:
        return json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        log.debug("invalid JSON payload: %s", exc)
        raise ParsingError.failed() from None


to_json = parse_generic


def from_file(file_name: str, scope: Optional[ResourceScope] = None) -> DynamicValue:
    """Load ``file_name`` from ``scope`` and return the unwrapped JSON value."""

    return parse_generic(load(file_name, scope))


def _reject_constant(name: str) -> None:
    # NaN and Infinity are not part of the JSON grammar.
    raise ValueError(f"invalid constant {name}")
