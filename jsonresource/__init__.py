"""
Load bundled JSON resources as dictionaries or arrays of dictionaries.

Deutsch:
    Lädt mitgelieferte JSON-Ressourcen als Dictionary oder Liste von Dictionaries.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import ParsingError, ParsingErrorKind, ParsingFailedError, ResourceNotFoundError
from .loader import DynamicValue, from_file, load, parse_generic, to_json
from .scope import DirectoryScope, PackageScope, ResourceScope, default_scope
from .value import JSON, JSONKind

__all__ = [
    "JSON",
    "JSONKind",
    "DynamicValue",
    "ParsingError",
    "ParsingErrorKind",
    "ParsingFailedError",
    "ResourceNotFoundError",
    "ResourceScope",
    "DirectoryScope",
    "PackageScope",
    "default_scope",
    "load",
    "parse_generic",
    "to_json",
    "from_file",
    "__version__",
]
