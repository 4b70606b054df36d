"""
Error types raised while loading JSON resources.

Deutsch:
    Fehlertypen beim Laden von JSON-Ressourcen.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ParsingErrorKind(Enum):
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ParsingError(Exception):
    """
    Raised when a resource cannot be resolved or turned into JSON.

    The kind is fixed by the subclass that is raised.

    Deutsch:
        Wird geworfen, wenn eine Ressource nicht gefunden oder nicht gelesen werden kann.
    """

    kind: ParsingErrorKind = ParsingErrorKind.FAILED

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.kind.value)

    @staticmethod
    def not_found(name: str = "") -> "ResourceNotFoundError":
        return ResourceNotFoundError(f"resource {name!r} not found")

    @staticmethod
    def failed(name: str = "") -> "ParsingFailedError":
        if name:
            return ParsingFailedError(f"resource {name!r} could not be parsed")
        return ParsingFailedError("data could not be parsed as JSON")


class ResourceNotFoundError(ParsingError):
    """No concrete path exists for the name. / Keine Datei zum Namen gefunden."""

    kind = ParsingErrorKind.NOT_FOUND


class ParsingFailedError(ParsingError):
    """The file was found but could not be read or parsed. / Datei nicht lesbar oder kein JSON."""

    kind = ParsingErrorKind.FAILED
