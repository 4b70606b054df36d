"""
Resource scopes used to locate bundled files by logical name.

Deutsch:
    Ressourcenbereiche, die mitgelieferte Dateien über ihren Namen finden.
"""

from __future__ import annotations

import logging
import os
import sys
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import Optional, Union

log = logging.getLogger(__name__)

ROOT_ENV = "JSONRESOURCE_ROOT"

Resource = Union[Path, Traversable]


class ResourceScope:
    """
    Base class for all resource scopes.

    Deutsch:
        Basisklasse für alle Ressourcenbereiche.
    """

    name = "base"

    def resolve_path(self, base_name: str, extension: str) -> Optional[Resource]:  # pragma: no cover - abstract
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class DirectoryScope(ResourceScope):
    """Resolve resources below a directory on disk."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)
        self.name = str(self.root)

    def resolve_path(self, base_name: str, extension: str) -> Optional[Resource]:
        parts = _relative_parts(base_name, extension)
        if parts is None:
            return None
        candidate = self.root.joinpath(*parts)
        if not candidate.is_file():
            log.debug("no resource %s below %s", "/".join(parts), self.root)
            return None
        return candidate


class PackageScope(ResourceScope):
    """
    Resolve resources shipped inside an importable package.

    Deutsch:
        Findet Ressourcen, die in einem Python-Paket mitgeliefert werden.
    """

    def __init__(self, package: str) -> None:
        self.package = package
        self.name = package

    def resolve_path(self, base_name: str, extension: str) -> Optional[Resource]:
        parts = _relative_parts(base_name, extension)
        if parts is None:
            return None
        try:
            base = resources.files(self.package)
        except (ImportError, TypeError) as exc:
            log.debug("package %s not importable: %s", self.package, exc)
            return None
        candidate = base.joinpath(*parts)
        if not candidate.is_file():
            log.debug("no resource %s in package %s", "/".join(parts), self.package)
            return None
        return candidate


def default_scope() -> ResourceScope:
    """
    Return the scope of the running program.

    ``JSONRESOURCE_ROOT`` wins, then the directory of the ``__main__`` module,
    then the current working directory.

    Deutsch:
        Liefert den Standardbereich des laufenden Programms.
    """

    root = os.getenv(ROOT_ENV)
    if root:
        return DirectoryScope(root)
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if main_file:
        return DirectoryScope(Path(main_file).resolve().parent)
    return DirectoryScope(Path.cwd())


def _relative_parts(base_name: str, extension: str) -> Optional[list[str]]:
    filename = f"{base_name}.{extension}" if extension else base_name
    path = PurePosixPath(filename)
    if path.is_absolute() or ".." in path.parts:
        return None
    parts = [part for part in path.parts if part != "."]
    return parts or None
