from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

from jsonresource import JSON, DirectoryScope, PackageScope, ResourceNotFoundError, default_scope

PACKAGE_NAME = "jsonresource_bundle_fixture"


@pytest.fixture()
def bundle_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    package_dir = tmp_path / PACKAGE_NAME
    (package_dir / "profiles").mkdir(parents=True)
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "defaults.json").write_text('{"api_version": 4}', encoding="utf-8")
    (package_dir / "profiles" / "cable.json").write_text('[{"provider": "Official"}]', encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    sys.modules.pop(PACKAGE_NAME, None)
    yield PACKAGE_NAME
    sys.modules.pop(PACKAGE_NAME, None)


def test_directory_scope_resolves_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "data.json"
    target.write_text("{}", encoding="utf-8")
    scope = DirectoryScope(tmp_path)
    assert scope.resolve_path("data", "json") == target
    assert scope.resolve_path("other", "json") is None


def test_directory_scope_without_extension(tmp_path: Path) -> None:
    (tmp_path / "LICENSE").write_text("text", encoding="utf-8")
    assert DirectoryScope(tmp_path).resolve_path("LICENSE", "") == tmp_path / "LICENSE"


def test_directory_scope_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "nested.json").mkdir()
    assert DirectoryScope(tmp_path).resolve_path("nested", "json") is None


@pytest.mark.parametrize("base_name", ["../secret", "/etc/passwd", "a/../../b", "."])
def test_directory_scope_stays_below_root(tmp_path: Path, base_name: str) -> None:
    root = tmp_path / "root"
    root.mkdir()
    (tmp_path / "secret.json").write_text("{}", encoding="utf-8")
    assert DirectoryScope(root).resolve_path(base_name, "json" if base_name != "." else "") is None


def test_package_scope_resolves_bundled_files(bundle_package: str) -> None:
    scope = PackageScope(bundle_package)
    assert JSON(JSON.from_file("defaults.json", scope)).dictionary == {"api_version": 4}
    assert JSON(JSON.from_file("profiles/cable.json", scope)).array == [{"provider": "Official"}]


def test_package_scope_missing_resource(bundle_package: str) -> None:
    with pytest.raises(ResourceNotFoundError):
        JSON.from_file("absent.json", PackageScope(bundle_package))


def test_package_scope_unknown_package() -> None:
    assert PackageScope("jsonresource_no_such_package").resolve_path("data", "json") is None


def test_default_scope_prefers_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSONRESOURCE_ROOT", str(tmp_path))
    scope = default_scope()
    assert isinstance(scope, DirectoryScope)
    assert scope.root == tmp_path


def test_default_scope_falls_back_to_main_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JSONRESOURCE_ROOT", raising=False)
    script = tmp_path / "app.py"
    script.write_text("", encoding="utf-8")
    monkeypatch.setattr(sys.modules["__main__"], "__file__", str(script), raising=False)
    scope = default_scope()
    assert isinstance(scope, DirectoryScope)
    assert scope.root == tmp_path.resolve()


def test_default_scope_falls_back_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JSONRESOURCE_ROOT", raising=False)
    monkeypatch.delattr(sys.modules["__main__"], "__file__", raising=False)
    monkeypatch.chdir(tmp_path)
    scope = default_scope()
    assert isinstance(scope, DirectoryScope)
    assert scope.root == tmp_path.resolve()
