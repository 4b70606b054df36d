"""Click-based command line for inspecting JSON resources."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import click

from . import __version__
from .errors import ParsingError
from .logging_conf import configure_logging
from .scope import DirectoryScope, PackageScope, ResourceScope, default_scope
from .value import JSON, JSONKind


@click.group(help="Inspect bundled JSON resources")
@click.version_option(__version__)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
def cli(verbose: bool) -> None:
    """
    Root CLI group configuring logging before subcommands execute.
    """

    configure_logging(verbose)


@cli.command("show")
@click.argument("name")
@click.option(
    "--root",
    default=None,
    type=click.Path(path_type=Path, exists=True, file_okay=False),
    help="Directory to resolve NAME in (default: JSONRESOURCE_ROOT or the program directory).",
)
@click.option("--package", default=None, help="Importable package to resolve NAME in.")
def cli_show(name: str, root: Optional[Path], package: Optional[str]) -> None:
    """Load NAME, report its variant and print the payload."""

    scope = _select_scope(root, package)
    try:
        value = JSON.load(name, scope)
    except ParsingError as exc:
        raise click.ClickException(str(exc)) from exc
    logging.getLogger(__name__).info("loaded %s from %r as %s", name, scope, value.kind.value)
    payload = value.array if value.kind is JSONKind.ARRAY else value.dictionary
    click.echo(f"kind: {value.kind.value}")
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _select_scope(root: Optional[Path], package: Optional[str]) -> ResourceScope:
    if root is not None and package:
        raise click.UsageError("--root and --package are mutually exclusive")
    if root is not None:
        return DirectoryScope(root)
    if package:
        return PackageScope(package)
    return default_scope()


def main(argv: Optional[Iterable[str]] = None) -> int:
    """
    Entry point returning an exit code for setuptools console scripts.
    """

    argv_list = list(argv if argv is not None else sys.argv[1:])
    try:
        cli.main(args=argv_list, prog_name="jsonresource", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
