"""
Logging configuration helpers.

Deutsch:
    Logging-Konfiguration für die Kommandozeile.
"""

from __future__ import annotations

import logging
import os

LOGLEVEL_ENV = "JSONRESOURCE_LOGLEVEL"


def resolve_level(verbose: bool = False) -> int:
    """Level from ``JSONRESOURCE_LOGLEVEL``, else DEBUG when verbose, else WARNING."""

    fallback = "DEBUG" if verbose else "WARNING"
    level_name = os.getenv(LOGLEVEL_ENV, fallback).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> int:
    """
    Configure the root logger once and return the level in effect.

    Deutsch:
        Setzt das Root-Logging einmalig auf; weitere Aufrufe ändern nur den Level.
    """

    level = resolve_level(verbose)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return level

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
    )
    return level
