# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark CLI package.

This package groups all Click command definitions and supporting utilities
for the SpdxMark command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        spdxmark = "spdxmark.cli.main:cli"

All subcommands live in [`spdxmark.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
