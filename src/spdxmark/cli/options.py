# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : options.py
#   file_relpath : src/spdxmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, output format, project
root) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from spdxmark.cli.errors import SpdxmarkUsageError
from spdxmark.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Program output formats."""

    TEXT = "text"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v`` / ``-q`` counts.

    Three or more ``-v`` select TRACE, two DEBUG, one INFO; any ``-q`` selects
    ERROR. The default is WARNING.

    Raises:
        SpdxmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SpdxmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail (-vvv enables TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option (text or json)."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([v.value for v in OutputFormat]),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)


def root_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--root`` option naming the project root (config + DEP-5 lookup)."""
    return click.option(
        "--root",
        "root",
        type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
        default=None,
        help="Project root holding spdxmark.toml / pyproject.toml (default: CWD).",
    )(f)
