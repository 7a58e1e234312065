# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : errors.py
#   file_relpath : src/spdxmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Exceptions for the SpdxMark CLI.

Usage:
    Commands translate core exceptions (`spdxmark.core.errors`) into these via
    [`cli_error_from`][spdxmark.cli.errors.cli_error_from] so each failure
    category maps to a stable exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from spdxmark.cli.exit_codes import ExitCode
from spdxmark.core.errors import ConfigError, FormatError, InvalidRequestError, UnknownStyleError


class SpdxmarkCliError(click.ClickException):
    """Base class for all SpdxMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SpdxmarkUsageError(SpdxmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SpdxmarkFormatError(SpdxmarkCliError):
    """Error for malformed DEP-5 input."""

    exit_code = ExitCode.FORMAT_ERROR


class SpdxmarkFileNotFoundError(SpdxmarkCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SpdxmarkInvalidRequestError(SpdxmarkCliError):
    """Error for requests the core refuses (e.g., binary `.license` target)."""

    exit_code = ExitCode.INVALID_REQUEST


class SpdxmarkIOError(SpdxmarkCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class SpdxmarkConfigError(SpdxmarkCliError):
    """Error for configuration errors (malformed TOML, unknown style names)."""

    exit_code = ExitCode.CONFIG_ERROR


def cli_error_from(exc: Exception) -> SpdxmarkCliError:
    """Map a core or OS exception to the matching CLI error."""
    if isinstance(exc, FormatError):
        return SpdxmarkFormatError(f"Malformed DEP-5 file: {exc}")
    if isinstance(exc, InvalidRequestError):
        return SpdxmarkInvalidRequestError(str(exc))
    if isinstance(exc, UnknownStyleError):
        return SpdxmarkUsageError(str(exc))
    if isinstance(exc, ConfigError):
        return SpdxmarkConfigError(str(exc))
    if isinstance(exc, FileNotFoundError):
        return SpdxmarkFileNotFoundError(f"File not found: {exc.filename}")
    if isinstance(exc, OSError):
        return SpdxmarkIOError(f"I/O error: {exc}")
    if isinstance(exc, UnicodeDecodeError):
        return SpdxmarkIOError(f"Cannot decode file as {exc.encoding}: {exc.reason}")
    return SpdxmarkCliError(str(exc))
