# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : errors.py
#   file_relpath : src/spdxmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Exceptions raised by the SpdxMark core.

These are framework-agnostic; the CLI translates them into Click exceptions
with dedicated exit codes (see `spdxmark.cli.errors`).
"""

from __future__ import annotations


class SpdxmarkError(Exception):
    """Base class for all SpdxMark core errors."""


class FormatError(SpdxmarkError):
    """Malformed DEP-5 input (missing separator, orphaned continuation line)."""


class InvalidRequestError(SpdxmarkError):
    """A request that cannot be honored, e.g. updating a binary `.license` file."""


class UnknownStyleError(SpdxmarkError, KeyError):
    """No commenter is registered under the requested style name."""

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes.
        return str(self.args[0]) if self.args else ""


class ConfigError(SpdxmarkError):
    """Configuration file is unreadable, malformed or holds invalid values."""
