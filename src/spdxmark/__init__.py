# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark package.

SpdxMark reads and writes REUSE/SPDX licensing headers. For each file it
determines the license identifiers and copyright statements that apply (from
the file header, a ``.license`` sidecar or a DEP-5 file) and regenerates the
header in the comment syntax of the file type, idempotently.
"""

from __future__ import annotations

from spdxmark.combiner import CombinedEntry, combine_entries
from spdxmark.commenters import Commenter, get_commenter, guess_commenter
from spdxmark.core.errors import (
    ConfigError,
    FormatError,
    InvalidRequestError,
    SpdxmarkError,
    UnknownStyleError,
)
from spdxmark.dep5 import DebianControlFile, Stanza
from spdxmark.entry import FileEntry
from spdxmark.resolver import resolve_entry

__all__ = [
    "CombinedEntry",
    "Commenter",
    "ConfigError",
    "DebianControlFile",
    "FileEntry",
    "FormatError",
    "InvalidRequestError",
    "SpdxmarkError",
    "Stanza",
    "UnknownStyleError",
    "combine_entries",
    "get_commenter",
    "guess_commenter",
    "resolve_entry",
]
