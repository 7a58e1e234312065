# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : slash.py
#   file_relpath : src/spdxmark/commenters/slash.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Commenter for `//` line comments (C#, Scala, JavaScript, Go, ...)."""

from __future__ import annotations

from spdxmark.commenters.base import Commenter


class SlashCommenter(Commenter):
    """Commenter for C++-style single-line comments."""

    name = "slash"
    line_prefix = "// "
