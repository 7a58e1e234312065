# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : plain.py
#   file_relpath : src/spdxmark/commenters/plain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Commenter for files without comment syntax (plain text, `.license` sidecars)."""

from __future__ import annotations

from spdxmark.commenters.base import Commenter


class PlainCommenter(Commenter):
    """Render metadata lines verbatim, separated by an empty line."""

    name = "plain"
    line_prefix = ""
