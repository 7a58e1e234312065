# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : pound.py
#   file_relpath : src/spdxmark/commenters/pound.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Commenter for `#` line comments.

This covers shell-like and configuration formats: Python, shell scripts, YAML,
TOML, `.gitignore`, `.editorconfig`, PowerShell and friends.
"""

from __future__ import annotations

from spdxmark.commenters.base import Commenter


class PoundCommenter(Commenter):
    """Commenter for `#`-prefixed line comments."""

    name = "pound"
    line_prefix = "# "
