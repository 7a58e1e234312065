# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : dashdash.py
#   file_relpath : src/spdxmark/commenters/dashdash.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Commenter for `--` line comments (SQL, Lua, Haskell)."""

from __future__ import annotations

from spdxmark.commenters.base import Commenter


class DashDashCommenter(Commenter):
    name = "dashdash"
    line_prefix = "-- "
