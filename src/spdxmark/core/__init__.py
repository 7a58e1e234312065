# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Core primitives shared by the SpdxMark modules.

- [`spdxmark.core.errors`][]: exception hierarchy.
- [`spdxmark.core.fs`][]: filesystem collaborator protocol and local implementation.
- [`spdxmark.core.patterns`][]: compiled metadata patterns.
"""

from __future__ import annotations
