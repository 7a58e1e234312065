# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark configuration and logging.

Submodules are imported explicitly by their users (``spdxmark.config.logging``
is needed by every other module, so this package must stay import-light):

- [`spdxmark.config.logging`][]: TRACE-aware logger and colored formatter.
- [`spdxmark.config.model`][]: immutable `Config` snapshot.
- [`spdxmark.config.io`][]: TOML discovery and loading.
"""

from __future__ import annotations
