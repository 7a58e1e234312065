# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/dep5/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""DEP-5 (Debian machine-readable copyright) support.

[`reuse`][spdxmark.dep5.reuse] is not imported here since it depends on the
entry model; import it explicitly.
"""

from __future__ import annotations

from spdxmark.dep5.control_file import DebianControlFile
from spdxmark.dep5.stanza import Stanza

__all__ = ["DebianControlFile", "Stanza"]
