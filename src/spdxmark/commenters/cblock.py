# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : cblock.py
#   file_relpath : src/spdxmark/commenters/cblock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Commenter for C-like block comments: `/* ... */`.

Layout example:

```text
/*
SPDX-FileCopyrightText: Jane Doe <jane@example.com>

SPDX-License-Identifier: MIT
*/
```

Inner lines carry no per-line prefix, so the separator is an empty line.
"""

from __future__ import annotations

from spdxmark.commenters.base import Commenter


class CBlockCommenter(Commenter):
    """Commenter for C-style block comments (CSS, C, SCSS, ...)."""

    name = "cblock"
    comment_start_line = "/*"
    line_prefix = ""
    comment_end_line = "*/"
