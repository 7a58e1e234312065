# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : patterns.py
#   file_relpath : src/spdxmark/core/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Compiled patterns recognizing copyright statements.

The patterns are deliberately kept as an ordered tuple of independent regexes
rather than one alternation: a single line may satisfy several of them, and
each match is recorded separately by the reader.
"""

# REUSE-IgnoreStart

from __future__ import annotations

import re
from typing import Final

RE_SPDX_COPYRIGHT: Final[re.Pattern[str]] = re.compile(r"SPDX-(?:File|Snippet)CopyrightText:\s*(.*)")
RE_COPYRIGHT_WORD: Final[re.Pattern[str]] = re.compile(r"Copyright\s?(?:\([Cc]\))?\s+(.*)")
RE_COPYRIGHT_SIGN: Final[re.Pattern[str]] = re.compile(r"©\s+(.*)")

COPYRIGHT_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    RE_SPDX_COPYRIGHT,
    RE_COPYRIGHT_WORD,
    RE_COPYRIGHT_SIGN,
)


def match_copyrights(line: str) -> list[str]:
    """Return the statement captured by every copyright pattern matching ``line``.

    Args:
        line (str): A single physical line.

    Returns:
        list[str]: One entry per matching pattern, in pattern order.
    """
    found: list[str] = []
    for pattern in COPYRIGHT_PATTERNS:
        m = pattern.search(line)
        if m:
            found.append(m.group(1))
    return found


def is_copyright_line(line: str) -> bool:
    """Return True if any copyright pattern matches ``line``."""
    return any(pattern.search(line) for pattern in COPYRIGHT_PATTERNS)


# REUSE-IgnoreEnd
