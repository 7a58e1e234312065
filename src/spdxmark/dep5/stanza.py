# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : stanza.py
#   file_relpath : src/spdxmark/dep5/stanza.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""A single stanza (paragraph) of a Debian control-format file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class Stanza:
    """Ordered key/value fields of one stanza.

    Keys are kept exactly as written and need not be unique; ``fields`` mirrors
    the order of the source file.
    """

    fields: tuple[tuple[str, str], ...] = ()

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the first field named ``key`` (or ``default``)."""
        for k, v in self.fields:
            if k == key:
                return v
        return default

    def keys(self) -> list[str]:
        """Return field names in order (duplicates included)."""
        return [k for k, _ in self.fields]

    def to_dict(self) -> dict[str, object]:
        """Serialize for machine output."""
        return {"fields": [[k, v] for k, v in self.fields]}
