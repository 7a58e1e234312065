# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : combiner.py
#   file_relpath : src/spdxmark/combiner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Merge metadata of several files into one de-duplicated view.

Entries are ordered by their path relative to a base directory before merging,
so the result does not depend on the order in which files were discovered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spdxmark.config.logging import get_logger
from spdxmark.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from spdxmark.config.logging import SpdxmarkLogger
    from spdxmark.entry import FileEntry

logger: SpdxmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class CombinedEntry:
    """Combined REUSE metadata of several files.

    Attributes:
        license_identifiers (tuple[str, ...]): De-duplicated, first-seen order.
        copyright_statements (tuple[str, ...]): De-duplicated, first-seen order.
    """

    license_identifiers: tuple[str, ...] = ()
    copyright_statements: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Serialize for machine output."""
        return {
            "license_identifiers": list(self.license_identifiers),
            "copyright_statements": list(self.copyright_statements),
        }


def _append_unique(target: list[str], seen: set[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in seen:
            seen.add(value)
            target.append(value)


def combine_entries(base_directory: Path, entries: Iterable[FileEntry]) -> CombinedEntry:
    """Combine ``entries`` preserving relative order and removing duplicates.

    Args:
        base_directory (Path): Directory used to compute each entry's relative
            path; the lexical order of those paths drives the merge order.
        entries (Iterable[FileEntry]): Entries to combine.

    Returns:
        CombinedEntry: Licenses and copyrights, each value kept at its first
            occurrence across all entries.
    """
    ordered: list[FileEntry] = sorted(
        entries, key=lambda e: compute_relpath(e.path, base_directory).as_posix()
    )

    licenses: list[str] = []
    copyrights: list[str] = []
    seen_licenses: set[str] = set()
    seen_copyrights: set[str] = set()
    for entry in ordered:
        _append_unique(licenses, seen_licenses, entry.license_identifiers)
        _append_unique(copyrights, seen_copyrights, entry.copyright_statements)

    logger.debug(
        "Combined %d entries: %d license(s), %d copyright(s)",
        len(ordered),
        len(licenses),
        len(copyrights),
    )
    return CombinedEntry(tuple(licenses), tuple(copyrights))
