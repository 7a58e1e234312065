# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : entry.py
#   file_relpath : src/spdxmark/entry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Per-file REUSE metadata: reading it from headers and writing it back.

A [`FileEntry`][spdxmark.entry.FileEntry] is an immutable value holding the SPDX
license identifiers and copyright statements of one file. Entries are created
either by parsing the header of an existing file
([`FileEntry.read_from_file`][spdxmark.entry.FileEntry.read_from_file]) or
directly from known facts (a DEP-5 rule, a ``.license`` sidecar, CLI input).

The only side effect is
[`FileEntry.update_file_contents`][spdxmark.entry.FileEntry.update_file_contents],
which rewrites the header of the target file (or of its ``.license`` sidecar
when the target is binary).

Known limitations:
    - Ignore regions (``REUSE-IgnoreStart`` / ``REUSE-IgnoreEnd``) do not nest:
      an inner end marker closes the outer region.
    - Snippet ranges, contributor tags and inverted comment markers are not
      recognized.
"""

# REUSE-IgnoreStart

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from spdxmark.commenters.plain import PlainCommenter
from spdxmark.commenters.registry import guess_commenter
from spdxmark.config.logging import get_logger
from spdxmark.constants import IGNORE_END_MARKER, IGNORE_START_MARKER, LICENSE_IDENTIFIER_TAG
from spdxmark.core.errors import InvalidRequestError
from spdxmark.core.fs import default_file_system
from spdxmark.core.patterns import match_copyrights
from spdxmark.utils.file import is_sidecar, looks_binary, sidecar_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

    from spdxmark.combiner import CombinedEntry
    from spdxmark.commenters.base import Commenter
    from spdxmark.config.logging import SpdxmarkLogger
    from spdxmark.core.fs import FileSystem

logger: SpdxmarkLogger = get_logger(__name__)

_RE_LINE_BREAK = re.compile(r"[\r\n]")


def split_physical_lines(text: str) -> list[str]:
    """Split on CR and LF alike, dropping empty entries."""
    return [line for line in _RE_LINE_BREAK.split(text) if line]


def filter_ignored_blocks(lines: Iterable[str]) -> Iterator[str]:
    """Drop the lines between ignore markers (markers excluded).

    The toggle is flat: a nested start marker is a no-op and the first end
    marker resumes scanning.
    """
    ignoring = False
    for line in lines:
        if IGNORE_START_MARKER in line:
            ignoring = True
            continue
        if IGNORE_END_MARKER in line:
            ignoring = False
            continue
        if not ignoring:
            yield line


def collect_statements(lines: Iterable[str]) -> tuple[list[str], list[str]]:
    """Collect license identifiers and copyright statements from ``lines``.

    Args:
        lines (Iterable[str]): Physical lines with ignored regions removed.

    Returns:
        tuple[list[str], list[str]]: ``(licenses, copyrights)`` in encounter
            order. A line matching several copyright patterns contributes one
            statement per matching pattern.
    """
    licenses: list[str] = []
    copyrights: list[str] = []
    for line in lines:
        if LICENSE_IDENTIFIER_TAG in line:
            licenses.append(line.split(LICENSE_IDENTIFIER_TAG, 1)[1].strip())
            continue
        copyrights.extend(match_copyrights(line))
    return licenses, copyrights


@dataclass(frozen=True)
class FileEntry:
    """REUSE metadata collected for a single file.

    Attributes:
        path (Path): The file the entry refers to.
        license_identifiers (tuple[str, ...]): SPDX license identifiers
            (duplicates permitted).
        copyright_statements (tuple[str, ...]): Copyright statements
            (duplicates permitted).
    """

    path: Path
    license_identifiers: tuple[str, ...] = field(default=())
    copyright_statements: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any path-like / sequence input but store immutable values.
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "license_identifiers", tuple(self.license_identifiers))
        object.__setattr__(self, "copyright_statements", tuple(self.copyright_statements))

    @property
    def is_empty(self) -> bool:
        """True when the entry holds neither licenses nor copyrights."""
        return not self.license_identifiers and not self.copyright_statements

    def with_path(self, path: Path) -> FileEntry:
        """Return a copy of this entry bound to ``path``."""
        return replace(self, path=Path(path))

    def to_dict(self) -> dict[str, object]:
        """Serialize for machine output."""
        return {
            "path": str(self.path),
            "license_identifiers": list(self.license_identifiers),
            "copyright_statements": list(self.copyright_statements),
        }

    # ---- Reading ----------------------------------------------------------------

    @classmethod
    def read_from_file(cls, path: Path, fs: FileSystem | None = None) -> FileEntry | None:
        """Read REUSE metadata exclusively from the header of ``path``.

        Neither DEP-5 nor the ``.license`` sidecar are consulted; see
        [`resolve_entry`][spdxmark.resolver.resolve_entry] for that.

        Args:
            path (Path): File to scan.
            fs (FileSystem | None): Filesystem collaborator (local disk by default).

        Returns:
            FileEntry | None: The entry, or None when the file does not exist, is
                not valid text, or holds no recognizable metadata.
        """
        fs = fs or default_file_system()
        path = Path(path)
        if not fs.exists(path):
            logger.debug("read_from_file: %s does not exist", path)
            return None

        try:
            text: str = fs.read_text(path)
        except UnicodeDecodeError as exc:
            logger.warning("Cannot decode %s as text, no metadata read: %s", path, exc)
            return None

        lines = filter_ignored_blocks(split_physical_lines(text))
        licenses, copyrights = collect_statements(lines)
        if not licenses and not copyrights:
            logger.debug("read_from_file: no metadata found in %s", path)
            return None

        logger.trace(
            "read_from_file: %s -> %d license(s), %d copyright(s)",
            path,
            len(licenses),
            len(copyrights),
        )
        return cls(path, tuple(licenses), tuple(copyrights))

    @classmethod
    def read_header_block(
        cls,
        path: Path,
        commenter: Commenter,
        fs: FileSystem | None = None,
    ) -> FileEntry | None:
        """Read the metadata of the leading header block of ``path`` only.

        Unlike `read_from_file`, metadata-like lines in the body are ignored: the
        result holds what `update_file_contents` would replace.

        Args:
            path (Path): File to scan.
            commenter (Commenter): Comment style the header is written in.
            fs (FileSystem | None): Filesystem collaborator (local disk by default).

        Returns:
            FileEntry | None: The entry, or None when the file does not exist, is
                binary, or starts with no metadata block.
        """
        fs = fs or default_file_system()
        path = Path(path)
        if not fs.exists(path) or looks_binary(fs.read_bytes(path)):
            return None

        lines: list[str] = commenter.header_lines(fs.read_text(path))
        licenses, copyrights = collect_statements(lines)
        if not licenses and not copyrights:
            return None
        logger.trace("read_header_block: %s -> %d line(s)", path, len(lines))
        return cls(path, tuple(licenses), tuple(copyrights))

    # ---- Writing ----------------------------------------------------------------

    def update_file_contents(
        self,
        commenter: Commenter | None = None,
        fs: FileSystem | None = None,
        *,
        style_overrides: Mapping[str, str] | None = None,
    ) -> Path:
        """Rewrite the metadata header of the file with the data of this entry.

        The existing header (if any) is replaced and the rest of the content is
        preserved. An empty entry removes the header without writing a new one.
        Binary files (any NUL byte) cannot host a textual header: the metadata
        goes to ``<name>.license`` instead, in plain style, and the original
        bytes are left untouched.

        Args:
            commenter (Commenter | None): Comment style to use; resolved from the
                file extension when None. Ignored for binary targets.
            fs (FileSystem | None): Filesystem collaborator (local disk by default).
            style_overrides (Mapping[str, str] | None): Extension to style name
                overrides used when resolving the commenter.

        Returns:
            Path: The file that was written (the target or its sidecar).

        Raises:
            InvalidRequestError: If the target is a binary ``.license`` file.
        """
        fs = fs or default_file_system()
        exists: bool = fs.exists(self.path)

        if exists and looks_binary(fs.read_bytes(self.path)):
            if is_sidecar(self.path):
                raise InvalidRequestError(
                    f"Cannot update binary file {self.path}: "
                    "it is already a .license file and cannot get a sidecar."
                )
            sidecar: Path = sidecar_path(self.path)
            logger.info("Binary file %s: writing metadata to %s", self.path, sidecar)
            return self.with_path(sidecar).update_file_contents(PlainCommenter(), fs)

        commenter = commenter or guess_commenter(self.path, style_overrides)
        # An empty entry strips the existing block and writes no header.
        header: str = (
            ""
            if self.is_empty
            else commenter.generate_header(self.copyright_statements, self.license_identifiers)
        )
        if exists:
            new_content: str = header + commenter.remove_header(fs.read_text(self.path))
        else:
            new_content = header

        logger.debug("Updating %s with %r", self.path, commenter)
        fs.write_text(self.path, new_content)
        return self.path

    # ---- Combining --------------------------------------------------------------

    @staticmethod
    def combine_entries(base_directory: Path, entries: Sequence[FileEntry]) -> CombinedEntry:
        """Alias of [`combine_entries`][spdxmark.combiner.combine_entries]."""
        from spdxmark.combiner import combine_entries

        return combine_entries(base_directory, entries)


# REUSE-IgnoreEnd
