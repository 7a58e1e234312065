# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : fs.py
#   file_relpath : src/spdxmark/core/fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Filesystem collaborator used by the metadata model.

The core never touches the filesystem directly; it goes through an object
implementing [`FileSystem`][spdxmark.core.fs.FileSystem]. The default
[`LocalFileSystem`][spdxmark.core.fs.LocalFileSystem] reads and writes UTF-8
with newline translation disabled, so CRLF files survive byte-for-byte.

Notes:
    - No retries, no locking and no atomic replace: a write is a single
      best-effort ``open(..., "w")``. Callers that parallelize across a tree
      must serialize writes to the same path themselves.
    - I/O errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from spdxmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


class FileSystem(Protocol):
    """Protocol for the I/O operations consumed by the metadata model."""

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists and is a regular file."""
        ...

    def read_text(self, path: Path) -> str:
        """Return the full text of ``path`` without newline translation."""
        ...

    def write_text(self, path: Path, text: str) -> None:
        """Replace the content of ``path`` with ``text`` (no newline translation)."""
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Return the raw bytes of ``path``."""
        ...


class LocalFileSystem:
    """`FileSystem` backed by the local disk."""

    encoding: str

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: Path) -> bool:  # noqa: D102
        return path.is_file()

    def read_text(self, path: Path) -> str:  # noqa: D102
        with open(path, encoding=self.encoding, newline="") as f:
            return f.read()

    def write_text(self, path: Path, text: str) -> None:
        """Write ``text`` to ``path``.

        Args:
            path (Path): Destination file; created if missing.
            text (str): Full new content.
        """
        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(text)
        logger.debug("LocalFileSystem: wrote %d bytes to file %s", len(text.encode(self.encoding)), path)

    def read_bytes(self, path: Path) -> bytes:  # noqa: D102
        return path.read_bytes()


def default_file_system() -> FileSystem:
    """Return a fresh `LocalFileSystem` (no shared state across calls)."""
    return LocalFileSystem()
