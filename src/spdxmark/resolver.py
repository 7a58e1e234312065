# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : resolver.py
#   file_relpath : src/spdxmark/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Resolve the REUSE metadata of a file from all of its sources.

Precedence, first hit wins:

1. the ``<name>.license`` sidecar,
2. the header of the file itself (skipped for binary files),
3. the DEP-5 rule matching the file, when a control file is supplied.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from spdxmark.config.logging import get_logger
from spdxmark.core.fs import default_file_system
from spdxmark.dep5.reuse import entry_from_dep5
from spdxmark.entry import FileEntry
from spdxmark.utils.file import is_sidecar, looks_binary, sidecar_path

if TYPE_CHECKING:
    from spdxmark.config.logging import SpdxmarkLogger
    from spdxmark.core.fs import FileSystem
    from spdxmark.dep5.control_file import DebianControlFile

logger: SpdxmarkLogger = get_logger(__name__)


def resolve_entry(
    path: Path,
    *,
    control_file: DebianControlFile | None = None,
    base_dir: Path | None = None,
    fs: FileSystem | None = None,
) -> FileEntry | None:
    """Return the metadata that applies to ``path``.

    Args:
        path (Path): The file to resolve.
        control_file (DebianControlFile | None): Parsed DEP-5 file, if any.
        base_dir (Path | None): Root the DEP-5 patterns are relative to
            (defaults to the current directory).
        fs (FileSystem | None): Filesystem collaborator (local disk by default).

    Returns:
        FileEntry | None: An entry bound to ``path``, or None when no source
            declares anything.
    """
    fs = fs or default_file_system()
    path = Path(path)

    sidecar: Path = sidecar_path(path)
    from_sidecar: FileEntry | None = FileEntry.read_from_file(sidecar, fs)
    if from_sidecar is not None:
        logger.debug("Metadata for %s taken from %s", path, sidecar)
        return from_sidecar.with_path(path)

    if fs.exists(path) and not looks_binary(fs.read_bytes(path)):
        from_header: FileEntry | None = FileEntry.read_from_file(path, fs)
        if from_header is not None:
            logger.debug("Metadata for %s taken from its header", path)
            return from_header

    if control_file is not None:
        return entry_from_dep5(control_file, base_dir or Path.cwd(), path)

    return None


def metadata_target(path: Path, fs: FileSystem | None = None) -> Path:
    """Return the file whose header holds the metadata of ``path``.

    This is the ``.license`` sidecar when one exists or when ``path`` is binary,
    and ``path`` itself otherwise. A sidecar is its own target.

    Args:
        path (Path): The annotated file.
        fs (FileSystem | None): Filesystem collaborator (local disk by default).

    Returns:
        Path: ``path`` or its sidecar.
    """
    fs = fs or default_file_system()
    path = Path(path)
    if is_sidecar(path):
        return path

    sidecar: Path = sidecar_path(path)
    if fs.exists(sidecar):
        return sidecar
    if fs.exists(path) and looks_binary(fs.read_bytes(path)):
        return sidecar
    return path
