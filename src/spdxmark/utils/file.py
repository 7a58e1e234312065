# spdxmark:header:start
#
#   file         : file.py
#   file_relpath : src/spdxmark/utils/file.py
#   project      : SpdxMark
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Path and content helpers for SpdxMark."""

import os
from pathlib import Path

from spdxmark.constants import LICENSE_SIDECAR_SUFFIX


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = Path(file_path).resolve()
    resolved_root = Path(root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath: fall back to os.path.relpath ("../x")
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def sidecar_path(path: Path) -> Path:
    """Return the ``<name>.license`` sibling of ``path``."""
    return path.with_name(path.name + LICENSE_SIDECAR_SUFFIX)


def is_sidecar(path: Path) -> bool:
    """Return True if ``path`` names a ``.license`` sidecar file."""
    return path.name.endswith(LICENSE_SIDECAR_SUFFIX)


def looks_binary(data: bytes) -> bool:
    """Return True if ``data`` contains a NUL byte anywhere.

    This is a crude full-content scan (no content sniffing), kept simple so that
    results are reproducible.
    """
    return b"\x00" in data
