# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : test_resolve_entry.py
#   file_relpath : tests/resolver/test_resolve_entry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Tests for resolving file metadata across sidecar, header and DEP-5."""

from __future__ import annotations

from pathlib import Path

from spdxmark.dep5 import DebianControlFile
from spdxmark.entry import FileEntry
from spdxmark.resolver import metadata_target, resolve_entry
from tests.conftest import write_text

# REUSE-IgnoreStart
DEP5 = DebianControlFile.parse("Files: *\nCopyright: 2020 Dep5 Owner\nLicense: CC0-1.0\n")


def test_sidecar_wins_over_header(tmp_path: Path) -> None:
    """A `.license` sidecar takes precedence and is rebound to the file itself."""
    target: Path = write_text(tmp_path / "a.py", "# SPDX-License-Identifier: MIT\n")
    write_text(tmp_path / "a.py.license", "SPDX-License-Identifier: Apache-2.0\n")

    entry = resolve_entry(target, control_file=DEP5, base_dir=tmp_path)

    assert entry == FileEntry(target, ("Apache-2.0",))


def test_header_wins_over_dep5(tmp_path: Path) -> None:
    """A file header is used before the DEP-5 rules."""
    target: Path = write_text(tmp_path / "a.py", "# SPDX-License-Identifier: MIT\n")

    entry = resolve_entry(target, control_file=DEP5, base_dir=tmp_path)

    assert entry is not None
    assert entry.license_identifiers == ("MIT",)


def test_dep5_as_fallback(tmp_path: Path) -> None:
    """Files without header or sidecar fall back to DEP-5."""
    target: Path = write_text(tmp_path / "data.json", "{}\n")

    entry = resolve_entry(target, control_file=DEP5, base_dir=tmp_path)

    assert entry == FileEntry(target, ("CC0-1.0",), ("2020 Dep5 Owner",))


def test_binary_header_is_not_scanned(tmp_path: Path) -> None:
    """Binary content is never parsed for headers."""
    target: Path = tmp_path / "blob.bin"
    target.write_bytes(b"SPDX-License-Identifier: MIT\n\x00\x01")

    assert resolve_entry(target) is None
    assert resolve_entry(target, control_file=DEP5, base_dir=tmp_path) is not None


def test_nothing_found(tmp_path: Path) -> None:
    """Without any source the result is None."""
    target: Path = write_text(tmp_path / "plain.txt", "hello\n")

    assert resolve_entry(target) is None


def test_missing_file_with_sidecar(tmp_path: Path) -> None:
    """The sidecar is read even if the file itself is gone."""
    write_text(tmp_path / "gone.png.license", "SPDX-License-Identifier: MIT\n")

    entry = resolve_entry(tmp_path / "gone.png")

    assert entry is not None
    assert entry.path == tmp_path / "gone.png"


def test_metadata_target_of_plain_text_file(tmp_path: Path) -> None:
    """Text files without a sidecar carry their own metadata."""
    target: Path = write_text(tmp_path / "a.py", "x = 1\n")

    assert metadata_target(target) == target


def test_metadata_target_prefers_existing_sidecar(tmp_path: Path) -> None:
    """An existing sidecar holds the metadata even for text files."""
    target: Path = write_text(tmp_path / "notes.txt", "hello\n")
    write_text(tmp_path / "notes.txt.license", "SPDX-License-Identifier: MIT\n")

    assert metadata_target(target) == tmp_path / "notes.txt.license"


def test_metadata_target_of_binary_file(tmp_path: Path) -> None:
    """Binary files point at their (possibly missing) sidecar."""
    target: Path = tmp_path / "logo.png"
    target.write_bytes(b"\x89PNG\x00")

    assert metadata_target(target) == tmp_path / "logo.png.license"


def test_metadata_target_of_sidecar_is_itself(tmp_path: Path) -> None:
    """A `.license` file is never redirected to a further sidecar."""
    sidecar: Path = write_text(tmp_path / "a.png.license", "SPDX-License-Identifier: MIT\n")

    assert metadata_target(sidecar) == sidecar


# REUSE-IgnoreEnd
