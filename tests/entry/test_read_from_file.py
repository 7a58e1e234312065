# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : test_read_from_file.py
#   file_relpath : tests/entry/test_read_from_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Tests for reading REUSE metadata from file headers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spdxmark.commenters import PlainCommenter, PoundCommenter
from spdxmark.core.patterns import match_copyrights
from spdxmark.entry import FileEntry, filter_ignored_blocks, split_physical_lines
from tests.conftest import parametrize, write_text

if TYPE_CHECKING:
    from pathlib import Path

# REUSE-IgnoreStart


def test_reads_licenses_and_copyrights(tmp_path: Path) -> None:
    """Statements are collected in encounter order."""
    path: Path = write_text(
        tmp_path / "mod.py",
        "# SPDX-FileCopyrightText: 2024 Jane Doe\n"
        "# SPDX-FileCopyrightText: 2025 John Doe\n"
        "#\n"
        "# SPDX-License-Identifier: MIT\n"
        "import os\n",
    )

    entry = FileEntry.read_from_file(path)

    assert entry == FileEntry(path, ("MIT",), ("2024 Jane Doe", "2025 John Doe"))


def test_missing_file_gives_none(tmp_path: Path) -> None:
    """A path that does not exist yields no entry."""
    assert FileEntry.read_from_file(tmp_path / "absent.py") is None


def test_file_without_metadata_gives_none(tmp_path: Path) -> None:
    """Plain content yields no entry."""
    path: Path = write_text(tmp_path / "plain.txt", "hello\nworld\n")

    assert FileEntry.read_from_file(path) is None


def test_undecodable_file_gives_none(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 are reported as no metadata."""
    path: Path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    assert FileEntry.read_from_file(path) is None


def test_duplicates_are_kept(tmp_path: Path) -> None:
    """Repeated statements are not de-duplicated at read time."""
    path: Path = write_text(
        tmp_path / "dup.sh",
        "# SPDX-License-Identifier: MIT\n# SPDX-License-Identifier: MIT\n",
    )

    entry = FileEntry.read_from_file(path)

    assert entry is not None
    assert entry.license_identifiers == ("MIT", "MIT")


def test_license_value_is_trimmed(tmp_path: Path) -> None:
    """The identifier is the trimmed text after the tag, comment closers included."""
    path: Path = write_text(tmp_path / "a.css", "/* SPDX-License-Identifier:   MIT   */\n")

    entry = FileEntry.read_from_file(path)

    assert entry is not None
    assert entry.license_identifiers == ("MIT   */",)


def test_crlf_and_cr_line_breaks(tmp_path: Path) -> None:
    """CR and CRLF separate lines just like LF."""
    path: Path = write_text(
        tmp_path / "win.cs",
        "// SPDX-FileCopyrightText: X\r\n//\r\n// SPDX-License-Identifier: MIT\r// tail",
    )

    entry = FileEntry.read_from_file(path)

    assert entry is not None
    assert entry.copyright_statements == ("X",)
    assert entry.license_identifiers == ("MIT",)


def test_ignore_blocks_are_skipped(tmp_path: Path) -> None:
    """Lines between the ignore markers do not contribute."""
    path: Path = write_text(
        tmp_path / "doc.md",
        "<!-- SPDX-License-Identifier: MIT -->\n"
        "REUSE-IgnoreStart\n"
        "SPDX-License-Identifier: GPL-3.0-only\n"
        "Copyright (C) 1999 Example\n"
        "REUSE-IgnoreEnd\n"
        "© 2024 After Ignore\n",
    )

    entry = FileEntry.read_from_file(path)

    assert entry is not None
    assert entry.license_identifiers == ("MIT -->",)
    assert entry.copyright_statements == ("2024 After Ignore",)


def test_ignore_markers_do_not_nest() -> None:
    """A nested start is a no-op and the first end marker resumes scanning."""
    lines: list[str] = [
        "a",
        "REUSE-IgnoreStart",
        "b",
        "REUSE-IgnoreStart",
        "c",
        "REUSE-IgnoreEnd",
        "d",
        "REUSE-IgnoreEnd",
        "e",
    ]

    assert list(filter_ignored_blocks(lines)) == ["a", "d", "e"]


def test_unterminated_ignore_block_hides_the_rest() -> None:
    """Without an end marker everything after the start is ignored."""
    assert list(filter_ignored_blocks(["a", "x REUSE-IgnoreStart x", "b"])) == ["a"]


def test_split_physical_lines_drops_empty_entries() -> None:
    """Empty lines carry no metadata and are dropped."""
    assert split_physical_lines("a\r\n\r\nb\rc\n") == ["a", "b", "c"]


@parametrize(
    "line, expected",
    [
        ("# SPDX-FileCopyrightText: 2024 Jane Doe", ["2024 Jane Doe"]),
        ("// SPDX-SnippetCopyrightText: 2023 Snip", ["2023 Snip"]),
        ("Copyright (C) 2020 Foo", ["2020 Foo"]),
        ("Copyright (c) 2020 Foo", ["2020 Foo"]),
        ("Copyright 2020 Foo", ["2020 Foo"]),
        ("© 2021 Bar", ["2021 Bar"]),
        ("Copyright © 2022 Baz", ["© 2022 Baz", "2022 Baz"]),
        ("no statement here", []),
        ("Copyrighted material", []),
    ],
)
def test_copyright_patterns(line: str, expected: list[str]) -> None:
    """Each matching pattern contributes its own capture, in pattern order."""
    assert match_copyrights(line) == expected


def test_one_statement_per_matching_pattern(tmp_path: Path) -> None:
    """A line matched by two patterns yields two statements."""
    path: Path = write_text(tmp_path / "x.txt", "Copyright © 2022 Baz\n")

    entry = FileEntry.read_from_file(path)

    assert entry is not None
    assert entry.copyright_statements == ("© 2022 Baz", "2022 Baz")
    assert entry.license_identifiers == ()


def test_license_line_is_not_scanned_for_copyrights(tmp_path: Path) -> None:
    """A license line only contributes its identifier."""
    path: Path = write_text(
        tmp_path / "x.txt", "SPDX-License-Identifier: LicenseRef-Copyright 2020 X\n"
    )

    entry = FileEntry.read_from_file(path)

    assert entry is not None
    assert entry.copyright_statements == ()


def test_header_block_ignores_metadata_in_body(tmp_path: Path) -> None:
    """Only the leading block is read; body text that looks like metadata is not."""
    path: Path = write_text(
        tmp_path / "tags.py",
        "# SPDX-FileCopyrightText: 2024 Jane Doe\n"
        "#\n"
        "# SPDX-License-Identifier: MIT\n"
        '"""Tag helpers.\n'
        "\n"
        "Copyright notices are parsed from file headers.\n"
        '"""\n'
        'LICENSE_TAG = "SPDX-License-Identifier: "\n',
    )

    entry = FileEntry.read_header_block(path, PoundCommenter())

    assert entry == FileEntry(path, ("MIT",), ("2024 Jane Doe",))


def test_header_block_absent(tmp_path: Path) -> None:
    """A file that does not start with a metadata block yields no entry."""
    path: Path = write_text(tmp_path / "mod.py", 'TAG = "SPDX-License-Identifier: MIT"\n')

    assert FileEntry.read_header_block(path, PoundCommenter()) is None


def test_header_block_of_binary_file(tmp_path: Path) -> None:
    """Binary files have no header block."""
    path: Path = tmp_path / "logo.png"
    path.write_bytes(b"SPDX-License-Identifier: MIT\n\x00")

    assert FileEntry.read_header_block(path, PlainCommenter()) is None


# REUSE-IgnoreEnd
