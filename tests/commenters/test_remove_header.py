# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : test_remove_header.py
#   file_relpath : tests/commenters/test_remove_header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Tests for stripping SPDX metadata blocks from file contents."""

from __future__ import annotations

from spdxmark.commenters import (
    CBlockCommenter,
    Commenter,
    DashDashCommenter,
    PlainCommenter,
    PoundCommenter,
    SlashCommenter,
    XmlCommenter,
)
from tests.conftest import parametrize

# REUSE-IgnoreStart

ALL_STYLES: list[Commenter] = [
    PlainCommenter(),
    PoundCommenter(),
    SlashCommenter(),
    DashDashCommenter(),
    CBlockCommenter(),
    XmlCommenter(),
]


@parametrize("commenter", ALL_STYLES)
def test_removing_a_generated_header_leaves_nothing(commenter: Commenter) -> None:
    """A freshly generated header is removed entirely."""
    header: str = commenter.generate_header(["2024 Jane Doe"], ["MIT", "Apache-2.0"])

    assert commenter.remove_header(header) == ""


@parametrize("commenter", ALL_STYLES)
def test_body_after_generated_header_is_preserved(commenter: Commenter) -> None:
    """Everything after the block survives untouched."""
    body = "first line\n\nlast line\n"
    header: str = commenter.generate_header(["X"], ["MIT"])

    assert commenter.remove_header(header + body) == body


def test_content_without_header_is_unchanged() -> None:
    """Files without metadata are returned as-is."""
    content = "import os\n\nprint(os.getcwd())\n"

    assert PoundCommenter().remove_header(content) == content


def test_missing_final_newline_is_kept_missing() -> None:
    """No newline is added to content that did not end with one."""
    content = "# SPDX-License-Identifier: MIT\nprint('x')"

    assert PoundCommenter().remove_header(content) == "print('x')"


def test_blank_line_after_block_is_kept() -> None:
    """Spacing between the block and the code is not part of the block."""
    content = "// SPDX-FileCopyrightText: Old\n// SPDX-License-Identifier: GPL-2.0\n\nnamespace Foo;\n"

    assert SlashCommenter().remove_header(content) == "\nnamespace Foo;\n"


def test_separator_lines_before_code_are_kept() -> None:
    """Separator lines right before the first foreign line are restored."""
    content = "// SPDX-License-Identifier: MIT\n//\n\nnamespace Foo;\n"

    assert SlashCommenter().remove_header(content) == "//\n\nnamespace Foo;\n"


def test_separator_between_metadata_lines_is_dropped() -> None:
    """Separators followed by more metadata belong to the block."""
    content = "# SPDX-FileCopyrightText: X\n#\n# SPDX-License-Identifier: MIT\ncode\n"

    assert PoundCommenter().remove_header(content) == "code\n"


def test_only_the_leading_block_is_removed() -> None:
    """Metadata appearing after the first foreign line stays in place."""
    content = "# SPDX-License-Identifier: MIT\ncode\n# SPDX-License-Identifier: Apache-2.0\n"

    assert PoundCommenter().remove_header(content) == (
        "code\n# SPDX-License-Identifier: Apache-2.0\n"
    )


def test_legacy_copyright_lines_are_part_of_the_block() -> None:
    """Any recognized copyright form is consumed, not just the SPDX tag."""
    content = "# Copyright (C) 2019 Legacy Corp\n# © 2020 Someone\n# SPDX-License-Identifier: MIT\nx = 1\n"

    assert PoundCommenter().remove_header(content) == "x = 1\n"


def test_block_wrappers_are_consumed() -> None:
    """C block start and end lines around metadata are removed."""
    content = "/*\nSPDX-License-Identifier: MIT\n*/\nbody { color: red; }\n"

    assert CBlockCommenter().remove_header(content) == "body { color: red; }\n"


def test_regular_block_comment_is_not_a_wrapper() -> None:
    """A one-line comment that merely starts with the block opener is content."""
    content = "/* regular comment */\nint x;\n"

    assert CBlockCommenter().remove_header(content) == content


def test_xml_wrappers_with_trailing_spaces() -> None:
    """Wrapper lines are compared after trimming trailing whitespace."""
    content = "<!--  \nSPDX-License-Identifier: MIT\n-->\t\n<root/>\n"

    assert XmlCommenter().remove_header(content) == "<root/>\n"


def test_empty_content() -> None:
    """Empty input gives empty output."""
    assert PoundCommenter().remove_header("") == ""


@parametrize("commenter", ALL_STYLES)
def test_header_lines_of_generated_header(commenter: Commenter) -> None:
    """Only the metadata lines of the block are reported, in order."""
    header: str = commenter.generate_header(["2024 Jane Doe"], ["MIT"])

    assert commenter.header_lines(header + "body\n") == [
        f"{commenter.line_prefix}SPDX-FileCopyrightText: 2024 Jane Doe",
        f"{commenter.line_prefix}SPDX-License-Identifier: MIT",
    ]


def test_header_lines_stop_at_first_foreign_line() -> None:
    """Metadata-like text after the leading block is not part of the header."""
    content = (
        "# SPDX-License-Identifier: MIT\n"
        '"""Helpers.\n'
        "\n"
        "Copyright notices are parsed from file headers.\n"
        '"""\n'
        'TAG = "SPDX-License-Identifier: "\n'
    )

    assert PoundCommenter().header_lines(content) == ["# SPDX-License-Identifier: MIT"]


def test_header_lines_strip_carriage_returns() -> None:
    """CRLF content yields lines without the trailing CR."""
    content = "// SPDX-License-Identifier: MIT\r\nnamespace Foo;\r\n"

    assert SlashCommenter().header_lines(content) == ["// SPDX-License-Identifier: MIT"]


# REUSE-IgnoreEnd
