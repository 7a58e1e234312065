# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : base.py
#   file_relpath : src/spdxmark/commenters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Base commenter: renders and strips SPDX metadata comment blocks.

A commenter is configured entirely by three class-level constants:

* ``comment_start_line``: optional line opening the block (e.g. ``/*``),
* ``line_prefix``: prefix for each metadata line (e.g. ``# ``),
* ``comment_end_line``: optional line closing the block (e.g. ``*/``).

Rendered layout (pound style):

```text
# SPDX-FileCopyrightText: Jane Doe <jane@example.com>
#
# SPDX-License-Identifier: MIT
```

Removal is a small state machine that consumes metadata lines, separator lines
and the block wrapper lines from the top of the content, and stops at the first
line that is none of those. It guarantees correct round-trips only for strict
formats (mostly the ones produced here); for anything looser it does a best
effort at preserving the rest of the file.

The separator is only rendered between copyright and license lines. A header
with copyright lines alone gets no trailing separator: removal keeps a
separator that follows the block, so a trailing one would be duplicated on
every update.
"""

# REUSE-IgnoreStart

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from spdxmark.config.logging import get_logger
from spdxmark.constants import FILE_COPYRIGHT_TAG, LICENSE_IDENTIFIER_MARKER, LICENSE_IDENTIFIER_TAG
from spdxmark.core.patterns import is_copyright_line

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


class Commenter:
    """Manage SPDX metadata comments for one comment syntax.

    Subclasses only override the class attributes; instances are stateless and
    safe to share across threads.
    """

    #: Registry name of the style (``plain``, ``pound``, ...).
    name: ClassVar[str] = "plain"
    #: Optional line opening the comment block.
    comment_start_line: ClassVar[str | None] = None
    #: Prefix of each rendered metadata line.
    line_prefix: ClassVar[str] = ""
    #: Optional line closing the comment block.
    comment_end_line: ClassVar[str | None] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    @property
    def separator_line(self) -> str:
        """The line separating copyright and license lines (the trimmed prefix)."""
        return self.line_prefix.rstrip()

    # ---- Rendering ------------------------------------------------------------

    def _iter_header_lines(
        self,
        copyright_statements: Iterable[str],
        license_identifiers: Iterable[str],
    ) -> Iterator[str]:
        licenses: list[str] = list(license_identifiers)
        had_any_line = False
        for statement in copyright_statements:
            if not had_any_line and self.comment_start_line is not None:
                yield self.comment_start_line
            yield f"{self.line_prefix}{FILE_COPYRIGHT_TAG} {statement}"
            had_any_line = True

        # Separator only between copyright and license lines, never trailing.
        if had_any_line and licenses:
            yield self.separator_line

        for identifier in licenses:
            if not had_any_line and self.comment_start_line is not None:
                yield self.comment_start_line
            yield f"{self.line_prefix}{LICENSE_IDENTIFIER_TAG} {identifier}"
            had_any_line = True

        if had_any_line and self.comment_end_line is not None:
            yield self.comment_end_line

    def generate_header(
        self,
        copyright_statements: Iterable[str],
        license_identifiers: Iterable[str],
    ) -> str:
        """Render the metadata block to insert at the top of a file.

        Args:
            copyright_statements (Iterable[str]): Copyright statements, in order.
            license_identifiers (Iterable[str]): SPDX license identifiers, in order.

        Returns:
            str: The rendered block, always ending with exactly one newline. With
                no statements at all this is just ``"\\n"``.
        """
        return "\n".join(self._iter_header_lines(copyright_statements, license_identifiers)) + "\n"

    # ---- Removal --------------------------------------------------------------

    def _is_metadata_line(self, line: str) -> bool:
        return is_copyright_line(line) or LICENSE_IDENTIFIER_MARKER in line

    def _is_wrapper_line(self, trimmed_line: str) -> bool:
        start = self.comment_start_line
        end = self.comment_end_line
        return (start is not None and trimmed_line == start.rstrip()) or (
            end is not None and trimmed_line == end.rstrip()
        )

    def _filter_lines(self, lines: Iterable[str]) -> Iterator[str]:
        separator = self.separator_line
        space_buffer: list[str] = []
        block_ended = False
        for line in lines:
            if not block_ended:
                if self._is_metadata_line(line):
                    space_buffer.clear()
                    continue

                trimmed_line = line.rstrip()
                if trimmed_line == separator:
                    space_buffer.append(line)
                    continue

                if self._is_wrapper_line(trimmed_line):
                    continue

                # First foreign line: keep the spacing that followed the block.
                block_ended = True
                yield from space_buffer

            yield line

    def header_lines(self, current_content: str) -> list[str]:
        """Return the metadata lines of the leading block of ``current_content``.

        These are exactly the metadata lines `remove_header` strips; metadata-like
        lines further down the file are not part of the header and are ignored.
        """
        separator = self.separator_line
        found: list[str] = []
        for line in current_content.split("\n"):
            if self._is_metadata_line(line):
                found.append(line.rstrip("\r"))
                continue
            trimmed_line = line.rstrip()
            if trimmed_line == separator or self._is_wrapper_line(trimmed_line):
                continue
            break
        return found

    def remove_header(self, current_content: str) -> str:
        """Strip a previously generated metadata block from ``current_content``.

        The final newline of the input (if any) is set aside before splitting and
        restored when anything remains, so that removing a freshly generated
        header yields the empty string and re-applying a header is a fixed point.

        Args:
            current_content (str): Current file contents.

        Returns:
            str: File contents without the leading metadata block.
        """
        had_final_newline = current_content.endswith("\n")
        body = current_content[:-1] if had_final_newline else current_content
        kept: list[str] = list(self._filter_lines(body.split("\n")))
        logger.trace(
            "%s: kept %d line(s) after header removal", self.__class__.__name__, len(kept)
        )
        if not kept:
            return ""
        return "\n".join(kept) + ("\n" if had_final_newline else "")


# REUSE-IgnoreEnd
