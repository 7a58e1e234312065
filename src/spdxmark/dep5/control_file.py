# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : control_file.py
#   file_relpath : src/spdxmark/dep5/control_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Debian control-format (DEP-5) parser.

The parser is intentionally minimal and covers the subset of the Debian
copyright format used by REUSE:

* lines starting with ``#`` are comments and are skipped (they never end a stanza),
* blank lines separate stanzas,
* lines starting with a space or a tab continue the value of the previous field;
  the trimmed text is appended after a newline,
* every other line is a ``Key: value`` field.

See <https://www.debian.org/doc/debian-policy/ch-controlfields.html>.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spdxmark.config.logging import get_logger
from spdxmark.core.errors import FormatError
from spdxmark.dep5.stanza import Stanza

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from typing import TextIO

    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


class _StanzaBuilder:
    """Accumulates stanzas while scanning lines."""

    def __init__(self) -> None:
        self.stanzas: list[Stanza] = []
        self._current: list[tuple[str, str]] | None = None

    def end_stanza(self) -> None:
        if self._current is not None:
            self.stanzas.append(Stanza(tuple(self._current)))
        self._current = None

    def append_continuation(self, line: str) -> None:
        value: str = line.strip()
        if self._current is None:
            raise FormatError(f'No stanza to append value to: "{value}".')
        if not self._current:
            raise FormatError(f'No stanza field to append value to: "{value}".')
        key, previous = self._current[-1]
        self._current[-1] = (key, f"{previous}\n{value}")

    def append_field(self, key: str, value: str) -> None:
        if self._current is None:
            self._current = []
        self._current.append((key, value))


@dataclass(frozen=True)
class DebianControlFile:
    """A parsed DEP-5 file: stanzas in the order they appear in the source."""

    stanzas: tuple[Stanza, ...] = ()

    @classmethod
    def parse(cls, text: str) -> DebianControlFile:
        """Parse DEP-5 text.

        Args:
            text (str): Full file content; any line ending convention.

        Returns:
            DebianControlFile: The parsed stanzas.

        Raises:
            FormatError: If a field line lacks the ``:`` separator, or a
                continuation line appears before any field of the current stanza.
        """
        builder = _StanzaBuilder()
        normalized: str = text.replace("\r\n", "\n").replace("\r", "\n")

        for line in normalized.split("\n"):
            if line.startswith("#"):
                continue
            if not line.strip():
                builder.end_stanza()
                continue
            if line[0] in (" ", "\t"):
                builder.append_continuation(line)
                continue

            key, sep, value = line.partition(":")
            if not sep:
                raise FormatError(f'Format error: line doesn\'t have separator: "{line}".')
            builder.append_field(key, value.strip())

        builder.end_stanza()
        logger.debug("Parsed DEP-5 content: %d stanza(s)", len(builder.stanzas))
        return cls(tuple(builder.stanzas))

    @classmethod
    def read(cls, stream: TextIO) -> DebianControlFile:
        """Read a DEP-5 file from an open text stream (consumed to the end)."""
        return cls.parse(stream.read())

    @classmethod
    def from_path(cls, path: Path) -> DebianControlFile:
        """Read and parse the DEP-5 file at ``path`` (UTF-8)."""
        logger.debug("Reading DEP-5 file %s", path)
        with open(path, encoding="utf-8") as f:
            return cls.read(f)

    def __iter__(self) -> Iterator[Stanza]:
        return iter(self.stanzas)

    def __len__(self) -> int:
        return len(self.stanzas)
