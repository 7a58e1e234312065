# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : reuse.py
#   file_relpath : src/spdxmark/dep5/reuse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""REUSE interpretation of a DEP-5 file.

Only stanzas carrying a ``Files`` field are rules; the leading header stanza
(``Format``, ``Upstream-Name``, ...) is ignored. Within a rule:

* ``Files`` is a whitespace-separated list of shell-style patterns, where ``*``
  also matches ``/`` (DEP-5 semantics),
* ``Copyright`` holds one statement per non-empty line,
* the first line of ``License`` is the SPDX expression.

When several rules match a path, the last one wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from spdxmark.config.logging import get_logger
from spdxmark.entry import FileEntry
from spdxmark.utils.file import compute_relpath

if TYPE_CHECKING:
    from pathlib import Path

    from spdxmark.config.logging import SpdxmarkLogger
    from spdxmark.dep5.control_file import DebianControlFile
    from spdxmark.dep5.stanza import Stanza

logger: SpdxmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Dep5Rule:
    """Licensing declared by one ``Files`` stanza."""

    patterns: tuple[str, ...]
    copyright_statements: tuple[str, ...] = ()
    license_identifiers: tuple[str, ...] = ()

    @classmethod
    def from_stanza(cls, stanza: Stanza) -> Dep5Rule | None:
        """Build a rule from ``stanza``; None if it has no ``Files`` field."""
        files: str | None = stanza.get("Files")
        if files is None:
            return None
        copyright_value: str = stanza.get("Copyright") or ""
        license_value: str = (stanza.get("License") or "").split("\n", 1)[0].strip()
        return cls(
            patterns=tuple(files.split()),
            copyright_statements=tuple(
                line.strip() for line in copyright_value.split("\n") if line.strip()
            ),
            license_identifiers=(license_value,) if license_value else (),
        )

    def matches(self, relpath: str) -> bool:
        """Return True if ``relpath`` (POSIX form) matches any pattern."""
        return any(fnmatchcase(relpath, pattern) for pattern in self.patterns)


def dep5_rules(control_file: DebianControlFile) -> list[Dep5Rule]:
    """Return the ``Files`` rules of ``control_file`` in file order."""
    rules: list[Dep5Rule] = []
    for stanza in control_file.stanzas:
        rule = Dep5Rule.from_stanza(stanza)
        if rule is not None:
            rules.append(rule)
    return rules


def entry_from_dep5(
    control_file: DebianControlFile,
    base_dir: Path,
    path: Path,
) -> FileEntry | None:
    """Construct the entry DEP-5 declares for ``path``.

    Args:
        control_file (DebianControlFile): The parsed DEP-5 file.
        base_dir (Path): Project root the ``Files`` patterns are relative to.
        path (Path): The file to look up.

    Returns:
        FileEntry | None: The entry of the last matching rule, or None.
    """
    relpath: str = compute_relpath(path, base_dir).as_posix()
    matched: Dep5Rule | None = None
    for rule in dep5_rules(control_file):
        if rule.matches(relpath):
            matched = rule

    if matched is None:
        logger.trace("No DEP-5 rule matches %s", relpath)
        return None

    logger.debug("DEP-5 rule %s matches %s", matched.patterns, relpath)
    return FileEntry(path, matched.license_identifiers, matched.copyright_statements)
