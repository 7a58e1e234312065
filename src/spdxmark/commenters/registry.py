# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : registry.py
#   file_relpath : src/spdxmark/commenters/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Extension to commenter lookup.

The table is a closed, read-only mapping built once at import time; lookups are
pure functions and every call returns a fresh (stateless) commenter instance.

Extensions are matched as stored (case-sensitive), without the leading dot.
The extension of a dot-file is the name after the dot, so ``.gitignore``
resolves to ``gitignore``. Unmapped extensions fall back to
[`PlainCommenter`][spdxmark.commenters.plain.PlainCommenter].
"""

from __future__ import annotations

from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from spdxmark.commenters.cblock import CBlockCommenter
from spdxmark.commenters.dashdash import DashDashCommenter
from spdxmark.commenters.plain import PlainCommenter
from spdxmark.commenters.pound import PoundCommenter
from spdxmark.commenters.slash import SlashCommenter
from spdxmark.commenters.xml import XmlCommenter
from spdxmark.config.logging import get_logger
from spdxmark.core.errors import UnknownStyleError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from os import PathLike

    from spdxmark.commenters.base import Commenter
    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


STYLES: Final[Mapping[str, type[Commenter]]] = MappingProxyType(
    {
        cls.name: cls
        for cls in (
            PlainCommenter,
            SlashCommenter,
            PoundCommenter,
            DashDashCommenter,
            CBlockCommenter,
            XmlCommenter,
        )
    }
)

_EXTENSIONS_BY_STYLE: Final[dict[type[Commenter], tuple[str, ...]]] = {
    PoundCommenter: (
        "bash",
        "cfg",
        "conf",
        "dockerfile",
        "dockerignore",
        "editorconfig",
        "env",
        "gitignore",
        "ini",
        "mk",
        "pl",
        "plugins",  # Play Framework plugin lists
        "properties",
        "ps1",
        "py",
        "pyi",
        "r",
        "rb",
        "sh",
        "toml",
        "yaml",
        "yml",
    ),
    SlashCommenter: (
        "cs",
        "dart",
        "fs",
        "go",
        "java",
        "js",
        "jsx",
        "kt",
        "rs",
        "sbt",
        "scala",
        "swift",
        "ts",
        "tsx",
    ),
    CBlockCommenter: ("c", "cpp", "css", "h", "hpp", "less", "scss"),
    DashDashCommenter: ("hs", "lua", "sql"),
    XmlCommenter: ("htm", "html", "md", "svg", "vue", "xhtml", "xml", "xsd", "xsl"),
}

EXTENSION_STYLES: Final[Mapping[str, type[Commenter]]] = MappingProxyType(
    {ext: cls for cls, exts in _EXTENSIONS_BY_STYLE.items() for ext in exts}
)


def extension_of(path: str | PathLike[str]) -> str:
    """Return the extension of ``path`` without the leading dot.

    Args:
        path (str | PathLike[str]): File path; only its final component is inspected.

    Returns:
        str: Text after the last ``.`` of the file name (``""`` if there is none).
    """
    name: str = PurePath(path).name
    idx: int = name.rfind(".")
    return name[idx + 1 :] if idx >= 0 else ""


def commenter_names() -> tuple[str, ...]:
    """Return the registered style names, sorted."""
    return tuple(sorted(STYLES))


def get_commenter(name: str) -> Commenter:
    """Instantiate the commenter registered under ``name``.

    Raises:
        UnknownStyleError: If no style has that name.
    """
    try:
        return STYLES[name]()
    except KeyError:
        raise UnknownStyleError(
            f"Unknown comment style '{name}' (expected one of: {', '.join(commenter_names())})"
        ) from None


def guess_commenter(
    path: str | PathLike[str],
    overrides: Mapping[str, str] | None = None,
) -> Commenter:
    """Resolve the commenter for ``path`` by its extension.

    Args:
        path (str | PathLike[str]): The file to resolve.
        overrides (Mapping[str, str] | None): Extension to style name mapping
            consulted before the built-in table (see `Config.styles`).

    Returns:
        Commenter: The matching commenter, or a `PlainCommenter` if the
            extension is unknown.
    """
    ext: str = extension_of(path)
    if overrides and ext in overrides:
        commenter = get_commenter(overrides[ext])
        logger.debug("Style override '%s' for extension '%s': %s", overrides[ext], ext, path)
        return commenter
    cls: type[Commenter] = EXTENSION_STYLES.get(ext, PlainCommenter)
    logger.trace("Resolved extension '%s' of %s to %s", ext, path, cls.__name__)
    return cls()
