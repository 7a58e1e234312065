# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : io.py
#   file_relpath : src/spdxmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Load SpdxMark configuration from TOML.

Sources, first match wins:

1. ``spdxmark.toml`` in the root directory (top-level table), then
2. the ``[tool.spdxmark]`` table of ``pyproject.toml``.

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from spdxmark.config.logging import get_logger
from spdxmark.config.model import Config
from spdxmark.constants import PYPROJECT_TOML_NAME, SPDXMARK_TOML_NAME
from spdxmark.core.errors import ConfigError

if TYPE_CHECKING:
    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return data_any if isinstance(data_any, dict) else {}


def find_config_table(root: Path) -> tuple[dict[str, Any], Path | None]:
    """Locate the SpdxMark table under ``root``.

    Args:
        root (Path): Directory to look in (not searched upwards).

    Returns:
        tuple[dict[str, Any], Path | None]: The table (empty when not configured)
            and the file it came from.
    """
    spdxmark_toml: Path = root / SPDXMARK_TOML_NAME
    if spdxmark_toml.is_file():
        logger.debug("Using configuration file %s", spdxmark_toml)
        return load_toml_dict(spdxmark_toml), spdxmark_toml

    pyproject: Path = root / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        tool: Any = load_toml_dict(pyproject).get("tool", {})
        table: Any = tool.get("spdxmark") if isinstance(tool, dict) else None
        if isinstance(table, dict):
            logger.debug("Using [tool.spdxmark] from %s", pyproject)
            return table, pyproject

    logger.debug("No SpdxMark configuration found in %s", root)
    return {}, None


def load_config(root: Path | None = None) -> Config:
    """Resolve the effective configuration for ``root`` (defaults to CWD).

    Args:
        root (Path | None): Project root directory.

    Returns:
        Config: The frozen configuration snapshot.

    Raises:
        ConfigError: If the configuration file is malformed.
    """
    resolved_root: Path = (root or Path.cwd()).resolve()
    table, _source = find_config_table(resolved_root)
    return Config.from_table(table, root=resolved_root)
