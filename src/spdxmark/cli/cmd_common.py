# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : cmd_common.py
#   file_relpath : src/spdxmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by the commands: configuration and DEP-5
loading, and translation of core exceptions into CLI errors.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from spdxmark.cli.errors import SpdxmarkCliError, cli_error_from
from spdxmark.config.io import load_config
from spdxmark.config.logging import get_logger
from spdxmark.core.errors import SpdxmarkError
from spdxmark.dep5.control_file import DebianControlFile

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from spdxmark.config.logging import SpdxmarkLogger
    from spdxmark.config.model import Config

logger: SpdxmarkLogger = get_logger(__name__)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise core and OS errors as CLI errors with dedicated exit codes."""
    try:
        yield
    except SpdxmarkCliError:
        raise
    except (SpdxmarkError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Translating %s into a CLI error", type(exc).__name__, exc_info=True)
        raise cli_error_from(exc) from exc


def load_cli_config(root: Path | None) -> Config:
    """Load the configuration for ``root``, translating errors."""
    with translate_errors():
        return load_config(root)


def load_control_file(config: Config, override: Path | None = None) -> DebianControlFile | None:
    """Parse the DEP-5 file named by ``override`` or the configuration.

    Returns:
        DebianControlFile | None: The parsed file, or None when none is configured.
    """
    path: Path | None = override or config.dep5_path
    if path is None:
        return None
    with translate_errors():
        return DebianControlFile.from_path(path)
