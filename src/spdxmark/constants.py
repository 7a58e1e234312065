# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : constants.py
#   file_relpath : src/spdxmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path

try:
    SPDXMARK_VERSION: str = get_version("spdxmark")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    SPDXMARK_VERSION = "0.0.0"

# Tags recognized in (and written to) file headers. REUSE-IgnoreStart
LICENSE_IDENTIFIER_TAG: str = "SPDX-License-Identifier:"
LICENSE_IDENTIFIER_MARKER: str = "SPDX-License-Identifier"
FILE_COPYRIGHT_TAG: str = "SPDX-FileCopyrightText:"
# REUSE-IgnoreEnd

IGNORE_START_MARKER: str = "REUSE-IgnoreStart"
IGNORE_END_MARKER: str = "REUSE-IgnoreEnd"

LICENSE_SIDECAR_SUFFIX: str = ".license"

DEFAULT_DEP5_PATH: Path = Path(".reuse") / "dep5"

# Configuration sources, in lookup order:
SPDXMARK_TOML_NAME: str = "spdxmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

LOG_LEVEL_ENV_VAR: str = "SPDXMARK_LOG_LEVEL"
