# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : model.py
#   file_relpath : src/spdxmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Configuration model.

`Config` is an immutable runtime snapshot. It is produced by
[`load_config`][spdxmark.config.io.load_config] from ``spdxmark.toml`` or the
``[tool.spdxmark]`` table of ``pyproject.toml``:

```toml
[tool.spdxmark]
dep5 = ".reuse/dep5"

[tool.spdxmark.styles]
txt = "pound"
tpl = "xml"
```

Path semantics:
    ``dep5`` is normalized against the directory holding the config file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from spdxmark.commenters.registry import commenter_names
from spdxmark.config.logging import get_logger
from spdxmark.constants import DEFAULT_DEP5_PATH
from spdxmark.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable SpdxMark configuration.

    Attributes:
        root (Path | None): Directory the configuration was resolved against.
        dep5_path (Path | None): DEP-5 file to consult, or None when absent.
        styles (Mapping[str, str]): Extension (without dot) to commenter name overrides.
    """

    root: Path | None = None
    dep5_path: Path | None = None
    styles: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_table(cls, table: Mapping[str, Any], *, root: Path) -> Config:
        """Build a `Config` from a parsed ``[tool.spdxmark]`` table.

        Args:
            table (Mapping[str, Any]): The SpdxMark table (may be empty).
            root (Path): Directory the table was read from.

        Returns:
            Config: The validated configuration.

        Raises:
            ConfigError: If a value has the wrong type or names an unknown style.
        """
        dep5_value: Any = table.get("dep5")
        if dep5_value is None:
            candidate: Path = root / DEFAULT_DEP5_PATH
            dep5_path: Path | None = candidate if candidate.is_file() else None
        elif isinstance(dep5_value, str):
            dep5_path = (root / dep5_value).resolve()
        else:
            raise ConfigError(f"'dep5' must be a string, got {type(dep5_value).__name__}")

        styles_value: Any = table.get("styles", {})
        if not isinstance(styles_value, dict):
            raise ConfigError(f"'styles' must be a table, got {type(styles_value).__name__}")

        known: tuple[str, ...] = commenter_names()
        styles: dict[str, str] = {}
        for ext, name in styles_value.items():
            style = str(name)
            if style not in known:
                raise ConfigError(
                    f"Unknown style '{style}' for extension '{ext}' "
                    f"(expected one of: {', '.join(known)})"
                )
            styles[str(ext).lstrip(".")] = style

        logger.debug("Config: root=%s dep5=%s styles=%s", root, dep5_path, styles)
        return cls(root=root, dep5_path=dep5_path, styles=MappingProxyType(styles))
