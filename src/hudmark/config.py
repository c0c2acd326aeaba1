"""
hudmark.toml loading.

Example:

    [hudmark]
    base_file = "Pages/Placeholder.ui"
    root_marker_id = "HudRoot"
    root_selector = "#Content"
    style_var_prefix = "CustomStyle"
    log_level = "DEBUG"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hudmark.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "hudmark.toml"


@dataclass
class HudmarkConfig:
    """Settings shared by every interface built in one host."""

    base_file: str | None = None
    root_marker_id: str = "HudRoot"  # userId of the node that controls show/hide
    root_selector: str = ""  # scope top-level nodes are appended into
    style_var_prefix: str = "CustomStyle"
    log_level: str = "INFO"

    def apply_logging(self) -> None:
        """Set the hudmark logger level from this config."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ConfigError(f"unknown log level '{self.log_level}'")
        logging.getLogger("hudmark").setLevel(level)


def _expect_str(data: dict[str, Any], key: str, default: str | None) -> str | None:
    value = data.get(key, default)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"[hudmark] {key} must be a string, got {type(value).__name__}")
    return value


def load_config(path: Path | None = None) -> HudmarkConfig:
    """
    Load configuration from a hudmark.toml file.

    Args:
        path: File to read; a directory is searched for hudmark.toml.
            A missing file yields the defaults.

    Returns:
        HudmarkConfig with file values over defaults

    Raises:
        ConfigError: If the file is not valid TOML or a value has the wrong type
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
    elif path.is_dir():
        path = path / CONFIG_FILENAME

    if not path.exists():
        logger.debug("No %s found, using defaults", path)
        return HudmarkConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    section = data.get("hudmark", {})
    if not isinstance(section, dict):
        raise ConfigError("[hudmark] must be a table")

    defaults = HudmarkConfig()
    return HudmarkConfig(
        base_file=_expect_str(section, "base_file", defaults.base_file),
        root_marker_id=_expect_str(section, "root_marker_id", defaults.root_marker_id)
        or defaults.root_marker_id,
        root_selector=_expect_str(section, "root_selector", defaults.root_selector) or "",
        style_var_prefix=_expect_str(section, "style_var_prefix", defaults.style_var_prefix)
        or defaults.style_var_prefix,
        log_level=_expect_str(section, "log_level", defaults.log_level) or defaults.log_level,
    )
