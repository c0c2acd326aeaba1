"""Tests for hudmark.toml loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hudmark.config import CONFIG_FILENAME, HudmarkConfig, load_config
from hudmark.errors import ConfigError


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project directory with a complete hudmark.toml."""
    (tmp_path / CONFIG_FILENAME).write_text(
        """
[hudmark]
base_file = "Pages/Settings.ui"
root_marker_id = "Overlay"
root_selector = "#Content"
style_var_prefix = "Btn"
log_level = "DEBUG"
unknown_key = 1
"""
    )
    return tmp_path


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "nope.toml") == HudmarkConfig()

    def test_directory_is_searched(self, project_dir: Path) -> None:
        config = load_config(project_dir)

        assert config == HudmarkConfig(
            base_file="Pages/Settings.ui",
            root_marker_id="Overlay",
            root_selector="#Content",
            style_var_prefix="Btn",
            log_level="DEBUG",
        )

    def test_explicit_file(self, project_dir: Path) -> None:
        assert load_config(project_dir / CONFIG_FILENAME).root_marker_id == "Overlay"

    def test_defaults_for_missing_keys(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[hudmark]\nbase_file = "Base.ui"\n')

        config = load_config(path)

        assert config.base_file == "Base.ui"
        assert config.root_marker_id == "HudRoot"
        assert config.style_var_prefix == "CustomStyle"

    def test_missing_section(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[other]\nkey = "value"\n')

        assert load_config(path) == HudmarkConfig()

    def test_cwd_default(self, project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(project_dir)

        assert load_config().root_selector == "#Content"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[hudmark\n")

        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(path)

    def test_wrong_value_type(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[hudmark]\nroot_marker_id = 5\n")

        with pytest.raises(ConfigError, match="root_marker_id"):
            load_config(path)

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('hudmark = "yes"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(path)


class TestApplyLogging:
    """Tests for HudmarkConfig.apply_logging."""

    def test_sets_package_logger_level(self) -> None:
        logger = logging.getLogger("hudmark")
        previous = logger.level
        try:
            HudmarkConfig(log_level="debug").apply_logging()
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_unknown_level(self) -> None:
        with pytest.raises(ConfigError, match="unknown log level"):
            HudmarkConfig(log_level="chatty").apply_logging()
