"""Tests for configuration loading."""

from pathlib import Path

import pytest

from pinaudit.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_SCAN_DIRS,
    allow_pins,
    get_excludes,
    get_extensions,
    get_ignored_packages,
    get_scan_dirs,
    load_config,
)
from pinaudit.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_config_is_empty(self, tmp_path: Path) -> None:
        """A package without config files gets an empty config."""
        assert load_config(tmp_path) == {}

    def test_loads_pinaudit_toml(self, tmp_path: Path) -> None:
        """Should read settings from pinaudit.toml."""
        (tmp_path / "pinaudit.toml").write_text(
            'exclude = ["lib/generated/**"]\n'
            'ignore = ["analyzer"]\n'
            "allow_pins = true\n"
        )

        config = load_config(tmp_path)

        assert get_excludes(config) == ["lib/generated/**"]
        assert get_ignored_packages(config) == ["analyzer"]
        assert allow_pins(config) is True

    def test_loads_pyproject_table(self, tmp_path: Path) -> None:
        """Should fall back to [tool.pinaudit] in pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.pinaudit]\nignore = ["build_runner"]\n'
        )

        config = load_config(tmp_path)

        assert get_ignored_packages(config) == ["build_runner"]

    def test_pinaudit_toml_wins_over_pyproject(self, tmp_path: Path) -> None:
        """pinaudit.toml takes precedence over pyproject.toml."""
        (tmp_path / "pinaudit.toml").write_text('ignore = ["a"]\n')
        (tmp_path / "pyproject.toml").write_text('[tool.pinaudit]\nignore = ["b"]\n')

        assert get_ignored_packages(load_config(tmp_path)) == ["a"]

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        """A pyproject.toml without the table is ignored."""
        (tmp_path / "pyproject.toml").write_text('[tool.ruff]\nexclude = ["x"]\n')
        assert load_config(tmp_path) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Invalid TOML raises ConfigError."""
        (tmp_path / "pinaudit.toml").write_text("exclude = [\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestGetters:
    """Tests for configuration getters."""

    def test_defaults(self) -> None:
        """Missing keys fall back to defaults."""
        assert get_excludes({}) == []
        assert get_ignored_packages({}) == []
        assert get_scan_dirs({}) == DEFAULT_SCAN_DIRS
        assert get_extensions({}) == DEFAULT_EXTENSIONS
        assert allow_pins({}) is False

    def test_defaults_are_copies(self) -> None:
        """Mutating a returned default does not change the module default."""
        get_scan_dirs({}).append("other")
        assert "other" not in DEFAULT_SCAN_DIRS

    def test_wrong_list_type(self) -> None:
        """Non-list or non-string items raise ConfigError."""
        with pytest.raises(ConfigError):
            get_excludes({"exclude": "lib/**"})
        with pytest.raises(ConfigError):
            get_ignored_packages({"ignore": [1, 2]})

    def test_wrong_bool_type(self) -> None:
        """A non-boolean allow_pins raises ConfigError."""
        with pytest.raises(ConfigError):
            allow_pins({"allow_pins": "yes"})
