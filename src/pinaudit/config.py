"""Configuration loading for pinaudit.

Settings come from ``pinaudit.toml`` at the package root, or from the
``[tool.pinaudit]`` table of a ``pyproject.toml`` there. The dedicated file
wins when both exist.
"""

from pathlib import Path

import tomli

from pinaudit.errors import ConfigError
from pinaudit.paths import get_config_path, get_pyproject_path

DEFAULT_SCAN_DIRS = ["lib", "bin", "test", "tool", "example", "web"]
DEFAULT_EXTENSIONS = ["dart", "scss", "less"]


def load_config(project_path: Path) -> dict:
    """Load pinaudit settings for a package, or ``{}`` if none exist."""
    config_path = get_config_path(project_path)
    if config_path.exists():
        return _read_toml(config_path)

    pyproject_path = get_pyproject_path(project_path)
    if pyproject_path.exists():
        data = _read_toml(pyproject_path)
        section = data.get("tool", {}).get("pinaudit", {})
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.pinaudit] in {pyproject_path} must be a table")
        return section

    return {}


def _read_toml(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def _get_str_list(config: dict, key: str, default: list[str]) -> list[str]:
    value = config.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(value)


def get_excludes(config: dict) -> list[str]:
    """Get exclusion globs for file scanning."""
    return _get_str_list(config, "exclude", [])


def get_ignored_packages(config: dict) -> list[str]:
    """Get package names to skip during pin checks."""
    return _get_str_list(config, "ignore", [])


def get_scan_dirs(config: dict) -> list[str]:
    """Get directories (relative to the package root) to scan for files."""
    return _get_str_list(config, "scan_dirs", DEFAULT_SCAN_DIRS)


def get_extensions(config: dict) -> list[str]:
    """Get file extensions to scan for."""
    return _get_str_list(config, "extensions", DEFAULT_EXTENSIONS)


def allow_pins(config: dict) -> bool:
    """Check if pins are reported without failing the run."""
    value = config.get("allow_pins", False)
    if not isinstance(value, bool):
        raise ConfigError("'allow_pins' must be true or false")
    return value
