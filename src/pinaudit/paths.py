"""Centralized path management for files pinaudit reads and writes."""

from pathlib import Path

# Package manifest and analyzer configuration
MANIFEST_FILE = "pubspec.yaml"
ANALYSIS_OPTIONS_FILE = "analysis_options.yaml"

# pinaudit configuration sources, in order of precedence
CONFIG_FILE = "pinaudit.toml"
PYPROJECT_FILE = "pyproject.toml"


def get_manifest_path(project_path: Path) -> Path:
    """Get the pubspec.yaml path for a package."""
    return project_path / MANIFEST_FILE


def get_analysis_options_path(project_path: Path) -> Path:
    """Get the analysis_options.yaml path for a package."""
    return project_path / ANALYSIS_OPTIONS_FILE


def get_config_path(project_path: Path) -> Path:
    """Get the pinaudit.toml path for a package."""
    return project_path / CONFIG_FILE


def get_pyproject_path(project_path: Path) -> Path:
    """Get the pyproject.toml path for a package."""
    return project_path / PYPROJECT_FILE

