"""Package manifest (pubspec.yaml) loading."""

from pathlib import Path
from urllib.parse import urlparse

import yaml

from pinaudit.errors import ManifestError
from pinaudit.paths import get_analysis_options_path

DEPENDENCIES_KEY = "dependencies"
DEV_DEPENDENCIES_KEY = "dev_dependencies"


def load_manifest(manifest_path: Path) -> dict:
    """Load a pubspec.yaml file into a dict."""
    try:
        content = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {manifest_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Could not read {manifest_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in {manifest_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} must contain a mapping at the top level")
    return data


def get_dependency_section(manifest: dict, key: str) -> dict:
    """Get a dependency mapping from the manifest; missing sections are empty."""
    section = manifest.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ManifestError(f"'{key}' must be a mapping of package names")
    return section


def get_package_name(manifest: dict, default: str) -> str:
    """Get the package name declared in the manifest."""
    name = manifest.get("name")
    return name if isinstance(name, str) and name else default


def get_analysis_options_include_package(path: Path | None = None) -> str | None:
    """Get the package referenced by ``include:`` in analysis_options.yaml.

    Returns None if there is no options file, no include directive, or the
    include is not a ``package:`` URI.
    """
    options_path = get_analysis_options_path(path or Path.cwd())
    if not options_path.exists():
        return None

    try:
        content = options_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Could not read {options_path}: {e}") from e

    try:
        analysis_options = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in {options_path}: {e}") from e

    if not isinstance(analysis_options, dict):
        return None

    include = analysis_options.get("include")
    if not isinstance(include, str) or not include.startswith("package:"):
        return None

    segments = [s for s in urlparse(include).path.split("/") if s]
    return segments[0] if segments else None
