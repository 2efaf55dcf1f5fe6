"""Run a pin audit over a package and report the results."""

import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from pinaudit import __version__
from pinaudit.analysis.pins import find_pins
from pinaudit.config import get_extensions, get_scan_dirs
from pinaudit.errors import ManifestError
from pinaudit.exclusion import ExclusionGlob, list_files_with_extension
from pinaudit.log import log_dependency_info, log_dependency_infractions
from pinaudit.manifest import (
    DEPENDENCIES_KEY,
    DEV_DEPENDENCIES_KEY,
    get_analysis_options_include_package,
    get_dependency_section,
    get_package_name,
)
from pinaudit.models.results import AuditResults
from pinaudit.paths import get_manifest_path

logger = logging.getLogger(__name__)

# dependency_overrides are local workarounds; pinning them is expected
AUDITED_SECTIONS = (DEPENDENCIES_KEY, DEV_DEPENDENCIES_KEY)


def audit_package(
    project_path: Path,
    manifest: dict,
    config: dict,
    ignored_packages: Iterable[str] = (),
    excludes: Iterable[ExclusionGlob] = (),
) -> AuditResults:
    """Classify a package's dependencies and count its source files."""
    ignored = list(ignored_packages)
    globs = list(excludes)

    results = AuditResults(
        package=get_package_name(manifest, project_path.name),
        manifest=get_manifest_path(project_path),
        audited_at=datetime.now(),
        pinaudit_version=__version__,
    )

    for section in AUDITED_SECTIONS:
        dependencies = get_dependency_section(manifest, section)
        infractions, unparseable = find_pins(dependencies, ignored, section)
        results.infractions.extend(infractions)
        results.unparseable.extend(unparseable)

    for extension in get_extensions(config):
        count = 0
        for scan_dir in get_scan_dirs(config):
            count += len(
                list_files_with_extension(
                    project_path / scan_dir, globs, extension, base=project_path
                )
            )
        results.files_scanned[extension] = count

    # Only the include package is lost when analysis_options.yaml is broken
    try:
        results.analysis_options_include = get_analysis_options_include_package(project_path)
    except ManifestError as e:
        logger.warning("Ignoring analysis options: %s", e)

    return results


def report_results(results: AuditResults) -> None:
    """Log pins, unparseable constraints and scan counts."""
    if results.infractions:
        log_dependency_infractions(
            "These packages are pinned in pubspec.yaml:",
            [i.describe() for i in results.infractions],
        )
    else:
        logger.info("No dependency pins found.")

    if results.unparseable:
        log_dependency_infractions(
            "These packages have version constraints that could not be parsed:",
            [u.describe() for u in results.unparseable],
        )

    log_dependency_info(
        "Scanned source files:",
        [f"{ext}: {count}" for ext, count in results.files_scanned.items()],
    )
