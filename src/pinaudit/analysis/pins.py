"""Pin detection for dependency version constraints.

A pin is a version constraint that is stricter than it needs to be and so
blocks non-breaking upgrades. Classification looks only at the shape of the
constraint's upper bound:

- ``^1.2.0`` allows every patch and minor release below 2.0.0: not a pin.
- ``<1.2.4`` truncates the patch range of 1.2.x: blocks patch releases.
- ``<=1.2.0`` always blocks the very next release: inclusive maximum.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pinaudit.errors import ConstraintParseError
from pinaudit.models.constraint import (
    AnyConstraint,
    ExactConstraint,
    VersionRange,
    is_first_prerelease,
)
from pinaudit.models.pins import (
    PinEvaluation,
    RawConstraint,
    StructuredWithVersion,
    Unresolvable,
    VersionSpecifier,
)
from pinaudit.models.results import PinInfraction, UnparseableDependency
from pinaudit.versioning.parser import parse_constraint

logger = logging.getLogger(__name__)


def inspect_version_for_pins(version: str) -> PinEvaluation:
    """Return the reason ``version`` is a pin, or NOT_A_PIN.

    Raises:
        ConstraintParseError: If ``version`` is not a valid constraint.
    """
    constraint = parse_constraint(version)

    if isinstance(constraint, AnyConstraint):
        return PinEvaluation.NOT_A_PIN

    if isinstance(constraint, ExactConstraint):
        return PinEvaluation.DIRECT_PIN

    if isinstance(constraint, VersionRange):
        if constraint.include_max:
            return PinEvaluation.INCLUSIVE_MAX

        upper = constraint.max
        if upper is None:
            return PinEvaluation.NOT_A_PIN

        if upper.build or (upper.prerelease and not is_first_prerelease(upper)):
            return PinEvaluation.BUILD_OR_PRERELEASE

        if upper.major > 0:
            if upper.patch > 0:
                return PinEvaluation.BLOCKS_PATCH_RELEASES
            if upper.minor > 0:
                return PinEvaluation.BLOCKS_MINOR_BUMPS
        elif upper.patch > 0:
            return PinEvaluation.BLOCKS_MINOR_BUMPS

        return PinEvaluation.NOT_A_PIN

    return PinEvaluation.EMPTY_PIN


def resolve_specifier(package_meta: object) -> VersionSpecifier:
    """Resolve a manifest dependency value into a version specifier."""
    if isinstance(package_meta, str):
        return RawConstraint(package_meta)
    if isinstance(package_meta, Mapping):
        # Only versions can be checked, not git refs, paths or sdks
        version = package_meta.get("version")
        if isinstance(version, str):
            return StructuredWithVersion(version)
    return Unresolvable()


def find_pins(
    dependencies: Mapping[str, object],
    ignored_packages: Iterable[str] = (),
    section: str = "dependencies",
) -> tuple[list[PinInfraction], list[UnparseableDependency]]:
    """Classify every dependency and collect pins and unparseable entries.

    Args:
        dependencies: Mapping of package name to version specifier.
        ignored_packages: Package names to skip entirely.
        section: Manifest section the mapping came from.

    Returns:
        Tuple of (infractions, unparseable entries), in mapping order.
    """
    ignored = set(ignored_packages)
    infractions: list[PinInfraction] = []
    unparseable: list[UnparseableDependency] = []

    for package_name, package_meta in dependencies.items():
        if package_name in ignored:
            logger.debug("Skipping ignored package %s", package_name)
            continue

        specifier = resolve_specifier(package_meta)
        if isinstance(specifier, Unresolvable):
            logger.debug("No version string for %s, skipping", package_name)
            continue

        try:
            evaluation = inspect_version_for_pins(specifier.text)
        except ConstraintParseError as e:
            logger.warning("%s: %s", package_name, e)
            unparseable.append(
                UnparseableDependency(
                    section=section,
                    package=package_name,
                    version=specifier.text,
                    error=e.reason,
                )
            )
            continue

        if evaluation.is_pin:
            infractions.append(
                PinInfraction(
                    section=section,
                    package=package_name,
                    version=specifier.text,
                    evaluation=evaluation,
                )
            )

    return infractions, unparseable


def get_dependencies_with_pins(
    dependencies: Mapping[str, object],
    ignored_packages: Iterable[str] = (),
) -> list[str]:
    """List the packages with pins as ``"<name>: <version> -- <reason>"``."""
    infractions, _ = find_pins(dependencies, ignored_packages)
    return [infraction.describe() for infraction in infractions]
