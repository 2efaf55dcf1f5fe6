"""Data models for pin classification."""

from dataclasses import dataclass
from enum import Enum


class PinEvaluation(Enum):
    """Why a version constraint is (or is not) considered a pin."""

    NOT_A_PIN = "not_a_pin"
    DIRECT_PIN = "direct_pin"
    INCLUSIVE_MAX = "inclusive_max"
    BUILD_OR_PRERELEASE = "build_or_prerelease"
    BLOCKS_PATCH_RELEASES = "blocks_patch_releases"
    BLOCKS_MINOR_BUMPS = "blocks_minor_bumps"
    EMPTY_PIN = "empty_pin"

    @property
    def is_pin(self) -> bool:
        return self is not PinEvaluation.NOT_A_PIN

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    PinEvaluation.NOT_A_PIN: "This is not a pin.",
    PinEvaluation.DIRECT_PIN: (
        "This is a direct pin, preventing updates for non-breaking changes."
    ),
    PinEvaluation.INCLUSIVE_MAX: (
        "This has an inclusive maximum, which blocks the next patch release."
    ),
    PinEvaluation.BUILD_OR_PRERELEASE: (
        "This has a build or pre-release maximum, "
        "which is likely an accidental over-restriction."
    ),
    PinEvaluation.BLOCKS_PATCH_RELEASES: (
        "This blocks patch releases below the next minor version."
    ),
    PinEvaluation.BLOCKS_MINOR_BUMPS: (
        "This blocks minor version bumps below the next major version."
    ),
    PinEvaluation.EMPTY_PIN: (
        "This constraint could not be classified; review it by hand."
    ),
}


@dataclass(frozen=True)
class RawConstraint:
    """A dependency declared directly as a constraint string."""

    text: str


@dataclass(frozen=True)
class StructuredWithVersion:
    """A dependency declared as a mapping with a ``version`` key."""

    text: str


@dataclass(frozen=True)
class Unresolvable:
    """A dependency with no version string (git, path, sdk, ...)."""


VersionSpecifier = RawConstraint | StructuredWithVersion | Unresolvable
