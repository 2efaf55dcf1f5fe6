"""Data models for parsed version constraints."""

from dataclasses import dataclass

from semantic_version import Version


@dataclass(frozen=True)
class AnyConstraint:
    """A constraint that allows every version."""

    def __str__(self) -> str:
        return "any"


@dataclass(frozen=True)
class EmptyConstraint:
    """A constraint that no version can satisfy."""

    def __str__(self) -> str:
        return "<empty>"


@dataclass(frozen=True)
class ExactConstraint:
    """A constraint that allows a single version."""

    version: Version

    def __str__(self) -> str:
        return str(self.version)


@dataclass(frozen=True)
class VersionRange:
    """A lower/upper bound pair; either bound may be open."""

    min: Version | None = None
    max: Version | None = None
    include_min: bool = False
    include_max: bool = False

    def __str__(self) -> str:
        parts: list[str] = []
        if self.min is not None:
            parts.append(f"{'>=' if self.include_min else '>'}{self.min}")
        if self.max is not None:
            parts.append(f"{'<=' if self.include_max else '<'}{self.max}")
        return " ".join(parts) or "any"


VersionConstraint = AnyConstraint | EmptyConstraint | ExactConstraint | VersionRange


def is_first_prerelease(version: Version) -> bool:
    """Return True if ``version`` carries the lowest possible pre-release tag."""
    return tuple(version.prerelease) == ("0",)


def first_prerelease(version: Version) -> Version:
    """Return ``version`` with its pre-release set to ``0`` and no build."""
    return Version(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=("0",),
        build=(),
    )


def next_breaking(version: Version) -> Version:
    """Return the next version that may contain breaking changes.

    Zero-major versions treat the minor number as the breaking axis.
    """
    if version.major == 0:
        return Version(major=0, minor=version.minor + 1, patch=0)
    return Version(major=version.major + 1, minor=0, patch=0)
