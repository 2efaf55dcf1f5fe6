"""Parse pub-style version constraint strings.

Supported expressions:
- ``any`` or ``*``
- exact versions (e.g., ``1.2.3``, ``1.2.3-dev.1+build.5``)
- caret ranges ``^x.y.z`` -> ``>=x.y.z <(next breaking)-0``
- hyphen ranges ``1.0.0 - 2.0.0`` (both ends inclusive)
- comparisons, e.g. ``>=1.0.0 <2.0.0`` or ``>=1.0.0<2.0.0``, intersected
"""

from __future__ import annotations

import re

from semantic_version import Version

from pinaudit.errors import ConstraintParseError
from pinaudit.models.constraint import (
    AnyConstraint,
    EmptyConstraint,
    ExactConstraint,
    VersionConstraint,
    VersionRange,
    first_prerelease,
    next_breaking,
)

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_VERSION = rf"[0-9]+\.[0-9]+\.[0-9]+(?:-{_IDENT})?(?:\+{_IDENT})?"

_VERSION_RE = re.compile(_VERSION)
_HYPHEN_RE = re.compile(rf"({_VERSION})\s+-\s+({_VERSION})")
_TERM_RE = re.compile(rf"(<=|>=|<|>)?\s*({_VERSION})(?=\s|$|[<>])")

ANY_TOKENS = ("any", "*")


def parse_version(text: str, constraint: str | None = None) -> Version:
    """Parse a single semantic version, raising ConstraintParseError on failure."""
    source = text if constraint is None else constraint
    if not _VERSION_RE.fullmatch(text):
        raise ConstraintParseError(source, f"{text!r} is not a valid version")
    try:
        return Version(text)
    except ValueError as e:
        raise ConstraintParseError(source, str(e)) from e


def parse_constraint(constraint: str) -> VersionConstraint:
    """Parse a version constraint string into a VersionConstraint."""
    if not isinstance(constraint, str):
        raise ConstraintParseError(str(constraint), "constraint must be a string")

    text = constraint.strip()
    if not text:
        raise ConstraintParseError(constraint, "empty constraint")

    if text in ANY_TOKENS:
        return AnyConstraint()

    if text.startswith("^"):
        base = parse_version(text[1:].strip(), constraint)
        return VersionRange(
            min=base,
            max=first_prerelease(next_breaking(base)),
            include_min=True,
            include_max=False,
        )

    if match := _HYPHEN_RE.fullmatch(text):
        low = parse_version(match.group(1), constraint)
        high = parse_version(match.group(2), constraint)
        return _intersect([(">=", low), ("<=", high)])

    terms: list[tuple[str | None, Version]] = []
    pos = 0
    while pos < len(text):
        if text[pos].isspace():
            pos += 1
            continue
        match = _TERM_RE.match(text, pos)
        if match is None:
            raise ConstraintParseError(constraint, f"unexpected text {text[pos:]!r}")
        terms.append((match.group(1), parse_version(match.group(2), constraint)))
        pos = match.end()

    return _intersect(terms)


def _compare(a: Version, b: Version) -> int:
    """Compare by precedence; build metadata does not affect ordering."""
    return (a > b) - (a < b)


def _intersect(terms: list[tuple[str | None, Version]]) -> VersionConstraint:
    """Intersect comparison terms into a single constraint."""
    low: Version | None = None
    low_inclusive = False
    high: Version | None = None
    high_inclusive = False

    for op, version in terms:
        if op in (None, ">=", ">"):
            inclusive = op != ">"
            cmp = 1 if low is None else _compare(version, low)
            if cmp > 0:
                low, low_inclusive = version, inclusive
            elif cmp == 0:
                low_inclusive = low_inclusive and inclusive
        if op in (None, "<=", "<"):
            inclusive = op != "<"
            cmp = -1 if high is None else _compare(version, high)
            if cmp < 0:
                high, high_inclusive = version, inclusive
            elif cmp == 0:
                high_inclusive = high_inclusive and inclusive

    if low is not None and high is not None:
        cmp = _compare(low, high)
        if cmp > 0:
            return EmptyConstraint()
        if cmp == 0:
            if low_inclusive and high_inclusive:
                return ExactConstraint(low)
            return EmptyConstraint()

    return VersionRange(
        min=low,
        max=high,
        include_min=low_inclusive,
        include_max=high_inclusive,
    )
