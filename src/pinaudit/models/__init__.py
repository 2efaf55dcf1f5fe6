"""Data models for pinaudit."""

from pinaudit.models.constraint import (
    AnyConstraint,
    EmptyConstraint,
    ExactConstraint,
    VersionConstraint,
    VersionRange,
)
from pinaudit.models.pins import (
    PinEvaluation,
    RawConstraint,
    StructuredWithVersion,
    Unresolvable,
    VersionSpecifier,
)
from pinaudit.models.results import AuditResults, PinInfraction, UnparseableDependency

__all__ = [
    # Constraint models
    "AnyConstraint",
    "EmptyConstraint",
    "ExactConstraint",
    "VersionConstraint",
    "VersionRange",
    # Pin models
    "PinEvaluation",
    "RawConstraint",
    "StructuredWithVersion",
    "Unresolvable",
    "VersionSpecifier",
    # Results models
    "AuditResults",
    "PinInfraction",
    "UnparseableDependency",
]
