"""Data models for audit results."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from pinaudit.models.pins import PinEvaluation


@dataclass
class PinInfraction:
    """A dependency whose version constraint is a pin."""

    section: str  # "dependencies", "dev_dependencies", ...
    package: str
    version: str
    evaluation: PinEvaluation

    def describe(self) -> str:
        return f"{self.package}: {self.version} -- {self.evaluation.message}"

    def to_dict(self) -> dict:
        return {
            "section": self.section,
            "package": self.package,
            "version": self.version,
            "evaluation": self.evaluation.value,
            "message": self.evaluation.message,
        }


@dataclass
class UnparseableDependency:
    """A dependency whose version constraint could not be parsed."""

    section: str
    package: str
    version: str
    error: str

    def describe(self) -> str:
        return f"{self.package}: {self.version} -- {self.error}"

    def to_dict(self) -> dict:
        return {
            "section": self.section,
            "package": self.package,
            "version": self.version,
            "error": self.error,
        }


@dataclass
class AuditResults:
    """Complete results of a pinaudit run."""

    package: str
    manifest: Path
    audited_at: datetime
    pinaudit_version: str
    infractions: list[PinInfraction] = field(default_factory=list)
    unparseable: list[UnparseableDependency] = field(default_factory=list)
    files_scanned: dict[str, int] = field(default_factory=dict)  # extension -> count
    analysis_options_include: str | None = None  # package named by `include: package:...`

    @property
    def has_pins(self) -> bool:
        return bool(self.infractions)

    def to_dict(self) -> dict:
        return {
            "package": self.package,
            "manifest": str(self.manifest),
            "audited_at": self.audited_at.isoformat(),
            "pinaudit_version": self.pinaudit_version,
            "infractions": [i.to_dict() for i in self.infractions],
            "unparseable": [u.to_dict() for u in self.unparseable],
            "files_scanned": dict(sorted(self.files_scanned.items())),
            "analysis_options_include": self.analysis_options_include,
        }
