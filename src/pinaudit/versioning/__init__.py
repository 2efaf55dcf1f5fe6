"""Version constraint parsing."""

from pinaudit.versioning.parser import parse_constraint, parse_version

__all__ = ["parse_constraint", "parse_version"]
