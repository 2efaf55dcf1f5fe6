"""Analysis of dependency constraints."""

from pinaudit.analysis.pins import (
    find_pins,
    get_dependencies_with_pins,
    inspect_version_for_pins,
    resolve_specifier,
)

__all__ = [
    "find_pins",
    "get_dependencies_with_pins",
    "inspect_version_for_pins",
    "resolve_specifier",
]
