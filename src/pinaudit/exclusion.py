"""Exclusion-aware source file listing for pinaudit.

Walks a directory tree and returns files with a given extension, skipping
files inside hidden directories (like ``.dart_tool``) and files matched by
gitignore-style exclusion globs (via the pathspec library).
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePath

import pathspec

from pinaudit.errors import SubtreeUnreadableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionGlob:
    """A compiled exclusion pattern matched against slash-separated paths."""

    pattern: str
    _spec: pathspec.PathSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        spec = pathspec.PathSpec.from_lines("gitwildmatch", [self.pattern])
        object.__setattr__(self, "_spec", spec)

    def matches(self, path: str | PurePath) -> bool:
        """Check if ``path`` matches this glob."""
        return self._spec.match_file(PurePath(path).as_posix())


def compile_globs(patterns: Iterable[str]) -> list[ExclusionGlob]:
    """Compile exclusion patterns, dropping blanks and ``#`` comments."""
    return [
        ExclusionGlob(p.strip())
        for p in patterns
        if p.strip() and not p.strip().startswith("#")
    ]


def is_hidden_path(parts: Iterable[str]) -> bool:
    """Check if any path segment other than ``.`` starts with a dot."""
    return any(part != "." and part.startswith(".") for part in parts)


def _relative_to(path: Path, base: Path) -> Path:
    try:
        return path.relative_to(base)
    except ValueError:
        return path


def _normalize_extension(extension: str) -> str:
    return extension if extension.startswith(".") else f".{extension}"


def list_files_with_extension(
    dir_path: str | Path,
    excludes: Iterable[ExclusionGlob],
    extension: str,
    strict: bool = False,
    base: str | Path | None = None,
) -> list[Path]:
    """List all files ending in ``.extension`` under ``dir_path``.

    Files inside hidden directories are skipped, as are files matched by any
    glob in ``excludes``. A missing root is not an error; it just has no
    files.

    Args:
        dir_path: Root directory to walk.
        excludes: Exclusion globs, matched against each file path as produced
            by the walk (``dir_path`` joined with the relative path).
        extension: File extension, with or without the leading dot.
        strict: Raise SubtreeUnreadableError instead of skipping directories
            that cannot be read.
        base: Match exclusion globs against paths relative to this directory
            instead of the path as produced by the walk.

    Returns:
        Matching file paths, in walk order.
    """
    root = Path(dir_path)
    if not root.is_dir():
        return []

    suffix = _normalize_extension(extension)
    globs = list(excludes)

    def on_error(error: OSError) -> None:
        if strict:
            raise SubtreeUnreadableError(
                error.errno, f"Cannot read directory: {error.strerror}", error.filename
            ) from error
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)

    files: list[Path] = []
    for current, dirnames, filenames in os.walk(root, onerror=on_error):
        current_path = Path(current)
        rel_dir = current_path.relative_to(root)

        # Prune hidden directories (e.g. `.dart_tool/`) before descending
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]

        for name in filenames:
            file_path = current_path / name
            if Path(name).suffix != suffix:
                continue
            if is_hidden_path((rel_dir / name).parts):
                continue
            if not file_path.is_file():
                continue
            match_path = file_path if base is None else _relative_to(file_path, Path(base))
            if any(glob.matches(match_path) for glob in globs):
                continue
            files.append(file_path)

    return files


def list_dart_files_in(
    dir_path: str | Path, excludes: Iterable[ExclusionGlob]
) -> list[Path]:
    """List all Dart files in ``dir_path`` not matched by ``excludes``."""
    return list_files_with_extension(dir_path, excludes, "dart")


def list_scss_files_in(
    dir_path: str | Path, excludes: Iterable[ExclusionGlob]
) -> list[Path]:
    """List all Scss files in ``dir_path`` not matched by ``excludes``."""
    return list_files_with_extension(dir_path, excludes, "scss")


def list_less_files_in(
    dir_path: str | Path, excludes: Iterable[ExclusionGlob]
) -> list[Path]:
    """List all Less files in ``dir_path`` not matched by ``excludes``."""
    return list_files_with_extension(dir_path, excludes, "less")
